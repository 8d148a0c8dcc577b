"""
Resource Config Loading

Builds a ResourceMap from a YAML resource config. Each resource maps to a single
record or a list of records:

    resources:
      bwa:
        file: /opt/bwa/bwa
        version: 0.7.12
      indels:
        - file: /refs/1000G_phase1.indels.b37.vcf
          version: "1.2"
        - file: /refs/Mills_and_1000G_gold_standard.indels.b37.vcf

Examples:
    >>> resource_map = load_resource_map(Path("resources.yaml"))
    >>> file_version_from_key(resource_map, ResourceKey.BWA)
    '0.7.12'
"""

import os
from pathlib import Path
from typing import Any, Dict, List

from dotenv import load_dotenv
from omegaconf import OmegaConf

from piper_report.contexts.versioning.constants import ResourceKey
from piper_report.contexts.versioning.logger import _log_info
from piper_report.contexts.versioning.resources import FileVersionRecord, ResourceMap

load_dotenv()
RESOURCE_CONFIG_PATH = os.getenv("RESOURCE_CONFIG_PATH")


def _to_record(name: str, entry: Any) -> FileVersionRecord:
    if not isinstance(entry, dict) or entry.get("file") is None:
        raise ValueError(f"Resource '{name}' entry must have a 'file' field, got: {entry}")

    version = entry.get("version")
    return FileVersionRecord(
        file=Path(str(entry["file"])),
        version=None if version is None else str(version),
    )


def resource_map_from_dict(config: Dict[str, Any]) -> ResourceMap:
    """
    Build a ResourceMap from an already loaded config dict.

    Args:
        config: Dict with a top-level 'resources' mapping

    Returns:
        ResourceMap with records in config order

    Raises:
        ValueError: If 'resources' is missing, a resource name is unknown,
                    or an entry has no 'file'
    """
    if "resources" not in config or not isinstance(config["resources"], dict):
        raise ValueError("Resource config must contain a 'resources' mapping at root level")

    resource_map: ResourceMap = {}
    for name, entries in config["resources"].items():
        key = ResourceKey.from_name(str(name))
        if entries is None:
            resource_map[key] = []
            continue
        if not isinstance(entries, list):
            entries = [entries]
        records: List[FileVersionRecord] = [_to_record(name, entry) for entry in entries]
        resource_map.setdefault(key, []).extend(records)

    return resource_map


def load_resource_map(config_path: Path = None) -> ResourceMap:
    """
    Load a ResourceMap from a YAML resource config.

    Args:
        config_path: Path to the config (defaults to RESOURCE_CONFIG_PATH env variable)

    Returns:
        ResourceMap built from the file

    Raises:
        ValueError: If no path is given and RESOURCE_CONFIG_PATH is unset,
                    or the config is malformed
        FileNotFoundError: If the config file doesn't exist
    """
    if config_path is None:
        if RESOURCE_CONFIG_PATH is None:
            raise ValueError("No resource config given and RESOURCE_CONFIG_PATH is not set")
        config_path = Path(RESOURCE_CONFIG_PATH)

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Resource config not found at {config_path}")

    config = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)
    resource_map = resource_map_from_dict(config)

    _log_info(f"Loaded {len(resource_map)} resources from {config_path}")
    return resource_map

"""
Resource version lookup.

A resource map is built once by the config loader and only read here.
Lookups never raise: a missing key degrades to UNKNOWN or an empty list.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from piper_report.contexts.versioning.constants import UNKNOWN, ResourceKey
from piper_report.contexts.versioning.logger import _log_debug


@dataclass(frozen=True)
class FileVersionRecord:
    """
    A resource file and its version, if one is known.

    Attributes:
        file: Path to the program or reference file
        version: Version string, None when the resource carries none
    """

    file: Path
    version: Optional[str] = None


ResourceMap = Dict[ResourceKey, List[FileVersionRecord]]


def multiple_file_versions_from_key(
    resource_map: ResourceMap, key: ResourceKey
) -> List[FileVersionRecord]:
    """
    All records for a key, in map order.

    Args:
        resource_map: Map of resources to file/version records
        key: Resource to look up

    Returns:
        List of records, empty if the key is absent
    """
    return list(resource_map.get(key, []))


def file_version_from_key(resource_map: ResourceMap, key: ResourceKey) -> str:
    """
    Version of a singular resource.

    Args:
        resource_map: Map of resources to file/version records
        key: Resource to look up

    Returns:
        The version of the key's record, or UNKNOWN if the key is absent,
        has no records, or its record has no version
    """
    records = multiple_file_versions_from_key(resource_map, key)
    if not records:
        _log_debug(f"{key.value} not in resource map")
        return UNKNOWN
    if len(records) > 1:
        _log_debug(f"{key.value} has {len(records)} records, using {records[0].file}")
    return records[0].version or UNKNOWN


def format_file_versions(records: List[FileVersionRecord], label: str) -> str:
    """
    Format records as "<label>: {<file name> version: <version>}" lines.

    Args:
        records: Records in the order they should appear
        label: Line label (e.g., "indel resource file")

    Returns:
        Newline-joined lines, empty string when there are no records
    """
    return "\n".join(
        f"{label}: {{{Path(record.file).name} version: {record.version or UNKNOWN}}}"
        for record in records
    )

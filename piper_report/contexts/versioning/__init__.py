"""
Versioning Context

Responsibilities:
- Finds the pipeline and GATK archives among the visible packages
- Reads versions from archive manifests and properties entries
- Looks up tool and reference versions in the resource map
- Loads resource maps from YAML resource configs

Owns: Version strings and the UNKNOWN fallback
Never: Renders or writes reports
"""

from piper_report.contexts.versioning.archives import (
    ARCHIVE_RESOLVERS,
    ManifestAttribute,
    PropertiesEntry,
    get_gatk_version,
    get_pipeline_version,
    list_available_packages,
    name_contains,
    name_starts_with,
    resolve_version,
)
from piper_report.contexts.versioning.constants import UNKNOWN, ResourceKey
from piper_report.contexts.versioning.resource_config import load_resource_map
from piper_report.contexts.versioning.resources import (
    FileVersionRecord,
    ResourceMap,
    file_version_from_key,
    format_file_versions,
    multiple_file_versions_from_key,
)

__all__ = [
    # Archive scanning
    "ARCHIVE_RESOLVERS",
    "ManifestAttribute",
    "PropertiesEntry",
    "get_gatk_version",
    "get_pipeline_version",
    "list_available_packages",
    "name_contains",
    "name_starts_with",
    "resolve_version",
    # Resource lookup
    "FileVersionRecord",
    "ResourceKey",
    "ResourceMap",
    "UNKNOWN",
    "file_version_from_key",
    "format_file_versions",
    "load_resource_map",
    "multiple_file_versions_from_key",
]

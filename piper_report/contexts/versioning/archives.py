"""
Archive Version Resolution

Finds a uniquely named archive (jar, wheel, zip) among the packages visible to
the running process and reads a version string from inside it, either from the
manifest main section or from a line of a properties entry.

Resolution is best effort: an ambiguous or missing archive, an archive that
cannot be opened, or a missing entry/attribute all yield UNKNOWN rather than
an exception.

Examples:
    >>> resolve_version(
    ...     list_available_packages(),
    ...     name_starts_with("piper_"),
    ...     ManifestAttribute("Implementation-Version"),
    ... )
    '1.5.0'
"""

import os
import sys
import zipfile
import zlib
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional

from dotenv import load_dotenv

from piper_report.contexts.versioning.constants import (
    GATK_ARCHIVE_NAME,
    GATK_PROPERTIES_ENTRY,
    GATK_VERSION_PREFIX,
    MANIFEST_ENTRY,
    PIPELINE_ARCHIVE_PREFIX,
    PIPELINE_VERSION_ATTRIBUTE,
    UNKNOWN,
)
from piper_report.contexts.versioning.logger import (
    _log_warning,
    log_ambiguous_archives,
    log_version_resolved,
)

load_dotenv()

PackageLister = Callable[[], List[Path]]
NameFilter = Callable[[Path], bool]
Extractor = Callable[[zipfile.ZipFile], Optional[str]]

# Corrupt, encrypted or unsupported entries fail in zipfile or zlib
ARCHIVE_READ_ERRORS = (
    OSError,
    zipfile.BadZipFile,
    zlib.error,
    RuntimeError,
    NotImplementedError,
    EOFError,
)


def list_available_packages() -> List[Path]:
    """
    List the package archives visible to the running process.

    Reads PIPER_CLASSPATH (falling back to CLASSPATH) split on os.pathsep,
    followed by the entries of sys.path. Duplicates are dropped, order is kept.

    Returns:
        Paths in lookup order
    """
    classpath = os.getenv("PIPER_CLASSPATH") or os.getenv("CLASSPATH") or ""
    entries = classpath.split(os.pathsep) + list(sys.path)

    packages = []
    seen = set()
    for entry in entries:
        if not entry or entry in seen:
            continue
        seen.add(entry)
        packages.append(Path(entry))
    return packages


def name_starts_with(prefix: str) -> NameFilter:
    """Match archives whose file name starts with prefix."""
    return lambda path: path.name.startswith(prefix)


def name_contains(substring: str) -> NameFilter:
    """Match archives whose file name contains substring."""
    return lambda path: substring in path.name


def parse_manifest(text: str) -> Dict[str, str]:
    """
    Parse the main section of a JAR manifest.

    Attributes are "Name: value" lines. A line starting with a single space
    continues the previous value. The main section ends at the first blank line.

    Args:
        text: Manifest content

    Returns:
        Dict mapping attribute names to values
    """
    attributes: Dict[str, str] = {}
    last_key = None

    for line in text.splitlines():
        if not line.strip():
            break
        if line.startswith(" ") and last_key is not None:
            attributes[last_key] += line[1:]
            continue
        key, sep, value = line.partition(":")
        if not sep:
            continue
        last_key = key.strip()
        attributes[last_key] = value.strip()

    return attributes


def _read_text_entry(archive: zipfile.ZipFile, entry: str) -> Optional[str]:
    """Read a text entry from an open archive, None if it is missing."""
    try:
        data = archive.read(entry)
    except KeyError:
        return None
    return data.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class ManifestAttribute:
    """Extract a manifest main-section attribute by name."""

    key: str
    entry: str = MANIFEST_ENTRY

    def __call__(self, archive: zipfile.ZipFile) -> Optional[str]:
        text = _read_text_entry(archive, self.entry)
        if text is None:
            return None
        return parse_manifest(text).get(self.key)


@dataclass(frozen=True)
class PropertiesEntry:
    """
    Extract a value from the first line of a text entry that starts with prefix.

    The value is everything after the first delimiter on that line.
    """

    entry: str
    prefix: str
    delimiter: str = "="

    def __call__(self, archive: zipfile.ZipFile) -> Optional[str]:
        text = _read_text_entry(archive, self.entry)
        if text is None:
            return None
        for line in text.splitlines():
            if line.startswith(self.prefix):
                _, sep, value = line.partition(self.delimiter)
                return value.strip() if sep else None
        return None


def resolve_version(
    search_paths: Iterable[Path],
    name_filter: NameFilter,
    extractor: Extractor,
    what: str = "archive",
) -> str:
    """
    Resolve a version string from the single archive matching name_filter.

    Args:
        search_paths: Candidate archive paths
        name_filter: Predicate on the archive path (usually its file name)
        extractor: Reads the version from the opened archive
        what: Name used in log messages

    Returns:
        The extracted version, or UNKNOWN if zero or several archives match,
        the archive cannot be read, or the version is not present
    """
    matches = [Path(path) for path in search_paths if name_filter(Path(path))]

    # Several matches are never resolved arbitrarily
    if len(matches) != 1:
        log_ambiguous_archives(what, matches)
        return UNKNOWN

    archive_path = matches[0]
    try:
        with zipfile.ZipFile(archive_path) as archive:
            version = extractor(archive)
    except ARCHIVE_READ_ERRORS as e:
        _log_warning(f"Could not read {what} archive {archive_path}: {e}")
        return UNKNOWN

    if not version:
        _log_warning(f"No version found in {what} archive {archive_path}")
        return UNKNOWN

    log_version_resolved(what, version, archive_path)
    return version.strip()


def get_pipeline_version(list_packages: Optional[PackageLister] = None) -> str:
    """
    Version of the Piper archive, from its manifest Implementation-Version.

    Only works once the pipeline runs from a packaged archive; returns UNKNOWN
    when running from a source checkout.
    """
    list_packages = list_packages or list_available_packages
    return resolve_version(
        list_packages(),
        name_starts_with(PIPELINE_ARCHIVE_PREFIX),
        ManifestAttribute(PIPELINE_VERSION_ATTRIBUTE),
        what="piper",
    )


def get_gatk_version(list_packages: Optional[PackageLister] = None) -> str:
    """Version of GATK, from the CommandLineGATK.version line of GATKText.properties."""
    list_packages = list_packages or list_available_packages
    return resolve_version(
        list_packages(),
        name_contains(GATK_ARCHIVE_NAME),
        PropertiesEntry(GATK_PROPERTIES_ENTRY, GATK_VERSION_PREFIX),
        what="gatk",
    )


# Archive-backed versions that report configs can refer to by name
ARCHIVE_RESOLVERS: Dict[str, Callable[[Optional[PackageLister]], str]] = {
    "piper": get_pipeline_version,
    "gatk": get_gatk_version,
}

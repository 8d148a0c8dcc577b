"""
Versioning context logger.

Provides logging interface for versioning context with automatic [version] prefix.
All versioning modules should import from this module, not from loguru directly.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[version]"

# Sinks are configured by the caller (see contexts/reporting/logger.py)


# Wrapper functions with automatic [version] prefix


def _log_info(message: str) -> None:
    """Log info message with [version] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [version] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [version] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_version_resolved(what: str, version: str, source: Path = None) -> None:
    """Log a resolved archive version, noting where it came from."""
    if source is None:
        _log_debug(f"{what}: {version}")
    else:
        _log_debug(f"{what}: {version} (from {source})")


def log_ambiguous_archives(what: str, matches: list) -> None:
    """Log that zero or several archives matched."""
    if not matches:
        _log_warning(f"No archive found for {what}, version is unknown")
    else:
        names = ", ".join(str(path) for path in matches)
        _log_warning(f"{len(matches)} archives match {what} ({names}), version is unknown")

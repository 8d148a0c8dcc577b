"""
Reporting context logger.

Provides logging interface for reporting context with automatic [report] prefix.
All reporting modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from piper_report.contexts.versioning.constants import UNKNOWN
from piper_report.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[report]"


def setup_reporting_logger(log_dir: Path, report_type: str = None) -> Path:
    """
    Setup logger for reporting context.

    Configures loguru with provenance tracking and reporting-specific context.

    Args:
        log_dir: Directory for this reporting session
        report_type: Report type for provenance (e.g., "haloplex")

    Returns:
        Path to log file

    Example:
        from piper_report.contexts.reporting.logger import setup_reporting_logger, _log_info

        log_file = setup_reporting_logger(log_dir, report_type="rna_counts")
        _log_info("Rendering report...")
    """
    extra = {"Report type": report_type} if report_type else None
    return _setup_logger(context_name="report", log_dir=log_dir, extra_provenance=extra)


# Wrapper functions with automatic [report] prefix


def _log_info(message: str) -> None:
    """Log info message with [report] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [report] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [report] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [report] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [report] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level reporting-specific logging helpers


def log_report_start(report_type: str, output_file: Path) -> None:
    """Log start of report generation."""
    _log_info(f"Generating {report_type} report")
    _log_debug(f"Output: {output_file}")


def log_unknown_versions(report_type: str, versions: dict) -> None:
    """Log which template variables fell back to Unknown."""
    unknown = [name for name, version in versions.items() if version == UNKNOWN]
    if unknown:
        _log_warning(f"{report_type}: unknown versions for {', '.join(unknown)}")


def log_report_written(report_type: str, output_file: Path, elapsed_time: float) -> None:
    """Log successful report write."""
    _log_success(f"{report_type}: report written ({elapsed_time:.2f}s)")
    _log_info(f"  Output: {output_file}")

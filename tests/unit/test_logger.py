"""Unit tests for loguru setup."""

import sys

import pytest
from loguru import logger

from piper_report.contexts.reporting.logger import _log_info, setup_reporting_logger


@pytest.fixture
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.mark.unit
def test_setup_reporting_logger_writes_provenance(tmp_path, restore_logger):
    """Test the log file gets the provenance header and prefixed messages."""
    log_dir = tmp_path / "logs" / "report_20251114_123456"

    log_file = setup_reporting_logger(log_dir, report_type="haloplex")
    _log_info("Rendering report")
    logger.remove()

    assert log_file == log_dir / "report.log"
    content = log_file.read_text()
    assert "Report type: haloplex" in content
    assert "Python:" in content
    assert "[report] Rendering report" in content

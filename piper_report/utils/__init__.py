"""
Shared utilities for piper-report.

Common functionality used across contexts:
- Logger setup with provenance
- Timestamps for session directories
"""

from piper_report.utils.timestamp import now

__all__ = ["now"]

"""
piper-report - README reports for Piper analysis runs

Summarizes which pipeline version and which tool/reference versions were used
for a genomics analysis run, and writes that summary as a plain-text README.

Architecture:
- Versioning Context: Archive manifest scanning and resource version lookup
- Reporting Context: Report templates, rendering and output
"""

__version__ = "0.1.0"

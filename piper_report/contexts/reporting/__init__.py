"""
Reporting Context

Responsibilities:
- Manages the report templates and report configs (types/{report_type}/)
- Builds report contexts from resolved versions and file references
- Renders templates and writes README reports to disk

Owns: Report text, report output files
Never: Decides which version a tool has (see versioning context)
"""

from piper_report.contexts.reporting.exceptions import ReportWriteError, TemplateRenderError
from piper_report.contexts.reporting.registries import ReportConfigRegistry, TemplateRegistry
from piper_report.contexts.reporting.renderer import (
    REPORT_TYPES,
    build_report_context,
    construct_dna_best_practice_variant_calling_report,
    construct_haloplex_report,
    construct_report,
    construct_rna_counts_report,
    render_report,
    write_report,
)
from piper_report.contexts.reporting.report_data_structure import ReferenceBundle, ReportContext

__all__ = [
    # Report constructors
    "construct_rna_counts_report",
    "construct_dna_best_practice_variant_calling_report",
    "construct_haloplex_report",
    "construct_report",
    "REPORT_TYPES",
    # Rendering steps
    "build_report_context",
    "render_report",
    "write_report",
    # Data structures
    "ReferenceBundle",
    "ReportContext",
    # Registries
    "TemplateRegistry",
    "ReportConfigRegistry",
    # Errors
    "ReportWriteError",
    "TemplateRenderError",
]

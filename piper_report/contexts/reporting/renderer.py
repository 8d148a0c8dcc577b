"""
Report Renderer

Generates README reports for Piper runs, listing which Piper version was used
and which program and reference versions went into the analysis.

Each report type is a template plus a report config naming the versions the
template needs (see registries.py). A report is built in three steps:
    1. build_report_context() resolves every version the config names
    2. render_report() substitutes them into the template
    3. write_report() writes the text to the output file

The construct_*_report() functions wrap these steps for the known qscripts.
Version lookups never fail (they fall back to "Unknown"); only writing the
output file can.
"""

import time
from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import TemplateError

from piper_report.contexts.reporting.exceptions import ReportWriteError, TemplateRenderError
from piper_report.contexts.reporting.logger import (
    _log_error,
    log_report_start,
    log_report_written,
    log_unknown_versions,
)
from piper_report.contexts.reporting.registries import ReportConfigRegistry, TemplateRegistry
from piper_report.contexts.reporting.report_data_structure import (
    PathLike,
    ReferenceBundle,
    ReportContext,
)
from piper_report.contexts.versioning.archives import ARCHIVE_RESOLVERS, PackageLister
from piper_report.contexts.versioning.constants import ResourceKey
from piper_report.contexts.versioning.resources import (
    ResourceMap,
    file_version_from_key,
    format_file_versions,
    multiple_file_versions_from_key,
)

RNA_COUNTS = "rna_counts"
DNA_BEST_PRACTICE_VARIANT_CALLING = "dna_best_practice_variant_calling"
HALOPLEX = "haloplex"

REPORT_TYPES = (RNA_COUNTS, DNA_BEST_PRACTICE_VARIANT_CALLING, HALOPLEX)

_templates = TemplateRegistry()
_configs = ReportConfigRegistry()


def build_report_context(
    report_type: str,
    resource_map: ResourceMap,
    files: Dict[str, Any],
    list_packages: Optional[PackageLister] = None,
    config_registry: ReportConfigRegistry = None,
) -> ReportContext:
    """
    Resolve every version a report type needs.

    Args:
        report_type: Report type name (e.g., 'rna_counts')
        resource_map: Map of resources like the one from load_resource_map()
        files: File references for the template (names, paths, bundles)
        list_packages: Lists archives to scan for pipeline/GATK versions
        config_registry: Registry to read the report config from

    Returns:
        ReportContext with versions and files

    Raises:
        ValueError: If the config names an unknown archive resolver or resource
        FileNotFoundError: If the report type has no config
    """
    config = (config_registry or _configs).get_config(report_type)
    versions: Dict[str, str] = {}

    for variable, resolver_name in config["archive_versions"].items():
        if resolver_name not in ARCHIVE_RESOLVERS:
            raise ValueError(
                f"Unknown archive resolver '{resolver_name}' in {report_type} config. "
                f"Available resolvers: {list(ARCHIVE_RESOLVERS)}"
            )
        versions[variable] = ARCHIVE_RESOLVERS[resolver_name](list_packages)

    for variable, resource_name in config["resource_versions"].items():
        key = ResourceKey.from_name(resource_name)
        versions[variable] = file_version_from_key(resource_map, key)

    for variable, block in config["multi_file_versions"].items():
        key = ResourceKey.from_name(block["key"])
        records = multiple_file_versions_from_key(resource_map, key)
        versions[variable] = format_file_versions(records, block["label"])

    return ReportContext(report_type=report_type, versions=versions, files=dict(files))


def render_report(context: ReportContext, template_registry: TemplateRegistry = None) -> str:
    """
    Render a report context into report text.

    Args:
        context: Resolved report context
        template_registry: Registry to load the template from

    Returns:
        Rendered report

    Raises:
        TemplateNotFound: If the report type has no template
        TemplateRenderError: If the template references a missing value
    """
    registry = template_registry or _templates
    template = registry.get_template(context.report_type)

    try:
        return template.render(context.template_vars())
    except TemplateError as e:
        raise TemplateRenderError(
            f"Failed to render {context.report_type} report",
            report_type=context.report_type,
            template_path=registry.get_template_path(context.report_type),
            original_error=e,
        ) from e


def write_report(text: str, output_file: PathLike) -> Path:
    """
    Write report text to a file, replacing any existing content.

    Args:
        text: Rendered report
        output_file: Path to write to (parent directories are created)

    Returns:
        Path that was written

    Raises:
        ReportWriteError: If the file cannot be written
    """
    output_file = Path(output_file)
    try:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        with open(output_file, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
    except OSError as e:
        _log_error(f"Could not write report to {output_file}: {e}")
        raise ReportWriteError(
            f"Could not write report to {output_file}", output_path=output_file, original_error=e
        ) from e
    return output_file


def construct_report(
    report_type: str,
    resource_map: ResourceMap,
    files: Dict[str, Any],
    output_file: PathLike,
    list_packages: Optional[PackageLister] = None,
) -> Path:
    """
    Build, render and write a report of any known type.

    Args:
        report_type: One of REPORT_TYPES (or a custom type in PIPER_REPORT_TYPES_PATH)
        resource_map: Map of resources like the one from load_resource_map()
        files: File references the template expects
        output_file: File to write the report to
        list_packages: Lists archives to scan for pipeline/GATK versions

    Returns:
        The file that was written

    Raises:
        ValueError: If report_type has no report config
        ReportWriteError: If the report cannot be written
    """
    available = _configs.available_types()
    if report_type not in available:
        raise ValueError(f"Unknown report type '{report_type}'. Available report types: {available}")

    output_file = Path(output_file)
    log_report_start(report_type, output_file)
    start_time = time.time()

    context = build_report_context(report_type, resource_map, files, list_packages)
    log_unknown_versions(report_type, context.versions)

    text = render_report(context)
    written = write_report(text, output_file)

    log_report_written(report_type, written, time.time() - start_time)
    return written


def construct_rna_counts_report(
    resource_map: ResourceMap,
    reference: PathLike,
    transcripts: PathLike,
    mask_file: Optional[PathLike],
    output_file: PathLike,
    list_packages: Optional[PackageLister] = None,
) -> Path:
    """
    Construct the report for the RNACounts qscript and write it to file.

    Args:
        resource_map: Map of resources like the one from load_resource_map()
        reference: The reference file used
        transcripts: The transcripts used
        mask_file: The mask file used, if any
        output_file: File to write output to
        list_packages: Lists archives to scan for the Piper version

    Returns:
        The file that was created and written to
    """
    files = {
        "reference_name": Path(reference).name,
        "transcripts_path": str(Path(transcripts).absolute()),
        "mask_file_path": str(Path(mask_file).absolute()) if mask_file is not None else None,
    }
    return construct_report(RNA_COUNTS, resource_map, files, output_file, list_packages)


def construct_dna_best_practice_variant_calling_report(
    resource_map: ResourceMap,
    reference: PathLike,
    output_file: PathLike,
    list_packages: Optional[PackageLister] = None,
) -> Path:
    """
    Construct the report for the DNABestPracticeVariantCalling qscript and write it to file.

    Args:
        resource_map: Map of resources like the one from load_resource_map()
        reference: The reference file used
        output_file: File to write output to
        list_packages: Lists archives to scan for the Piper and GATK versions

    Returns:
        The file that was created and written to
    """
    files = {"reference_name": Path(reference).name}
    return construct_report(
        DNA_BEST_PRACTICE_VARIANT_CALLING, resource_map, files, output_file, list_packages
    )


def construct_haloplex_report(
    resource_map: ResourceMap,
    resources: ReferenceBundle,
    reference: PathLike,
    output_file: PathLike,
    list_packages: Optional[PackageLister] = None,
) -> Path:
    """
    Construct the report for the Haloplex qscript and write it to file.

    Args:
        resource_map: Map of resources like the one from load_resource_map()
        resources: References already resolved by the Haloplex script
        reference: The reference file used
        output_file: File to write output to
        list_packages: Lists archives to scan for the Piper and GATK versions

    Returns:
        The file that was created and written to
    """
    files = {"reference_name": Path(reference).name, "resources": resources.resolved()}
    return construct_report(HALOPLEX, resource_map, files, output_file, list_packages)

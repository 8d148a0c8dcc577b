#!/usr/bin/env python3
"""
Piper README Report CLI

Writes README reports listing the Piper, program and reference versions used
for an analysis run.

Commands:
    rna-counts         - Report for the RNACounts qscript
    dna-best-practice  - Report for the DNABestPracticeVariantCalling qscript
    haloplex           - Report for the Haloplex qscript
    versions           - Show the Piper and GATK versions found on the classpath

Examples:\n

    generate_report.py rna-counts hg19.fa genes.gtf README.txt --resources resources.yaml

    generate_report.py dna-best-practice hg19.fa README.txt

    generate_report.py haloplex hg19.fa README.txt --dbsnp dbsnp_138.vcf --mills mills.vcf

    generate_report.py versions
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from piper_report.contexts.reporting import (
    ReferenceBundle,
    ReportWriteError,
    construct_dna_best_practice_variant_calling_report,
    construct_haloplex_report,
    construct_rna_counts_report,
)
from piper_report.contexts.reporting.logger import setup_reporting_logger
from piper_report.contexts.versioning import (
    get_gatk_version,
    get_pipeline_version,
    load_resource_map,
)
from piper_report.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))


app = typer.Typer(
    help="Generate README reports with the Piper, program and reference versions of a run",
    add_completion=False,
    invoke_without_command=True,
)

ResourcesOption = Annotated[
    Optional[Path],
    typer.Option(
        "--resources",
        "-r",
        help="YAML resource config (default: RESOURCE_CONFIG_PATH from environment)",
    ),
]


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _load_resources(resources: Optional[Path]):
    try:
        return load_resource_map(resources)
    except (ValueError, FileNotFoundError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def _run(report_type: str, build):
    """Set up a session log, build the report and print the outcome."""
    log_dir = LOGS_PATH / f"report_{now()}"
    log_file = setup_reporting_logger(log_dir, report_type=report_type)

    try:
        output = build()
    except ReportWriteError as e:
        typer.secho(f"✗ {e}", fg=typer.colors.RED, bold=True, err=True)
        typer.echo(f"  Log: {log_file}")
        raise typer.Exit(code=1)

    typer.secho(f"✓ Report written: {output}", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Log: {log_file}")


@app.command("rna-counts")
def rna_counts_command(
    reference: Annotated[Path, typer.Argument(help="Reference genome used")],
    transcripts: Annotated[Path, typer.Argument(help="Transcript reference used")],
    output_file: Annotated[Path, typer.Argument(help="Report file to write")],
    mask_file: Annotated[
        Optional[Path],
        typer.Option("--mask", "-m", help="Mask file used (e.g. rRNA mask)"),
    ] = None,
    resources: ResourcesOption = None,
):
    """
    Write the report for an RNACounts run.

    Examples:\n

        $ generate_report.py rna-counts hg19.fa genes.gtf README.txt

        $ generate_report.py rna-counts hg19.fa genes.gtf README.txt --mask rRNA.gtf
    """
    resource_map = _load_resources(resources)
    _run(
        "rna_counts",
        lambda: construct_rna_counts_report(
            resource_map, reference, transcripts, mask_file, output_file
        ),
    )


@app.command("dna-best-practice")
def dna_best_practice_command(
    reference: Annotated[Path, typer.Argument(help="Reference genome used")],
    output_file: Annotated[Path, typer.Argument(help="Report file to write")],
    resources: ResourcesOption = None,
):
    """
    Write the report for a DNABestPracticeVariantCalling run.

    Examples:\n

        $ generate_report.py dna-best-practice hg19.fa README.txt -r resources.yaml
    """
    resource_map = _load_resources(resources)
    _run(
        "dna_best_practice_variant_calling",
        lambda: construct_dna_best_practice_variant_calling_report(
            resource_map, reference, output_file
        ),
    )


@app.command("haloplex")
def haloplex_command(
    reference: Annotated[Path, typer.Argument(help="Reference genome used")],
    output_file: Annotated[Path, typer.Argument(help="Report file to write")],
    dbsnp: Annotated[Optional[Path], typer.Option("--dbsnp", help="dbSNP reference")] = None,
    hapmap: Annotated[Optional[Path], typer.Option("--hapmap", help="HapMap reference")] = None,
    omni: Annotated[Optional[Path], typer.Option("--omni", help="1000G Omni reference")] = None,
    phase1: Annotated[
        Optional[Path], typer.Option("--phase1", help="1000G phase 1 indels")
    ] = None,
    mills: Annotated[
        Optional[Path], typer.Option("--mills", help="Mills and 1000G gold standard indels")
    ] = None,
    resources: ResourcesOption = None,
):
    """
    Write the report for a Haloplex run.

    Examples:\n

        $ generate_report.py haloplex hg19.fa README.txt --dbsnp dbsnp_138.vcf
    """
    resource_map = _load_resources(resources)
    bundle = ReferenceBundle(dbsnp=dbsnp, hapmap=hapmap, omni=omni, phase1=phase1, mills=mills)
    _run(
        "haloplex",
        lambda: construct_haloplex_report(resource_map, bundle, reference, output_file),
    )


@app.command("versions")
def versions_command():
    """
    Show the Piper and GATK versions found among the visible packages.

    Versions come from PIPER_CLASSPATH (or CLASSPATH) and sys.path.
    """
    typer.echo(f"piper: {get_pipeline_version()}")
    typer.echo(f"gatk: {get_gatk_version()}")


if __name__ == "__main__":
    app()

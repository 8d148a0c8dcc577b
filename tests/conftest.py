"""Shared fixtures: fixture archives and resource maps."""

import zipfile
from pathlib import Path

import pytest

from piper_report.contexts.versioning import FileVersionRecord, ResourceKey


def write_archive(path: Path, entries: dict) -> Path:
    """Write a zip archive with the given {entry name: text} contents."""
    with zipfile.ZipFile(path, "w") as archive:
        for name, text in entries.items():
            archive.writestr(name, text)
    return path


@pytest.fixture
def make_archive(tmp_path):
    """Factory writing fixture archives into tmp_path."""

    def _make(name: str, entries: dict) -> Path:
        return write_archive(tmp_path / name, entries)

    return _make


@pytest.fixture
def piper_jar(make_archive):
    return make_archive(
        "piper_2.10-1.5.0.jar",
        {
            "META-INF/MANIFEST.MF": (
                "Manifest-Version: 1.0\r\n"
                "Implementation-Title: piper\r\n"
                "Implementation-Version: 1.5.0\r\n"
                "\r\n"
            )
        },
    )


@pytest.fixture
def gatk_jar(make_archive):
    return make_archive(
        "GenomeAnalysisTK.jar",
        {
            "GATKText.properties": (
                "org.broadinstitute.gatk.engine.CommandLineGATK.name=GATK\n"
                "org.broadinstitute.gatk.engine.CommandLineGATK.version=3.4-46-gbc02625\n"
            )
        },
    )


@pytest.fixture
def dna_resource_map():
    return {
        ResourceKey.BWA: [FileVersionRecord(Path("/opt/bwa/bwa"), "0.7.12")],
        ResourceKey.SAMTOOLS: [FileVersionRecord(Path("/opt/samtools/samtools"), "1.3")],
        ResourceKey.QUALIMAP: [FileVersionRecord(Path("/opt/qualimap/qualimap"), "2.1")],
        ResourceKey.SNP_EFF: [FileVersionRecord(Path("/opt/snpEff/snpEff.jar"), "4.1")],
        ResourceKey.DB_SNP: [FileVersionRecord(Path("/refs/dbsnp_138.b37.vcf"), "138")],
    }

"""
Constants shared by the versioning context.

Resource keys use the names that appear in resource config files.
"""

import os
from enum import Enum

from dotenv import load_dotenv

load_dotenv()

UNKNOWN = "Unknown"

# Pipeline archive: piper_<scala version>-<piper version>.jar
PIPELINE_ARCHIVE_PREFIX = os.getenv("PIPELINE_ARCHIVE_PREFIX", "piper_")
PIPELINE_VERSION_ATTRIBUTE = "Implementation-Version"

GATK_ARCHIVE_NAME = "GenomeAnalysisTK.jar"
GATK_PROPERTIES_ENTRY = "GATKText.properties"
GATK_VERSION_PREFIX = "org.broadinstitute.gatk.engine.CommandLineGATK.version="

MANIFEST_ENTRY = "META-INF/MANIFEST.MF"


class ResourceKey(str, Enum):
    """Tools and reference datasets that can carry a version in the resource map."""

    BWA = "bwa"
    SAMTOOLS = "samtools"
    QUALIMAP = "qualimap"
    SNP_EFF = "snpEff"
    SNP_EFF_REFERENCE = "snpEff_reference"
    DB_SNP = "db_snp"
    HAPMAP = "hapmap"
    OMNI = "omni"
    THOUSAND_GENOMES = "1000G_indels"
    MILLS = "mills"
    INDELS = "indels"
    TOPHAT = "tophat"
    CUFFLINKS = "cufflinks"
    RNA_SEQC = "RNA-SeQC"
    CUTADAPT = "cutadapt"

    @classmethod
    def from_name(cls, name: str) -> "ResourceKey":
        """
        Look up a key by config name or enum member name (case-insensitive).

        Raises:
            ValueError: If no key matches
        """
        for key in cls:
            if name == key.value or name.upper() == key.name:
                return key
        available = [key.value for key in cls]
        raise ValueError(f"Unknown resource '{name}'. Available resources: {available}")

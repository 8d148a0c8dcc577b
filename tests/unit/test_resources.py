"""Unit tests for resource version lookup and resource config loading."""

from pathlib import Path

import pytest

from piper_report.contexts.versioning import (
    UNKNOWN,
    FileVersionRecord,
    ResourceKey,
    file_version_from_key,
    format_file_versions,
    load_resource_map,
    multiple_file_versions_from_key,
)
from piper_report.contexts.versioning.resource_config import resource_map_from_dict


@pytest.mark.unit
@pytest.mark.parametrize("key", list(ResourceKey))
def test_absent_key_is_unknown(key):
    """Test every key missing from an empty map resolves to the sentinel."""
    assert file_version_from_key({}, key) == UNKNOWN


@pytest.mark.unit
def test_single_version_lookup(dna_resource_map):
    """Test the version of a singular resource is returned."""
    assert file_version_from_key(dna_resource_map, ResourceKey.BWA) == "0.7.12"
    assert file_version_from_key(dna_resource_map, ResourceKey.SAMTOOLS) == "1.3"


@pytest.mark.unit
def test_record_without_version_is_unknown():
    """Test a record with no version resolves to the sentinel."""
    resource_map = {ResourceKey.TOPHAT: [FileVersionRecord(Path("/opt/tophat"))]}
    assert file_version_from_key(resource_map, ResourceKey.TOPHAT) == UNKNOWN


@pytest.mark.unit
def test_key_with_no_records_is_unknown():
    """Test an empty record list resolves to the sentinel."""
    assert file_version_from_key({ResourceKey.INDELS: []}, ResourceKey.INDELS) == UNKNOWN


@pytest.mark.unit
def test_multiple_lookup_absent_key_is_empty():
    """Test multi-file lookup of a missing key is an empty list."""
    assert multiple_file_versions_from_key({}, ResourceKey.INDELS) == []


@pytest.mark.unit
def test_format_indel_versions_keeps_map_order():
    """Test each record becomes one line, Unknown for a missing version."""
    records = [
        FileVersionRecord(Path("/refs/fileA"), "1.2"),
        FileVersionRecord(Path("/refs/fileB"), None),
    ]
    resource_map = {ResourceKey.INDELS: records}

    block = format_file_versions(
        multiple_file_versions_from_key(resource_map, ResourceKey.INDELS), "indel resource file"
    )

    assert block.split("\n") == [
        "indel resource file: {fileA version: 1.2}",
        "indel resource file: {fileB version: Unknown}",
    ]


@pytest.mark.unit
def test_format_no_records_is_empty():
    """Test formatting nothing gives an empty block."""
    assert format_file_versions([], "indel resource file") == ""


@pytest.mark.unit
def test_resource_key_from_name():
    """Test keys resolve from config names and member names."""
    assert ResourceKey.from_name("1000G_indels") is ResourceKey.THOUSAND_GENOMES
    assert ResourceKey.from_name("db_snp") is ResourceKey.DB_SNP
    assert ResourceKey.from_name("rna_seqc") is ResourceKey.RNA_SEQC

    with pytest.raises(ValueError, match="Unknown resource"):
        ResourceKey.from_name("bowtie")


@pytest.mark.unit
def test_resource_map_from_dict_single_and_list():
    """Test single mappings and lists both become record lists."""
    resource_map = resource_map_from_dict(
        {
            "resources": {
                "bwa": {"file": "/opt/bwa/bwa", "version": "0.7.12"},
                "indels": [
                    {"file": "/refs/fileA", "version": 1.2},
                    {"file": "/refs/fileB"},
                ],
            }
        }
    )

    assert resource_map[ResourceKey.BWA] == [FileVersionRecord(Path("/opt/bwa/bwa"), "0.7.12")]
    assert resource_map[ResourceKey.INDELS] == [
        FileVersionRecord(Path("/refs/fileA"), "1.2"),
        FileVersionRecord(Path("/refs/fileB"), None),
    ]


@pytest.mark.unit
def test_resource_map_from_dict_rejects_bad_config():
    """Test malformed configs raise ValueError."""
    with pytest.raises(ValueError, match="'resources'"):
        resource_map_from_dict({"programs": {}})

    with pytest.raises(ValueError, match="Unknown resource"):
        resource_map_from_dict({"resources": {"bowtie": {"file": "/opt/bowtie"}}})

    with pytest.raises(ValueError, match="'file'"):
        resource_map_from_dict({"resources": {"bwa": {"version": "0.7.12"}}})


@pytest.mark.unit
def test_load_resource_map_from_yaml(tmp_path):
    """Test loading a YAML resource config from disk."""
    config = tmp_path / "resources.yaml"
    config.write_text(
        "resources:\n"
        "  samtools:\n"
        "    file: /opt/samtools/samtools\n"
        "    version: '1.3'\n"
        "  1000G_indels:\n"
        "    file: /refs/1000G_phase1.indels.b37.vcf\n"
        "    version: phase1\n"
        "  indels:\n"
        "    - file: /refs/fileA\n"
        "      version: '1.2'\n"
        "    - file: /refs/fileB\n"
    )

    resource_map = load_resource_map(config)

    assert file_version_from_key(resource_map, ResourceKey.SAMTOOLS) == "1.3"
    assert file_version_from_key(resource_map, ResourceKey.THOUSAND_GENOMES) == "phase1"
    assert len(resource_map[ResourceKey.INDELS]) == 2
    assert file_version_from_key(resource_map, ResourceKey.BWA) == UNKNOWN


@pytest.mark.unit
def test_load_resource_map_missing_file(tmp_path):
    """Test a missing config file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_resource_map(tmp_path / "missing.yaml")


@pytest.mark.unit
def test_example_resource_config_loads():
    """Test the shipped example config is valid."""
    config = Path(__file__).parents[2] / "config" / "resources.yaml"

    resource_map = load_resource_map(config)

    assert file_version_from_key(resource_map, ResourceKey.BWA) == "0.7.12"
    assert file_version_from_key(resource_map, ResourceKey.MILLS) == UNKNOWN
    assert len(multiple_file_versions_from_key(resource_map, ResourceKey.INDELS)) == 2

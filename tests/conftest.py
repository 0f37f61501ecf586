"""
Test configuration for COPD PRS Lookup.
"""

import json
import sys
import pytest
from pathlib import Path

# Add src/ to Python path so tests run without installing the package
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from copd_prs.data_store import DataStore  # noqa: E402


SAMPLE_RECORDS = [
    {"Gene Name": "ABC", "SNP ID": "rs1", "Effect Size (Beta)": 0.3},
    {"Gene Name": "ABC", "SNP ID": "rs2"},
    {"Gene Name": "HHIP", "SNP ID": "rs13118928", "Chromosome": "4", "Effect Size (Beta)": 0.6},
    {"Gene Name": "HHIP", "SNP ID": "rs1828591", "Chromosome": "4", "Effect Size (Beta)": 0.45},
    {"Gene Name": "fam13a", "SNP ID": "RS7671167", "Chromosome": "4", "Effect Size (Beta)": 0.123456},
    {"Gene Name": "ZERO", "SNP ID": "rs900", "Effect Size (Beta)": 0},
]


@pytest.fixture
def sample_records():
    """Return a fresh copy of the sample dataset."""
    return [dict(record) for record in SAMPLE_RECORDS]


@pytest.fixture
def data_file(tmp_path, sample_records):
    """Write the sample dataset to a JSON file and return its path."""
    path = tmp_path / "copd_data.json"
    path.write_text(json.dumps(sample_records))
    return path


@pytest.fixture
def loaded_store(sample_records):
    """Return a READY store holding the sample dataset."""
    return DataStore().replace(sample_records)


@pytest.fixture
def output_dir(tmp_path):
    """Return a temporary output directory for reports."""
    output_dir = tmp_path / "output"
    output_dir.mkdir()
    return output_dir

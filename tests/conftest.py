"""Pytest configuration and shared fixtures for seqforge tests.

Fixtures are organized by category:

- Configuration fixtures: Reset global state between tests
- Sequence fixtures: Provide ready-made sequences
- Synthetic data fixtures: Generate test data programmatically
"""

from pathlib import Path
from typing import Generator

import numpy as np
import pytest

from seqforge.config import Config, get_config, set_config
from seqforge.sequence import DNASequence, ProteinSequence, RNASequence, Sequence


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def default_config() -> Generator[Config, None, None]:
    """Run each test with a fresh default configuration."""
    previous = get_config()
    config = Config()
    set_config(config)
    yield config
    set_config(previous)


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write a YAML configuration that enables strict construction."""
    path = tmp_path / "seqforge.yaml"
    path.write_text(
        "sequence:\n"
        "  validate_on_construction: true\n"
        "logging:\n"
        "  verbosity: 0\n"
        "  use_rich: false\n"
    )
    return path


# =============================================================================
# Sequence Fixtures
# =============================================================================


@pytest.fixture
def sample_dna() -> Sequence:
    """DNA sequence used by the original pipeline example."""
    return DNASequence("Sample_001", "ATGGCCATTGTAATGGGCCGCTGAAAGGGTGCCCGATAG")


@pytest.fixture
def sample_rna() -> Sequence:
    """RNA sequence with a stop codon in the middle."""
    return RNASequence("rna_001", "AUGUAAUUU")


@pytest.fixture
def sample_protein() -> Sequence:
    """Short protein sequence."""
    return ProteinSequence("prot_001", "MAIVMGR")


# =============================================================================
# Synthetic Data Fixtures
# =============================================================================


@pytest.fixture
def random_dna() -> list[Sequence]:
    """Generate reproducible random DNA sequences of varying length."""
    rng = np.random.default_rng(42)
    return [
        DNASequence(f"rand_{i}", "".join(rng.choice(list("ACGT"), length)))
        for i, length in enumerate([0, 1, 2, 3, 10, 99, 500])
    ]


@pytest.fixture
def random_sense_rna() -> list[Sequence]:
    """Generate random RNA whose codons contain no stop codon."""
    from seqforge.codons import CODON_TABLE, STOP_CODONS

    sense = sorted(c for c in CODON_TABLE if c not in STOP_CODONS)
    rng = np.random.default_rng(7)
    return [
        RNASequence(f"sense_{i}", "".join(rng.choice(sense, n_codons)))
        for i, n_codons in enumerate([1, 5, 33, 200])
    ]

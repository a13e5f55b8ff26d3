"""Tests for the seqforge command-line interface.

Commands are invoked through click's CliRunner with sequences given
as arguments.
"""

from pathlib import Path

import pytest
from click.testing import CliRunner

from seqforge import __version__
from seqforge.cli import main


@pytest.fixture
def runner() -> CliRunner:
    """Return a click test runner."""
    return CliRunner()


def output_lines(result) -> list[str]:
    """Non-empty output lines."""
    return [line for line in result.output.splitlines() if line.strip()]


# =============================================================================
# Group Options
# =============================================================================


class TestMainGroup:
    """Tests for the top-level command group."""

    def test_help_lists_commands(self, runner: CliRunner) -> None:
        """--help shows every command."""
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        for command in ["complement", "transcribe", "translate", "mutate", "find-motif"]:
            assert command in result.output

    def test_version(self, runner: CliRunner) -> None:
        """--version prints the package version."""
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_missing_config(self, runner: CliRunner, tmp_path: Path) -> None:
        """A missing config file is a usage error."""
        result = runner.invoke(main, ["-c", str(tmp_path / "nope.yaml"), "complement", "ATG"])
        assert result.exit_code == 2

    def test_invalid_config(self, runner: CliRunner, tmp_path: Path) -> None:
        """An invalid config file is reported as an error."""
        path = tmp_path / "bad.yaml"
        path.write_text("unknown: {}\n")
        result = runner.invoke(main, ["-c", str(path), "complement", "ATG"])
        assert result.exit_code == 1
        assert "Error:" in result.output


# =============================================================================
# complement
# =============================================================================


class TestComplementCommand:
    """Tests for 'seqforge complement'."""

    def test_complement(self, runner: CliRunner) -> None:
        """Prints the complement."""
        result = runner.invoke(main, ["complement", "ATGGCC"])
        assert result.exit_code == 0
        assert output_lines(result) == ["TACCGG"]

    def test_unknown_base(self, runner: CliRunner) -> None:
        """Invalid bases are reported and exit with status 1."""
        result = runner.invoke(main, ["complement", "ACNT"])
        assert result.exit_code == 1
        assert "Unknown base: N" in result.output

    def test_strict_flag(self, runner: CliRunner) -> None:
        """--strict rejects invalid input at construction."""
        result = runner.invoke(main, ["--strict", "complement", "ACNT"])
        assert result.exit_code == 1
        assert "not allowed in DNA sequences" in result.output

    def test_strict_from_config(self, runner: CliRunner, config_file: Path) -> None:
        """validate_on_construction from the config file applies."""
        result = runner.invoke(main, ["-c", str(config_file), "complement", "ACNT"])
        assert result.exit_code == 1
        assert "not allowed" in result.output


# =============================================================================
# transcribe / translate
# =============================================================================


class TestTranscribeCommand:
    """Tests for 'seqforge transcribe'."""

    def test_dna(self, runner: CliRunner) -> None:
        """DNA is transcribed to RNA and printed as FASTA."""
        result = runner.invoke(main, ["transcribe", "ATGTAA", "--id", "sample_001"])
        assert result.exit_code == 0
        assert output_lines(result) == [">sample_001", "AUGUAA"]

    def test_rna(self, runner: CliRunner) -> None:
        """RNA is translated to protein."""
        result = runner.invoke(main, ["transcribe", "AUGUAA", "--kind", "rna"])
        assert result.exit_code == 0
        assert output_lines(result) == [">seq", "M"]

    def test_protein(self, runner: CliRunner) -> None:
        """Proteins cannot be transcribed."""
        result = runner.invoke(main, ["transcribe", "MA", "--kind", "protein"])
        assert result.exit_code == 1
        assert "cannot be transcribed" in result.output


class TestTranslateCommand:
    """Tests for 'seqforge translate'."""

    def test_stop_codon(self, runner: CliRunner) -> None:
        """Translation ends at the first stop codon."""
        result = runner.invoke(main, ["translate", "AUGUAAUUU"])
        assert result.exit_code == 0
        assert output_lines(result) == [">seq", "M"]

    def test_from_dna(self, runner: CliRunner) -> None:
        """--from-dna transcribes before translating."""
        result = runner.invoke(main, ["translate", "ATGGCCTGA", "--from-dna", "--id", "g1"])
        assert result.exit_code == 0
        assert output_lines(result) == [">g1", "MA"]

    def test_unknown_codon(self, runner: CliRunner) -> None:
        """DNA given as RNA fails on the first unknown codon."""
        result = runner.invoke(main, ["translate", "ATG"])
        assert result.exit_code == 1
        assert "Unknown codon: ATG" in result.output


# =============================================================================
# mutate / find-motif
# =============================================================================


class TestMutateCommand:
    """Tests for 'seqforge mutate'."""

    def test_mutate(self, runner: CliRunner) -> None:
        """Prints the mutated record."""
        result = runner.invoke(main, ["mutate", "AUGGCC", "2", "A", "--kind", "rna"])
        assert result.exit_code == 0
        assert output_lines(result) == [">seq", "AUAGCC"]

    def test_out_of_range(self, runner: CliRunner) -> None:
        """Out-of-range positions fail."""
        result = runner.invoke(main, ["mutate", "ATG", "3", "A"])
        assert result.exit_code == 1
        assert "out of range" in result.output

    def test_negative_position(self, runner: CliRunner) -> None:
        """Negative positions fail."""
        result = runner.invoke(main, ["mutate", "--", "ATG", "-1", "A"])
        assert result.exit_code == 1
        assert "out of range" in result.output

    def test_invalid_symbol(self, runner: CliRunner) -> None:
        """Symbols outside the alphabet fail."""
        result = runner.invoke(main, ["mutate", "ATG", "0", "U"])
        assert result.exit_code == 1
        assert "not allowed" in result.output


class TestFindMotifCommand:
    """Tests for 'seqforge find-motif'."""

    def test_found(self, runner: CliRunner) -> None:
        """Prints the index of the first match."""
        result = runner.invoke(main, ["find-motif", "ATGGCC", "GGC"])
        assert result.exit_code == 0
        assert output_lines(result) == ["2"]

    def test_absent(self, runner: CliRunner) -> None:
        """Prints -1 for an absent motif."""
        result = runner.invoke(main, ["find-motif", "ATGGCC", "TTT"])
        assert result.exit_code == 0
        assert output_lines(result) == ["-1"]

    def test_protein(self, runner: CliRunner) -> None:
        """Works for protein sequences."""
        result = runner.invoke(main, ["find-motif", "MAIVMGR", "MG", "--kind", "protein"])
        assert result.exit_code == 0
        assert output_lines(result) == ["4"]

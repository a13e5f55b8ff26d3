"""Command-line interface for seqforge.

This module provides the main entry point for the seqforge CLI tool.
It uses Click to define commands for the sequence operations. Sequences
are given directly on the command line.

Commands:
    complement: Complement of a DNA sequence
    transcribe: One pipeline step (DNA -> RNA, RNA -> protein)
    translate: Translate RNA (or DNA with --from-dna) to protein
    mutate: Replace one symbol and print the record
    find-motif: Position of the first occurrence of a motif

Example:
    $ seqforge --help
    $ seqforge complement ATGGCC
    $ seqforge transcribe ATGTAA --id sample_001
    $ seqforge translate AUGGCCUAA
    $ seqforge mutate AUGGCC 2 A --kind rna
    $ seqforge find-motif ATGGCC GGC
"""

import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from seqforge import __version__
from seqforge.alphabet import SequenceKind
from seqforge.config import Config, set_config
from seqforge.errors import SequenceError
from seqforge.sequence import Sequence
from seqforge.transforms import complement, transcribe, transcribe_dna, translate
from seqforge.utils.logging import setup_logging

# Initialize rich console for pretty output
console = Console()

logger = logging.getLogger(__name__)

DEFAULT_IDENTIFIER = "seq"

KIND_CHOICE = click.Choice(["dna", "rna", "protein"], case_sensitive=False)


def _fail(message: str) -> None:
    console.print(f"[red]Error:[/red] {escape(message)}")
    raise SystemExit(1)


@click.group()
@click.version_option(version=__version__, prog_name="seqforge")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output.")
@click.option("-q", "--quiet", is_flag=True, help="Suppress non-error output.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML configuration file.",
)
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Validate sequences against their alphabet when they are created.",
)
@click.pass_context
def main(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    config_path: Optional[Path],
    strict: Optional[bool],
) -> None:
    """seqforge: DNA, RNA and protein sequence tools.

    Transcribe DNA to RNA, translate RNA to protein, complement DNA,
    apply point mutations and search for motifs.
    """
    try:
        config = Config.load(config_path)
    except ValueError as e:
        _fail(str(e))

    if strict is not None:
        config.sequence.validate_on_construction = strict
    if verbose:
        config.logging.verbosity = 2
    elif quiet:
        config.logging.verbosity = 0

    set_config(config)
    setup_logging(
        verbosity=config.logging.verbosity,
        log_file=config.logging.log_file,
        use_rich=config.logging.use_rich,
    )

    # Ensure context object exists
    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet


# =============================================================================
# complement command
# =============================================================================


@main.command("complement")
@click.argument("sequence")
@click.option("--id", "identifier", default=DEFAULT_IDENTIFIER, show_default=True, help="Sequence identifier.")
def complement_cmd(sequence: str, identifier: str) -> None:
    """Print the complement of a DNA SEQUENCE.

    \b
    Examples:
        $ seqforge complement ATGGCC
        TACCGG
    """
    try:
        click.echo(complement(Sequence(identifier, sequence, SequenceKind.DNA)))
    except SequenceError as e:
        _fail(str(e))


# =============================================================================
# transcribe command
# =============================================================================


@main.command("transcribe")
@click.argument("sequence")
@click.option("--id", "identifier", default=DEFAULT_IDENTIFIER, show_default=True, help="Sequence identifier.")
@click.option("--kind", type=KIND_CHOICE, default="dna", show_default=True, help="Kind of the input sequence.")
def transcribe_cmd(sequence: str, identifier: str, kind: str) -> None:
    """Advance SEQUENCE one step along DNA -> RNA -> protein.

    DNA input is transcribed to RNA; RNA input is translated to protein.
    The result is printed as a FASTA record.

    \b
    Examples:
        $ seqforge transcribe ATGTAA --id sample_001
        >sample_001
        AUGUAA
    """
    try:
        seq = Sequence(identifier, sequence, SequenceKind.from_name(kind))
        click.echo(transcribe(seq).render())
    except SequenceError as e:
        _fail(str(e))


# =============================================================================
# translate command
# =============================================================================


@main.command("translate")
@click.argument("sequence")
@click.option("--id", "identifier", default=DEFAULT_IDENTIFIER, show_default=True, help="Sequence identifier.")
@click.option("--from-dna", is_flag=True, help="Treat SEQUENCE as DNA and transcribe it first.")
def translate_cmd(sequence: str, identifier: str, from_dna: bool) -> None:
    """Translate an RNA SEQUENCE to protein, stopping at the first stop codon.

    \b
    Examples:
        $ seqforge translate AUGUAAUUU
        >seq
        M
        $ seqforge translate ATGGCCTGA --from-dna
        >seq
        MA
    """
    try:
        if from_dna:
            rna = transcribe_dna(Sequence(identifier, sequence, SequenceKind.DNA))
        else:
            rna = Sequence(identifier, sequence, SequenceKind.RNA)
        protein = translate(rna)
        logger.debug(f"Translated {len(rna)} bases into {len(protein)} residues")
        click.echo(protein.render())
    except SequenceError as e:
        _fail(str(e))


# =============================================================================
# mutate command
# =============================================================================


@main.command("mutate")
@click.argument("sequence")
@click.argument("position", type=int)
@click.argument("value")
@click.option("--id", "identifier", default=DEFAULT_IDENTIFIER, show_default=True, help="Sequence identifier.")
@click.option("--kind", type=KIND_CHOICE, default="dna", show_default=True, help="Kind of the input sequence.")
def mutate_cmd(
    sequence: str,
    position: int,
    value: str,
    identifier: str,
    kind: str,
) -> None:
    """Replace the symbol at POSITION (0-based) of SEQUENCE with VALUE.

    \b
    Examples:
        $ seqforge mutate AUGGCC 2 A --kind rna
        >seq
        AUAGCC
    """
    try:
        seq = Sequence(identifier, sequence, SequenceKind.from_name(kind))
        seq.mutate(position, value)
        click.echo(seq.render())
    except SequenceError as e:
        _fail(str(e))


# =============================================================================
# find-motif command
# =============================================================================


@main.command("find-motif")
@click.argument("sequence")
@click.argument("motif")
@click.option("--kind", type=KIND_CHOICE, default="dna", show_default=True, help="Kind of the input sequence.")
def find_motif_cmd(sequence: str, motif: str, kind: str) -> None:
    """Print the 0-based position of the first MOTIF in SEQUENCE (-1 if absent).

    \b
    Examples:
        $ seqforge find-motif ATGGCC GGC
        2
    """
    try:
        seq = Sequence(DEFAULT_IDENTIFIER, sequence, SequenceKind.from_name(kind))
    except SequenceError as e:
        _fail(str(e))

    position = seq.find_motif(motif)
    logger.debug(f"Motif '{motif}' search returned {position}")
    click.echo(position)


if __name__ == "__main__":
    main()

"""Transforms along the DNA -> RNA -> protein pipeline.

Transforms are plain functions that dispatch on the sequence kind:

- complement: Watson-Crick complement of a DNA sequence (A<->T, C<->G)
- transcribe_dna: DNA -> RNA (T -> U)
- translate: RNA -> protein using the standard codon table
- transcribe: one pipeline step (DNA -> RNA, or RNA -> protein)

Every transform returns a new value; the source sequence is never modified.

Example:
    >>> from seqforge import DNASequence
    >>> from seqforge.transforms import transcribe
    >>> rna = transcribe(DNASequence("seq1", "ATGTAA"))
    >>> rna.data
    'AUGUAA'
    >>> transcribe(rna).data
    'M'
"""

import logging

from seqforge.alphabet import STOP_SYMBOL, SequenceKind
from seqforge.codons import CODON_LENGTH, lookup_codon
from seqforge.errors import AlphabetInvariantError, UnsupportedOperationError
from seqforge.sequence import Sequence

logger = logging.getLogger(__name__)

# =============================================================================
# Constants
# =============================================================================

DNA_COMPLEMENT = {"A": "T", "T": "A", "C": "G", "G": "C"}


def _require_kind(sequence: Sequence, kind: SequenceKind, operation: str) -> None:
    if sequence.kind is not kind:
        raise UnsupportedOperationError(
            f"{operation} requires a {kind.value} sequence, "
            f"got {sequence.kind.value} ({sequence.identifier})"
        )


# =============================================================================
# DNA Transforms
# =============================================================================


def complement(sequence: Sequence) -> str:
    """Get the complement of a DNA sequence.

    Args:
        sequence: DNA sequence.

    Returns:
        Complement string of the same length.

    Raises:
        UnsupportedOperationError: If sequence is not DNA.
        AlphabetInvariantError: If data holds a symbol other than A, T, C, G.
    """
    _require_kind(sequence, SequenceKind.DNA, "complement")

    bases = []
    for i, base in enumerate(sequence.data):
        try:
            bases.append(DNA_COMPLEMENT[base])
        except KeyError:
            logger.error(
                f"{sequence.identifier}: unknown base {base!r} at position {i}"
            )
            raise AlphabetInvariantError(f"Unknown base: {base}") from None
    return "".join(bases)


def transcribe_dna(sequence: Sequence) -> Sequence:
    """Transcribe DNA to RNA by replacing every T with U.

    Args:
        sequence: DNA sequence.

    Returns:
        New RNA sequence with the same identifier.

    Raises:
        UnsupportedOperationError: If sequence is not DNA.
    """
    _require_kind(sequence, SequenceKind.DNA, "transcription")

    logger.debug(f"{sequence.identifier}: transcribing {len(sequence)} bases")
    return Sequence(
        sequence.identifier,
        sequence.data.replace("T", "U"),
        SequenceKind.RNA,
        strict=False,
    )


# =============================================================================
# RNA Transforms
# =============================================================================


def translate(sequence: Sequence) -> Sequence:
    """Translate RNA to protein.

    Codons are read from offset 0 without overlap. Translation ends at the
    first stop codon (which adds nothing) or when fewer than three bases
    remain.

    Args:
        sequence: RNA sequence.

    Returns:
        New protein sequence with the same identifier. May be empty.

    Raises:
        UnsupportedOperationError: If sequence is not RNA.
        AlphabetInvariantError: If a codon is not in the codon table.
    """
    _require_kind(sequence, SequenceKind.RNA, "translation")

    data = sequence.data
    protein = []

    for i in range(0, len(data) - CODON_LENGTH + 1, CODON_LENGTH):
        aa = lookup_codon(data[i : i + CODON_LENGTH])
        if aa == STOP_SYMBOL:
            logger.debug(f"{sequence.identifier}: stop codon at position {i}")
            break
        protein.append(aa)

    return Sequence(
        sequence.identifier,
        "".join(protein),
        SequenceKind.PROTEIN,
        strict=False,
    )


# =============================================================================
# Pipeline
# =============================================================================


def transcribe(sequence: Sequence) -> Sequence:
    """Advance a sequence one step along DNA -> RNA -> protein.

    Args:
        sequence: DNA or RNA sequence.

    Returns:
        RNA sequence for DNA input, protein sequence for RNA input.

    Raises:
        UnsupportedOperationError: If sequence is a protein.
    """
    if sequence.kind is SequenceKind.DNA:
        return transcribe_dna(sequence)
    if sequence.kind is SequenceKind.RNA:
        return translate(sequence)
    raise UnsupportedOperationError(
        f"Protein sequences cannot be transcribed ({sequence.identifier})"
    )

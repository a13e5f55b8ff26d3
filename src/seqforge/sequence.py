"""Sequence model shared by DNA, RNA and protein sequences.

A :class:`Sequence` is an identifier plus a mutable string of symbols,
tagged with a :class:`~seqforge.alphabet.SequenceKind`. The kind decides
which alphabet :meth:`Sequence.mutate` enforces and which transforms in
:mod:`seqforge.transforms` accept the sequence.

Initial data is not checked against the alphabet unless ``strict=True`` is
passed or ``validate_on_construction`` is set in the active configuration.
Only :meth:`Sequence.mutate` always enforces the alphabet.

Example:
    >>> from seqforge.sequence import DNASequence
    >>> seq = DNASequence("seq1", "ATGGCC")
    >>> seq.find_motif("GGC")
    2
    >>> seq.mutate(0, "G")
    >>> print(seq.render())
    >seq1
    GTGGCC
"""

from __future__ import annotations

import logging

import attrs

from seqforge.alphabet import SequenceKind
from seqforge.config import get_config
from seqforge.errors import InvalidSymbolError, PositionOutOfRangeError

logger = logging.getLogger(__name__)


# =============================================================================
# Sequence Class
# =============================================================================


@attrs.define(init=False)
class Sequence:
    """A biological sequence with an identifier and a fixed alphabet.

    Attributes:
        identifier: Label used when rendering. Cannot be reassigned.
        data: Sequence symbols. Modified in place by mutate().
        kind: Sequence kind. Cannot be reassigned.
    """

    identifier: str = attrs.field(on_setattr=attrs.setters.frozen)
    data: str
    kind: SequenceKind = attrs.field(on_setattr=attrs.setters.frozen)

    def __init__(
        self,
        identifier: str,
        data: str,
        kind: SequenceKind = SequenceKind.DNA,
        *,
        strict: bool | None = None,
    ) -> None:
        """Create a sequence.

        Args:
            identifier: Sequence label.
            data: Initial symbols.
            kind: Sequence kind.
            strict: Validate data against the alphabet. Defaults to the
                active configuration's validate_on_construction.

        Raises:
            InvalidSymbolError: If strict and data has a symbol outside the
                alphabet.
        """
        self.__attrs_init__(identifier, data, kind)

        if strict is None:
            strict = get_config().sequence.validate_on_construction
        if strict:
            self.validate()

    @property
    def alphabet(self) -> frozenset[str]:
        """Legal symbols for this sequence."""
        return self.kind.alphabet

    def length(self) -> int:
        """Number of symbols in the sequence."""
        return len(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def mutate(self, position: int, value: str) -> None:
        """Replace the symbol at a position.

        Args:
            position: 0-based position to change.
            value: New symbol; must belong to the alphabet.

        Raises:
            PositionOutOfRangeError: If position is outside [0, length).
            InvalidSymbolError: If value is not in the alphabet.
        """
        if not 0 <= position < len(self.data):
            raise PositionOutOfRangeError(position, len(self.data))
        if value not in self.alphabet:
            raise InvalidSymbolError(value, self.kind)

        old = self.data[position]
        self.data = self.data[:position] + value + self.data[position + 1 :]
        logger.debug(f"{self.identifier}: mutated position {position} {old}->{value}")

    def find_motif(self, motif: str) -> int:
        """Find the first occurrence of a motif.

        Args:
            motif: Substring to search for.

        Returns:
            0-based index of the first match, or -1 if not found.
        """
        return self.data.find(motif)

    def render(self) -> str:
        """Return the sequence as a single FASTA record (no line wrapping)."""
        return f">{self.identifier}\n{self.data}"

    def __str__(self) -> str:
        return self.render()

    def validate(self) -> None:
        """Check every symbol against the alphabet.

        Raises:
            InvalidSymbolError: For the first symbol outside the alphabet.
        """
        alphabet = self.alphabet
        for i, symbol in enumerate(self.data):
            if symbol not in alphabet:
                raise InvalidSymbolError(symbol, self.kind, position=i)

    def is_valid(self) -> bool:
        """Check whether all symbols belong to the alphabet."""
        return set(self.data) <= self.alphabet


# =============================================================================
# Constructors
# =============================================================================


def DNASequence(identifier: str, data: str, *, strict: bool | None = None) -> Sequence:
    """Create a DNA sequence over {A, T, C, G}."""
    return Sequence(identifier, data, SequenceKind.DNA, strict=strict)


def RNASequence(identifier: str, data: str, *, strict: bool | None = None) -> Sequence:
    """Create an RNA sequence over {A, U, C, G}."""
    return Sequence(identifier, data, SequenceKind.RNA, strict=strict)


def ProteinSequence(
    identifier: str, data: str, *, strict: bool | None = None
) -> Sequence:
    """Create a protein sequence over the 20 amino acids plus X and *."""
    return Sequence(identifier, data, SequenceKind.PROTEIN, strict=strict)

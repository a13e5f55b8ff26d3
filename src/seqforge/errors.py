"""Exceptions raised by seqforge.

All library errors derive from :class:`SequenceError`. Validation errors
(:class:`PositionOutOfRangeError`, :class:`InvalidSymbolError`) are
recoverable and leave the sequence untouched. :class:`AlphabetInvariantError`
signals a defect: a symbol or codon that should never be present was found
while transforming a sequence.

Example:
    >>> from seqforge import DNASequence
    >>> from seqforge.errors import InvalidSymbolError
    >>> seq = DNASequence("seq1", "ATG")
    >>> try:
    ...     seq.mutate(0, "U")
    ... except InvalidSymbolError as e:
    ...     print(e.symbol)
    U
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from seqforge.alphabet import SequenceKind


class SequenceError(Exception):
    """Base class for all seqforge errors."""

    pass


class PositionOutOfRangeError(SequenceError, IndexError):
    """Raised when a position lies outside ``[0, length)``."""

    def __init__(self, position: int, length: int) -> None:
        self.position = position
        self.length = length
        super().__init__(
            f"Position {position} is out of range for sequence of length {length}"
        )


class InvalidSymbolError(SequenceError, ValueError):
    """Raised when a symbol is not part of a sequence's alphabet."""

    def __init__(
        self,
        symbol: str,
        kind: SequenceKind,
        position: int | None = None,
    ) -> None:
        self.symbol = symbol
        self.kind = kind
        self.position = position
        message = f"Symbol '{symbol}' is not allowed in {kind.value} sequences"
        if position is not None:
            message += f" (position {position})"
        super().__init__(message)


class AlphabetInvariantError(SequenceError):
    """Raised when a transform meets a base or codon outside its alphabet.

    This indicates that a sequence was built from unvalidated data; it is
    never raised for input that passed :meth:`Sequence.validate`.
    """

    pass


class UnsupportedOperationError(SequenceError, TypeError):
    """Raised when a transform is applied to a kind that does not support it."""

    pass

"""Sequence kinds and their alphabets.

Each sequence carries a :class:`SequenceKind` tag. The tag selects the set of
legal symbols and the transforms that apply to the sequence.

Example:
    >>> from seqforge.alphabet import SequenceKind, alphabet_for
    >>> sorted(alphabet_for(SequenceKind.RNA))
    ['A', 'C', 'G', 'U']
"""

from enum import Enum

# =============================================================================
# Alphabets
# =============================================================================

DNA_ALPHABET = frozenset("ATCG")

RNA_ALPHABET = frozenset("AUCG")

# 20 standard amino acids
AMINO_ACIDS = frozenset("ARNDCEQGHILKMFPSTWYV")

WILDCARD_SYMBOL = "X"

STOP_SYMBOL = "*"

PROTEIN_ALPHABET = AMINO_ACIDS | {WILDCARD_SYMBOL, STOP_SYMBOL}


# =============================================================================
# Enums
# =============================================================================


class SequenceKind(Enum):
    """Kind of biological sequence."""

    DNA = "DNA"
    RNA = "RNA"
    PROTEIN = "protein"

    @property
    def alphabet(self) -> frozenset[str]:
        """Legal symbols for this kind."""
        return _ALPHABETS[self]

    @classmethod
    def from_name(cls, name: str) -> "SequenceKind":
        """Look up a kind by case-insensitive name (dna, rna, protein).

        Raises:
            ValueError: If the name is not a known kind.
        """
        for kind in cls:
            if kind.value.lower() == name.lower():
                return kind
        raise ValueError(f"Unknown sequence kind: {name}")


_ALPHABETS = {
    SequenceKind.DNA: DNA_ALPHABET,
    SequenceKind.RNA: RNA_ALPHABET,
    SequenceKind.PROTEIN: PROTEIN_ALPHABET,
}


def alphabet_for(kind: SequenceKind) -> frozenset[str]:
    """Return the alphabet for a sequence kind."""
    return _ALPHABETS[kind]

"""Standard genetic code for RNA codons.

The table covers all 64 codons over {A, U, C, G}: 61 sense codons map to
one-letter amino acid codes and the three stop codons map to
:data:`STOP_SYMBOL`. The mapping is read-only.

Example:
    >>> from seqforge.codons import CODON_TABLE, lookup_codon
    >>> lookup_codon("AUG")
    'M'
    >>> CODON_TABLE["UGA"]
    '*'
"""

import logging
from types import MappingProxyType

from seqforge.alphabet import STOP_SYMBOL
from seqforge.errors import AlphabetInvariantError

logger = logging.getLogger(__name__)

# =============================================================================
# Constants
# =============================================================================

# Standard genetic code (NCBI Table 1), RNA codons
CODON_TABLE = MappingProxyType(
    {
        "UUU": "F", "UUC": "F", "UUA": "L", "UUG": "L",
        "CUU": "L", "CUC": "L", "CUA": "L", "CUG": "L",
        "AUU": "I", "AUC": "I", "AUA": "I", "AUG": "M",
        "GUU": "V", "GUC": "V", "GUA": "V", "GUG": "V",
        "UCU": "S", "UCC": "S", "UCA": "S", "UCG": "S",
        "CCU": "P", "CCC": "P", "CCA": "P", "CCG": "P",
        "ACU": "T", "ACC": "T", "ACA": "T", "ACG": "T",
        "GCU": "A", "GCC": "A", "GCA": "A", "GCG": "A",
        "UAU": "Y", "UAC": "Y", "UAA": STOP_SYMBOL, "UAG": STOP_SYMBOL,
        "CAU": "H", "CAC": "H", "CAA": "Q", "CAG": "Q",
        "AAU": "N", "AAC": "N", "AAA": "K", "AAG": "K",
        "GAU": "D", "GAC": "D", "GAA": "E", "GAG": "E",
        "UGU": "C", "UGC": "C", "UGA": STOP_SYMBOL, "UGG": "W",
        "CGU": "R", "CGC": "R", "CGA": "R", "CGG": "R",
        "AGU": "S", "AGC": "S", "AGA": "R", "AGG": "R",
        "GGU": "G", "GGC": "G", "GGA": "G", "GGG": "G",
    }
)

START_CODON = "AUG"

STOP_CODONS = frozenset(
    codon for codon, aa in CODON_TABLE.items() if aa == STOP_SYMBOL
)

CODON_LENGTH = 3


# =============================================================================
# Lookup
# =============================================================================


def lookup_codon(codon: str) -> str:
    """Translate a single RNA codon.

    Args:
        codon: Three-letter RNA codon.

    Returns:
        One-letter amino acid code, or STOP_SYMBOL for stop codons.

    Raises:
        AlphabetInvariantError: If codon is not one of the 64 valid codons.
    """
    try:
        return CODON_TABLE[codon]
    except KeyError:
        logger.error(f"Unknown codon encountered during translation: {codon!r}")
        raise AlphabetInvariantError(f"Unknown codon: {codon}") from None


def is_stop_codon(codon: str) -> bool:
    """Check whether a codon is one of UAA, UAG, UGA."""
    return codon in STOP_CODONS

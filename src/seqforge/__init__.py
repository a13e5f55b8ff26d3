"""seqforge: DNA, RNA and protein sequences.

seqforge models biological sequences as mutable strings over a fixed
alphabet and implements the DNA -> RNA -> protein pipeline: transcription,
translation with the standard codon table, complementation, point mutation
and motif search.

Example:
    >>> from seqforge import DNASequence, transcribe
    >>> dna = DNASequence("sample_001", "ATGGCCTAA")
    >>> protein = transcribe(transcribe(dna))
    >>> print(protein)
    >sample_001
    MA

Modules:
    alphabet: Sequence kinds and their alphabets
    codons: Standard codon table
    sequence: Sequence model and constructors
    transforms: complement, transcription and translation
    errors: Exception hierarchy
    config: Configuration management
    cli: Command-line interface
    utils: Logging utilities
"""

__version__ = "0.1.0"

from seqforge.alphabet import SequenceKind
from seqforge.codons import CODON_TABLE, STOP_CODONS
from seqforge.errors import (
    AlphabetInvariantError,
    InvalidSymbolError,
    PositionOutOfRangeError,
    SequenceError,
    UnsupportedOperationError,
)
from seqforge.sequence import DNASequence, ProteinSequence, RNASequence, Sequence
from seqforge.transforms import complement, transcribe, transcribe_dna, translate

__all__ = [
    "__version__",
    # Model
    "Sequence",
    "SequenceKind",
    "DNASequence",
    "RNASequence",
    "ProteinSequence",
    # Transforms
    "complement",
    "transcribe",
    "transcribe_dna",
    "translate",
    # Codon table
    "CODON_TABLE",
    "STOP_CODONS",
    # Errors
    "SequenceError",
    "PositionOutOfRangeError",
    "InvalidSymbolError",
    "AlphabetInvariantError",
    "UnsupportedOperationError",
]

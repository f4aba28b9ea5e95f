"""
word-order: the position of a word among the sorted anagrams of its letters.

The rank is computed from letter multiplicities alone, without enumerating
any permutations.
"""

from .anagram import (
    word_order,
    factorial,
    combinations_remaining,
    SymbolMultiset,
    WordOrderError,
    ArithmeticOverflowError,
    SymbolNotFoundError,
)

__version__ = "0.1.0"
__all__ = [
    "word_order",
    "factorial",
    "combinations_remaining",
    "SymbolMultiset",
    "WordOrderError",
    "ArithmeticOverflowError",
    "SymbolNotFoundError",
]

"""
Exceptions raised by the anagram rank engine.
"""

from typing import Optional


class WordOrderError(Exception):
    """Base class for every error raised while ranking a word."""


class ArithmeticOverflowError(WordOrderError, OverflowError):
    """A factorial or multinomial coefficient does not fit the integer width.

    A wrapped value would be indistinguishable from a valid rank, so the
    computation is aborted instead.
    """

    def __init__(self, operand: int, limit: Optional[int], message: str = "Input too large"):
        self.operand = operand
        self.limit = limit
        super().__init__(f"{message}: {operand} exceeds the integer limit {limit}")


class SymbolNotFoundError(WordOrderError, KeyError):
    """A symbol was taken from a multiset that does not hold it."""

    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(symbol)

    def __str__(self) -> str:
        return f"Symbol {self.symbol!r} is not present in the multiset"

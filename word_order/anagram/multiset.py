from typing import Hashable, Iterable, Optional

from .combinatorics import combinations_remaining
from .errors import SymbolNotFoundError


class Symbol:
    def __init__(self, value: Hashable, count: int = 1):
        # the symbol itself, a one-character str or a byte value
        self.value = value
        # how many copies are still held
        self.count = count

    def __repr__(self) -> str:
        return f"Symbol({self.value!r}, count={self.count})"


class SymbolMultiset:
    """A sorted multiset of symbols for counting anagram arrangements.

    Entries are kept in a contiguous list sorted ascending by symbol value,
    with no duplicate values and no zero counts. The ordinal index of a
    symbol is the number of held symbols strictly smaller than it.
    """

    def __init__(self, max_value: Optional[int] = None):
        self.symbols: list[Symbol] = []
        self.length = 0
        self.max_value = max_value

    @classmethod
    def from_word(cls, word: Iterable[Hashable], max_value: Optional[int] = None) -> "SymbolMultiset":
        multiset = cls(max_value=max_value)
        for value in word:
            multiset.insert(value)
        return multiset

    def insert(self, value: Hashable) -> int:
        """Add one copy of a symbol.

        Args:
            value (Hashable): The symbol to add.

        Returns:
            int: The number of held symbols strictly smaller than value.
        """
        self.length += 1
        index = 0
        for pos, symbol in enumerate(self.symbols):
            if symbol.value == value:
                symbol.count += 1
                return index
            if symbol.value > value:
                self.symbols.insert(pos, Symbol(value))
                return index
            index += symbol.count

        self.symbols.append(Symbol(value))
        return index

    def take(self, value: Hashable) -> int:
        """Remove one copy of a symbol.

        Args:
            value (Hashable): The symbol to remove.

        Returns:
            int: The number of held symbols strictly smaller than value,
                measured before the removal.
        """
        index = 0
        for pos, symbol in enumerate(self.symbols):
            if symbol.value == value:
                symbol.count -= 1
                self.length -= 1
                if symbol.count == 0:
                    self.symbols.pop(pos)
                return index
            if symbol.value > value:
                break
            index += symbol.count

        raise SymbolNotFoundError(value)

    def combinations_remaining(self) -> int:
        """Number of distinct arrangements of the symbols currently held."""
        return combinations_remaining((s.count for s in self.symbols), self.max_value)

    def counts(self) -> list[tuple[Hashable, int]]:
        return [(s.value, s.count) for s in self.symbols]

    def __len__(self) -> int:
        return self.length

    def __repr__(self) -> str:
        return f"SymbolMultiset({self.counts()!r}, length={self.length})"

"""
Lexicographic rank of a word among the distinct permutations of its letters.

The rank is accumulated one symbol at a time. For the symbol at position i,
every arrangement of the suffix word[i:] that starts with a strictly smaller
symbol sorts before the word. There are

    index * combinations / length

such arrangements, where index is the number of suffix symbols smaller than
word[i], combinations the number of distinct arrangements of the suffix and
length the suffix length. Summing these over i and adding one gives the
1-based rank.
"""

from typing import Hashable, Optional, Sequence

from .combinatorics import DEFAULT_DTYPE, max_value_for
from .multiset import SymbolMultiset
from word_order.config.logging_config import get_logger

DIRECTIONS = ("insert", "remove")

logger = get_logger(__name__)


def _contribution(index: int, combinations: int, length: int) -> int:
    # multiply before dividing so the remainder term is not truncated early
    quotient, remainder = divmod(combinations, length)
    return index * quotient + (index * remainder) // length


def _order_by_insertion(word: Sequence[Hashable], max_value: Optional[int]) -> int:
    """Walk the word right to left, growing the multiset of seen symbols."""
    seen = SymbolMultiset(max_value=max_value)
    accumulated = 0

    for pos in range(len(word) - 1, -1, -1):
        index = seen.insert(word[pos])
        length = seen.length
        combinations = seen.combinations_remaining()

        # a single arrangement means every smaller-symbol count is zero
        if combinations < 2:
            continue

        accumulated += _contribution(index, combinations, length)
        logger.debug(
            "Inserted symbol",
            pos=pos, symbol=word[pos], index=index,
            combinations=combinations, length=length,
        )

    return accumulated


def _order_by_removal(word: Sequence[Hashable], max_value: Optional[int]) -> int:
    """Pre-load the whole word, then consume it left to right."""
    remaining = SymbolMultiset.from_word(word, max_value=max_value)
    accumulated = 0

    for pos, value in enumerate(word):
        length = remaining.length
        combinations = remaining.combinations_remaining()

        # only one arrangement left, later symbols cannot change the rank
        if combinations < 2:
            break

        index = remaining.take(value)
        accumulated += _contribution(index, combinations, length)
        logger.debug(
            "Took symbol",
            pos=pos, symbol=value, index=index,
            combinations=combinations, length=length,
        )

    return accumulated


def word_order(
    word: Sequence[Hashable],
    max_value: Optional[int] = max_value_for(DEFAULT_DTYPE),
    direction: str = "insert",
) -> int:
    """
    Compute the 1-based position of a word in the sorted list of its anagrams.

    Args:
        word (Sequence[Hashable]): The word. A str is ranked by character, a
            bytes object by byte value. Symbols are case-sensitive.
        max_value (Optional[int]): Integer limit for the factorials involved.
            Defaults to the uint64 maximum; None disables the check.
        direction (str): "insert" builds the multiset right to left, "remove"
            consumes a pre-built multiset left to right. Both give the same rank.

    Returns:
        int: The rank, starting at 1. The empty word has rank 1.

    Raises:
        ArithmeticOverflowError: If a factorial exceeds max_value.
    """
    if direction == "insert":
        accumulated = _order_by_insertion(word, max_value)
    elif direction == "remove":
        accumulated = _order_by_removal(word, max_value)
    else:
        raise ValueError(f"Invalid direction: {direction!r}, expected one of {DIRECTIONS}")

    rank = accumulated + 1
    logger.info("Computed word order", word=word, rank=rank, direction=direction)
    return rank

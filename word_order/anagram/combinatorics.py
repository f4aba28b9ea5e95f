"""
Checked integer combinatorics used to count anagram arrangements.

Python integers never wrap, so the "integer width" of a computation is an
explicit upper bound (max_value). Any intermediate value that would not fit
that bound raises ArithmeticOverflowError rather than producing a value
that a fixed-width implementation would have silently wrapped.
"""

from typing import Iterable, Optional

import numpy as np

from .errors import ArithmeticOverflowError

DEFAULT_DTYPE = "uint64"


def max_value_for(dtype: str) -> int:
    """
    Return the largest value representable by a numpy integer dtype.

    Args:
        dtype (str): A numpy integer dtype name such as "uint64" or "int32".

    Returns:
        int: The dtype's maximum as a Python int.
    """
    try:
        info = np.iinfo(np.dtype(dtype))
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid integer dtype: {dtype!r}") from e
    return int(info.max)


def _check(value: int, max_value: Optional[int]) -> int:
    if max_value is not None and value > max_value:
        raise ArithmeticOverflowError(value, max_value)
    return value


def factorial(n: int, max_value: Optional[int] = None) -> int:
    """
    Compute n! as the iterative product 2 * 3 * ... * n.

    Args:
        n (int): Non-negative operand. 0! and 1! are 1.
        max_value (Optional[int]): Largest allowed intermediate product, or
            None for unbounded arithmetic.

    Returns:
        int: n factorial.
    """
    if n < 0:
        raise ValueError(f"factorial is undefined for negative numbers: {n}")

    accumulator = 1
    for i in range(2, n + 1):
        accumulator = _check(accumulator * i, max_value)
    return accumulator


def combinations_remaining(counts: Iterable[int], max_value: Optional[int] = None) -> int:
    """
    Number of distinct arrangements of a multiset with the given symbol counts.

    This is the multinomial coefficient n! / (c1! * c2! * ...). The
    denominator is accumulated first, so the final division is exact.

    Args:
        counts (Iterable[int]): Multiplicity of every distinct symbol.
        max_value (Optional[int]): Integer limit, or None for unbounded.

    Returns:
        int: The number of distinct permutations.
    """
    total = 0
    denominator = 1
    for count in counts:
        total += count
        denominator = _check(denominator * factorial(count, max_value), max_value)

    numerator = factorial(total, max_value)
    combinations, remainder = divmod(numerator, denominator)
    # n! is always divisible by the product of the count factorials
    assert remainder == 0
    return combinations

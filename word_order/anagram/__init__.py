from .errors import WordOrderError, ArithmeticOverflowError, SymbolNotFoundError
from .combinatorics import factorial, combinations_remaining, max_value_for, DEFAULT_DTYPE
from .multiset import Symbol, SymbolMultiset
from .order import word_order, DIRECTIONS

"""
SortedSearch
============
Binary search over sorted, random-access sequences.

Components:
  - compare: three-way comparison, key projection, type-contract error
  - bounds: exact, floor, ceil, floor+ceil, insertion point, equal range
  - validation: optional sortedness checks
  - view: SortedView, a sequence + key bound into one object

Absence is reported as the NOT_FOUND (-1) sentinel, never as an exception.
"""

from sortedsearch.bounds import (
    NOT_FOUND, exact_index, floor_index, ceil_index, floor_and_ceil,
    insertion_point, equal_range,
)
from sortedsearch.compare import IncomparableElementsError, compare
from sortedsearch.validation import (
    UnsortedSequenceError, first_inversion, is_sorted, ensure_sorted,
)
from sortedsearch.view import SortedView

__version__ = "1.0.0"

__all__ = [
    "NOT_FOUND",
    "exact_index",
    "floor_index",
    "ceil_index",
    "floor_and_ceil",
    "insertion_point",
    "equal_range",
    "compare",
    "IncomparableElementsError",
    "UnsortedSequenceError",
    "first_inversion",
    "is_sorted",
    "ensure_sorted",
    "SortedView",
]

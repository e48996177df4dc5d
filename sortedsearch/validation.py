"""
SortedSearch Validation
=======================
Optional ordering checks. The search operations never call these; they
assume a non-decreasing sequence and only guarantee bounds safety when it
is not. Callers that cannot vouch for their input check it once up front.
"""

import logging
from typing import Any, Optional, Sequence

from sortedsearch.compare import KeyFunc, resolve_key

logger = logging.getLogger(__name__)


class UnsortedSequenceError(ValueError):
    """Raised when a sequence is not in non-decreasing order."""

    def __init__(self, index: int, left: Any, right: Any):
        self.index = index
        super().__init__(
            f"Sequence not sorted: element at {index + 1} ({right!r}) "
            f"is less than element at {index} ({left!r})"
        )


def first_inversion(seq: Sequence, key: Optional[KeyFunc] = None) -> int:
    """
    Return the first index i where seq[i + 1] < seq[i], or -1 if the
    sequence is non-decreasing. O(n).
    """
    key = resolve_key(key)
    for i in range(len(seq) - 1):
        if key(seq[i + 1]) < key(seq[i]):
            return i
    return -1


def is_sorted(seq: Sequence, key: Optional[KeyFunc] = None) -> bool:
    return first_inversion(seq, key) == -1


def ensure_sorted(seq: Sequence, key: Optional[KeyFunc] = None) -> None:
    """Raise UnsortedSequenceError at the first inversion."""
    i = first_inversion(seq, key)
    if i != -1:
        logger.debug("Inversion at index %d of %d-element sequence", i, len(seq))
        raise UnsortedSequenceError(i, seq[i], seq[i + 1])

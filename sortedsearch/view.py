"""
SortedSearch View
=================
Object wrapper that binds a sorted sequence and an optional key so the
search operations can be called without repeating them.

Usage:
    view = SortedView([1, 2, 8, 10, 10, 12, 19])
    view.floor(5)             # -> 1
    view.floor_value(5)       # -> 2
    view.floor_and_ceil(10)   # -> (4, 3)

    people = SortedView(rows, key=lambda r: r.age, verify=True)
    people.equal_range(30)

The view keeps a reference to the sequence, not a copy. Targets are given
in key space.
"""

import logging
from typing import Any, Iterator, Optional, Sequence, Tuple

from sortedsearch import bounds
from sortedsearch.compare import KeyFunc
from sortedsearch.validation import ensure_sorted

logger = logging.getLogger(__name__)


class SortedView:
    """Read-only search facade over a non-decreasing sequence."""

    __slots__ = ('_seq', '_key')

    def __init__(self, seq: Sequence, key: Optional[KeyFunc] = None,
                 verify: bool = False):
        if verify:
            ensure_sorted(seq, key)
        self._seq = seq
        self._key = key
        logger.debug("SortedView over %d elements (verified=%s)", len(seq), verify)

    @property
    def sequence(self) -> Sequence:
        return self._seq

    @property
    def key(self) -> Optional[KeyFunc]:
        return self._key

    def __len__(self) -> int:
        return len(self._seq)

    def __getitem__(self, index):
        return self._seq[index]

    def __iter__(self) -> Iterator:
        return iter(self._seq)

    def __contains__(self, target: Any) -> bool:
        return self.exact(target) != bounds.NOT_FOUND

    def __repr__(self) -> str:
        return f"SortedView(len={len(self._seq)}, key={self._key!r})"

    # ─── Index lookups ──────────────────────────────────────────────────

    def exact(self, target: Any) -> int:
        return bounds.exact_index(self._seq, target, self._key)

    def floor(self, target: Any) -> int:
        return bounds.floor_index(self._seq, target, self._key)

    def ceil(self, target: Any) -> int:
        return bounds.ceil_index(self._seq, target, self._key)

    def floor_and_ceil(self, target: Any) -> Tuple[int, int]:
        return bounds.floor_and_ceil(self._seq, target, self._key)

    def insertion_point(self, target: Any) -> int:
        return bounds.insertion_point(self._seq, target, self._key)

    def equal_range(self, target: Any) -> Tuple[int, int]:
        return bounds.equal_range(self._seq, target, self._key)

    # ─── Value lookups ──────────────────────────────────────────────────

    def floor_value(self, target: Any, default: Any = None) -> Any:
        """Element at floor(target), or `default` when there is none."""
        idx = self.floor(target)
        return default if idx == bounds.NOT_FOUND else self._seq[idx]

    def ceil_value(self, target: Any, default: Any = None) -> Any:
        """Element at ceil(target), or `default` when there is none."""
        idx = self.ceil(target)
        return default if idx == bounds.NOT_FOUND else self._seq[idx]

"""
SortedSearch Property Tests
===========================
Exhaustive checks over every non-decreasing sequence of length 0..7 drawn
from a small alphabet, with targets below, inside, between and above it.

Tests prove:
  - exact hit holds the target; a miss means the target is absent
  - floor is the last index <= target, ceil the first index >= target
  - fused floor_and_ceil agrees with the separate calls
  - insertion_point agrees with bisect.bisect_left
  - equal_range spans exactly the run of the target
  - unsorted input never probes out of range and always terminates
"""

import bisect
import itertools
import math
import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sortedsearch.bounds import (
    NOT_FOUND, exact_index, floor_index, ceil_index, floor_and_ceil,
    insertion_point, equal_range,
)


ALPHABET = (0, 2, 4, 6)
TARGETS = (-1, 0, 1, 2, 3, 4, 5, 6, 7)
MAX_LEN = 7


def _sorted_sequences():
    for n in range(MAX_LEN + 1):
        for combo in itertools.combinations_with_replacement(ALPHABET, n):
            yield list(combo)


SORTED_CASES = list(_sorted_sequences())


class GuardedSequence:
    """Sequence that fails on any out-of-range read and counts probes."""

    def __init__(self, items):
        self._items = list(items)
        self.probes = 0

    def __len__(self):
        return len(self._items)

    def __getitem__(self, index):
        if not isinstance(index, int) or not 0 <= index < len(self._items):
            raise AssertionError(f"probe outside bounds: {index!r}")
        self.probes += 1
        return self._items[index]


def _probe_limit(n):
    return math.ceil(math.log2(n + 1))


# ═══════════════════════════════════════════════════════════════════════════
# Sorted input
# ═══════════════════════════════════════════════════════════════════════════

class TestSortedProperties:

    @pytest.mark.parametrize("seq", SORTED_CASES, ids=str)
    def test_exact(self, seq):
        for t in TARGETS:
            i = exact_index(seq, t)
            if i == NOT_FOUND:
                assert t not in seq
            else:
                assert seq[i] == t

    @pytest.mark.parametrize("seq", SORTED_CASES, ids=str)
    def test_floor(self, seq):
        for t in TARGETS:
            i = floor_index(seq, t)
            if i == NOT_FOUND:
                assert all(x > t for x in seq)
            else:
                assert seq[i] <= t
                assert i == len(seq) - 1 or seq[i + 1] > t

    @pytest.mark.parametrize("seq", SORTED_CASES, ids=str)
    def test_ceil(self, seq):
        for t in TARGETS:
            i = ceil_index(seq, t)
            if i == NOT_FOUND:
                assert all(x < t for x in seq)
            else:
                assert seq[i] >= t
                assert i == 0 or seq[i - 1] < t

    @pytest.mark.parametrize("seq", SORTED_CASES, ids=str)
    def test_fused_matches_separate(self, seq):
        for t in TARGETS:
            assert floor_and_ceil(seq, t) == (floor_index(seq, t), ceil_index(seq, t))

    @pytest.mark.parametrize("seq", SORTED_CASES, ids=str)
    def test_insertion_point_matches_bisect(self, seq):
        for t in TARGETS:
            assert insertion_point(seq, t) == bisect.bisect_left(seq, t)

    @pytest.mark.parametrize("seq", SORTED_CASES, ids=str)
    def test_equal_range(self, seq):
        for t in TARGETS:
            first, last = equal_range(seq, t)
            if t not in seq:
                assert (first, last) == (NOT_FOUND, NOT_FOUND)
            else:
                assert first == bisect.bisect_left(seq, t)
                assert last == bisect.bisect_right(seq, t) - 1

    @pytest.mark.parametrize("seq", SORTED_CASES, ids=str)
    def test_probe_count_is_logarithmic(self, seq):
        limit = _probe_limit(len(seq))
        for t in TARGETS:
            for op in (exact_index, floor_index, ceil_index, insertion_point):
                guarded = GuardedSequence(seq)
                op(guarded, t)
                assert guarded.probes <= limit


# ═══════════════════════════════════════════════════════════════════════════
# Unsorted input (out of contract, must stay bounds-safe)
# ═══════════════════════════════════════════════════════════════════════════

UNSORTED_CASES = [
    list(p)
    for n in range(6)
    for p in itertools.product((0, 1, 2), repeat=n)
]


class TestUnsortedBoundsSafety:

    @pytest.mark.parametrize("seq", UNSORTED_CASES, ids=str)
    def test_single_pass_operations(self, seq):
        limit = _probe_limit(len(seq))
        for t in (-1, 0, 1, 2, 3):
            for op in (exact_index, floor_index, ceil_index, insertion_point):
                guarded = GuardedSequence(seq)
                result = op(guarded, t)
                assert -1 <= result <= len(seq)
                assert guarded.probes <= limit

    @pytest.mark.parametrize("seq", UNSORTED_CASES, ids=str)
    def test_two_pass_operations(self, seq):
        limit = _probe_limit(len(seq))
        for t in (-1, 0, 1, 2, 3):
            for op in (floor_and_ceil, equal_range):
                guarded = GuardedSequence(seq)
                a, b = op(guarded, t)
                assert -1 <= a < len(seq)
                assert -1 <= b < len(seq)
                assert guarded.probes <= 2 * limit + 1

"""
SortedSearch Bounds
===================
Binary search variants over a non-decreasing, random-access sequence.

Operations:
  - exact_index:      some index holding the target, or -1
  - floor_index:      last index whose element is <= target, or -1
  - ceil_index:       first index whose element is >= target, or -1
  - floor_and_ceil:   (floor_index, ceil_index) from one fused pass
  - insertion_point:  leftmost index where the target fits (never -1)
  - equal_range:      (first, last) of the run equal to the target

All variants share one skeleton (_narrow) over an inclusive [low, high]
range. A step function maps the three-way comparison of the probed element
to (record mid as best?, direction).

Unsorted input gives an unspecified answer, but every probe stays inside
[0, len - 1] and each narrowing runs at most ceil(log2(n + 1)) iterations.

Concurrency: pure functions, no shared state.
"""

from typing import Any, Callable, Optional, Sequence, Tuple

from sortedsearch.compare import KeyFunc, probe, resolve_key


# ─── Constants ──────────────────────────────────────────────────────────────

NOT_FOUND = -1

# Step directions
GO_LEFT = -1
STOP = 0
GO_RIGHT = 1

Step = Callable[[int], Tuple[bool, int]]


# ─── Step functions ─────────────────────────────────────────────────────────
# Input is compare(seq[mid], target): -1 element smaller, 0 equal, 1 larger.

def _exact_step(order: int) -> Tuple[bool, int]:
    if order == 0:
        return True, STOP
    if order < 0:
        return False, GO_RIGHT
    return False, GO_LEFT


def _floor_step(order: int) -> Tuple[bool, int]:
    # Qualifies; a larger qualifying index may exist to the right.
    if order <= 0:
        return True, GO_RIGHT
    return False, GO_LEFT


def _ceil_step(order: int) -> Tuple[bool, int]:
    # Qualifies; a smaller qualifying index may exist to the left.
    if order >= 0:
        return True, GO_LEFT
    return False, GO_RIGHT


# ─── Skeleton ───────────────────────────────────────────────────────────────

def _narrow(seq: Sequence, target: Any, key: KeyFunc, step: Step,
            low: int, high: int, best: int = NOT_FOUND) -> int:
    """
    Narrow [low, high] (inclusive) with `step`, returning the last recorded
    mid, or `best` if nothing was recorded.
    """
    while low <= high:
        mid = low + (high - low) // 2
        record, direction = step(probe(seq, mid, target, key))
        if record:
            best = mid
        if direction == STOP:
            break
        if direction == GO_RIGHT:
            low = mid + 1
        else:
            high = mid - 1
    return best


# ─── Public operations ──────────────────────────────────────────────────────

def exact_index(seq: Sequence, target: Any, key: Optional[KeyFunc] = None) -> int:
    """
    Return an index i with seq[i] == target, or -1.
    Among duplicates any matching index may be returned.
    """
    return _narrow(seq, target, resolve_key(key), _exact_step, 0, len(seq) - 1)


def floor_index(seq: Sequence, target: Any, key: Optional[KeyFunc] = None) -> int:
    """Return the greatest index i with seq[i] <= target, or -1."""
    return _narrow(seq, target, resolve_key(key), _floor_step, 0, len(seq) - 1)


def ceil_index(seq: Sequence, target: Any, key: Optional[KeyFunc] = None) -> int:
    """Return the least index i with seq[i] >= target, or -1."""
    return _narrow(seq, target, resolve_key(key), _ceil_step, 0, len(seq) - 1)


def floor_and_ceil(seq: Sequence, target: Any,
                   key: Optional[KeyFunc] = None) -> Tuple[int, int]:
    """
    Return (floor_index, ceil_index) in a single fused pass.

    Strictly smaller probes update the floor, strictly larger ones the ceil.
    On the first exact hit at mid, everything above `high` is known to be
    larger than the target and everything below `low` smaller, so the floor
    lies in [mid, high] and the ceil in [low, mid]. Each half is finished
    with its own narrowing, seeded with mid.
    """
    key = resolve_key(key)
    low, high = 0, len(seq) - 1
    floor, ceil = NOT_FOUND, NOT_FOUND

    while low <= high:
        mid = low + (high - low) // 2
        order = probe(seq, mid, target, key)
        if order < 0:
            floor = mid
            low = mid + 1
        elif order > 0:
            ceil = mid
            high = mid - 1
        else:
            floor = _narrow(seq, target, key, _floor_step, mid + 1, high, best=mid)
            ceil = _narrow(seq, target, key, _ceil_step, low, mid - 1, best=mid)
            break

    return floor, ceil


def insertion_point(seq: Sequence, target: Any, key: Optional[KeyFunc] = None) -> int:
    """
    Return the leftmost index at which target can be inserted while keeping
    seq sorted. Equivalent to bisect.bisect_left.
    """
    idx = ceil_index(seq, target, key)
    return len(seq) if idx == NOT_FOUND else idx


def equal_range(seq: Sequence, target: Any,
                key: Optional[KeyFunc] = None) -> Tuple[int, int]:
    """
    Return inclusive (first, last) indices of the elements equal to target,
    or (-1, -1) if target is absent.
    """
    key = resolve_key(key)
    first = _narrow(seq, target, key, _ceil_step, 0, len(seq) - 1)
    if first == NOT_FOUND or probe(seq, first, target, key) != 0:
        return NOT_FOUND, NOT_FOUND
    last = _narrow(seq, target, key, _floor_step, first + 1, len(seq) - 1, best=first)
    return first, last

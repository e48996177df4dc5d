"""
SortedSearch Comparison
=======================
Three-way comparison used by every search operation.

Only the `<` operator is consulted, in both directions, so any type that
implements __lt__ can be searched (the same convention as the stdlib
bisect module). Equality is inferred as "neither is less".

Key projection:
  A `key` callable is applied to each probed element, never to the target.
  The target must already be in key space.
"""

from typing import Any, Callable, Optional


KeyFunc = Callable[[Any], Any]


class IncomparableElementsError(TypeError):
    """Raised when a sequence element and the target cannot be ordered."""

    def __init__(self, element: Any, target: Any, index: int):
        self.element = element
        self.target = target
        self.index = index
        super().__init__(
            f"Cannot order element {type(element).__name__} at index {index} "
            f"against target {type(target).__name__}"
        )


def identity(value: Any) -> Any:
    return value


def resolve_key(key: Optional[KeyFunc]) -> KeyFunc:
    """Return `key`, or identity when None."""
    return identity if key is None else key


def compare(left: Any, right: Any) -> int:
    """
    Return -1 if left < right, 1 if right < left, else 0.
    Lets TypeError propagate; callers wrap it with the probe index.
    """
    if left < right:
        return -1
    if right < left:
        return 1
    return 0


def probe(seq, index: int, target: Any, key: KeyFunc) -> int:
    """Compare key(seq[index]) against target."""
    element = key(seq[index])
    try:
        return compare(element, target)
    except TypeError as e:
        raise IncomparableElementsError(element, target, index) from e

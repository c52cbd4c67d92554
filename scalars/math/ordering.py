"""
Ordering helpers shared by the value types.

Absent operands sort high: comparing a value against None gives +1, None
against a value gives -1.
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional, TypeVar

T = TypeVar("T")

NULL_POSITION = 1


def sign(value: int) -> int:
    """-1, 0 or +1 according to the sign of ``value``."""
    return (value > 0) - (value < 0)


def compare_floats(left: float, right: float) -> int:
    """Three-way float comparison; unordered (NaN) pairs report +1."""
    if left < right:
        return -1
    if left == right:
        return 0
    return 1


def compare_nullable(
    left: Optional[T], right: Optional[T], compare: Callable[[T, T], int]
) -> int:
    """
    Three-way comparison with absent operands sorting high.

    Args:
        left: Left operand or None
        right: Right operand or None
        compare: Comparison used when both operands are present

    Returns:
        -1, 0 or +1
    """
    if left is None and right is None:
        return 0
    if right is None:
        return NULL_POSITION
    if left is None:
        return -NULL_POSITION
    return sign(compare(left, right))


def fold_nullable(values: Iterable[Optional[T]], pick: Callable[[T, T], T]) -> Optional[T]:
    """
    Reduce ``values`` pairwise with ``pick``, skipping None entries.

    Mirrors a database aggregate: an input with no present values yields None.
    """
    result: Optional[T] = None
    for value in values:
        if value is None:
            continue
        result = value if result is None else pick(result, value)
    return result

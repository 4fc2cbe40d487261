"""
Generic routines that only talk to cursors through the cursor contract:
get/set, advance, copy, ==, and, where the category allows it, retreat and
offset arithmetic. They pick the cheapest path the category admits and
refuse (CapabilityError) where it admits none.
"""

from collections.abc import Callable, Iterator
from typing import Any

import numpy as np

from lockstep.capabilities import (
    AssignableCursor,
    BidirectionalCursor,
    CapabilityError,
    Category,
    Cursor,
)


def _require(cursor: Cursor[Any], needed: Category, what: str):
    if cursor.category < needed:
        raise CapabilityError(
            f"{what} requires a {needed.name} cursor, got {cursor.category.name}"
        )


def advance[C: Cursor[Any]](cursor: C, n: int) -> C:
    """moves `cursor` by n in place; n < 0 needs a bidirectional cursor"""
    if cursor.category >= Category.RANDOM_ACCESS:
        cursor += n  # pyright: ignore[reportOperatorIssue]
        return cursor

    if n < 0:
        _require(cursor, Category.BIDIRECTIONAL, "advancing by a negative count")
        for _ in range(-n):
            cursor.retreat()  # pyright: ignore[reportAttributeAccessIssue]
        return cursor

    for _ in range(n):
        cursor.advance()
    return cursor


def next_cursor[C: Cursor[Any]](cursor: C, n: int = 1) -> C:
    return advance(cursor.copy(), n)


def prev_cursor[C: Cursor[Any]](cursor: C, n: int = 1) -> C:
    return advance(cursor.copy(), -n)


def distance(first: Cursor[Any], last: Cursor[Any]) -> int:
    """
    Number of steps from `first` to `last`.
    O(1) for random access cursors, otherwise counts by walking a copy.
    """
    if first.category >= Category.RANDOM_ACCESS and last.category >= Category.RANDOM_ACCESS:
        return last - first  # pyright: ignore[reportOperatorIssue]

    walker = first.copy()
    n = 0

    while walker != last:
        walker.advance()
        n += 1
    return n


def iter_range[T](first: Cursor[T], last: Cursor[T]) -> Iterator[T]:
    """yields the elements in [first, last) without moving `first`"""
    walker = first.copy()

    while walker != last:
        yield walker.get()
        walker.advance()


def _owned(value: Any) -> Any:
    """
    A value that survives writes to the position it was read from. numpy
    rows come out of get() as views into the array, so they are copied.
    """
    if isinstance(value, tuple):
        return tuple(_owned(v) for v in value)
    if isinstance(value, np.ndarray):
        return value.copy()
    return value


def iter_swap(a: AssignableCursor[Any], b: AssignableCursor[Any]):
    """swaps the elements under two assignable cursors"""
    tmp = _owned(a.get())
    a.set(b.get())
    b.set(tmp)


def reverse(first: BidirectionalCursor[Any], last: BidirectionalCursor[Any]):
    _require(first, Category.BIDIRECTIONAL, "reverse()")
    lo = first.copy()
    hi = last.copy()

    while lo != hi:
        hi.retreat()

        if lo == hi:
            break

        iter_swap(lo, hi)  # pyright: ignore[reportArgumentType]
        lo.advance()


def insertion_sort(
    first: BidirectionalCursor[Any],
    last: BidirectionalCursor[Any],
    key: Callable[[Any], Any] | None = None,
):
    """
    Stable in-place sort of [first, last).

    Only needs bidirectional, assignable cursors, so it can sort a zip of
    several containers by one of their columns, moving every column together.
    """
    _require(first, Category.BIDIRECTIONAL, "insertion_sort()")
    key_of = key if key is not None else (lambda x: x)

    if first == last:
        return

    pivot = first.copy().advance()

    while pivot != last:
        value = _owned(pivot.get())
        value_key = key_of(value)
        hole = pivot.copy()

        while hole != first:
            before = hole.copy().retreat()
            prior = before.get()

            if not value_key < key_of(prior):
                break

            hole.set(prior)  # pyright: ignore[reportAttributeAccessIssue]
            hole = before

        hole.set(value)  # pyright: ignore[reportAttributeAccessIssue]
        pivot.advance()


def equal(first1: Cursor[Any], last1: Cursor[Any], first2: Cursor[Any]) -> bool:
    a = first1.copy()
    b = first2.copy()

    while a != last1:
        if a.get() != b.get():
            return False
        a.advance()
        b.advance()
    return True

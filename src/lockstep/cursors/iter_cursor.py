import itertools
from collections.abc import Iterable, Iterator
from typing import Self, final, override

from lockstep.capabilities import Category

_UNREAD = object()
_EXHAUSTED = object()


@final
class IterCursor[T]:
    """
    Promotes a plain python iterable into a forward cursor.

    The cursor keeps one element of lookahead so that it can tell when it has
    run off the end of its iterable. Copies are made with itertools.tee, so a
    copy and its original advance independently.

    Re-iterable containers (sets, dict views, ...) give FORWARD cursors; one-shot
    iterators such as generators only give INPUT cursors, since a second
    begin() over them would see whatever the first one left behind.

    Two kinds of position-only cursors exist for building end bounds:
      - sentinel(source): equal to any cursor over `source` that is exhausted
      - marker(source, n): equal to any cursor over `source` at position n
    """

    __slots__ = ("_source", "_it", "_head", "_pos", "category")

    def __init__(self, source: Iterable[T]):
        self._source: Iterable[T] = source
        self._it: Iterator[T] | None = iter(source)
        self._head: object = _UNREAD
        self._pos: int | None = 0
        self.category: Category = _category_of(source)

    @classmethod
    def sentinel(cls, source: Iterable[T]) -> "IterCursor[T]":
        return cls._position_only(source, None)

    @classmethod
    def marker(cls, source: Iterable[T], position: int) -> "IterCursor[T]":
        return cls._position_only(source, position)

    @classmethod
    def _position_only(cls, source: Iterable[T], position: int | None) -> "IterCursor[T]":
        cursor = cls.__new__(cls)
        cursor._source = source
        cursor._it = None
        cursor._head = _EXHAUSTED
        cursor._pos = position
        cursor.category = _category_of(source)
        return cursor

    @property
    def position(self) -> int | None:
        """elements consumed so far; None for an exhaustion sentinel"""
        return self._pos

    def _fill(self):
        if self._head is _UNREAD:
            assert self._it is not None
            self._head = next(self._it, _EXHAUSTED)

    def exhausted(self) -> bool:
        self._fill()
        return self._head is _EXHAUSTED

    def get(self) -> T:
        self._fill()

        if self._head is _EXHAUSTED:
            raise IndexError("cursor is past the end of its iterable")
        return self._head  # pyright: ignore[reportReturnType]

    def advance(self) -> Self:
        if self._it is not None:
            self._fill()
            self._head = _UNREAD

        if self._pos is not None:
            self._pos += 1
        return self

    def copy(self) -> Self:
        if self._it is None:
            return self._position_only(self._source, self._pos)  # pyright: ignore[reportReturnType]

        self._it, other = itertools.tee(self._it)
        cursor = type(self).__new__(type(self))
        cursor._source = self._source
        cursor._it = other
        cursor._head = self._head
        cursor._pos = self._pos
        cursor.category = self.category
        return cursor

    def _is_sentinel(self) -> bool:
        return self._it is None and self._pos is None

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IterCursor):
            return NotImplemented
        if self._source is not other._source:
            return False

        if self._is_sentinel():
            return other._is_sentinel() or other.exhausted()
        if other._is_sentinel():
            return self.exhausted()

        return self._pos == other._pos

    @override
    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)

        if result is NotImplemented:
            return result
        return not result

    __hash__ = None  # pyright: ignore[reportAssignmentType]

    @override
    def __repr__(self) -> str:
        where = "end" if self._pos is None else self._pos
        return f"IterCursor({type(self._source).__name__}, position={where})"


def _category_of(source: Iterable) -> Category:
    if isinstance(source, Iterator):
        return Category.INPUT
    return Category.FORWARD

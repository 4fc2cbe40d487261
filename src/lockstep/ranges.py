"""
Ready-made cursor ranges: sequences that hand out their own begin()/end()
cursors instead of relying on indexing or iteration.
"""

from collections.abc import Callable, Iterable
from typing import Any, ClassVar, Self, final, override

from lockstep.capabilities import Category


@final
class CountingCursor:
    """
    A random access cursor whose elements are computed from its position,
    fn(i) for i = start, start + 1, ...; there is no storage behind it, so
    get() returns a fresh value every time.
    """

    category: ClassVar[Category] = Category.RANDOM_ACCESS

    __slots__ = ("_i", "_fn")

    def __init__(self, i: int, fn: Callable[[int], Any] | None = None):
        self._i: int = i
        self._fn: Callable[[int], Any] | None = fn

    @property
    def position(self) -> int:
        return self._i

    def _value(self, i: int) -> Any:
        return i if self._fn is None else self._fn(i)

    def get(self) -> Any:
        return self._value(self._i)

    def copy(self) -> Self:
        return type(self)(self._i, self._fn)

    def advance(self) -> Self:
        self._i += 1
        return self

    def retreat(self) -> Self:
        self._i -= 1
        return self

    def __add__(self, n: int) -> Self:
        return type(self)(self._i + n, self._fn)

    def __radd__(self, n: int) -> Self:
        return type(self)(n + self._i, self._fn)

    def __iadd__(self, n: int) -> Self:
        self._i += n
        return self

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, CountingCursor):
            return self._i - other._i
        return type(self)(self._i - other, self._fn)

    def __isub__(self, n: int) -> Self:
        self._i -= n
        return self

    def __getitem__(self, n: int) -> Any:
        return self._value(self._i + n)

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CountingCursor):
            return NotImplemented
        return self._i == other._i

    @override
    def __ne__(self, other: object) -> bool:
        if not isinstance(other, CountingCursor):
            return NotImplemented
        return self._i != other._i

    __hash__ = None  # pyright: ignore[reportAssignmentType]

    def __lt__(self, other: "CountingCursor") -> bool:
        return self._i < other._i

    def __le__(self, other: "CountingCursor") -> bool:
        return self._i <= other._i

    def __gt__(self, other: "CountingCursor") -> bool:
        return self._i > other._i

    def __ge__(self, other: "CountingCursor") -> bool:
        return self._i >= other._i

    @override
    def __repr__(self) -> str:
        return f"CountingCursor({self._i})"


@final
class CountingRange:
    """
    [start, stop) as a cursor range, optionally mapped through `fn`.
    Not subscriptable and not iterable on its own: it is only reachable
    through begin()/end(), with a size() for its length.
    """

    def __init__(self, start: int, stop: int, fn: Callable[[int], Any] | None = None):
        if stop < start:
            raise ValueError(f"Expecting stop ({stop}) >= start ({start})")

        self.start: int = start
        self.stop: int = stop
        self.fn: Callable[[int], Any] | None = fn

    def size(self) -> int:
        return self.stop - self.start

    def begin(self) -> CountingCursor:
        return CountingCursor(self.start, self.fn)

    def end(self) -> CountingCursor:
        return CountingCursor(self.stop, self.fn)

    @override
    def __repr__(self) -> str:
        return f"CountingRange({self.start}, {self.stop})"


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next: "_Node | None" = None):
        self.value: Any = value
        self.next: _Node | None = next


@final
class ForwardListCursor:
    category: ClassVar[Category] = Category.FORWARD

    __slots__ = ("_node",)

    def __init__(self, node: _Node | None):
        self._node: _Node | None = node

    def get(self) -> Any:
        if self._node is None:
            raise IndexError("dereferencing the end of a ForwardList")
        return self._node.value

    def set(self, value: Any):
        if self._node is None:
            raise IndexError("assigning through the end of a ForwardList")
        self._node.value = value

    def copy(self) -> Self:
        return type(self)(self._node)

    def advance(self) -> Self:
        if self._node is None:
            raise IndexError("advancing past the end of a ForwardList")
        self._node = self._node.next
        return self

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ForwardListCursor):
            return NotImplemented
        return self._node is other._node

    @override
    def __ne__(self, other: object) -> bool:
        if not isinstance(other, ForwardListCursor):
            return NotImplemented
        return self._node is not other._node

    __hash__ = None  # pyright: ignore[reportAssignmentType]


@final
class ForwardList:
    """
    A singly linked list. Its cursors only move forward, but they are
    assignable. It has a length but no indexing and no python iteration.
    """

    def __init__(self, items: Iterable[Any] = ()):
        self._head: _Node | None = None
        self._len: int = 0
        tail: _Node | None = None

        for item in items:
            node = _Node(item)

            if tail is None:
                self._head = node
            else:
                tail.next = node

            tail = node
            self._len += 1

    def __len__(self) -> int:
        return self._len

    def begin(self) -> ForwardListCursor:
        return ForwardListCursor(self._head)

    def end(self) -> ForwardListCursor:
        return ForwardListCursor(None)

    def to_list(self) -> list[Any]:
        out = []
        node = self._head

        while node is not None:
            out.append(node.value)
            node = node.next
        return out

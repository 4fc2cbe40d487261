from typing import Any, ClassVar, Self, final, override

from lockstep.capabilities import Category, Subscriptable, can_assign


@final
class SubscriptCursor[T]:
    """
    A random access cursor over any container that only supports
    `container[i]`.

    Positions outside the container's valid range are not checked; whatever
    the container does for such an index (IndexError, or wrapping around for
    negative indices) is passed straight through.
    """

    category: ClassVar[Category] = Category.RANDOM_ACCESS

    __slots__ = ("_container", "_index")

    def __init__(self, container: Subscriptable[T], index: int = 0):
        self._container: Subscriptable[T] = container
        self._index: int = index

    @property
    def container(self) -> Subscriptable[T]:
        return self._container

    @property
    def index(self) -> int:
        return self._index

    @property
    def assignable(self) -> bool:
        """False over tuples, strings, ranges and read-only arrays"""
        return can_assign(self._container)

    def get(self) -> T:
        return self._container[self._index]

    def set(self, value: T):
        self._container[self._index] = value  # pyright: ignore[reportIndexIssue]

    def copy(self) -> Self:
        return type(self)(self._container, self._index)

    def advance(self) -> Self:
        self._index += 1
        return self

    def retreat(self) -> Self:
        self._index -= 1
        return self

    def __add__(self, n: int) -> Self:
        return type(self)(self._container, self._index + n)

    def __radd__(self, n: int) -> Self:
        return type(self)(self._container, n + self._index)

    def __iadd__(self, n: int) -> Self:
        self._index += n
        return self

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, SubscriptCursor):
            return self._index - other._index
        return type(self)(self._container, self._index - other)

    def __isub__(self, n: int) -> Self:
        self._index -= n
        return self

    def __getitem__(self, n: int) -> T:
        return self._container[self._index + n]

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SubscriptCursor):
            return NotImplemented
        return self._container is other._container and self._index == other._index

    @override
    def __ne__(self, other: object) -> bool:
        if not isinstance(other, SubscriptCursor):
            return NotImplemented
        return self._container is not other._container or self._index != other._index

    __hash__ = None  # pyright: ignore[reportAssignmentType]

    def __lt__(self, other: "SubscriptCursor[T]") -> bool:
        return self._index < other._index

    def __le__(self, other: "SubscriptCursor[T]") -> bool:
        return self._index <= other._index

    def __gt__(self, other: "SubscriptCursor[T]") -> bool:
        return self._index > other._index

    def __ge__(self, other: "SubscriptCursor[T]") -> bool:
        return self._index >= other._index

    @override
    def __repr__(self) -> str:
        return f"SubscriptCursor({type(self._container).__name__}, index={self._index})"

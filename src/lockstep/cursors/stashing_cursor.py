from typing import Any, ClassVar, Self, override

from lockstep.capabilities import Category, Cursor, Gated, is_assignable

_EMPTY = object()


class StashingCursor[T](Gated):
    """
    Wraps a cursor whose get() computes a value (rather than handing out
    something stored in a container) and keeps the last produced value in a
    single slot owned by the wrapper.

    The value returned by get() is the slot's content and stays there until the
    next get(), [n] or set() on the same wrapper. A copy only copies the inner
    position: it starts with an empty slot and never shares it with the
    original.
    """

    _gated: ClassVar[dict[str, Category]] = {
        "retreat": Category.BIDIRECTIONAL,
    }

    def __init__(self, inner: Cursor[T]):
        self._inner: Cursor[T] = inner
        self._slot: object = _EMPTY
        self.category: Category = inner.category

    @property
    def inner(self) -> Cursor[T]:
        return self._inner

    @property
    def is_empty(self) -> bool:
        return self._slot is _EMPTY

    @property
    def stashed(self) -> T | None:
        """the slot's current content, None if nothing was produced yet"""
        if self._slot is _EMPTY:
            return None
        return self._slot  # pyright: ignore[reportReturnType]

    def _stash(self, value: T) -> T:
        self._slot = value
        return value

    def get(self) -> T:
        return self._stash(self._inner.get())

    @property
    def assignable(self) -> bool:
        return is_assignable(self._inner)

    def set(self, value: T):
        self._inner.set(value)  # pyright: ignore[reportAttributeAccessIssue]
        self._stash(value)

    def advance(self) -> Self:
        self._inner.advance()
        return self

    def copy(self) -> Self:
        return type(self)(self._inner.copy())

    def __copy__(self) -> Self:
        return self.copy()

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StashingCursor):
            return NotImplemented
        return self._inner == other._inner

    @override
    def __ne__(self, other: object) -> bool:
        if not isinstance(other, StashingCursor):
            return NotImplemented
        return self._inner != other._inner

    __hash__ = None  # pyright: ignore[reportAssignmentType]

    @override
    def __repr__(self) -> str:
        state = "empty" if self.is_empty else f"stashed={self._slot!r}"
        return f"{type(self).__name__}({self._inner!r}, {state})"


class BidirectionalStashingCursor[T](StashingCursor[T]):
    def retreat(self) -> Self:
        self._inner.retreat()  # pyright: ignore[reportAttributeAccessIssue]
        return self


class RandomAccessStashingCursor[T](BidirectionalStashingCursor[T]):
    def __add__(self, n: int) -> Self:
        return type(self)(self._inner + n)  # pyright: ignore[reportOperatorIssue]

    def __radd__(self, n: int) -> Self:
        return type(self)(n + self._inner)  # pyright: ignore[reportOperatorIssue]

    def __iadd__(self, n: int) -> Self:
        self._inner += n  # pyright: ignore[reportOperatorIssue]
        return self

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, StashingCursor):
            return self._inner - other._inner  # pyright: ignore[reportOperatorIssue]
        return type(self)(self._inner - other)  # pyright: ignore[reportOperatorIssue]

    def __isub__(self, n: int) -> Self:
        self._inner -= n  # pyright: ignore[reportOperatorIssue]
        return self

    def __getitem__(self, n: int) -> T:
        return self._stash(self._inner[n])  # pyright: ignore[reportIndexIssue]

    def __lt__(self, other: "RandomAccessStashingCursor[T]") -> bool:
        return self._inner < other._inner  # pyright: ignore[reportOperatorIssue]

    def __le__(self, other: "RandomAccessStashingCursor[T]") -> bool:
        return self._inner <= other._inner  # pyright: ignore[reportOperatorIssue]

    def __gt__(self, other: "RandomAccessStashingCursor[T]") -> bool:
        return self._inner > other._inner  # pyright: ignore[reportOperatorIssue]

    def __ge__(self, other: "RandomAccessStashingCursor[T]") -> bool:
        return self._inner >= other._inner  # pyright: ignore[reportOperatorIssue]


def stashing[T](cursor: Cursor[T]) -> StashingCursor[T]:
    """Wraps a cursor in the stashing tier matching its category."""
    if cursor.category >= Category.RANDOM_ACCESS:
        return RandomAccessStashingCursor(cursor)
    if cursor.category >= Category.BIDIRECTIONAL:
        return BidirectionalStashingCursor(cursor)
    return StashingCursor(cursor)

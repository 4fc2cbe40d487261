import operator
from collections.abc import Sequence
from typing import Any, ClassVar, Self, override

from lockstep.capabilities import CapabilityError, Category, Cursor, Gated, is_assignable


class ZipCursor[*Ts](Gated):
    """
    One position in several sequences at once.

    Holds one sub-cursor per zipped input, in the order the inputs were given,
    and moves all of them together. get() gathers each sub-cursor's element
    into a tuple without copying anything the sub-cursors hand out.

    The operations available depend on the weakest sub-cursor: this base tier
    only moves forward, BidirectionalZipCursor adds retreat(), and
    RandomAccessZipCursor adds offset arithmetic, [n], ordering and distance.
    Use zip_cursor() to get the right tier.

    Moving past the end of any input is undefined; nothing checks for it.
    """

    _gated: ClassVar[dict[str, Category]] = {
        "retreat": Category.BIDIRECTIONAL,
    }

    def __init__(self, cursors: Sequence[Cursor[Any]]):
        self._cursors: tuple[Cursor[Any], ...] = tuple(cursors)
        self.category: Category = Category.common(*(c.category for c in self._cursors))

    @property
    def cursors(self) -> tuple[Cursor[Any], ...]:
        return self._cursors

    def part(self, i: int) -> Cursor[Any]:
        return self._cursors[i]

    @property
    def arity(self) -> int:
        return len(self._cursors)

    def _spawn(self, cursors: Sequence[Cursor[Any]]) -> Self:
        return type(self)(cursors)

    def get(self) -> tuple[*Ts]:
        return tuple(c.get() for c in self._cursors)  # pyright: ignore[reportReturnType]

    @property
    def assignable(self) -> bool:
        return all(is_assignable(c) for c in self._cursors)

    def set(self, values: tuple[*Ts]):
        """
        Writes each component of `values` through the matching sub-cursor.
        Nothing is written unless every sub-cursor is assignable.
        """
        if len(values) != len(self._cursors):
            raise ValueError(
                f"Expecting {len(self._cursors)} values, got {len(values)}"
            )

        read_only = [i for i, c in enumerate(self._cursors) if not is_assignable(c)]

        if read_only:
            raise CapabilityError(
                f"{type(self).__name__}.set() requires assignable cursors, "
                f"but input(s) {read_only} are read-only"
            )

        for cursor, value in zip(self._cursors, values):
            cursor.set(value)  # pyright: ignore[reportAttributeAccessIssue]

    def advance(self) -> Self:
        for c in self._cursors:
            c.advance()
        return self

    def copy(self) -> Self:
        return self._spawn([c.copy() for c in self._cursors])

    def meets(self, other: "ZipCursor[*Ts]") -> bool:
        """
        True once any input has reached its position in `other`.
        Used to stop at the shortest input when iterating to an end bound.
        """
        return any(a == b for a, b in zip(self._cursors, other._cursors))

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZipCursor):
            return NotImplemented
        return all(a == b for a, b in zip(self._cursors, other._cursors))

    @override
    def __ne__(self, other: object) -> bool:
        if not isinstance(other, ZipCursor):
            return NotImplemented
        return not self.__eq__(other)

    __hash__ = None  # pyright: ignore[reportAssignmentType]

    @override
    def __repr__(self) -> str:
        inner = ", ".join(repr(c) for c in self._cursors)
        return f"{type(self).__name__}[{self.category.name}]({inner})"


class BidirectionalZipCursor[*Ts](ZipCursor[*Ts]):
    def retreat(self) -> Self:
        for c in self._cursors:
            c.retreat()  # pyright: ignore[reportAttributeAccessIssue]
        return self


class RandomAccessZipCursor[*Ts](BidirectionalZipCursor[*Ts]):
    """
    Ordering and distance are taken from the first input alone: every input
    moves in lockstep, so any one of them is representative.
    """

    def __add__(self, n: int) -> Self:
        return self._spawn([c + n for c in self._cursors])  # pyright: ignore[reportOperatorIssue]

    def __radd__(self, n: int) -> Self:
        return self._spawn([n + c for c in self._cursors])  # pyright: ignore[reportOperatorIssue]

    def __iadd__(self, n: int) -> Self:
        self._cursors = tuple(operator.iadd(c, n) for c in self._cursors)
        return self

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, ZipCursor):
            return self._cursors[0] - other._cursors[0]  # pyright: ignore[reportOperatorIssue]
        return self._spawn([c - other for c in self._cursors])  # pyright: ignore[reportOperatorIssue]

    def __isub__(self, n: int) -> Self:
        self._cursors = tuple(operator.isub(c, n) for c in self._cursors)
        return self

    def __getitem__(self, n: int) -> tuple[*Ts]:
        return tuple(c[n] for c in self._cursors)  # pyright: ignore[reportReturnType, reportIndexIssue]

    def __lt__(self, other: "RandomAccessZipCursor[*Ts]") -> bool:
        return self._cursors[0] < other._cursors[0]  # pyright: ignore[reportOperatorIssue]

    def __le__(self, other: "RandomAccessZipCursor[*Ts]") -> bool:
        return self._cursors[0] <= other._cursors[0]  # pyright: ignore[reportOperatorIssue]

    def __gt__(self, other: "RandomAccessZipCursor[*Ts]") -> bool:
        return self._cursors[0] > other._cursors[0]  # pyright: ignore[reportOperatorIssue]

    def __ge__(self, other: "RandomAccessZipCursor[*Ts]") -> bool:
        return self._cursors[0] >= other._cursors[0]  # pyright: ignore[reportOperatorIssue]


def zip_cursor(*cursors: Cursor[Any]) -> ZipCursor:
    """
    Combines one cursor per input into a composite whose tier is the weakest
    category among them.
    """
    if not cursors:
        raise ValueError("Expecting at least one cursor to zip")

    category = Category.common(*(c.category for c in cursors))

    if category >= Category.RANDOM_ACCESS:
        return RandomAccessZipCursor(cursors)
    if category >= Category.BIDIRECTIONAL:
        return BidirectionalZipCursor(cursors)
    return ZipCursor(cursors)

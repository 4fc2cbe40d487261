"""
Capability probing for zip inputs and cursors.

Every predicate here looks at the *type* of an object and never calls the
operation it probes for, so classifying an input has no side effects.
"""

import functools
import operator
from collections.abc import Mapping, Sized
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, ClassVar, Protocol, Self

import numpy as np


class Category(IntEnum):
    """
    How far a cursor can move. Each level includes every level below it.
    """

    INPUT = 0
    FORWARD = 1
    BIDIRECTIONAL = 2
    RANDOM_ACCESS = 3

    @staticmethod
    def common(*categories: "Category") -> "Category":
        """The weakest of several categories."""
        if not categories:
            raise ValueError("Expecting at least one category")
        return min(categories)


class CapabilityError(AttributeError):
    """
    An operation was requested that one or more inputs cannot support.
    """


class Cursor[T](Protocol):
    category: Category

    def get(self) -> T: ...
    def advance(self) -> Self: ...
    def copy(self) -> Self: ...
    def __eq__(self, other: object, /) -> bool: ...


class AssignableCursor[T](Cursor[T], Protocol):
    def set(self, value: T) -> None: ...


class BidirectionalCursor[T](Cursor[T], Protocol):
    def retreat(self) -> Self: ...


class RandomAccessCursor[T](BidirectionalCursor[T], Protocol):
    def __add__(self, n: int, /) -> Self: ...
    def __radd__(self, n: int, /) -> Self: ...
    def __iadd__(self, n: int, /) -> Self: ...
    def __sub__(self, other: Any, /) -> Any: ...
    def __isub__(self, n: int, /) -> Self: ...
    def __getitem__(self, n: int, /) -> T: ...
    def __lt__(self, other: Self, /) -> bool: ...
    def __le__(self, other: Self, /) -> bool: ...
    def __gt__(self, other: Self, /) -> bool: ...
    def __ge__(self, other: Self, /) -> bool: ...


class CursorRange[T](Protocol):
    def begin(self) -> Cursor[T]: ...
    def end(self) -> Cursor[T]: ...


class Subscriptable[T](Protocol):
    def __getitem__(self, idx: int, /) -> T: ...


def _type_has(obj: object, name: str) -> bool:
    return callable(getattr(type(obj), name, None))


def is_integral(value: object) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, np.integer))


def has_length(seq: object) -> bool:
    return isinstance(seq, Sized) or _type_has(seq, "size")


def has_begin(seq: object) -> bool:
    return _type_has(seq, "begin")


def has_end(seq: object) -> bool:
    return _type_has(seq, "end")


def can_subscript(seq: object) -> bool:
    # mappings subscript by key, not by position
    return _type_has(seq, "__getitem__") and not isinstance(seq, Mapping)


def is_iterable(seq: object) -> bool:
    return _type_has(seq, "__iter__")


def indexes_by_position(seq: object) -> bool:
    """
    Subscriptable in the positional sense. An unsized iterable that also has
    __getitem__ (torch's IterableDataset inherits one that raises) is a
    stream, and is iterated rather than indexed.
    """
    if not can_subscript(seq):
        return False
    return has_length(seq) or not is_iterable(seq)


def can_assign(container: object) -> bool:
    """whether `container[i] = v` is supported, decided without writing"""
    if isinstance(container, np.ndarray):
        return bool(container.flags.writeable)
    return _type_has(container, "__setitem__")


def is_assignable(cursor: object) -> bool:
    """
    A cursor with a set() that will accept a write. Cursors that can only
    tell at runtime expose an `assignable` property.
    """
    if not callable(getattr(cursor, "set", None)):
        return False
    return bool(getattr(cursor, "assignable", True))


def length_of(seq: object) -> int:
    """
    The element count of a sequence, from len() or a size() method.

    Raises:
        TypeError: if the sequence exposes neither, or size() is not integral.
    """
    if isinstance(seq, Sized):
        return len(seq)

    if not _type_has(seq, "size"):
        raise TypeError(f"{type(seq).__name__} has no length query")

    n = seq.size()  # pyright: ignore[reportAttributeAccessIssue]

    if not is_integral(n):
        raise TypeError(
            f"{type(seq).__name__}.size() returned {type(n).__name__}, expecting an integral value"
        )
    return int(n)


@dataclass(frozen=True)
class Capabilities:
    """
    The capability profile of one input, or the conjunction of several.
    """

    length: bool
    begin: bool
    end: bool
    subscript: bool
    iterable: bool

    @classmethod
    def of(cls, seq: object) -> "Capabilities":
        return cls(
            length=has_length(seq),
            begin=has_begin(seq),
            end=has_end(seq),
            subscript=indexes_by_position(seq),
            iterable=is_iterable(seq),
        )

    @classmethod
    def common(cls, *profiles: "Capabilities") -> "Capabilities":
        if not profiles:
            raise ValueError("Expecting at least one capability profile")
        return functools.reduce(operator.and_, profiles)

    def __and__(self, other: "Capabilities") -> "Capabilities":
        return Capabilities(
            length=self.length and other.length,
            begin=self.begin and other.begin,
            end=self.end and other.end,
            subscript=self.subscript and other.subscript,
            iterable=self.iterable and other.iterable,
        )

    @property
    def iteration(self) -> bool:
        return self.begin or self.subscript or self.iterable

    @property
    def sized(self) -> bool:
        return self.length

    @property
    def indexable(self) -> bool:
        return self.subscript

    def describe(self) -> str:
        names = [
            name
            for name in ("length", "begin", "end", "subscript", "iterable")
            if getattr(self, name)
        ]
        return "{" + ", ".join(names) + "}"


class Promotion(Enum):
    """How an input is turned into a cursor."""

    NATIVE = "native"
    SUBSCRIPT = "subscript"
    ITERATOR = "iterator"


def promotion_of(seq: object) -> Promotion:
    if has_begin(seq):
        return Promotion.NATIVE
    if indexes_by_position(seq):
        return Promotion.SUBSCRIPT
    if is_iterable(seq):
        return Promotion.ITERATOR

    raise TypeError(
        f"{type(seq).__name__} is neither a cursor range, subscriptable, nor iterable"
    )


class Gated:
    """
    Turns lookups of operations missing from the selected tier into a
    CapabilityError naming what is missing.

    Subclasses list operation names and the category each one needs in
    `_gated`, and expose their own `category`.
    """

    _gated: ClassVar[dict[str, Category]] = {}

    def __getattr__(self, name: str) -> Any:
        required = type(self)._gated.get(name)

        if required is None:
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            )

        category = self.__dict__.get("category", getattr(type(self), "category", None))
        have = category.name if category is not None else "unknown"
        raise CapabilityError(
            f"{type(self).__name__}.{name}() requires {required.name} cursors, "
            f"but the weakest input is {have}"
        )

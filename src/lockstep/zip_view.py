import copy
import operator
from collections.abc import Iterator
from typing import Any, final, override

from torch.utils.data import Dataset

from lockstep import algorithms
from lockstep.capabilities import (
    CapabilityError,
    Capabilities,
    Category,
    Cursor,
    CursorRange,
    Promotion,
    has_end,
    has_length,
    length_of,
    promotion_of,
)
from lockstep.cursors import (
    IterCursor,
    StashingCursor,
    SubscriptCursor,
    ZipCursor,
    stashing,
    zip_cursor,
)
from lockstep.utils.print_utils import dprint


class Zip[*Ts]:
    """
    Several sequences viewed as one sequence of tuples, stopping at the
    shortest.

    Each input is used through the strongest route it offers: its own
    begin()/end() cursors, indexing (promoted with SubscriptCursor), or plain
    iteration (promoted with IterCursor). The composite only offers what
    every input can do; size() needs every input to have a length and [i]
    needs every input to be subscriptable. zip_view() picks the class that
    carries exactly those operations.

    The view only reads its inputs. Their lengths must not change while a
    traversal is under way.
    """

    def __init__(self, *sequences: Any, own: bool = False):
        if not sequences:
            raise ValueError("Expecting at least one sequence to zip")

        if own:
            sequences = tuple(copy.copy(seq) for seq in sequences)

        self._sequences: tuple[Any, ...] = sequences
        self._profiles: tuple[Capabilities, ...] = tuple(
            Capabilities.of(seq) for seq in sequences
        )
        self._capabilities: Capabilities = Capabilities.common(*self._profiles)
        self._promotions: tuple[Promotion, ...] = tuple(
            promotion_of(seq) for seq in sequences
        )
        self._size: int | None = (
            min(length_of(seq) for seq in sequences)
            if self._capabilities.sized
            else None
        )

        dprint(
            f"zip of {len(sequences)}:",
            [p.value for p in self._promotions],
            f"-> {self._capabilities.describe()}, size={self._size}",
        )

    @property
    def sequences(self) -> tuple[Any, ...]:
        return self._sequences

    @property
    def capabilities(self) -> Capabilities:
        return self._capabilities

    @property
    def promotions(self) -> tuple[Promotion, ...]:
        return self._promotions

    @property
    def category(self) -> Category:
        """the category of the cursors begin() hands out"""
        return self.begin().category

    def _begin_of(self, seq: Any, promotion: Promotion) -> Cursor[Any]:
        match promotion:
            case Promotion.NATIVE:
                native: CursorRange[Any] = seq
                return native.begin()
            case Promotion.SUBSCRIPT:
                return SubscriptCursor(seq, 0)
            case Promotion.ITERATOR:
                return IterCursor(seq)

    def _end_of(self, seq: Any, promotion: Promotion) -> Cursor[Any]:
        if self._size is not None:
            match promotion:
                case Promotion.NATIVE:
                    return algorithms.advance(seq.begin(), self._size)
                case Promotion.SUBSCRIPT:
                    return SubscriptCursor(seq, self._size)
                case Promotion.ITERATOR:
                    return IterCursor.marker(seq, self._size)

        match promotion:
            case Promotion.NATIVE if has_end(seq):
                return seq.end()
            case Promotion.ITERATOR:
                return IterCursor.sentinel(seq)
            case Promotion.SUBSCRIPT if has_length(seq):
                # its own length is the only end a subscripted input has
                return SubscriptCursor(seq, length_of(seq))
            case _:
                raise CapabilityError(
                    f"end() needs a length for every input, or an end of its own for each; "
                    f"{type(seq).__name__} ({promotion.value}) has neither"
                )

    def begin(self) -> ZipCursor[*Ts]:
        return zip_cursor(
            *(self._begin_of(s, p) for s, p in zip(self._sequences, self._promotions))
        )

    def end(self) -> ZipCursor[*Ts]:
        """
        The end bound. With a length for every input it is each input's begin
        advanced by size(); otherwise it is each input's own end.
        """
        return zip_cursor(
            *(self._end_of(s, p) for s, p in zip(self._sequences, self._promotions))
        )

    def sbegin(self) -> StashingCursor[tuple[*Ts]]:
        return stashing(self.begin())

    def send(self) -> StashingCursor[tuple[*Ts]]:
        return stashing(self.end())

    def __iter__(self) -> Iterator[tuple[*Ts]]:
        last = self.end()
        cursor = self.begin()

        while not cursor.meets(last):
            yield cursor.get()
            cursor.advance()

    def __getattr__(self, name: str) -> Any:
        if name == "size":
            missing = [
                i for i, profile in enumerate(self._profiles) if not profile.length
            ]
            raise CapabilityError(
                f"size() requires a length query on every input; input(s) {missing} have none"
            )
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

    @override
    def __repr__(self) -> str:
        kinds = ", ".join(type(seq).__name__ for seq in self._sequences)
        size = "" if self._size is None else f", size={self._size}"
        return f"{type(self).__name__}({kinds}{size})"


class SizedZip[*Ts](Zip[*Ts]):
    def size(self) -> int:
        """the length of the shortest input"""
        assert self._size is not None
        return self._size

    def __len__(self) -> int:
        return self.size()


class IndexedZip[*Ts](Zip[*Ts]):
    def __getitem__(self, idx: int) -> tuple[*Ts]:
        """
        The idx-th element of every input, read straight from the inputs.
        An idx past size() is undefined: whatever each input does is passed on.
        """
        i = operator.index(idx)
        return tuple(seq[i] for seq in self._sequences)  # pyright: ignore[reportReturnType]


@final
class ZipDataset[*Ts](SizedZip[*Ts], IndexedZip[*Ts], Dataset[tuple[*Ts]]):
    """
    A zip whose inputs are all sized and subscriptable; usable anywhere a
    map-style torch Dataset is expected.
    """


def zip_view(*sequences: Any, own: bool = False) -> Zip:
    """
    Zips `sequences` into the most capable view all of them support.

    Args:
        sequences: anything with begin()/end() cursors, anything subscriptable,
            or any iterable.
        own: store a shallow copy of each input instead of borrowing it.
    """
    if not sequences:
        raise ValueError("Expecting at least one sequence to zip")

    caps = Capabilities.common(*(Capabilities.of(seq) for seq in sequences))

    if caps.sized and caps.indexable:
        return ZipDataset(*sequences, own=own)
    if caps.sized:
        return SizedZip(*sequences, own=own)
    if caps.indexable:
        return IndexedZip(*sequences, own=own)
    return Zip(*sequences, own=own)

import numpy as np
import pytest

from lockstep.capabilities import CapabilityError, Category
from lockstep.cursors import (
    BidirectionalZipCursor,
    IterCursor,
    RandomAccessZipCursor,
    SubscriptCursor,
    ZipCursor,
    zip_cursor,
)
from lockstep.ranges import CountingCursor, ForwardList


def test_tier_is_weakest_input():
    a = [1, 2, 3]
    fl = ForwardList([1, 2, 3])

    rr = zip_cursor(SubscriptCursor(a), CountingCursor(0))
    assert type(rr) is RandomAccessZipCursor
    assert rr.category == Category.RANDOM_ACCESS

    rf = zip_cursor(SubscriptCursor(a), fl.begin())
    assert type(rf) is ZipCursor
    assert rf.category == Category.FORWARD

    ri = zip_cursor(SubscriptCursor(a), IterCursor(iter(a)))
    assert ri.category == Category.INPUT


def test_no_cursors():
    with pytest.raises(ValueError):
        zip_cursor()


def test_get_preserves_order_and_identity():
    xs = [object(), object()]
    ys = [[1], [2]]
    cursor = zip_cursor(SubscriptCursor(xs), SubscriptCursor(ys))

    x, y = cursor.get()
    assert x is xs[0]
    # the tuple holds the stored object itself, not a copy of it
    assert y is ys[0]

    assert cursor.arity == 2
    assert cursor.part(1).get() is ys[0]


def test_equality_is_pairwise():
    a = [1, 2, 3]
    b = [4, 5, 6]
    x = zip_cursor(SubscriptCursor(a), SubscriptCursor(b))
    y = zip_cursor(SubscriptCursor(a), SubscriptCursor(b))
    assert x == y

    x.advance()
    assert x != y

    y.advance()
    assert x == y


def test_meets_is_any_pair():
    a = [1, 2, 3]
    b = [4, 5]
    first = zip_cursor(SubscriptCursor(a, 2), SubscriptCursor(b, 2))
    last = zip_cursor(SubscriptCursor(a, 3), SubscriptCursor(b, 2))

    assert first != last
    assert first.meets(last)


def test_forward_tier_refuses_retreat():
    cursor = zip_cursor(SubscriptCursor([1, 2]), ForwardList([1, 2]).begin())

    with pytest.raises(CapabilityError, match="BIDIRECTIONAL"):
        cursor.retreat()

    with pytest.raises(TypeError):
        cursor + 1  # pyright: ignore[reportOperatorIssue]


def test_bidirectional_tier():
    class Bidi:
        category = Category.BIDIRECTIONAL

        def __init__(self, i):
            self.i = i

        def get(self):
            return self.i

        def advance(self):
            self.i += 1
            return self

        def retreat(self):
            self.i -= 1
            return self

        def copy(self):
            return Bidi(self.i)

        def __eq__(self, other):
            return self.i == other.i

    cursor = zip_cursor(Bidi(0), CountingCursor(10))
    assert type(cursor) is BidirectionalZipCursor

    cursor.advance().advance()
    assert cursor.get() == (2, 12)
    cursor.retreat()
    assert cursor.get() == (1, 11)

    with pytest.raises(TypeError):
        cursor - 1  # pyright: ignore[reportOperatorIssue]


def test_bulk_offset_equals_repeated_steps():
    a = list(range(10))
    b = [str(i) for i in range(10)]
    begin = zip_cursor(SubscriptCursor(a), SubscriptCursor(b))

    for n in range(10):
        stepped = begin.copy()
        for _ in range(n):
            stepped.advance()

        assert begin + n == stepped
        assert n + begin == stepped
        assert stepped - n == begin
        assert stepped - begin == n
        assert begin[n] == stepped.get()


def test_random_access_ops():
    a = [1, 2, 3, 4]
    b = "abcd"
    c = zip_cursor(SubscriptCursor(a), SubscriptCursor(b), CountingCursor(100))

    c += 2
    assert c.get() == (3, "c", 102)
    c -= 1
    assert c.get() == (2, "b", 101)
    assert c[1] == (3, "c", 102)
    assert c[-1] == (1, "a", 100)

    d = c + 2
    assert c < d and c <= d
    assert d > c and d >= c
    assert d - c == 2
    assert c.get() == (2, "b", 101)


def test_copy_is_independent():
    a = [1, 2, 3]
    c = zip_cursor(SubscriptCursor(a), IterCursor({7}))
    d = c.copy()
    c.advance()

    assert d.get() == (1, 7)
    assert d.part(0).index == 0


def test_set_writes_every_input():
    a = [1, 2, 3]
    b = ["a", "b", "c"]
    c = zip_cursor(SubscriptCursor(a, 1), SubscriptCursor(b, 1))
    c.set((20, "B"))

    assert a == [1, 20, 3]
    assert b == ["a", "B", "c"]

    with pytest.raises(ValueError):
        c.set((1,))  # pyright: ignore[reportArgumentType]


def test_set_refuses_before_writing():
    a = [1, 2, 3]
    c = zip_cursor(SubscriptCursor(a), CountingCursor(0))

    with pytest.raises(CapabilityError, match=r"\[1\]"):
        c.set((9, 9))

    assert a == [1, 2, 3]


def test_set_refuses_read_only_input_before_writing():
    a = [1, 2, 3]
    b = ("x", "y", "z")
    z = zip_cursor(SubscriptCursor(a), SubscriptCursor(b))

    assert not z.assignable

    with pytest.raises(CapabilityError, match=r"\[1\]"):
        z.set((9, "q"))

    assert a == [1, 2, 3]


def test_set_refuses_read_only_array():
    a = [1, 2]
    frozen = np.array([10, 20])
    frozen.flags.writeable = False
    z = zip_cursor(SubscriptCursor(a), SubscriptCursor(frozen))

    with pytest.raises(CapabilityError):
        z.set((5, 50))

    assert a == [1, 2]
    assert frozen.tolist() == [10, 20]

"""Tests for cursors and tags."""

from thoth.symdiff.cursor import Cursor
from thoth.symdiff.cursor import END
from thoth.symdiff.tag import Side
from thoth.symdiff.tag import Tag


class _Resurrecting:
    """Iterator which yields again after signalling exhaustion once."""

    def __init__(self):
        self.calls = 0

    def __iter__(self):
        return self

    def __next__(self):
        self.calls += 1
        if self.calls == 2:
            raise StopIteration
        return self.calls


class TestCursor:
    def test_pull_in_order(self):
        cursor = Cursor([1, 2, 3])
        assert [cursor.pull() for _ in range(3)] == [1, 2, 3]
        assert cursor.pulls == 3
        assert not cursor.exhausted

    def test_exhaustion_is_idempotent(self):
        cursor = Cursor([1])
        assert cursor.pull() == 1
        assert cursor.pull() is END
        assert cursor.pull() is END
        assert cursor.exhausted
        assert cursor.pulls == 1

    def test_resurrecting_iterator_not_touched_after_end(self):
        source = _Resurrecting()
        cursor = Cursor(source)
        assert cursor.pull() == 1
        assert cursor.pull() is END
        assert cursor.pull() is END
        assert source.calls == 2

    def test_none_is_a_value(self):
        cursor = Cursor([None])
        assert cursor.pull() is None
        assert cursor.pull() is END

    def test_cursors_over_same_collection_are_independent(self):
        values = [1, 2]
        first, second = Cursor(values), Cursor(values)
        assert first.pull() == 1
        assert first.pull() == 2
        assert second.pull() == 1

    def test_empty(self):
        cursor = Cursor([])
        assert cursor.pull() is END
        assert cursor.exhausted
        assert cursor.pulls == 0

    def test_repr(self):
        assert repr(END) == "END"
        assert repr(Cursor([])) == "Cursor(pulls=0, exhausted=False)"


class TestTag:
    def test_sides(self):
        left, right = Tag.left(2), Tag.right(2)
        assert left.side is Side.LEFT and left.is_left and not left.is_right
        assert right.side is Side.RIGHT and right.is_right and not right.is_left

    def test_provenance_matters_for_equality(self):
        assert Tag.left(2) != Tag.right(2)
        assert Tag.left(2) == Tag(Side.LEFT, 2)

    def test_unwrap(self):
        assert Tag.left("a").unwrap() == "a"
        assert Tag.right("b").unwrap() == "b"

    def test_repr(self):
        assert repr(Tag.left(2)) == "Left(2)"
        assert repr(Tag.right("x")) == "Right('x')"

# thoth-symdiff
# Copyright(C) 2022 Red Hat, Inc.
#
# This program is free software: you can redistribute it and / or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program. If not, see <http://www.gnu.org/licenses/>.

"""Lazy set-like operations on sorted iterables."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Iterable, Optional, Union, cast

from .cursor import Cursor
from .cursor import END
from .cursor import _End
from .tag import Side
from .tag import Tag

_LOGGER = logging.getLogger("thoth.symdiff.lazy_set_ops")


class Traversal(Enum):
    """Signal returned by a push-based callback."""

    CONTINUE = "continue"
    STOP = "stop"


class SymmetricDifferenceIterator:
    """Pull-based symmetric difference of two sorted iterables.

    Both inputs have to be strictly ascending and free of duplicates, this is not checked. Values are
    yielded as tags recording the input they come from, in ascending order. Each input is consumed
    exactly once; a value pulled from one side that is not yet due is kept in a single remainder slot
    for the next call instead of being pulled again.
    """

    __slots__ = ("_left", "_right", "_remainder", "_finished")

    def __init__(self, left: Cursor, right: Cursor) -> None:
        self._left = left
        self._right = right
        self._remainder: Optional[Tag] = None
        self._finished = False

    def __iter__(self) -> SymmetricDifferenceIterator:
        return self

    def __next__(self) -> Tag:
        item = self.produce_next()
        if item is END:
            raise StopIteration
        return cast(Tag, item)

    def produce_next(self) -> Union[Tag, _End]:
        """Advance the merge by one emitted item, return END once both inputs are drained."""
        remainder, self._remainder = self._remainder, None

        if remainder is None:
            left, right = self._left.pull(), self._right.pull()
        elif remainder.side is Side.LEFT:
            left, right = remainder.value, self._right.pull()
        else:
            left, right = self._left.pull(), remainder.value

        while True:
            if left is END:
                if right is END:
                    break
                return Tag.right(right)
            elif right is END:
                return Tag.left(left)
            elif left < right:
                self._remainder = Tag.right(right)
                return Tag.left(left)
            elif right < left:
                self._remainder = Tag.left(left)
                return Tag.right(right)

            # Present on both sides, emitted from neither.
            left, right = self._left.pull(), self._right.pull()

        if not self._finished:
            self._finished = True
            _LOGGER.debug(
                "Symmetric difference exhausted (%d left, %d right pulls)", self._left.pulls, self._right.pulls
            )

        return END


def traverse(left: Cursor, right: Cursor, on_item: Callable[[Tag], Optional[Traversal]]) -> None:
    """Push the symmetric difference of two cursors to a callback.

    Runs the same merge as SymmetricDifferenceIterator in one loop. The callback receives tags in the same
    order and may return Traversal.STOP to halt; nothing more is pulled from either cursor after that.
    """
    a, b = left.pull(), right.pull()

    while a is not END and b is not END:
        if a < b:
            if on_item(Tag.left(a)) is Traversal.STOP:
                _LOGGER.debug("Traversal stopped on left value %r", a)
                return
            a = left.pull()
        elif b < a:
            if on_item(Tag.right(b)) is Traversal.STOP:
                _LOGGER.debug("Traversal stopped on right value %r", b)
                return
            b = right.pull()
        else:
            a, b = left.pull(), right.pull()

    if a is not END:
        cursor, item, tag = left, a, Tag.left
    elif b is not END:
        cursor, item, tag = right, b, Tag.right
    else:
        cursor, item, tag = left, END, Tag.left

    # The other side is done, the rest needs no comparison.
    while item is not END:
        if on_item(tag(item)) is Traversal.STOP:
            _LOGGER.debug("Traversal stopped on %r", item)
            return
        item = cursor.pull()

    _LOGGER.debug("Traversal finished (%d left, %d right pulls)", left.pulls, right.pulls)


def traverse_split(
    left: Cursor,
    right: Cursor,
    on_left: Callable[[Any], Optional[Traversal]],
    on_right: Callable[[Any], Optional[Traversal]],
) -> None:
    """Push the symmetric difference of two cursors to one callback per side, as plain values.

    Same merge and stop protocol as traverse, without building tags.
    """
    a, b = left.pull(), right.pull()

    while a is not END and b is not END:
        if a < b:
            if on_left(a) is Traversal.STOP:
                _LOGGER.debug("Split traversal stopped on left value %r", a)
                return
            a = left.pull()
        elif b < a:
            if on_right(b) is Traversal.STOP:
                _LOGGER.debug("Split traversal stopped on right value %r", b)
                return
            b = right.pull()
        else:
            a, b = left.pull(), right.pull()

    while a is not END:
        if on_left(a) is Traversal.STOP:
            _LOGGER.debug("Split traversal stopped on left value %r", a)
            return
        a = left.pull()

    while b is not END:
        if on_right(b) is Traversal.STOP:
            _LOGGER.debug("Split traversal stopped on right value %r", b)
            return
        b = right.pull()

    _LOGGER.debug("Split traversal finished (%d left, %d right pulls)", left.pulls, right.pulls)


def symmetric_difference(source: Iterable[Any], dest: Iterable[Any]) -> SymmetricDifferenceIterator:
    """Compute the symmetric difference of two sorted iterables lazily."""
    return SymmetricDifferenceIterator(Cursor(source), Cursor(dest))


def symmetric_difference_for_each(
    source: Iterable[Any], dest: Iterable[Any], on_item: Callable[[Tag], Optional[Traversal]]
) -> None:
    """Compute the symmetric difference of two sorted iterables, calling on_item for each tagged value."""
    traverse(Cursor(source), Cursor(dest), on_item)


def symmetric_difference_split(
    source: Iterable[Any],
    dest: Iterable[Any],
    on_left: Callable[[Any], Optional[Traversal]],
    on_right: Callable[[Any], Optional[Traversal]],
) -> None:
    """Compute the symmetric difference of two sorted iterables, routing plain values per side."""
    traverse_split(Cursor(source), Cursor(dest), on_left, on_right)

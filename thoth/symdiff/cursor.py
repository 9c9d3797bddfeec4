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

"""Single-pass pull handle over an ordered iterable."""

from __future__ import annotations

from typing import Any, Iterable, Iterator


class _End:
    """Marker returned by a cursor once its sequence is exhausted."""

    def __repr__(self) -> str:
        return "END"


END = _End()


class Cursor:
    """Pull values one at a time from an iterable, in its order."""

    __slots__ = ("_iterator", "_exhausted", "pulls")

    def __init__(self, iterable: Iterable[Any]) -> None:
        self._iterator: Iterator[Any] = iter(iterable)
        self._exhausted = False
        self.pulls = 0

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def pull(self) -> Any:
        """Return the next value, or END for the rest of this cursor's life."""
        if self._exhausted:
            return END

        value = next(self._iterator, END)
        if value is END:
            # Some iterators resume after StopIteration, never look at them again.
            self._exhausted = True
            self._iterator = iter(())
        else:
            self.pulls += 1

        return value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(pulls={self.pulls}, exhausted={self._exhausted})"

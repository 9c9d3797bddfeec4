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

"""Provenance markers for values emitted by a symmetric difference."""

from __future__ import annotations

from enum import Enum
from typing import Any, NamedTuple


class Side(Enum):
    LEFT = "left"
    RIGHT = "right"


class Tag(NamedTuple):
    """A value together with the input it came from."""

    side: Side
    value: Any

    @classmethod
    def left(cls, value: Any) -> Tag:
        return cls(Side.LEFT, value)

    @classmethod
    def right(cls, value: Any) -> Tag:
        return cls(Side.RIGHT, value)

    @property
    def is_left(self) -> bool:
        return self.side is Side.LEFT

    @property
    def is_right(self) -> bool:
        return self.side is Side.RIGHT

    def unwrap(self) -> Any:
        """Drop the provenance and return the plain value."""
        return self.value

    def __repr__(self) -> str:
        return f"{self.side.name.capitalize()}({self.value!r})"

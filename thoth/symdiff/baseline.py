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

"""Hash-based symmetric difference and benchmark inputs."""

from typing import Any, Iterable, List, Set


def hashed_symmetric_difference(source: Iterable[Any], dest: Iterable[Any]) -> Set[Any]:
    """Compute the symmetric difference using hash membership, no ordering needed."""
    return set(source).symmetric_difference(dest)


def build_left(size: int, divisor: int = 13) -> List[int]:
    """Build the left benchmark input: [0, size) without multiples of divisor."""
    return [x for x in range(0, size) if x % divisor != 0]


def build_right(size: int, divisor: int = 23) -> List[int]:
    """Build the right benchmark input: [1, size) without multiples of divisor."""
    return [x for x in range(1, size) if x % divisor != 0]

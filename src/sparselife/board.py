from __future__ import annotations
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
import logging
from typing import NamedTuple, Optional

log = logging.getLogger(__name__)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class Coordinate(NamedTuple):
    x: int
    y: int

    def __str__(self) -> str:
        return f"{self.x} {self.y}"


@dataclass
class Board:
    """
    A sparse set of live cells on the integer plane.

    ``min_x``, ``min_y``, ``max_x``, and ``max_y`` give the legal coordinate
    range; neighbor enumeration never steps outside of it.  Separately, the
    board tracks the smallest box known to contain every cell that has ever
    been populated.  Killing a cell does not shrink that box; call `tighten()`
    to recompute it from the live set.
    """

    min_x: int = INT64_MIN
    min_y: int = INT64_MIN
    max_x: int = INT64_MAX
    max_y: int = INT64_MAX
    cells: set[Coordinate] = field(default_factory=set)
    # Unset until the first cell is populated
    occupied_min_x: Optional[int] = field(default=None, init=False)
    occupied_min_y: Optional[int] = field(default=None, init=False)
    occupied_max_x: Optional[int] = field(default=None, init=False)
    occupied_max_y: Optional[int] = field(default=None, init=False)

    def __post_init__(self) -> None:
        if self.min_x > self.max_x or self.min_y > self.max_y:
            raise ValueError(
                f"Empty legal range: x in [{self.min_x}, {self.max_x}],"
                f" y in [{self.min_y}, {self.max_y}]"
            )
        # The board owns its own copy of the initial cells
        self.cells = {Coordinate(*c) for c in self.cells}
        for c in self.cells:
            self._widen(c.x, c.y)

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.cells)

    def __contains__(self, xy: object) -> bool:
        return xy in self.cells

    @property
    def min_bounds(self) -> Coordinate:
        return Coordinate(self.min_x, self.min_y)

    @property
    def max_bounds(self) -> Coordinate:
        return Coordinate(self.max_x, self.max_y)

    @property
    def occupied_bounds(self) -> Optional[tuple[Coordinate, Coordinate]]:
        """
        The ``(lower-left, upper-right)`` corners of the occupied bounding box,
        or `None` if nothing has been populated since the box was last reset
        """
        if (
            self.occupied_min_x is None
            or self.occupied_min_y is None
            or self.occupied_max_x is None
            or self.occupied_max_y is None
        ):
            return None
        return (
            Coordinate(self.occupied_min_x, self.occupied_min_y),
            Coordinate(self.occupied_max_x, self.occupied_max_y),
        )

    def in_range(self, x: int, y: int) -> bool:
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def populate(self, x: int, y: int) -> None:
        # Coordinates outside the legal range are accepted as-is.
        loc = Coordinate(x, y)
        if loc not in self.cells:
            self.cells.add(loc)
            self._widen(x, y)

    def kill(self, x: int, y: int) -> None:
        self.cells.discard(Coordinate(x, y))

    def for_each_neighbor(
        self, x: int, y: int, visit: Callable[[int, int], None]
    ) -> None:
        """
        Call ``visit(nx, ny)`` for each of the (up to eight) cells adjacent to
        ``(x, y)`` that lie within the legal range
        """
        if x > self.min_x:
            visit(x - 1, y)
            if y > self.min_y:
                visit(x - 1, y - 1)
            if y < self.max_y:
                visit(x - 1, y + 1)
        if x < self.max_x:
            visit(x + 1, y)
            if y > self.min_y:
                visit(x + 1, y - 1)
            if y < self.max_y:
                visit(x + 1, y + 1)
        if y > self.min_y:
            visit(x, y - 1)
        if y < self.max_y:
            visit(x, y + 1)

    def neighbors(self, x: int, y: int) -> Iterator[Coordinate]:
        found: list[Coordinate] = []
        self.for_each_neighbor(x, y, lambda nx, ny: found.append(Coordinate(nx, ny)))
        yield from found

    def tighten(self) -> None:
        """Recompute the occupied bounding box from the current live cells"""
        self.occupied_min_x = self.occupied_min_y = None
        self.occupied_max_x = self.occupied_max_y = None
        for c in self.cells:
            self._widen(c.x, c.y)
        log.debug("Occupied bounds recomputed: %r", self.occupied_bounds)

    def _widen(self, x: int, y: int) -> None:
        if self.occupied_min_x is None or x < self.occupied_min_x:
            self.occupied_min_x = x
        if self.occupied_max_x is None or x > self.occupied_max_x:
            self.occupied_max_x = x
        if self.occupied_min_y is None or y < self.occupied_min_y:
            self.occupied_min_y = y
        if self.occupied_max_y is None or y > self.occupied_max_y:
            self.occupied_max_y = y

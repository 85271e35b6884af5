"""
Reading & writing boards in the `Life 1.06`_ format, plus a dense text
rendering of a board for debugging

.. _Life 1.06: https://conwaylife.com/wiki/Life_1.06
"""

from __future__ import annotations
import logging
from typing import IO
from .board import INT64_MAX, INT64_MIN, Board
from .util import INT32_MAX, INT32_MIN, parse_int

log = logging.getLogger(__name__)

HEADER = "#Life 1.06"

#: Largest width or height that `render_grid()` will materialize
MAX_GRID_DIMENSION = 4096

DEAD = "."
ALIVE = "O"


class GridTooLargeError(ValueError):
    pass


def load(fp: IO[str], board: Board) -> bool:
    """
    Populate ``board`` with the cells listed in ``fp``.  Returns `True` if at
    least one cell was read.

    Input that does not start with the ``#Life 1.06`` header is ignored
    entirely.  After the header, any line that is not a pair of integers is
    skipped.
    """
    first = fp.readline()
    if first.rstrip("\r\n") != HEADER:
        log.warning("Input does not begin with %r header; no cells loaded", HEADER)
        return False
    count = 0
    for lineno, line in enumerate(fp, start=2):
        tokens = line.split()
        if len(tokens) != 2:
            log.debug(
                "Line %d: expected 2 fields, got %d; skipping", lineno, len(tokens)
            )
            continue
        x = parse_int(tokens[0], INT64_MIN, INT64_MAX)
        y = parse_int(tokens[1], INT64_MIN, INT64_MAX)
        if x is None or y is None:
            log.debug("Line %d: invalid coordinates %r; skipping", lineno, line.strip())
            continue
        board.populate(x, y)
        count += 1
    log.info("Read %d cell lines (%d distinct live cells)", count, len(board))
    return count > 0


def dump(board: Board, fp: IO[str]) -> None:
    print(HEADER, file=fp)
    for loc in board:
        print(loc.x, loc.y, file=fp)


def render_grid(board: Board, iteration: int) -> str:
    """
    Render the occupied region of ``board`` as rows of ``.`` and ``O``, from
    the highest Y coordinate down to the lowest, each row followed by its Y
    coordinate.  Only usable on small boards near the origin.
    """
    lines = [f"n={iteration}", ""]
    if (bounds := board.occupied_bounds) is None:
        return "\n".join(lines) + "\n"
    lower, upper = bounds
    if not (
        INT32_MIN <= lower.x
        and upper.x <= INT32_MAX
        and INT32_MIN <= lower.y
        and upper.y <= INT32_MAX
    ):
        raise GridTooLargeError(
            f"Occupied region {lower}..{upper} is outside the 32-bit range"
        )
    width = upper.x - lower.x + 1
    height = upper.y - lower.y + 1
    if width > MAX_GRID_DIMENSION or height > MAX_GRID_DIMENSION:
        raise GridTooLargeError(
            f"Occupied region is {width}x{height}; cannot render grids larger"
            f" than {MAX_GRID_DIMENSION}x{MAX_GRID_DIMENSION}"
        )
    rows = [[DEAD] * width for _ in range(height)]
    for loc in board:
        rows[loc.y - lower.y][loc.x - lower.x] = ALIVE
    for y in range(height - 1, -1, -1):
        lines.append("".join(rows[y]) + f" {y + lower.y}")
    return "\n".join(lines) + "\n"


def dump_grid(board: Board, iteration: int, fp: IO[str]) -> None:
    print(render_grid(board, iteration), file=fp, end="")

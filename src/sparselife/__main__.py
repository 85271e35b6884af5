from __future__ import annotations
from collections.abc import Mapping
import logging
from pathlib import Path
import sys
from typing import TextIO
import click
from click_loglevel import LogLevel
import colorlog
from . import __version__, life106
from .board import Board, Coordinate
from .clack import ConfigurableCommand
from .config import DEFAULT_CFG, configure
from .simulator import CellStatus, Simulator
from .util import INT32_MAX, INT32_MIN, parse_int

log = logging.getLogger(__name__)

DEFAULT_ITERATIONS = 10


def parse_iterations(
    ctx: click.Context, param: click.Parameter, value: tuple[str, ...]
) -> int:
    # Each unparsable count is ignored, leaving the last good one given before
    # it; failing that, the configured default, and then the built-in default.
    configured = ctx.lookup_default(param.name or "iterations") or ()
    for candidate in [*reversed(value), *reversed(list(configured))]:
        n = parse_int(str(candidate), INT32_MIN, INT32_MAX)
        if n is not None:
            return n
    return DEFAULT_ITERATIONS


def log_votes(generation: int, votes: Mapping[Coordinate, CellStatus]) -> None:
    log.debug("Adjacencies for generation %d:", generation)
    for loc, status in votes.items():
        log.debug(
            "  (%d, %d): %d neighbors%s",
            loc.x,
            loc.y,
            status.count,
            " (alive)" if status.alive else "",
        )


def show_grid(board: Board, iteration: int) -> None:
    try:
        life106.dump_grid(board, iteration, sys.stderr)
    except life106.GridTooLargeError as e:
        raise click.ClickException(f"Cannot display grid: {e}") from e


@click.command(
    cls=ConfigurableCommand,
    allow_config=["iterations", "grid", "show_initial", "log_level"],
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option(
    "-c",
    "--config",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_CFG,
    show_default=True,
    help="Use the specified configuration file",
    callback=configure,
    is_eager=True,
    expose_value=False,
)
@click.option(
    "-f",
    "--file",
    "infile",
    type=click.File("r", encoding="utf-8", errors="replace"),
    default="-",
    help="Read the initial board from FILE  [default: stdin]",
    metavar="FILE",
)
@click.option(
    "-o",
    "--outfile",
    type=click.File("w", encoding="utf-8"),
    default="-",
    help="Write the final board to FILE  [default: stdout]",
    metavar="FILE",
)
@click.option(
    "-n",
    "--iterations",
    multiple=True,
    callback=parse_iterations,
    help=f"Maximum number of generations to run  [default: {DEFAULT_ITERATIONS}]",
    metavar="N",
)
@click.option(
    "-g",
    "--grid",
    is_flag=True,
    help="Print the board as a grid on stderr before and after each generation",
)
@click.option(
    "-i",
    "--show-initial",
    is_flag=True,
    help="Also write out the initial board before running",
)
@click.option(
    "-l",
    "--log-level",
    type=LogLevel(),
    default=logging.WARNING,
    help="Set logging level  [default: WARNING]",
)
@click.version_option(
    __version__,
    "-V",
    "--version",
    message="sparselife %(version)s",
)
def main(
    infile: TextIO,
    outfile: TextIO,
    iterations: int,
    grid: bool,
    show_initial: bool,
    log_level: int,
) -> None:
    """
    Run Conway's Game of Life on a board in Life 1.06 format.

    The board is read from FILE (or standard input), advanced up to N
    generations (stopping early once it no longer changes), and then written
    back out in Life 1.06 format.
    """
    colorlog.basicConfig(
        format="%(log_color)s[%(levelname)-8s] %(message)s",
        log_colors={
            "DEBUG": "cyan",
            "INFO": "bold",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "bold_red",
        },
        level=log_level,
        stream=sys.stderr,
    )
    board = Board()
    if not life106.load(infile, board):
        log.warning("No live cells read from %s", infile.name)
    if show_initial:
        life106.dump(board, outfile)
    sim = Simulator(on_step=log_votes if log.isEnabledFor(logging.DEBUG) else None)
    if grid:
        show_grid(board, 0)
        for n in sim.generations(board, iterations):
            show_grid(board, n)
    else:
        sim.run(board, iterations)
    log.info("Ran %d generation(s); %d live cells remain", sim.generation, len(board))
    life106.dump(board, outfile)


if __name__ == "__main__":
    main()

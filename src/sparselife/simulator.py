from __future__ import annotations
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
import logging
from typing import Optional
from .board import Board, Coordinate

log = logging.getLogger(__name__)


@dataclass
class CellStatus:
    #: Number of live neighbors (0 through 8)
    count: int = 0
    #: Whether the cell was alive at the start of the current step
    alive: bool = False


#: Called once per step, after the vote buffer has been filled in and before
#: any cell is born or killed.  Receives the number of the generation being
#: computed (starting at 1) and the vote buffer.
StepObserver = Callable[[int, Mapping[Coordinate, CellStatus]], None]


@dataclass
class Simulator:
    """
    Advances a `Board` one generation at a time under Conway's rules
    (B3/S23).

    Only cells that are alive or adjacent to a live cell are considered in a
    step, so the cost of a step is proportional to the population rather
    than to the size of the board.
    """

    on_step: Optional[StepObserver] = None
    #: Total number of steps performed by this simulator
    generation: int = field(default=0, init=False)
    votes: dict[Coordinate, CellStatus] = field(
        default_factory=dict, init=False, repr=False
    )

    def step(self, board: Board) -> bool:
        """
        Advance ``board`` by one generation.  Returns `True` if any cell was
        born or killed.
        """
        votes = self.votes
        votes.clear()

        def vote(x: int, y: int) -> None:
            loc = Coordinate(x, y)
            if (status := votes.get(loc)) is not None:
                status.count += 1
            else:
                votes[loc] = CellStatus(count=1)

        for loc in board.cells:
            if (status := votes.get(loc)) is not None:
                status.alive = True
            else:
                votes[loc] = CellStatus(count=0, alive=True)
            board.for_each_neighbor(loc.x, loc.y, vote)

        self.generation += 1
        if self.on_step is not None:
            self.on_step(self.generation, votes)

        # The buffer is complete at this point; board mutations below can no
        # longer affect any count.
        changed = False
        births = deaths = 0
        for loc, status in votes.items():
            if status.alive and (status.count < 2 or status.count > 3):
                board.kill(loc.x, loc.y)
                deaths += 1
                changed = True
            elif not status.alive and status.count == 3:
                board.populate(loc.x, loc.y)
                births += 1
                changed = True
        log.debug(
            "Generation %d: %d births, %d deaths, %d live cells",
            self.generation,
            births,
            deaths,
            len(board),
        )
        return changed

    def generations(self, board: Board, max_steps: int) -> Iterator[int]:
        """
        Step ``board`` up to ``max_steps`` times, yielding the generation
        number after each step.  Stops early after the first step that changes
        nothing.
        """
        for _ in range(max_steps):
            changed = self.step(board)
            yield self.generation
            if not changed:
                log.info("Board stable after generation %d", self.generation)
                return

    def run(self, board: Board, max_steps: int) -> int:
        """
        Step ``board`` up to ``max_steps`` times, stopping early once it is
        stable.  Returns the number of steps performed.
        """
        steps = 0
        for _ in self.generations(board, max_steps):
            steps += 1
        return steps

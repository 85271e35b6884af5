from __future__ import annotations
from types import GeneratorType
import pytest
from sparselife.board import INT64_MAX, INT64_MIN, Board, Coordinate
from test_helpers import make_board


def collect_neighbors(board: Board, x: int, y: int) -> list[Coordinate]:
    seen: list[Coordinate] = []
    board.for_each_neighbor(x, y, lambda nx, ny: seen.append(Coordinate(nx, ny)))
    return seen


def test_coordinate() -> None:
    c = Coordinate(3, -4)
    assert c == (3, -4)
    assert c.x == 3
    assert c.y == -4
    assert str(c) == "3 -4"
    assert hash(c) == hash(Coordinate(3, -4))
    assert len({c, Coordinate(3, -4), Coordinate(-4, 3)}) == 2


def test_default_bounds() -> None:
    board = Board()
    assert board.min_bounds == (INT64_MIN, INT64_MIN)
    assert board.max_bounds == (INT64_MAX, INT64_MAX)
    assert board.occupied_bounds is None
    assert len(board) == 0


def test_empty_legal_range() -> None:
    with pytest.raises(ValueError):
        Board(min_x=5, max_x=4)


def test_populate() -> None:
    board = Board()
    board.populate(1, 2)
    board.populate(1, 2)
    assert board.cells == {(1, 2)}
    assert (1, 2) in board
    assert len(board) == 1
    assert board.occupied_bounds == ((1, 2), (1, 2))
    board.populate(-3, 7)
    assert board.occupied_bounds == ((-3, 2), (1, 7))
    assert sorted(board) == [(-3, 7), (1, 2)]


def test_populate_outside_legal_range() -> None:
    board = Board(min_x=0, min_y=0, max_x=9, max_y=9)
    board.populate(20, -5)
    assert (20, -5) in board
    assert not board.in_range(20, -5)
    assert board.occupied_bounds == ((20, -5), (20, -5))


def test_kill_does_not_shrink() -> None:
    board = make_board([(0, 0), (5, 5)])
    board.kill(5, 5)
    board.kill(100, 100)
    assert board.cells == {(0, 0)}
    assert board.occupied_bounds == ((0, 0), (5, 5))
    board.tighten()
    assert board.occupied_bounds == ((0, 0), (0, 0))
    board.kill(0, 0)
    board.tighten()
    assert board.occupied_bounds is None


def test_initial_cells() -> None:
    board = Board(cells={Coordinate(2, 3), Coordinate(-1, 0)})
    assert board.occupied_bounds == ((-1, 0), (2, 3))


def test_for_each_neighbor_interior() -> None:
    board = Board()
    seen = collect_neighbors(board, 0, 0)
    assert len(seen) == 8
    assert set(seen) == {
        (-1, -1),
        (-1, 0),
        (-1, 1),
        (0, -1),
        (0, 1),
        (1, -1),
        (1, 0),
        (1, 1),
    }
    nbrs = board.neighbors(0, 0)
    assert isinstance(nbrs, GeneratorType)
    assert list(nbrs) == seen


@pytest.mark.parametrize(
    "x,y,expected",
    [
        (INT64_MIN, INT64_MIN, 3),
        (INT64_MAX, INT64_MAX, 3),
        (INT64_MIN, INT64_MAX, 3),
        (INT64_MAX, INT64_MIN, 3),
        (INT64_MIN, 0, 5),
        (INT64_MAX, 0, 5),
        (0, INT64_MIN, 5),
        (0, INT64_MAX, 5),
    ],
)
def test_for_each_neighbor_extremes(x: int, y: int, expected: int) -> None:
    board = Board()
    seen = collect_neighbors(board, x, y)
    assert len(seen) == expected
    assert len(set(seen)) == expected
    for c in seen:
        assert board.in_range(c.x, c.y)
        assert max(abs(c.x - x), abs(c.y - y)) == 1


def test_for_each_neighbor_custom_bounds() -> None:
    board = Board(min_x=0, min_y=0, max_x=2, max_y=0)
    assert set(collect_neighbors(board, 0, 0)) == {(1, 0)}
    assert set(collect_neighbors(board, 1, 0)) == {(0, 0), (2, 0)}


def test_initial_cells_are_copied() -> None:
    start = {Coordinate(0, 0)}
    board = Board(cells=start)
    board.populate(1, 1)
    board.kill(0, 0)
    assert start == {(0, 0)}
    assert board.cells == {(1, 1)}


def test_initial_cells_from_tuples() -> None:
    board = Board(cells={(4, 5), (-1, 2)})  # type: ignore[arg-type]
    assert board.cells == {(4, 5), (-1, 2)}
    assert all(isinstance(c, Coordinate) for c in board)
    assert board.occupied_bounds == ((-1, 2), (4, 5))

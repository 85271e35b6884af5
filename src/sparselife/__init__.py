"""
Sparse Conway's Game of Life

``sparselife`` runs Conway's Game of Life on an effectively unbounded integer
plane.  Boards are stored as sets of live cells, and each generation only
examines live cells and their neighbors, so patterns can sit anywhere in the
signed 64-bit coordinate space.  Boards are read & written in the Life 1.06
text format.
"""

from importlib.metadata import version
from .board import Board, Coordinate
from .simulator import CellStatus, Simulator

__version__ = version("sparselife")
__license__ = "MIT"

__all__ = ["Board", "CellStatus", "Coordinate", "Simulator"]

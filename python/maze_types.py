"""
Shared type definitions for the maze solver.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = ["Cell", "Direction", "Coord", "Maze", "Solution"]


class Cell(Enum):
    """A maze cell. The value is the symbol used in maze text."""

    PATH = "P"  # Traversable
    WALL = "W"  # Blocked


class Direction(Enum):
    """Cardinal direction, in neighbor-expansion order."""

    N = (-1, 0)  # Up (decreasing row)
    S = (1, 0)  # Down (increasing row)
    W = (0, -1)  # Left (decreasing col)
    E = (0, 1)  # Right (increasing col)

    @property
    def delta(self) -> tuple[int, int]:
        return self.value


Coord = tuple[int, int]


# =============================================================================
# Maze Definition
# =============================================================================


@dataclass(frozen=True)
class Maze:
    """
    A validated maze: name, rectangular cell grid, start and end.

    Instances are built by the parser, which guarantees that the grid is
    non-empty and rectangular and that start and end are in-bounds PATH cells.
    """

    name: str
    cells: tuple[tuple[Cell, ...], ...]
    start: Coord
    end: Coord

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def in_bounds(self, coord: Coord) -> bool:
        row, col = coord
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_open(self, coord: Coord) -> bool:
        """True if coord is inside the grid and traversable."""
        return self.in_bounds(coord) and self.cells[coord[0]][coord[1]] is Cell.PATH

    def render_description(self) -> str:
        """Name, start, end and the grid rows, in maze text form."""
        lines = [
            self.name,
            f"Start: {self.start[0]}-{self.start[1]}",
            f"End: {self.end[0]}-{self.end[1]}",
        ]
        lines.extend(",".join(cell.value for cell in row) for row in self.cells)
        return "".join(line + "\n" for line in lines)


# =============================================================================
# Search Result
# =============================================================================


@dataclass(frozen=True)
class Solution:
    """
    Outcome of one search over a maze.

    ``path`` runs from start to end inclusive. An empty path means the search
    completed and no route exists; that is a valid outcome, not an error.
    """

    maze: Maze
    path: tuple[Coord, ...]

    @property
    def found(self) -> bool:
        return len(self.path) > 0

    @property
    def moves(self) -> int:
        # Counts coordinates, endpoints included
        return len(self.path)

    def render_path_summary(self) -> str:
        """
        Render the solution in the summary format:

            <maze name>
            Moves: <N>
            Start
            <row>-<col>
            ...
            End
        """
        lines = [self.maze.name, f"Moves: {self.moves}", "Start"]
        lines.extend(f"{row}-{col}" for row, col in self.path)
        lines.append("End")
        return "".join(line + "\n" for line in lines)

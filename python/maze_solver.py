"""
Breadth-first shortest-path search over a Maze.

find_shortest_path() is the pure search; MazeSolver wraps it with the
load -> solve -> render lifecycle and the state checks that go with it.
Neighbors are expanded in Direction order (N, S, W, E), which fixes which of
several equal-length paths is returned.
"""

from __future__ import annotations

import logging
from collections import deque
from enum import Enum
from pathlib import Path

from maze_errors import MazeStateError
from maze_parser import load_maze_file, parse_maze
from maze_types import Coord, Direction, Maze, Solution

__all__ = ["find_shortest_path", "reconstruct_path", "SolverState", "MazeSolver"]

logger = logging.getLogger(__name__)

Predecessors = list[list[Coord | None]]


def find_shortest_path(maze: Maze) -> Solution:
    """
    Find the shortest start -> end path with breadth-first search.

    Cells are marked visited when enqueued, so each cell enters the frontier
    at most once. The search stops as soon as ``end`` is dequeued.

    Args:
        maze: A validated maze

    Returns:
        Solution whose path includes both endpoints, or an empty path if
        ``end`` is unreachable
    """
    rows, cols = maze.rows, maze.cols
    visited = [[False] * cols for _ in range(rows)]
    predecessors: Predecessors = [[None] * cols for _ in range(rows)]

    frontier: deque[Coord] = deque([maze.start])
    visited[maze.start[0]][maze.start[1]] = True
    explored = 0
    found = False

    while frontier:
        current = frontier.popleft()
        explored += 1
        if current == maze.end:
            found = True
            break

        row, col = current
        for direction in Direction:
            dr, dc = direction.delta
            neighbor = (row + dr, col + dc)
            if maze.is_open(neighbor) and not visited[neighbor[0]][neighbor[1]]:
                visited[neighbor[0]][neighbor[1]] = True
                predecessors[neighbor[0]][neighbor[1]] = current
                frontier.append(neighbor)

    if not found:
        logger.info("maze %r: no path (explored %d cells)", maze.name, explored)
        return Solution(maze, ())

    path = reconstruct_path(predecessors, maze.start, maze.end)
    logger.info("maze %r: path of %d cells (explored %d cells)", maze.name, len(path), explored)
    return Solution(maze, path)


def reconstruct_path(predecessors: Predecessors, start: Coord, end: Coord) -> tuple[Coord, ...]:
    """Follow predecessor links back from end to start; return the path start -> end."""
    path = [end]
    at = end
    while at != start:
        prev = predecessors[at[0]][at[1]]
        if prev is None:
            raise ValueError(f"No predecessor chain from {end} back to {start}")
        path.append(prev)
        at = prev
    path.reverse()
    return tuple(path)


class SolverState(Enum):
    """Lifecycle of a MazeSolver."""

    EMPTY = "empty"  # Nothing loaded
    LOADED = "loaded"  # Maze loaded, not yet solved
    SOLVED = "solved"  # Search has run (path may be empty)


class MazeSolver:
    """
    Load a maze, solve it, and render the result.

    A solver holds at most one maze and its latest solution. Loading a new
    maze discards the previous solution; solving again replaces it. A single
    solver is not meant to be shared between threads.

    Usage:
        solver = MazeSolver()
        solver.load_text(text)
        solver.solve()
        print(solver.render())
    """

    def __init__(self) -> None:
        self._maze: Maze | None = None
        self._solution: Solution | None = None

    @property
    def state(self) -> SolverState:
        if self._maze is None:
            return SolverState.EMPTY
        if self._solution is None:
            return SolverState.LOADED
        return SolverState.SOLVED

    @property
    def maze(self) -> Maze | None:
        return self._maze

    @property
    def solution(self) -> Solution | None:
        return self._solution

    def load_maze(self, maze: Maze) -> Maze:
        self._maze = maze
        self._solution = None
        return maze

    def load_text(self, text: str) -> Maze:
        """Parse and load maze text. On validation failure the solver is unchanged."""
        return self.load_maze(parse_maze(text))

    def load_file(self, file_path: Path | str) -> Maze:
        return self.load_maze(load_maze_file(file_path))

    def solve(self) -> Solution:
        if self._maze is None:
            raise MazeStateError("Maze has not been loaded")
        self._solution = find_shortest_path(self._maze)
        return self._solution

    def render(self) -> str:
        """Render the latest solution summary. A solution with no path renders with zero moves."""
        if self._solution is None:
            raise MazeStateError("Maze has not been solved yet")
        return self._solution.render_path_summary()

    def write_solution(self, file_path: Path | str) -> None:
        text = self.render()
        Path(file_path).write_text(text, encoding="utf-8")
        logger.debug("wrote solution to %s", file_path)

"""
ASCII rendering for mazes.

Draws the cell grid as one character per cell, with an optional route overlaid
and start/end marked. Colors come from simple_chalk and can be switched off
for plain-text output.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable

import simple_chalk as chalk  # type: ignore[import-untyped]

from maze_types import Cell, Coord, Maze

__all__ = ["RenderStyle", "render_maze"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderStyle:
    """Glyphs and coloring used by render_maze."""

    wall: str = "#"
    open: str = "."
    route: str = "*"
    start: str = "S"
    end: str = "E"
    color: bool = True


def _paint(color_fn: Callable[[str], str], text: str, enabled: bool) -> str:
    return color_fn(text) if enabled else text


def render_maze(
    maze: Maze,
    path: Iterable[Coord] = (),
    style: RenderStyle = RenderStyle(),
) -> str:
    """
    Render a maze to an ASCII string.

    Args:
        maze: The maze to draw
        path: Cells to mark as the route (typically Solution.path)
        style: Glyphs and color switch

    Returns:
        One line per grid row, no trailing newline
    """
    wall = _paint(chalk.blue, style.wall, style.color)
    route = _paint(chalk.yellow, style.route, style.color)

    # Build buffer
    buffer: list[list[str]] = [
        [wall if cell is Cell.WALL else style.open for cell in row] for row in maze.cells
    ]

    route_cells = 0
    for row, col in path:
        buffer[row][col] = route
        route_cells += 1

    # Endpoints drawn last so they stay visible over the route
    buffer[maze.start[0]][maze.start[1]] = _paint(chalk.greenBright, style.start, style.color)
    buffer[maze.end[0]][maze.end[1]] = _paint(chalk.redBright, style.end, style.color)

    logger.debug(
        "render_maze: %dx%d, route=%d cells, color=%s",
        maze.rows,
        maze.cols,
        route_cells,
        style.color,
    )
    return "\n".join("".join(row) for row in buffer)

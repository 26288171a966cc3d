"""
Command-line driver: read a maze file, solve it, print or write the result.

    maze-solver solve maze.txt [--output out.txt] [--show] [--no-color] [--verbose]
    maze-solver show maze.txt
"""

import logging
import typing as t
from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ascii_render import RenderStyle, render_maze
from maze_errors import MazeValidationError
from maze_solver import MazeSolver
from maze_types import Maze, Solution

app = typer.Typer(add_completion=False)
console = Console()
err_console = Console(stderr=True)

MazeFile = t.Annotated[
    Path,
    typer.Argument(exists=True, dir_okay=False, readable=True, help="Maze description file"),
]
NoColor = t.Annotated[bool, typer.Option("--no-color", help="Plain ASCII grid")]
Verbose = t.Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")]


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


def _load(solver: MazeSolver, maze_file: Path) -> Maze:
    try:
        return solver.load_file(maze_file)
    except MazeValidationError as e:
        err_console.print(
            f"Invalid maze ({e.kind.value}): {maze_file}",
            style="bold red",
            markup=False,
            soft_wrap=True,
        )
        err_console.print(str(e), markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(code=1)


def _grid_panel(maze: Maze, solution: Solution | None, color: bool) -> Panel:
    path = solution.path if solution is not None else ()
    grid = Text.from_ansi(render_maze(maze, path, RenderStyle(color=color)))
    if solution is None:
        subtitle = f"{maze.rows}x{maze.cols}"
    elif solution.found:
        subtitle = f"{solution.moves} moves"
    else:
        subtitle = "no path"
    return Panel(grid, title=Text(maze.name), subtitle=subtitle, expand=False)


@app.command()
def solve(
    maze_file: MazeFile,
    output: t.Annotated[
        t.Optional[Path], typer.Option("--output", "-o", help="Write the summary here")
    ] = None,
    show: t.Annotated[bool, typer.Option("--show", help="Also draw the grid and route")] = False,
    no_color: NoColor = False,
    verbose: Verbose = False,
):
    """Solve MAZE_FILE and print (or write) the path summary."""
    _configure_logging(verbose)
    solver = MazeSolver()
    maze = _load(solver, maze_file)
    solution = solver.solve()

    if output is not None:
        try:
            solver.write_solution(output)
        except OSError as e:
            err_console.print(
                f"Cannot write solution to {output}: {e.strerror or e}",
                style="bold red",
                markup=False,
                soft_wrap=True,
            )
            raise typer.Exit(code=1)
        console.print(f"Wrote solution to {output}", markup=False, highlight=False, soft_wrap=True)
    else:
        typer.echo(solver.render(), nl=False)

    if show:
        console.print(_grid_panel(maze, solution, color=not no_color))


@app.command()
def show(
    maze_file: MazeFile,
    no_color: NoColor = False,
    verbose: Verbose = False,
):
    """Print the parsed description of MAZE_FILE and draw its grid."""
    _configure_logging(verbose)
    solver = MazeSolver()
    maze = _load(solver, maze_file)
    typer.echo(maze.render_description(), nl=False)
    console.print(_grid_panel(maze, None, color=not no_color))


if __name__ == "__main__":
    app()

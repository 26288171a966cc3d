"""
Maze text parsing and validation.

Format:
    <maze name>
    <label>:<start_row>-<start_col>
    <label>:<end_row>-<end_col>
    <cell>,<cell>,...,<cell>       (one line per grid row)

Cells are P (path) or W (wall). Parsing is fail-fast: the first rule violated
raises MazeValidationError and no Maze is produced. Rules are checked in this
order: name, start line, end line, grid rows (column count, then symbols),
empty grid, bounds, traversability.
"""

from __future__ import annotations

import logging
from pathlib import Path

from maze_errors import MazeValidationError, ValidationErrorKind
from maze_types import Cell, Coord, Maze

__all__ = ["parse_maze", "load_maze_file", "validate_maze_text"]

logger = logging.getLogger(__name__)

CELL_DELIMITER = ","
_SYMBOLS = {cell.value: cell for cell in Cell}


def _fail(
    kind: ValidationErrorKind,
    message: str,
    line_number: int | None = None,
    line: str | None = None,
) -> MazeValidationError:
    logger.debug("maze rejected: %s (line %s)", kind.value, line_number)
    return MazeValidationError(kind, message, line_number, line)


def _parse_point(line: str | None, line_number: int, label: str) -> Coord:
    """Parse a ``<label>:<row>-<col>`` line. ``label`` is "Start" or "End"."""
    malformed = (
        ValidationErrorKind.MALFORMED_START
        if label == "Start"
        else ValidationErrorKind.MALFORMED_END
    )
    if line is None:
        raise _fail(malformed, f"Maze must have a {label.lower()} point line", line_number)

    parts = line.split(":")
    if len(parts) != 2:
        raise _fail(
            malformed,
            f"{label} line is improperly formatted\n"
            f"  Expected format: '<label>:<row>-<col>'",
            line_number,
            line,
        )

    coords = parts[1].strip().split("-")
    if len(coords) != 2:
        raise _fail(
            malformed,
            f"{label} coordinates are improperly formatted\n"
            f"  Expected exactly one '-' between row and column",
            line_number,
            line,
        )

    values: list[int] = []
    for part in coords:
        part = part.strip()
        try:
            if not (part.isascii() and part.isdecimal()):
                raise ValueError(part)
            values.append(int(part))
        except ValueError as e:
            shown = part if len(part) <= 20 else part[:20] + "..."
            raise _fail(
                ValidationErrorKind.NON_INTEGER_COORDINATE,
                f"{label} coordinates must be integers, got '{shown}'",
                line_number,
                line,
            ) from e

    return (values[0], values[1])


def _parse_row(line: str, line_number: int, expected_cols: int | None) -> tuple[Cell, ...]:
    tokens = line.split(CELL_DELIMITER)

    # Column count is checked before any symbol in the row
    if expected_cols is not None and len(tokens) != expected_cols:
        raise _fail(
            ValidationErrorKind.NON_RECTANGULAR_GRID,
            f"Maze is not rectangular\n"
            f"  Expected: {expected_cols} columns (from first grid row)\n"
            f"  Found: {len(tokens)} columns",
            line_number,
            line,
        )

    cells: list[Cell] = []
    for col_idx, token in enumerate(tokens):
        cell = _SYMBOLS.get(token.strip())
        if cell is None:
            raise _fail(
                ValidationErrorKind.INVALID_CELL_SYMBOL,
                f"Invalid cell symbol '{token}' at column {col_idx}\n"
                f"  Valid symbols: {', '.join(sorted(_SYMBOLS))}",
                line_number,
                line,
            )
        cells.append(cell)
    return tuple(cells)


def parse_maze(text: str) -> Maze:
    """
    Parse and validate maze text.

    Args:
        text: Full maze description (name, start, end, grid rows)

    Returns:
        A validated Maze

    Raises:
        MazeValidationError: On the first violated rule, tagged with its kind
    """
    lines = text.splitlines()
    # A trailing newline (or several) does not add grid rows
    while lines and not lines[-1].strip():
        lines.pop()

    name = lines[0].strip() if lines else ""
    if not name:
        raise _fail(
            ValidationErrorKind.MISSING_NAME,
            "Maze must have a name",
            1,
            lines[0] if lines else None,
        )

    start = _parse_point(lines[1] if len(lines) > 1 else None, 2, "Start")
    end = _parse_point(lines[2] if len(lines) > 2 else None, 3, "End")

    rows: list[tuple[Cell, ...]] = []
    expected_cols: int | None = None
    for line_number, line in enumerate(lines[3:], start=4):
        row = _parse_row(line, line_number, expected_cols)
        if expected_cols is None:
            expected_cols = len(row)
        rows.append(row)

    if not rows:
        raise _fail(ValidationErrorKind.EMPTY_GRID, "Maze grid cannot be empty")

    _check_endpoints(rows, start, end, lines)

    maze = Maze(name, tuple(rows), start, end)
    logger.info("parsed maze %r: %dx%d, start=%s, end=%s", name, maze.rows, maze.cols, start, end)
    return maze


def _check_endpoints(
    rows: list[tuple[Cell, ...]], start: Coord, end: Coord, lines: list[str]
) -> None:
    """Both endpoints must be inside the grid (checked first) and on PATH cells."""
    n_rows, n_cols = len(rows), len(rows[0])

    def in_bounds(point: Coord) -> bool:
        return 0 <= point[0] < n_rows and 0 <= point[1] < n_cols

    if not in_bounds(start):
        raise _fail(
            ValidationErrorKind.START_OUT_OF_BOUNDS,
            f"Start point {start[0]}-{start[1]} is outside the {n_rows}x{n_cols} grid",
            2,
            lines[1],
        )
    if not in_bounds(end):
        raise _fail(
            ValidationErrorKind.END_OUT_OF_BOUNDS,
            f"End point {end[0]}-{end[1]} is outside the {n_rows}x{n_cols} grid",
            3,
            lines[2],
        )
    if rows[start[0]][start[1]] is not Cell.PATH:
        raise _fail(
            ValidationErrorKind.START_NOT_ON_PATH,
            f"Start point {start[0]}-{start[1]} is not on a path",
            2,
            lines[1],
        )
    if rows[end[0]][end[1]] is not Cell.PATH:
        raise _fail(
            ValidationErrorKind.END_NOT_ON_PATH,
            f"End point {end[0]}-{end[1]} is not on a path",
            3,
            lines[2],
        )


def load_maze_file(file_path: Path | str) -> Maze:
    """
    Read a maze file (UTF-8) and parse it.

    Raises:
        FileNotFoundError: If the file doesn't exist
        MazeValidationError: If the contents are invalid
    """
    file_path = Path(file_path)
    logger.debug("loading maze from %s", file_path)
    return parse_maze(file_path.read_text(encoding="utf-8"))


def validate_maze_text(text: str) -> tuple[bool, str | None]:
    """
    Validate maze text without raising.

    Returns:
        Tuple of (is_valid, error_message); error_message is None if valid
    """
    try:
        parse_maze(text)
        return True, None
    except MazeValidationError as e:
        return False, str(e)

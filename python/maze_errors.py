"""
Error types for maze parsing and solving.

Validation failures share one exception type tagged with a ValidationErrorKind;
callers match on ``error.kind`` rather than on the exception class.
"""

from __future__ import annotations

from enum import Enum

__all__ = ["ValidationErrorKind", "MazeValidationError", "MazeStateError"]


class ValidationErrorKind(Enum):
    """Reason a maze description was rejected."""

    MISSING_NAME = "missing_name"
    MALFORMED_START = "malformed_start"
    MALFORMED_END = "malformed_end"
    NON_INTEGER_COORDINATE = "non_integer_coordinate"
    NON_RECTANGULAR_GRID = "non_rectangular_grid"
    INVALID_CELL_SYMBOL = "invalid_cell_symbol"
    EMPTY_GRID = "empty_grid"
    START_OUT_OF_BOUNDS = "start_out_of_bounds"
    END_OUT_OF_BOUNDS = "end_out_of_bounds"
    START_NOT_ON_PATH = "start_not_on_path"
    END_NOT_ON_PATH = "end_not_on_path"


class MazeValidationError(ValueError):
    """Raised when maze text fails validation. Parsing stops at the first failure."""

    def __init__(
        self,
        kind: ValidationErrorKind,
        message: str,
        line_number: int | None = None,
        line: str | None = None,
    ) -> None:
        self.kind = kind
        self.line_number = line_number
        self.line = line
        details = message
        if line_number is not None:
            details += f"\n  Line {line_number}: \"{line if line is not None else ''}\""
        super().__init__(details)


class MazeStateError(RuntimeError):
    """Raised when the solver API is used out of order (solve before load, render before solve)."""

    pass

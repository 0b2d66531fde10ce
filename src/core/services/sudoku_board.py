from __future__ import annotations

from typing import Any

from core.domain.errors import PuzzleExtractionError
from core.domain.models import BOARD_SIZE, Board

CELL_COUNT = BOARD_SIZE * BOARD_SIZE


def decode_board(value: Any, label: str) -> Board:
    """Convert a flat 81-entry JSON array into 9 rows of 9 digits.

    Assumes row-major order, which is how the source serializes its boards.
    `label` ("puzzle" or "solution") is only used in error messages.
    """

    if not isinstance(value, list):
        raise PuzzleExtractionError(f"Sudoku {label} data is not an array")
    if len(value) != CELL_COUNT:
        raise PuzzleExtractionError(
            f"Sudoku {label} expected {CELL_COUNT} entries but found {len(value)}"
        )

    flat: list[int] = []
    for cell in value:
        # bool is an int subclass; JSON true/false are not digits.
        if isinstance(cell, bool) or not isinstance(cell, int):
            raise PuzzleExtractionError(f"Encountered non-numeric value in {label}")
        if not 0 <= cell <= 9:
            raise PuzzleExtractionError(f"Invalid Sudoku digit {cell} in {label}")
        flat.append(cell)

    return [flat[i:i + BOARD_SIZE] for i in range(0, CELL_COUNT, BOARD_SIZE)]

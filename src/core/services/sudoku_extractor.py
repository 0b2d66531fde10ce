"""NYT hard Sudoku extraction from the embedded `window.gameData` payload.

Expected payload shape (dictated by the page, not by us):

    {
      "displayDate": "October 16, 2026",
      "hard": {
        "difficulty": "Hard",
        "print_date": "2026-10-16",
        "puzzle_data": {"puzzle": [81 ints], "solution": [81 ints]}
      }
    }

Each missing piece fails with its own message so a log line says exactly
which expectation the page broke.
"""

from __future__ import annotations

import json
from typing import Any

from core.domain.errors import PuzzleExtractionError
from core.domain.models import SudokuResult
from core.services.game_data import locate_game_data_blob
from core.services.sudoku_board import decode_board


def _field(node: Any, key: str) -> Any:
    if isinstance(node, dict):
        return node.get(key)
    return None


def _string_or(node: Any, key: str, default: str) -> str:
    value = _field(node, key)
    return value if isinstance(value, str) else default


def extract_sudoku_puzzle(html: str) -> SudokuResult:
    """Build a `SudokuResult` from the page HTML; raises `PuzzleExtractionError`."""

    blob = locate_game_data_blob(html)
    try:
        root = json.loads(blob)
    except (ValueError, RecursionError) as exc:
        raise PuzzleExtractionError(f"Failed to parse gameData JSON: {exc}") from exc

    display_date = _string_or(root, "displayDate", "")

    hard = _field(root, "hard")
    if hard is None:
        raise PuzzleExtractionError("Missing hard puzzle block")
    difficulty = _string_or(hard, "difficulty", "Hard")
    print_date = _string_or(hard, "print_date", display_date)

    puzzle_data = _field(hard, "puzzle_data")
    if puzzle_data is None:
        raise PuzzleExtractionError("Missing puzzle_data block")

    raw_puzzle = _field(puzzle_data, "puzzle")
    if raw_puzzle is None:
        raise PuzzleExtractionError("Missing puzzle array")
    puzzle = decode_board(raw_puzzle, "puzzle")

    raw_solution = _field(puzzle_data, "solution")
    if raw_solution is None:
        raise PuzzleExtractionError("Missing solution array")
    solution = decode_board(raw_solution, "solution")

    return SudokuResult(
        display_date=display_date,
        print_date=print_date,
        difficulty=difficulty,
        puzzle=puzzle,
        solution=solution,
    )

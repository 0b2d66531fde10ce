"""Shared fixtures: synthetic source pages and a mock-transport factory."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from core.config import AppSettings

PUZZLE = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]

SOLUTION = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]


def flatten(board: list[list[int]]) -> list[int]:
    return [cell for row in board for cell in row]


def wordle_row(date_cell: str, puzzle_cell: str, answer_cell: str) -> str:
    return f"<tr><td>{date_cell}</td><td>{puzzle_cell}</td><td>{answer_cell}</td></tr>"


def wordle_page(*rows: str) -> str:
    body = "\n".join(rows)
    return (
        "<html><body><h1>Wordle Answers</h1>"
        "<table><thead><tr><th>Date</th><th>Puzzle</th><th>Answer</th></tr></thead>"
        f"<tbody>{body}</tbody></table></body></html>"
    )


def game_data() -> dict[str, Any]:
    return {
        "displayDate": "October 16, 2026",
        "hard": {
            "difficulty": "Hard",
            "print_date": "2026-10-16",
            "puzzle_data": {
                "puzzle": flatten(PUZZLE),
                "solution": flatten(SOLUTION),
            },
        },
    }


def sudoku_page(data: Any) -> str:
    payload = data if isinstance(data, str) else json.dumps(data)
    return (
        "<html><head><script src=\"/vendor.js\"></script>"
        f"<script>window.gameData = {payload};</script>"
        "<script>window.other = {};</script></head><body></body></html>"
    )


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        wordle_url="https://wordle.test/answers/",
        sudoku_url="https://sudoku.test/hard",
        http_timeout_seconds=5.0,
    )


@pytest.fixture
def mock_transport() -> Callable[..., httpx.MockTransport]:
    """Build a transport that answers every request with `status` and `text`."""

    def factory(*, status: int = 200, text: str = "", seen: list[httpx.Request] | None = None) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            if seen is not None:
                seen.append(request)
            return httpx.Response(status, text=text)

        return httpx.MockTransport(handler)

    return factory

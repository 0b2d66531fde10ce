from __future__ import annotations

import pytest
from pydantic import ValidationError

from conftest import PUZZLE, SOLUTION
from core.domain.models import SudokuResult, WordleResult


class TestWordleResult:
    def test_valid(self):
        result = WordleResult(date="2026-10-16", word="CRANE", puzzle="Wordle #1580")
        assert result.model_dump() == {"date": "2026-10-16", "word": "CRANE", "puzzle": "Wordle #1580"}

    @pytest.mark.parametrize("word", ["crane", "CRANES", "CR4NE", ""])
    def test_word_shape_is_enforced(self, word):
        with pytest.raises(ValidationError):
            WordleResult(date="2026-10-16", word=word, puzzle="Wordle")

    def test_frozen(self):
        result = WordleResult(date="2026-10-16", word="CRANE", puzzle="Wordle")
        with pytest.raises(ValidationError):
            result.word = "SLATE"


class TestSudokuResult:
    def _make(self, **overrides):
        fields = {
            "display_date": "October 16, 2026",
            "print_date": "2026-10-16",
            "difficulty": "Hard",
            "puzzle": PUZZLE,
            "solution": SOLUTION,
        }
        fields.update(overrides)
        return SudokuResult(**fields)

    def test_dump_uses_wire_names(self):
        payload = self._make().model_dump(mode="json", by_alias=True)
        assert payload["displayDate"] == "October 16, 2026"
        assert payload["printDate"] == "2026-10-16"
        assert payload["puzzle"] == PUZZLE

    def test_accepts_wire_names(self):
        result = SudokuResult.model_validate(
            {"displayDate": "d", "printDate": "p", "puzzle": PUZZLE, "solution": SOLUTION}
        )
        assert result.display_date == "d"
        assert result.difficulty == "Hard"

    @pytest.mark.parametrize(
        "board",
        [
            PUZZLE[:8],
            [row[:8] for row in PUZZLE],
            [[10] * 9] + PUZZLE[1:],
        ],
    )
    def test_board_shape_is_enforced(self, board):
        with pytest.raises(ValidationError):
            self._make(puzzle=board)

    def test_puzzle_key(self):
        key = self._make().puzzle_key
        assert key.split("|")[0] == "530070000"
        assert key.count("|") == 8

    def test_headline_date_falls_back_to_print_date(self):
        assert self._make().headline_date == "October 16, 2026"
        assert self._make(display_date="").headline_date == "2026-10-16"

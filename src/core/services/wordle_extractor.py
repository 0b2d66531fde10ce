"""Wordle answer extraction from the Wordfinder answers table.

The page lists one row per puzzle: date, puzzle number, answer. The answer
is obfuscated by wrapping the word in an element with an inline
`display:none` style, which the browser hides but the parser still reads.

Coupling worth knowing:
- The table is assumed to be ordered newest first, so the first row with a
  readable answer wins. If the site ever reorders it, this returns a stale
  answer instead of failing.
- `date` comes from the local clock, not from the date cell. A row that is
  not really today's would still be labelled with today's date.
"""

from __future__ import annotations

import logging
import re
from datetime import date

from bs4 import BeautifulSoup, Tag

from core.domain.errors import PuzzleExtractionError
from core.domain.models import WordleResult
from core.services.label_formatter import format_puzzle_label
from core.services.text_normalizer import collapse_text, extract_hidden_word

logger = logging.getLogger(__name__)

# html5lib builds the tree a browser would: implied <tbody> and closed <td>.
ROW_SELECTOR = "table tbody tr"

_HIDDEN_STYLE_RE = re.compile(r"display\s*:\s*none", re.IGNORECASE)


def _hidden_word_in(cell: Tag) -> str | None:
    for candidate in cell.find_all(style=_HIDDEN_STYLE_RE):
        word = extract_hidden_word(candidate)
        if word:
            return word
    return None


def extract_wordle_answer(
    html: str | BeautifulSoup,
    *,
    today: date | None = None,
) -> WordleResult:
    """Return the answer of the first table row that carries a hidden 5-letter word.

    Rows with fewer than three cells are skipped. Raises
    `PuzzleExtractionError` when no row qualifies.
    """

    document = html if isinstance(html, BeautifulSoup) else BeautifulSoup(html, "html5lib")

    for row in document.select(ROW_SELECTOR):
        cells = row.find_all("td")
        date_cell = collapse_text(cells[0]) if len(cells) > 0 else ""
        puzzle_cell = collapse_text(cells[1]) if len(cells) > 1 else ""
        if len(cells) < 3:
            continue

        word = _hidden_word_in(cells[2])
        if word is None:
            continue

        if "today" not in date_cell.lower():
            logger.debug("Wordle row dated %r does not say 'today'; using local date anyway", date_cell)

        current = today or date.today()
        return WordleResult(
            date=current.strftime("%Y-%m-%d"),
            word=word,
            puzzle=format_puzzle_label(puzzle_cell),
        )

    logger.warning("Wordfinder page parsed but no hidden span containing today's answer was found")
    raise PuzzleExtractionError("Could not find Wordle answer on page")

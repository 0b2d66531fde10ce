"""Fuente: NYT Sudoku (dificultad alta).

Implementación:
- Un GET a la página del puzzle.
- El blob `window.gameData` se localiza y valida en el Core.
"""

from __future__ import annotations

import logging

import httpx

from adapters.http_client import fetch_page_text
from core.config import AppSettings
from core.domain.models import SudokuResult
from core.services.sudoku_extractor import extract_sudoku_puzzle

logger = logging.getLogger(__name__)

SOURCE_NAME = "NYT Sudoku"


async def fetch_sudoku_puzzle(
    *,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> SudokuResult:
    settings = settings or AppSettings()
    logger.info("Fetching NYT hard Sudoku puzzle")

    html = await fetch_page_text(
        settings.sudoku_url,
        source=SOURCE_NAME,
        settings=settings,
        transport=transport,
    )
    logger.info("Fetched latest Sudoku puzzle from NYT")
    return extract_sudoku_puzzle(html)

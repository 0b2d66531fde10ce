"""Fuente: Wordfinder (respuesta de Wordle).

Implementación:
- Un GET a la página de respuestas.
- El parseo de la tabla vive en `core.services.wordle_extractor`.
"""

from __future__ import annotations

import logging

import httpx

from adapters.http_client import fetch_page_text
from core.config import AppSettings
from core.domain.models import WordleResult
from core.services.wordle_extractor import extract_wordle_answer

logger = logging.getLogger(__name__)

SOURCE_NAME = "Wordfinder"


async def fetch_wordle_answer(
    *,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> WordleResult:
    settings = settings or AppSettings()
    logger.info("Fetching latest Wordle answer from %s", SOURCE_NAME)

    html = await fetch_page_text(
        settings.wordle_url,
        source=SOURCE_NAME,
        settings=settings,
        transport=transport,
    )
    result = extract_wordle_answer(html)
    logger.info("Fetched %s from %s", result.puzzle, SOURCE_NAME)
    return result

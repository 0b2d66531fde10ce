"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y el mapeo de errores a mensajes legibles.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.

Nota:
- Un cliente nuevo por llamada. No hay pool compartido ni reintentos.
"""

from __future__ import annotations

import logging

import httpx

from core.config import AppSettings
from core.domain.errors import PuzzleExtractionError

logger = logging.getLogger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults de navegador.

    Por qué un builder:
    - Centraliza timeouts/headers para que ambas fuentes se comporten igual.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


async def fetch_page_text(
    url: str,
    *,
    source: str,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """GET único a `url` y devuelve el cuerpo decodificado.

    Cada etapa (cliente, conexión, status, lectura) falla con su propio
    mensaje vía `PuzzleExtractionError`. `source` solo se usa en mensajes.
    """

    settings = settings or AppSettings()
    try:
        client = build_async_client(settings, transport=transport)
    except (TypeError, ValueError) as exc:
        raise PuzzleExtractionError(f"Failed to build HTTP client: {exc}") from exc

    async with client:
        try:
            async with client.stream("GET", url) as response:
                if not response.is_success:
                    status_msg = f"{source} responded with HTTP {response.status_code}"
                    logger.error(status_msg)
                    raise PuzzleExtractionError(status_msg)
                try:
                    await response.aread()
                except httpx.TimeoutException:
                    raise
                except httpx.HTTPError as exc:
                    raise PuzzleExtractionError(f"Failed to read {source} response: {exc}") from exc
                return response.text
        except httpx.TimeoutException as exc:
            raise PuzzleExtractionError(
                f"Timed out fetching {source} page after {settings.http_timeout_seconds:g}s"
            ) from exc
        except httpx.HTTPError as exc:
            raise PuzzleExtractionError(f"Failed to fetch {source} page: {exc}") from exc

"""Localiza el blob `window.gameData` dentro del HTML.

Por qué texto y no DOM:
- El payload es una asignación JS dentro de un `<script>`, no un data island.
  Un parser de HTML solo ve el script como texto opaco.
- Se mantiene aislado para que el matching por marcadores no se mezcle con
  la validación del JSON.
"""

from __future__ import annotations

from core.domain.errors import PuzzleExtractionError

GAME_DATA_MARKER = "window.gameData = "
SCRIPT_TERMINATOR = "</script>"


def locate_game_data_blob(html: str) -> str:
    """Devuelve el texto (presuntamente JSON) asignado a `window.gameData`.

    Usa la primera aparición del marcador y el primer `</script>` posterior.
    Recorta espacios y un único `;` final. No parsea el JSON.
    """

    start = html.find(GAME_DATA_MARKER)
    if start < 0:
        raise PuzzleExtractionError("window.gameData marker not found")

    after_marker = html[start + len(GAME_DATA_MARKER):]
    end = after_marker.find(SCRIPT_TERMINATOR)
    if end < 0:
        raise PuzzleExtractionError("Unable to find </script> following window.gameData")

    raw_block = after_marker[:end].strip()
    if raw_block.endswith(";"):
        raw_block = raw_block[:-1]
    return raw_block.strip()

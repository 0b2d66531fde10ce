"""Exportación JSON de resultados.

Por qué JSON:
- Es el formato que consume el front-end.
- Los alias (`displayDate`, `printDate`) se respetan al serializar.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import SudokuResult, WordleResult


def result_payload(result: WordleResult | SudokuResult) -> dict:
    return result.model_dump(mode="json", by_alias=True)


def export_result_json(*, result: WordleResult | SudokuResult, output_path: Path) -> Path:
    """Exporta un resultado a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(result_payload(result), ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path

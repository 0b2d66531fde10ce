"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP) lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "daily-puzzles"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "daily-puzzles"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "daily-puzzles"
    return Path.home() / ".config" / "daily-puzzles"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="DAILY_PUZZLES_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        min_length=1,
        description="User-Agent de navegador; las fuentes bloquean clientes genéricos.",
    )
    wordle_url: str = Field(
        default="https://wordfinder.yourdictionary.com/wordle/answers/",
        min_length=8,
        description="Página con la tabla de respuestas de Wordle.",
    )
    sudoku_url: str = Field(
        default="https://www.nytimes.com/puzzles/sudoku/hard",
        min_length=8,
        description="Página del Sudoku difícil con el blob `window.gameData`.",
    )
    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Nivel de logging por defecto para la CLI.",
    )

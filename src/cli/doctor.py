"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings, get_user_env_file

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return response.is_success, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc) or type(exc).__name__


async def _check_sources(settings: AppSettings) -> list[tuple[bool, str]]:
    return list(
        await asyncio.gather(
            _check_http(settings.wordle_url, settings),
            _check_http(settings.sudoku_url, settings),
        )
    )


@app.command()
def run() -> None:
    """Show the effective settings and probe both puzzle sources."""

    settings = AppSettings()

    table = Table(title="Daily Puzzles Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    env_file = get_user_env_file()
    table.add_row("User .env", "OK" if env_file.exists() else "OPTIONAL", str(env_file))
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("User-Agent", "OK", settings.user_agent)

    # Connectivity (best-effort)
    (ok_wordle, detail_wordle), (ok_sudoku, detail_sudoku) = asyncio.run(_check_sources(settings))
    table.add_row("Wordfinder", "OK" if ok_wordle else "FAIL", f"{settings.wordle_url} -> {detail_wordle}")
    table.add_row("NYT Sudoku", "OK" if ok_sudoku else "FAIL", f"{settings.sudoku_url} -> {detail_sudoku}")

    _console.print(table)

    if not (ok_wordle and ok_sudoku):
        _console.print(
            "\n[yellow]Note:[/yellow] Sources that answer with 403 usually need a different "
            "`DAILY_PUZZLES_USER_AGENT`."
        )

"""CLI principal (Typer).

Por qué la CLI es fina:
- Toda la extracción vive en `core`; la red en `adapters`.
- Aquí solo se orquesta, se presenta (Rich) y se traducen errores a exit codes.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import typer
from rich.console import Console

from adapters.json_exporter import export_result_json, result_payload
from adapters.puzzle_sources import fetch_sudoku_puzzle, fetch_wordle_answer
from cli import doctor
from cli.logging_setup import configure_logging
from cli.ui_components import (
    build_board_table,
    build_sudoku_panel,
    build_wordle_panel,
    print_banner,
    render_guess,
)
from core.config import AppSettings
from core.domain.errors import PuzzleExtractionError
from core.domain.models import SudokuResult, WordleResult
from core.services.guess_evaluator import evaluate_guess

app = typer.Typer(no_args_is_help=True, help="Fetch today's Wordle answer and NYT hard Sudoku.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def _fail(message: str) -> typer.Exit:
    _err_console.print(f"[bold red]Error:[/bold red] {message}")
    return typer.Exit(code=1)


def _emit_json(payload: object) -> None:
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True))


def _show_wordle(result: WordleResult) -> None:
    _console.print(build_wordle_panel(result))


def _show_sudoku(result: SudokuResult) -> None:
    _console.print(build_sudoku_panel(result))
    _console.print(build_board_table(result.puzzle, title="Puzzle"))


@app.callback()
def main(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING...). Defaults to DAILY_PUZZLES_LOG_LEVEL.",
    ),
) -> None:
    configure_logging(log_level or AppSettings().log_level)


@app.command()
def wordle(
    json_output: bool = typer.Option(False, "--json", help="Print the result as JSON."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Also write the result to a JSON file."),
    guess: str | None = typer.Option(None, "--guess", help="Score a 5-letter guess against today's answer."),
) -> None:
    """Fetch today's Wordle answer."""

    try:
        result = asyncio.run(fetch_wordle_answer())
    except PuzzleExtractionError as exc:
        raise _fail(str(exc)) from exc

    if output is not None:
        export_result_json(result=result, output_path=output)

    if guess is not None:
        try:
            statuses = evaluate_guess(guess, result.word)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--guess") from exc
        if json_output:
            _emit_json({"guess": guess.upper(), "statuses": [s.value for s in statuses]})
        else:
            _console.print(render_guess(guess, statuses))
        return

    if json_output:
        _emit_json(result_payload(result))
    else:
        _show_wordle(result)


@app.command()
def sudoku(
    json_output: bool = typer.Option(False, "--json", help="Print the result as JSON."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Also write the result to a JSON file."),
) -> None:
    """Fetch today's NYT hard Sudoku with its solution."""

    try:
        result = asyncio.run(fetch_sudoku_puzzle())
    except PuzzleExtractionError as exc:
        raise _fail(str(exc)) from exc

    if output is not None:
        export_result_json(result=result, output_path=output)

    if json_output:
        _emit_json(result_payload(result))
    else:
        _show_sudoku(result)


async def _fetch_both() -> list[object]:
    # Independent pipelines: one failing must not hide the other.
    return list(
        await asyncio.gather(
            fetch_wordle_answer(),
            fetch_sudoku_puzzle(),
            return_exceptions=True,
        )
    )


@app.command()
def today(
    json_output: bool = typer.Option(False, "--json", help="Print both results as JSON."),
) -> None:
    """Fetch both puzzles concurrently."""

    wordle_result, sudoku_result = asyncio.run(_fetch_both())

    failed = False
    payload: dict[str, object] = {}
    for name, outcome in (("wordle", wordle_result), ("sudoku", sudoku_result)):
        if isinstance(outcome, PuzzleExtractionError):
            failed = True
            payload[name] = {"error": str(outcome)}
            if not json_output:
                _err_console.print(f"[bold red]{name}:[/bold red] {outcome}")
        elif isinstance(outcome, BaseException):
            raise outcome
        else:
            payload[name] = result_payload(outcome)

    if json_output:
        _emit_json(payload)
    else:
        print_banner(_console)
        if isinstance(wordle_result, WordleResult):
            _show_wordle(wordle_result)
        if isinstance(sudoku_result, SudokuResult):
            _show_sudoku(sudoku_result)

    if failed:
        raise typer.Exit(code=1)


def run() -> None:
    app()

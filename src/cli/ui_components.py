"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import Board, SudokuResult, WordleResult
from core.services.guess_evaluator import LetterStatus

_STATUS_STYLES: dict[LetterStatus, str] = {
    LetterStatus.CORRECT: "bold white on green",
    LetterStatus.PRESENT: "bold black on yellow",
    LetterStatus.ABSENT: "bold white on grey23",
}


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("Daily Puzzles", style="bold cyan")
    subtitle = Text("Wordle • Sudoku", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_wordle_panel(result: WordleResult) -> Panel:
    body = Text()
    body.append(result.word, style="bold green")
    body.append(f"\n\nFecha: {result.date}", style="dim")
    return Panel(body, title=Text(result.puzzle, style="bold cyan"), border_style="cyan")


def render_guess(guess: str, statuses: list[LetterStatus]) -> Text:
    """Fila de letras coloreadas como en el tablero del juego."""

    text = Text()
    for letter, status in zip(guess.upper(), statuses):
        text.append(f" {letter} ", style=_STATUS_STYLES[status])
        text.append(" ")
    return text


def build_board_table(board: Board, *, title: str) -> Table:
    """Tabla 9x9; las casillas vacías (0) se muestran como `·`."""

    table = Table(title=title, show_header=False, show_lines=False, padding=(0, 1))
    for col in range(9):
        table.add_column(justify="center", style="bold" if col % 3 == 0 else None)
    for row_index, row in enumerate(board):
        cells = [str(cell) if cell else "·" for cell in row]
        table.add_row(*cells, end_section=row_index % 3 == 2 and row_index != 8)
    return table


def build_sudoku_panel(result: SudokuResult) -> Panel:
    body = Text()
    body.append(f"Dificultad: {result.difficulty}\n")
    body.append(f"Fecha: {result.headline_date or '-'}\n")
    body.append(f"Clave: {result.puzzle_key}", style="dim")
    return Panel(body, title=Text("NYT Sudoku", style="bold yellow"), border_style="yellow")

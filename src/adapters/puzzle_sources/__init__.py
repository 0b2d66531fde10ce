"""Fuentes de puzzles diarios.

Por qué un paquete:
- Un módulo por fuente: cada uno hace su GET y delega el parseo al Core.
- No hay interfaz común: las dos rutinas son independientes.
"""

from adapters.puzzle_sources.nyt_sudoku import fetch_sudoku_puzzle
from adapters.puzzle_sources.wordfinder import fetch_wordle_answer

__all__ = [
	"fetch_sudoku_puzzle",
	"fetch_wordle_answer",
]

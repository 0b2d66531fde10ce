"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Los resultados se serializan tal cual para el front-end (JSON).

Nota:
- Estos modelos describen *qué* es un puzzle del día, no *cómo* se obtiene.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

BOARD_SIZE = 9

Board = list[list[int]]


class WordleResult(BaseModel):
    """Respuesta de Wordle del día, normalizada.

    `date` es siempre la fecha local del momento de la extracción, no la
    fecha que muestre la tabla de origen.
    """

    model_config = ConfigDict(frozen=True)

    date: str = Field(
        ...,
        pattern=r"^\d{4}-\d{2}-\d{2}$",
        description="Fecha local (YYYY-MM-DD) en la que se extrajo la respuesta.",
    )
    word: str = Field(
        ...,
        pattern=r"^[A-Z]{5}$",
        description="Palabra solución: 5 letras ASCII en mayúsculas.",
    )
    puzzle: str = Field(
        ...,
        min_length=1,
        description="Etiqueta visible del puzzle (p.ej. 'Wordle #1234').",
    )


class SudokuResult(BaseModel):
    """Sudoku del día con su solución.

    Los nombres de wire (`displayDate`, `printDate`) se conservan como alias
    para que el JSON exportado coincida con lo que espera el front-end.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    display_date: str = Field(
        default="",
        alias="displayDate",
        description="Fecha legible tal como la publica la fuente.",
    )
    print_date: str = Field(
        default="",
        alias="printDate",
        description="Fecha de impresión (YYYY-MM-DD) del puzzle.",
    )
    difficulty: str = Field(
        default="Hard",
        description="Dificultad declarada por la fuente.",
    )
    puzzle: Board = Field(
        ...,
        description="Tablero 9x9; 0 indica casilla vacía.",
    )
    solution: Board = Field(
        ...,
        description="Tablero 9x9 resuelto.",
    )

    @field_validator("puzzle", "solution")
    @classmethod
    def _check_board_shape(cls, value: Board) -> Board:
        if len(value) != BOARD_SIZE:
            raise ValueError(f"board must have {BOARD_SIZE} rows, got {len(value)}")
        for row in value:
            if len(row) != BOARD_SIZE:
                raise ValueError(f"board rows must have {BOARD_SIZE} cells, got {len(row)}")
            for cell in row:
                if not 0 <= cell <= 9:
                    raise ValueError(f"board cell out of range: {cell}")
        return value

    @property
    def puzzle_key(self) -> str:
        """Identidad estable del tablero inicial (filas unidas por `|`)."""

        return "|".join("".join(str(cell) for cell in row) for row in self.puzzle)

    @property
    def headline_date(self) -> str:
        return self.display_date or self.print_date

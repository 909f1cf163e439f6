"""Formato de fechas para el contrato remoto."""

from __future__ import annotations

from typing import Protocol


class _DateLike(Protocol):
    year: int
    month: int
    day: int


def format_date(value: _DateLike) -> str:
    """Renderiza una fecha como `YYYYMMDD` (8 caracteres, sin separadores).

    Acepta `date` y `datetime` (naive o con zona): solo se leen
    `year`, `month` y `day`.
    """

    return f"{value.year:04d}"[-4:] + f"{value.month:02d}" + f"{value.day:02d}"

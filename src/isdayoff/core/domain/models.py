"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta de rangos (mes 1..12, día 1..31) en el borde.
- Modelos inmutables (`frozen`): cada consulta es un valor, no un estado.

Nota:
- Estos modelos describen *qué* se consulta, no *cómo* se envía.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterator, Literal, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from isdayoff.core.domain.day_status import DayStatus


class YearMonthDayQuery(BaseModel):
    """Consulta por año, año+mes o año+mes+día.

    Por qué `day` sin `month` no se valida aquí:
    - La normalización es responsabilidad del cliente; el builder solo
      traduce campos presentes a parámetros.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["ymd"] = "ymd"
    year: int = Field(
        ...,
        ge=1,
        le=9999,
        description="Año consultado.",
    )
    month: int | None = Field(
        default=None,
        ge=1,
        le=12,
        description="Mes (1..12). Ausente => año completo.",
    )
    day: int | None = Field(
        default=None,
        ge=1,
        le=31,
        description="Día del mes. Solo tiene sentido junto con `month`.",
    )


class DateRangeQuery(BaseModel):
    """Consulta por rango inclusivo de fechas.

    `start <= end` se espera pero no se valida: el servicio define qué pasa
    con rangos invertidos.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["range"] = "range"
    start: date = Field(..., description="Primer día del rango (inclusivo).")
    end: date = Field(..., description="Último día del rango (inclusivo).")

    def expected_length(self) -> int:
        return (self.end - self.start).days + 1


QuerySpec = Union[YearMonthDayQuery, DateRangeQuery]


class DayStatusSpan(BaseModel):
    """Secuencia de estados anclada a su primer día.

    Por qué existe:
    - La respuesta del servicio es posicional; este modelo reconstruye la
      fecha de cada posición sin que el llamador haga aritmética de fechas.
    """

    model_config = ConfigDict(frozen=True)

    start: date = Field(..., description="Fecha de la primera posición.")
    statuses: tuple[DayStatus, ...] = Field(
        default_factory=tuple,
        description="Estados en orden ascendente de fecha.",
    )

    def __len__(self) -> int:
        return len(self.statuses)

    @property
    def end(self) -> date:
        return self.start + timedelta(days=max(len(self.statuses) - 1, 0))

    def days(self) -> Iterator[tuple[date, DayStatus]]:
        for offset, status in enumerate(self.statuses):
            yield self.start + timedelta(days=offset), status

    def count(self, status: DayStatus) -> int:
        return sum(1 for s in self.statuses if s == status)

    def dates_with(self, status: DayStatus) -> list[date]:
        return [day for day, s in self.days() if s == status]

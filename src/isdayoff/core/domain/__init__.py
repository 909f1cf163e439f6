"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce HTTP, CLI, ni SDKs: solo conceptos del problema.
"""

from isdayoff.core.domain.day_status import DayStatus
from isdayoff.core.domain.models import DateRangeQuery, DayStatusSpan, QuerySpec, YearMonthDayQuery

__all__ = [
    "DateRangeQuery",
    "DayStatus",
    "DayStatusSpan",
    "QuerySpec",
    "YearMonthDayQuery",
]

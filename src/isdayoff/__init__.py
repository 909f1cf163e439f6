"""Cliente asíncrono del calendario de producción isdayoff.ru."""

from isdayoff._version import __version__
from isdayoff.core.config import AppSettings
from isdayoff.core.dates import format_date
from isdayoff.core.domain import DateRangeQuery, DayStatus, DayStatusSpan, QuerySpec, YearMonthDayQuery
from isdayoff.core.errors import DecodeError, InvalidQueryError, IsDayOffError, TransportError
from isdayoff.core.services import IsDayOffClient

__all__ = [
    "AppSettings",
    "DateRangeQuery",
    "DayStatus",
    "DayStatusSpan",
    "DecodeError",
    "InvalidQueryError",
    "IsDayOffClient",
    "IsDayOffError",
    "QuerySpec",
    "TransportError",
    "YearMonthDayQuery",
    "__version__",
    "format_date",
]

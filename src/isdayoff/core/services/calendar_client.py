"""Cliente del calendario de producción.

Este módulo expone los cinco modos de consulta (hoy, fecha, mes, año,
periodo), normaliza los defaults desde el reloj del host y decodifica la
respuesta. Toda la lógica de decisión de la librería vive aquí y en el
builder de `adapters.isdayoff_api`; el resto es fontanería.

Cada operación pública hace exactamente un request. El cliente no guarda
estado mutable entre llamadas, así que las consultas concurrentes
(`asyncio.gather`) son independientes.
"""

from __future__ import annotations

import calendar
import logging
from datetime import date
from types import TracebackType
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ValidationError

from isdayoff.adapters.http_client import build_async_client
from isdayoff.adapters.isdayoff_api import IsDayOffTransport
from isdayoff.adapters.system_clock import SystemClock
from isdayoff.core.config import AppSettings
from isdayoff.core.decoding import decode_single, decode_statuses
from isdayoff.core.domain.day_status import DayStatus
from isdayoff.core.domain.models import DateRangeQuery, DayStatusSpan, QuerySpec, YearMonthDayQuery
from isdayoff.core.errors import DecodeError, InvalidQueryError
from isdayoff.core.interfaces.clock import Clock
from isdayoff.core.interfaces.transport import CalendarTransport

if TYPE_CHECKING:
    import httpx

logger = logging.getLogger(__name__)


class IsDayOffClient:
    """Cliente asíncrono de isdayoff.ru.

    Uso típico::

        async with IsDayOffClient() as api:
            status = await api.today()
            september = await api.month(2024, 9)

    Sin `async with` también funciona: el transporte por defecto abre un
    `httpx.AsyncClient` efímero por request.
    """

    def __init__(
        self,
        transport: CalendarTransport | None = None,
        clock: Clock | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport: CalendarTransport = transport if transport is not None else IsDayOffTransport(self._settings)
        self._owns_transport = transport is None
        self._clock: Clock = clock or SystemClock()
        self._http: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "IsDayOffClient":
        if self._owns_transport and self._http is None:
            self._http = build_async_client(self._settings)
            self._transport = IsDayOffTransport(self._settings, client=self._http)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    @property
    def clock(self) -> Clock:
        return self._clock

    async def aclose(self) -> None:
        if self._http is not None:
            await self._http.aclose()
            self._http = None
            self._transport = IsDayOffTransport(self._settings)

    async def today(self) -> DayStatus:
        now = self._clock.today()
        return await self.date(now.year, now.month, now.day)

    async def date(self, year: int, month: int, day: int) -> DayStatus:
        spec = _build(YearMonthDayQuery, year=year, month=month, day=day)
        return decode_single(await self._request(spec))

    async def month(self, year: int | None = None, month: int | None = None) -> list[DayStatus]:
        """Estados del mes; `year` y `month` toman del reloj por separado."""

        spec = self._month_query(year, month)
        return await self._request_sequence(spec, calendar.monthrange(spec.year, spec.month)[1])

    async def year(self, year: int) -> list[DayStatus]:
        spec = _build(YearMonthDayQuery, year=year)
        return await self._request_sequence(spec, 366 if calendar.isleap(spec.year) else 365)

    async def period(self, start: date, end: date) -> list[DayStatus]:
        """Estados de `start` a `end`, ambos inclusive.

        La longitud no se exige: si el servicio devuelve un número de días
        distinto al rango pedido se registra un warning y se devuelve tal cual.
        Un body vacío sí es `DecodeError`.
        """

        spec = _build(DateRangeQuery, start=start, end=end)
        return await self._request_sequence(spec, spec.expected_length())

    async def month_calendar(self, year: int | None = None, month: int | None = None) -> DayStatusSpan:
        spec = self._month_query(year, month)
        statuses = await self._request_sequence(spec, calendar.monthrange(spec.year, spec.month)[1])
        return DayStatusSpan(start=date(spec.year, spec.month, 1), statuses=tuple(statuses))

    async def year_calendar(self, year: int) -> DayStatusSpan:
        statuses = await self.year(year)
        return DayStatusSpan(start=date(year, 1, 1), statuses=tuple(statuses))

    async def period_calendar(self, start: date, end: date) -> DayStatusSpan:
        statuses = await self.period(start, end)
        return DayStatusSpan(start=start, statuses=tuple(statuses))

    def _month_query(self, year: int | None, month: int | None) -> YearMonthDayQuery:
        if year is None or month is None:
            now = self._clock.today()
            year = now.year if year is None else year
            month = now.month if month is None else month
        return _build(YearMonthDayQuery, year=year, month=month)

    async def _request(self, spec: QuerySpec) -> str:
        return await self._transport.fetch(spec)

    async def _request_sequence(self, spec: QuerySpec, expected: int) -> list[DayStatus]:
        body = await self._request(spec)
        if not body:
            raise DecodeError(f"Empty response for {_describe(spec)}", body=body)

        statuses = decode_statuses(body)
        if len(statuses) != expected:
            logger.warning(
                "%s: expected %d day statuses, got %d",
                _describe(spec),
                expected,
                len(statuses),
            )
        return statuses


def _build(model: type[BaseModel], **fields: Any) -> Any:
    try:
        return model(**fields)
    except ValidationError as exc:
        raise InvalidQueryError(f"Invalid query {fields}: {exc.errors()[0]['msg']}") from exc


def _describe(spec: QuerySpec) -> str:
    if isinstance(spec, DateRangeQuery):
        return f"Period {spec.start.isoformat()}..{spec.end.isoformat()}"
    if spec.month is not None:
        return f"Month {spec.year:04d}-{spec.month:02d}"
    return f"Year {spec.year}"

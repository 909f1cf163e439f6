"""Adaptador HTTP del API de isdayoff.ru.

Implementación:
- Traduce un `QuerySpec` a los parámetros de `/getData`.
- Hace exactamente un GET y devuelve el body crudo.

Notas:
- `year`, `month`, `day` se emiten en ese orden y solo si están presentes.
- `date1`/`date2` van en formato `YYYYMMDD`.
- `cc` y `pre` solo se emiten si están configurados.
- Sin reintentos ni caché.
"""

from __future__ import annotations

import logging
from urllib.parse import urlencode

import httpx

from isdayoff.adapters.http_client import build_async_client
from isdayoff.core.config import AppSettings
from isdayoff.core.dates import format_date
from isdayoff.core.domain.models import DateRangeQuery, QuerySpec, YearMonthDayQuery
from isdayoff.core.errors import TransportError
from isdayoff.core.interfaces.transport import CalendarTransport

logger = logging.getLogger(__name__)

ENDPOINT = "/getData"


def build_query_params(
    spec: QuerySpec,
    *,
    country: str | None = None,
    pre_holiday: bool = False,
) -> dict[str, str]:
    params: dict[str, str] = {}

    if isinstance(spec, YearMonthDayQuery):
        params["year"] = str(spec.year)
        if spec.month is not None:
            params["month"] = str(spec.month)
        if spec.day is not None:
            params["day"] = str(spec.day)
    elif isinstance(spec, DateRangeQuery):
        params["date1"] = format_date(spec.start)
        params["date2"] = format_date(spec.end)
    else:
        raise TypeError(f"Unsupported query spec: {type(spec).__name__}")

    if country:
        params["cc"] = country
    if pre_holiday:
        params["pre"] = "1"
    return params


def build_url(
    base_url: str,
    spec: QuerySpec,
    *,
    country: str | None = None,
    pre_holiday: bool = False,
) -> str:
    """URL absoluta para `spec` (p.ej. `.../getData?year=2024&month=9`)."""

    params = build_query_params(spec, country=country, pre_holiday=pre_holiday)
    return f"{base_url.rstrip('/')}{ENDPOINT}?{urlencode(params)}"


class IsDayOffTransport(CalendarTransport):
    """Transporte httpx hacia isdayoff.ru.

    Por qué aceptar un `httpx.AsyncClient` externo:
    - Reutilizar conexiones cuando el llamador hace muchas consultas.
    - Inyectar un `httpx.MockTransport` en tests.

    Si no se pasa cliente, se crea uno efímero por request.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client

    def url_for(self, spec: QuerySpec) -> str:
        return build_url(
            self._settings.base_url,
            spec,
            country=self._settings.country,
            pre_holiday=self._settings.pre_holiday,
        )

    async def fetch(self, spec: QuerySpec) -> str:
        url = self.url_for(spec)
        logger.debug("GET %s", url)

        try:
            if self._client is not None:
                response = await self._client.get(url)
            else:
                async with build_async_client(self._settings) as client:
                    response = await client.get(url)
        except httpx.HTTPError as exc:
            logger.debug("Request to %s failed: %s", url, exc)
            raise TransportError(f"Request to {url} failed: {exc}", url=url) from exc

        if not response.is_success:
            logger.debug("Request to %s returned HTTP %s", url, response.status_code)
            raise TransportError(
                f"HTTP {response.status_code} from {url}",
                url=url,
                status_code=response.status_code,
            )

        return response.text

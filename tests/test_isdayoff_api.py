"""Tests for the query builder and the httpx transport."""

from datetime import date

import httpx
import pytest

from isdayoff._version import __version__
from isdayoff.adapters.http_client import build_async_client
from isdayoff.adapters.isdayoff_api import IsDayOffTransport, build_query_params, build_url
from isdayoff.core.config import AppSettings
from isdayoff.core.domain.models import DateRangeQuery, YearMonthDayQuery
from isdayoff.core.errors import TransportError

BASE = "https://isdayoff.ru/api"


class TestBuildUrl:
    def test_full_date(self):
        spec = YearMonthDayQuery(year=2024, month=9, day=29)
        assert build_url(BASE, spec) == f"{BASE}/getData?year=2024&month=9&day=29"

    def test_year_and_month(self):
        spec = YearMonthDayQuery(year=2024, month=9)
        assert build_url(BASE, spec) == f"{BASE}/getData?year=2024&month=9"

    def test_year_only(self):
        assert build_url(BASE, YearMonthDayQuery(year=2023)) == f"{BASE}/getData?year=2023"

    def test_date_range(self):
        spec = DateRangeQuery(start=date(2024, 9, 25), end=date(2024, 9, 28))
        assert build_url(BASE, spec) == f"{BASE}/getData?date1=20240925&date2=20240928"

    def test_trailing_slash_in_base(self):
        assert build_url(BASE + "/", YearMonthDayQuery(year=2023)) == f"{BASE}/getData?year=2023"

    def test_day_without_month_is_passed_through(self):
        params = build_query_params(YearMonthDayQuery(year=2024, day=3))
        assert params == {"year": "2024", "day": "3"}

    def test_parameter_order(self):
        params = build_query_params(YearMonthDayQuery(year=2024, month=1, day=2))
        assert list(params) == ["year", "month", "day"]

    def test_optional_service_parameters(self):
        spec = YearMonthDayQuery(year=2024, month=9)
        url = build_url(BASE, spec, country="kz", pre_holiday=True)
        assert url == f"{BASE}/getData?year=2024&month=9&cc=kz&pre=1"

    def test_unsupported_spec(self):
        with pytest.raises(TypeError):
            build_query_params("2024")


def _transport_with(handler, settings=None):
    settings = settings or AppSettings(_env_file=None)
    client = build_async_client(settings, transport=httpx.MockTransport(handler))
    return IsDayOffTransport(settings, client=client), client


class TestIsDayOffTransport:
    @pytest.mark.asyncio
    async def test_returns_body_text(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, text="0110")

        transport, client = _transport_with(handler)
        async with client:
            body = await transport.fetch(DateRangeQuery(start=date(2024, 9, 25), end=date(2024, 9, 28)))

        assert body == "0110"
        assert len(seen) == 1
        assert seen[0].method == "GET"
        assert str(seen[0].url) == f"{BASE}/getData?date1=20240925&date2=20240928"

    @pytest.mark.asyncio
    async def test_sends_identifying_user_agent(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, text="1")

        transport, client = _transport_with(handler)
        async with client:
            await transport.fetch(YearMonthDayQuery(year=2024, month=9, day=29))

        user_agent = seen[0].headers["User-Agent"]
        assert user_agent.startswith(f"isdayoff-py/{__version__}")

    @pytest.mark.asyncio
    async def test_configured_country_and_pre(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, text="1")

        settings = AppSettings(_env_file=None, country="BY", pre_holiday=True)
        transport, client = _transport_with(handler, settings)
        async with client:
            await transport.fetch(YearMonthDayQuery(year=2024))

        assert seen[0].url.params["cc"] == "by"
        assert seen[0].url.params["pre"] == "1"

    @pytest.mark.asyncio
    async def test_non_success_status_is_transport_error(self):
        transport, client = _transport_with(lambda request: httpx.Response(400, text="100"))
        async with client:
            with pytest.raises(TransportError) as excinfo:
                await transport.fetch(YearMonthDayQuery(year=2024, month=12, day=31))

        assert excinfo.value.status_code == 400
        assert excinfo.value.url.endswith("year=2024&month=12&day=31")

    @pytest.mark.asyncio
    async def test_network_failure_is_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        transport, client = _transport_with(handler)
        async with client:
            with pytest.raises(TransportError) as excinfo:
                await transport.fetch(YearMonthDayQuery(year=2024))

        assert excinfo.value.status_code is None
        assert isinstance(excinfo.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_timeout_is_transport_error(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        transport, client = _transport_with(handler)
        async with client:
            with pytest.raises(TransportError):
                await transport.fetch(YearMonthDayQuery(year=2024))

    def test_url_for_uses_settings(self):
        settings = AppSettings(_env_file=None, base_url="http://localhost:8080/api/")
        transport = IsDayOffTransport(settings)

        assert transport.url_for(YearMonthDayQuery(year=2024)) == "http://localhost:8080/api/getData?year=2024"


class TestAppSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("ISDAYOFF_COUNTRY", raising=False)
        monkeypatch.delenv("ISDAYOFF_PRE_HOLIDAY", raising=False)
        settings = AppSettings(_env_file=None)

        assert settings.base_url == BASE
        assert settings.country is None
        assert settings.pre_holiday is False
        assert settings.http_timeout_seconds > 0

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("ISDAYOFF_COUNTRY", "UZ")
        monkeypatch.setenv("ISDAYOFF_PRE_HOLIDAY", "true")

        settings = AppSettings(_env_file=None)

        assert settings.country == "uz"
        assert settings.pre_holiday is True

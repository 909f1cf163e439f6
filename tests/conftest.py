import asyncio
from datetime import date

import pytest

from isdayoff.core.config import AppSettings
from isdayoff.core.domain.models import QuerySpec


class FixedClock:
    """Clock that always reports the same local date."""

    def __init__(self, today: date):
        self._today = today

    def today(self) -> date:
        return self._today


class RecordingTransport:
    """Transport stub: records every spec and answers from a callable or a fixed body."""

    def __init__(self, body="1", delay: float = 0.0):
        self._body = body
        self._delay = delay
        self.calls: list[QuerySpec] = []

    async def fetch(self, spec: QuerySpec) -> str:
        self.calls.append(spec)
        if self._delay:
            await asyncio.sleep(self._delay)
        if callable(self._body):
            return self._body(spec)
        return self._body


SEPTEMBER_2024 = "100000110000011000001100000110"


@pytest.fixture
def settings():
    """Settings isolated from any local .env file."""
    return AppSettings(_env_file=None)


@pytest.fixture
def clock():
    return FixedClock(date(2024, 9, 15))


@pytest.fixture
def transport():
    return RecordingTransport()

"""Reloj del host: fecha local actual."""

from __future__ import annotations

from datetime import date, datetime

from isdayoff.core.interfaces.clock import Clock


class SystemClock(Clock):
    def today(self) -> date:
        # Zona horaria local del proceso, no UTC.
        return datetime.now().astimezone().date()

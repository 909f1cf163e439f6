"""Contrato del reloj del host (fecha local para los defaults de `today`/`month`)."""

from __future__ import annotations

from datetime import date
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    def today(self) -> date:
        """Fecha de calendario local actual."""

        ...

"""Adaptadores concretos de los contratos del Core (HTTP, reloj del host)."""

from isdayoff.adapters.isdayoff_api import IsDayOffTransport, build_query_params, build_url
from isdayoff.adapters.system_clock import SystemClock

__all__ = [
    "IsDayOffTransport",
    "SystemClock",
    "build_query_params",
    "build_url",
]

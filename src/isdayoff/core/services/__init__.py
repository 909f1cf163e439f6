from isdayoff.core.services.calendar_client import IsDayOffClient

__all__ = ["IsDayOffClient"]

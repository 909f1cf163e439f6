"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el Core depende de abstracciones.
"""

from isdayoff.core.interfaces.clock import Clock
from isdayoff.core.interfaces.transport import CalendarTransport

__all__ = ["CalendarTransport", "Clock"]

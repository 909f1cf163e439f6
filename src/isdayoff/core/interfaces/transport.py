"""Contrato del transporte hacia el servicio de calendario.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite sustituir el adaptador httpx por un stub en tests.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from isdayoff.core.domain.models import QuerySpec


@runtime_checkable
class CalendarTransport(Protocol):
    """Contrato mínimo del transporte.

    Reglas de diseño:
    - `fetch` es asíncrono porque hace I/O (HTTP).
    - Devuelve el body crudo; decodificar es responsabilidad del cliente.
    - Los fallos se elevan como `TransportError`.
    """

    async def fetch(self, spec: QuerySpec) -> str:
        ...

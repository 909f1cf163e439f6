"""Decodificación de la respuesta del servicio.

La respuesta es una cadena contigua de dígitos, uno por día y en orden
ascendente de fecha. No hay resultados parciales: un carácter inválido
invalida toda la respuesta.
"""

from __future__ import annotations

from isdayoff.core.domain.day_status import DayStatus
from isdayoff.core.errors import DecodeError


def decode_statuses(body: str) -> list[DayStatus]:
    statuses: list[DayStatus] = []
    for position, char in enumerate(body):
        try:
            statuses.append(DayStatus.from_char(char))
        except DecodeError:
            raise DecodeError(
                f"Unexpected character {char!r} at position {position} in response",
                body=body,
            ) from None
    return statuses


def decode_single(body: str) -> DayStatus:
    """Decodifica una respuesta de un solo día (`today`/`date`)."""

    statuses = decode_statuses(body)
    if len(statuses) != 1:
        raise DecodeError(
            f"Expected exactly one day status, got {len(statuses)}",
            body=body,
        )
    return statuses[0]

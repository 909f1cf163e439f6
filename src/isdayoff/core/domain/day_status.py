"""Estado de un día según el calendario de producción.

El servicio codifica cada día con un único dígito; este enum es la forma
tipada de ese dígito.
"""

from __future__ import annotations

from enum import IntEnum

from isdayoff.core.errors import DecodeError


class DayStatus(IntEnum):
    """Clasificación de un día del calendario."""

    WORKDAY = 0
    DAY_OFF = 1
    SHORT_DAY = 2
    UNKNOWN = 3

    @classmethod
    def from_char(cls, char: str) -> "DayStatus":
        """Convierte un carácter de la respuesta en `DayStatus`.

        Cualquier cosa fuera de `0..3` es un `DecodeError`.
        """

        if len(char) != 1 or char not in "0123":
            raise DecodeError(f"Invalid day status character: {char!r}", body=char)
        return cls(int(char))

    def is_working(self) -> bool:
        """Un día corto (pre-festivo) sigue siendo laborable."""

        return self in (DayStatus.WORKDAY, DayStatus.SHORT_DAY)

    def is_day_off(self) -> bool:
        return self is DayStatus.DAY_OFF

    def label(self) -> str:
        """Etiqueta legible para CLI y logging."""

        return _LABELS[self]


_LABELS: dict[DayStatus, str] = {
    DayStatus.WORKDAY: "Workday",
    DayStatus.DAY_OFF: "Day off",
    DayStatus.SHORT_DAY: "Short day",
    DayStatus.UNKNOWN: "Unknown",
}

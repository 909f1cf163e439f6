"""Errores del cliente isdayoff.

Por qué una jerarquía propia:
- El llamador captura `IsDayOffError` sin depender de httpx.
- Tres fallos posibles: argumentos inválidos (antes de enviar), transporte
  (antes de obtener el body) o decodificación (después).
"""

from __future__ import annotations


class IsDayOffError(Exception):
    """Error base de la librería."""


class TransportError(IsDayOffError):
    """Fallo de red/HTTP antes de obtener un body válido.

    Cubre DNS, conexión, timeout y respuestas no-2xx.
    """

    def __init__(self, message: str, *, url: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class DecodeError(IsDayOffError):
    """El body no es una cadena de dígitos válida para la consulta."""

    def __init__(self, message: str, *, body: str) -> None:
        super().__init__(message)
        self.body = body


class InvalidQueryError(IsDayOffError, ValueError):
    """Argumentos fuera de rango (año, mes o día) antes de enviar nada."""

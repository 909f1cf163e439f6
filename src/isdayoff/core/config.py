"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/reloj) lean config de forma consistente.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from isdayoff._version import __version__

DEFAULT_BASE_URL = "https://isdayoff.ru/api"
DEFAULT_USER_AGENT = f"isdayoff-py/{__version__} (+https://github.com/isdayoff-py)"


class AppSettings(BaseSettings):
    """Configuración central de la librería.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para cliente y CLI.
    """

    model_config = SettingsConfigDict(
        env_prefix="ISDAYOFF_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="Base URL del API (sin `/getData`).",
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        min_length=1,
        description="User-Agent identificativo (nombre/versión + contacto).",
    )
    http_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    country: str | None = Field(
        default=None,
        min_length=2,
        max_length=2,
        description="Código de país del calendario (ru, by, kz, uz, tr). Ausente => default del servicio.",
    )
    pre_holiday: bool = Field(
        default=False,
        description="Pedir al servicio que marque los días pre-festivos cortos con `2`.",
    )

    @field_validator("country")
    @classmethod
    def _normalize_country(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip().lower()

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

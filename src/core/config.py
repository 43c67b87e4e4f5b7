"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (handler remoto, exportador SVG) lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "trophy-svg"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "trophy-svg"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "trophy-svg"
    return Path.home() / ".config" / "trophy-svg"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Nota: no hay flags de CLI para estos valores; el parser rechaza
    cualquier opción desconocida.
    """

    model_config = SettingsConfigDict(
        env_prefix="TROPHY_SVG_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    placeholder_url: str = Field(
        default="http://localhost/",
        min_length=8,
        description="Host ficticio sobre el que se construye la URL a partir del username.",
    )
    output_dir: str = Field(
        default="generated",
        min_length=1,
        description="Directorio de salida para rutas derivadas del username.",
    )
    default_name: str = Field(
        default="trophy",
        min_length=1,
        description="Nombre base del SVG cuando no hay username conocido.",
    )

    handler: str | None = Field(
        default=None,
        description="Handler propio en formato `module:attr` (sustituye al remoto).",
    )
    service_base_url: str = Field(
        default="https://github-profile-trophy.vercel.app/",
        min_length=8,
        description="Base URL del servicio de trofeos usado por el handler remoto.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="trophy-svg/0.1 (+https://local)",
        min_length=1,
        description="User-Agent para el handler remoto.",
    )

    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Nivel de logging (DEBUG, INFO, WARNING...).",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

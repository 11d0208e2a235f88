"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Los adaptadores (DNS, plan de numeración) leen la config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


APP_DIR_NAME = "clientcheck"


def _platform_config_root() -> Path:
    if sys.platform.startswith("win"):
        return Path(os.environ.get("APPDATA") or Path.home())
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    return Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")


def get_user_config_dir() -> Path:
    """Carpeta `clientcheck` dentro de la raíz de configuración de la plataforma.

    Windows usa %APPDATA%, macOS `~/Library/Application Support` y el resto
    $XDG_CONFIG_HOME (por defecto `~/.config`).
    """

    return _platform_config_root() / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Un único contrato de configuración para CLI/adapters; el Core de
    validación no lee el entorno por su cuenta.
    """

    model_config = SettingsConfigDict(
        env_prefix="CLIENTCHECK_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    dns_nameservers: list[str] = Field(
        default_factory=list,
        description="Nameservers explícitos (IPs). Vacío = configuración del sistema.",
    )
    dns_lifetime_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Tiempo total máximo por consulta MX (segundos). None = default de dnspython.",
    )

    phone_legacy_ninth_digit: bool = Field(
        default=True,
        description="Reintentar móviles BR de 8 dígitos (pre-2016) insertando el noveno dígito.",
    )
    cpf_remap_remainder_ten: bool = Field(
        default=False,
        description="Aplicar el paso oficial del CPF que convierte un resto 10 en dígito 0.",
    )

    log_level: LogLevel = Field(
        default="WARNING",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

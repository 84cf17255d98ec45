"""Configuración del Core.

- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Los adaptadores (filesystem, reloj) leen la config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "hostm"
APP_VERSION = "0.1.0"


def get_default_hosts_path() -> Path:
    """Ruta estándar del fichero hosts según la plataforma."""

    if sys.platform.startswith("win"):
        system_root = os.environ.get("SystemRoot", r"C:\Windows")
        return Path(system_root) / "System32" / "drivers" / "etc" / "hosts"
    return Path("/etc/hosts")


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Cualquier campo puede sobreescribirse con `HOSTM_<CAMPO>` o desde un `.env`
    en el directorio actual. Los flags de la CLI tienen prioridad.
    """

    model_config = SettingsConfigDict(
        env_prefix="HOSTM_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    hosts_file: Path = Field(
        default_factory=get_default_hosts_path,
        description="Fichero hosts a modificar.",
    )
    tool_name: str = Field(
        default=APP_NAME,
        min_length=1,
        description="Nombre que aparece en los comentarios de auditoría ('# created by <tool>').",
    )
    timestamp_format: str = Field(
        default="%Y-%m-%d %H:%M:%S",
        min_length=1,
        description="Formato strftime de la marca de tiempo de auditoría.",
    )
    verbose: bool = Field(
        default=False,
        description="Emitir diagnósticos paso a paso por stdout.",
    )

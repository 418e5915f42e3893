"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- El destino del reporte y la caché del envelope son valores de
  configuración explícitos, no constantes globales del proceso.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_REPO_URL = "https://nexus-internal.cloudbees.com/content/repositories/releases/"
DEFAULT_REPORT_FILE_NAME = "Analyzed-Plugins.csv"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "envelope-analyzer"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "envelope-analyzer"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "envelope-analyzer"
    return Path.home() / ".config" / "envelope-analyzer"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        if key:
            data[key] = value.strip().strip('"').strip("'")
    return data


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario.

    Las claves existentes que no aparecen en `values` se conservan; los
    valores `None` se ignoran.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# envelope-analyzer user config (.env)"]
    lines.extend(f"{key}={existing[key]}" for key in sorted(existing))
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Orden de precedencia: argumentos explícitos > variables de entorno
    `ENVELOPE_ANALYZER_*` > `.env` del proyecto > `.env` del usuario.
    """

    model_config = SettingsConfigDict(
        env_prefix="ENVELOPE_ANALYZER_",
        extra="ignore",
        case_sensitive=False,
        env_file=(str(get_user_env_file()), ".env"),
        env_file_encoding="utf-8",
    )

    repo_url: str = Field(
        default=DEFAULT_REPO_URL,
        min_length=1,
        description="Raíz del repositorio Maven (terminada en '/').",
    )
    repo_username: str | None = Field(
        default=None,
        description="Usuario por defecto para la descarga autenticada.",
    )
    repo_password: SecretStr | None = Field(
        default=None,
        description="Contraseña por defecto para la descarga autenticada.",
    )

    output_dir: Path = Field(
        default=Path("target"),
        description="Directorio donde se escribe el reporte.",
    )
    report_file_name: str = Field(
        default=DEFAULT_REPORT_FILE_NAME,
        min_length=1,
        description="Nombre del fichero CSV del reporte.",
    )
    cache_dir: Path | None = Field(
        default=None,
        description="Caché de envelopes descargados (por defecto `output_dir`).",
    )

    http_timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Timeout de la descarga del envelope (segundos).",
    )
    user_agent: str = Field(
        default="envelope-analyzer/0.1",
        min_length=1,
        description="User-Agent para las peticiones HTTP.",
    )

    log_level: str = Field(
        default="INFO",
        description="Nivel de logging (DEBUG, INFO, WARNING...).",
    )

    @property
    def report_path(self) -> Path:
        return self.output_dir / self.report_file_name

    @property
    def manifest_cache_dir(self) -> Path:
        return self.cache_dir or self.output_dir

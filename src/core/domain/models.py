"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta en la construcción: un `ProductIdentity` o una
  `ReportRow` inconsistentes fallan al crearse, no al serializarse.
- Los alias (`name`, `version`, `groupId`...) permiten validar el JSON del
  envelope directamente sobre los modelos.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
- Todos son inmutables (`frozen`): se construyen una vez por ejecución.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any
from urllib.parse import urlsplit
from urllib.request import url2pathname

from pydantic import BaseModel, Field, SecretStr, field_validator, model_validator
from pydantic.config import ConfigDict


REPORT_HEADER: tuple[str, ...] = ("Id", "Name", "Version", "Envelope", "Version", "Type", "Scope")


class ProductIdentity(BaseModel):
    """Coordenadas Maven de un producto (groupId + artifactId)."""

    model_config = ConfigDict(frozen=True)

    group_id: str = Field(
        ...,
        pattern=r"^[A-Za-z0-9_-]+(\.[A-Za-z0-9_-]+)*$",
        description="Namespace con puntos, p.ej. 'com.cloudbees.jenkins.main'.",
    )
    artifact_id: str = Field(
        ...,
        pattern=r"^[A-Za-z0-9_.-]+$",
        description="Identificador del artefacto, p.ej. 'jenkins-enterprise-war'.",
    )


class Tier(str, Enum):
    """Clasificación de soporte asignada por el envelope."""

    VERIFIED = "verified"
    COMPATIBLE = "compatible"
    PROPRIETARY = "proprietary"
    COMMUNITY = "community"

    @property
    def label(self) -> str:
        return self.name


class Scope(str, Enum):
    """Clasificación de empaquetado asignada por el envelope."""

    BOOTSTRAP = "bootstrap"
    FAT = "fat"
    OPTIONAL = "optional"

    @property
    def label(self) -> str:
        return self.name


class ManifestRecord(BaseModel):
    """Entrada `plugins.<key>` de un envelope.

    `key` no viene dentro del objeto JSON: es la clave del mapa `plugins`,
    que `Envelope` inyecta antes de validar.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    key: str = Field(..., min_length=1, description="Identificador del plugin (clave del mapa).")
    display_name: str = Field(..., alias="name", description="Nombre legible del plugin.")
    group_id: str | None = Field(default=None, alias="groupId")
    artifact_id: str | None = Field(default=None, alias="artifactId")
    manifest_version: str = Field(
        ...,
        alias="version",
        min_length=1,
        description="Versión prescrita por el envelope.",
    )
    dependencies: dict[str, str] = Field(default_factory=dict)
    optional_dependencies: dict[str, str] = Field(default_factory=dict, alias="optionalDependencies")
    scope: Scope
    sha1: str | None = None
    tier: Tier

    @field_validator("tier", "scope", mode="before")
    @classmethod
    def _lowercase_classification(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value


class Envelope(BaseModel):
    """Documento completo del envelope.

    Solo `plugins` se consume; el resto se conserva para trazabilidad.
    La firma no se valida.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    product: str
    version: str
    distribution: str | None = None
    commit: str | None = None
    core: str | None = None
    plugins: dict[str, ManifestRecord] = Field(default_factory=dict)
    blacklist: list[str] = Field(default_factory=list)
    signature: dict[str, Any] | None = None

    @field_validator("plugins", mode="before")
    @classmethod
    def _inject_plugin_keys(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        return {
            key: {**record, "key": key} if isinstance(record, dict) else record
            for key, record in value.items()
        }


class Locator(BaseModel):
    """Dónde vive el envelope: URL completa + nombre del fichero."""

    model_config = ConfigDict(frozen=True)

    url: str
    file_name: str

    @property
    def scheme(self) -> str:
        return urlsplit(self.url).scheme.lower()

    @property
    def is_local(self) -> bool:
        return self.scheme == "file"

    @property
    def local_path(self) -> Path:
        if not self.is_local:
            raise ValueError(f"Not a file locator: {self.url}")
        return Path(url2pathname(urlsplit(self.url).path))


class Credentials(BaseModel):
    """Credenciales para la descarga autenticada del envelope."""

    model_config = ConfigDict(frozen=True)

    username: str = Field(..., min_length=1)
    password: SecretStr


class ReportRow(BaseModel):
    """Una fila del reporte (un plugin del inventario).

    Si el plugin no está en el envelope, los campos del envelope quedan en
    `None`; solo se convierten en celdas vacías al serializar.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    display_name: str | None = None
    installed_version: str
    present_in_manifest: bool = False
    manifest_version: str | None = None
    tier: Tier | None = None
    scope: Scope | None = None

    @model_validator(mode="after")
    def _check_presence(self) -> "ReportRow":
        manifest_fields = (self.display_name, self.manifest_version, self.tier, self.scope)
        if self.present_in_manifest and any(f is None for f in manifest_fields):
            raise ValueError(f"{self.key}: present in envelope but envelope fields are missing")
        if not self.present_in_manifest and any(f is not None for f in manifest_fields):
            raise ValueError(f"{self.key}: absent from envelope but envelope fields are set")
        return self

    @property
    def version_drift(self) -> bool:
        """El plugin está en el envelope con otra versión."""

        return self.present_in_manifest and self.manifest_version != self.installed_version

    def cells(self) -> tuple[str, ...]:
        if not self.present_in_manifest:
            return (self.key, "", self.installed_version, "NO", "", "", "")
        if self.tier is None or self.scope is None:
            # Solo alcanzable con `model_construct`, que salta `_check_presence`.
            raise ValueError(f"{self.key}: present in envelope but tier/scope are missing")
        return (
            self.key,
            self.display_name or "",
            self.installed_version,
            "YES",
            self.manifest_version or "",
            self.tier.label,
            self.scope.label,
        )


class Report(BaseModel):
    """Reporte ordenado: cabecera fija + una fila por plugin del inventario."""

    model_config = ConfigDict(frozen=True)

    rows: tuple[ReportRow, ...] = ()

    @property
    def header(self) -> tuple[str, ...]:
        return REPORT_HEADER

    def lines(self) -> list[tuple[str, ...]]:
        return [self.header, *(row.cells() for row in self.rows)]

    @property
    def present_count(self) -> int:
        return sum(1 for row in self.rows if row.present_in_manifest)

    @property
    def absent_count(self) -> int:
        return len(self.rows) - self.present_count

    @property
    def drift_count(self) -> int:
        return sum(1 for row in self.rows if row.version_drift)

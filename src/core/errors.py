"""Errores del Core.

Por qué una jerarquía propia:
- Los adaptadores traducen errores de librerías (httpx, pydantic, OSError)
  a estas clases, así la CLI solo captura `AnalyzerError`.
- Cada fallo del análisis es fatal: no hay reintentos ni reporte parcial.
"""

from __future__ import annotations

from pathlib import Path


class AnalyzerError(Exception):
    """Raíz de todos los fallos del análisis."""


class ConfigurationError(AnalyzerError):
    """Parámetros inválidos detectados antes de cualquier I/O."""


class InventoryNotFoundError(ConfigurationError):
    """El fichero de inventario no existe o no se puede leer."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"File not found: {path}")
        self.path = path


class MalformedLineError(AnalyzerError):
    """Una línea del inventario no tiene el formato `clave:versión`."""

    def __init__(self, path: Path, line_number: int, line: str) -> None:
        super().__init__(f"{path}:{line_number}: expected 'key:version', got {line!r}")
        self.path = path
        self.line_number = line_number
        self.line = line


class InvalidLocator(AnalyzerError):
    """La URL construida para el envelope no es válida."""


class LocatorUnreachable(AnalyzerError):
    """No se pudo abrir/descargar el envelope."""


class ManifestParseError(AnalyzerError):
    """El envelope no respeta el esquema esperado."""


class WriteError(AnalyzerError):
    """No se pudo (re)crear el fichero de reporte."""

"""Contratos para obtener e interpretar envelopes.

Por qué Protocol:
- Contrato estructural (duck typing) sin herencia rígida.
- El Core no conoce ni el formato JSON del envelope ni el transporte HTTP;
  los tests inyectan implementaciones en memoria.
"""

from __future__ import annotations

from typing import Mapping, Protocol, runtime_checkable

from core.domain.models import Credentials, Locator, ManifestRecord


@runtime_checkable
class ManifestModel(Protocol):
    """Interpreta los bytes de un envelope.

    Reglas de diseño:
    - Devuelve el mapa `clave de plugin -> ManifestRecord`.
    - Cualquier fallo de esquema se señala con `ManifestParseError`.
    """

    def parse(self, data: bytes) -> Mapping[str, ManifestRecord]:
        ...


@runtime_checkable
class ManifestFetcher(Protocol):
    """Descarga remota de un envelope.

    Reglas de diseño:
    - Síncrono: el análisis es secuencial y espera a la descarga.
    - Un único intento; los fallos se señalan con `LocatorUnreachable`.
    """

    def fetch(self, locator: Locator, credentials: Credentials | None = None) -> bytes:
        ...

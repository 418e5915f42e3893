"""Descarga HTTP del envelope (implementa `ManifestFetcher`).

Un solo intento, sin reintentos. Cualquier fallo de red o respuesta no-2xx se
traduce a `LocatorUnreachable`; el `ManifestAccessor` decide qué hacer con él.
"""

from __future__ import annotations

import logging

import httpx

from adapters.http_client import build_client
from core.config import AppSettings
from core.domain.models import Credentials, Locator
from core.errors import LocatorUnreachable
from core.interfaces.manifest import ManifestFetcher

logger = logging.getLogger(__name__)


class HttpManifestFetcher(ManifestFetcher):
    """Descarga autenticada (basic auth) contra el repositorio Maven."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    def fetch(self, locator: Locator, credentials: Credentials | None = None) -> bytes:
        try:
            with build_client(self._settings, credentials=credentials, transport=self._transport) as client:
                response = client.get(locator.url)
                logger.debug("HTTP %s %s", response.status_code, locator.url)
                for name, value in response.headers.items():
                    logger.debug("  %s: %s", name, value)
                response.raise_for_status()
                return response.content
        except httpx.HTTPStatusError as exc:
            raise LocatorUnreachable(
                f"HTTP {exc.response.status_code} while downloading {locator.url}"
            ) from exc
        except httpx.HTTPError as exc:
            raise LocatorUnreachable(f"Cannot download {locator.url}: {exc}") from exc

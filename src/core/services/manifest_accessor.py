"""Acceso al envelope (local o remoto) y delegación del parseo.

Modos:
- `file:` → se lee el fichero directamente.
- `http(s):` → se descarga una sola vez a `<cache_dir>/<file_name>`. Si el
  fichero ya existe en caché no se vuelve a descargar, ni en esta ejecución
  ni en las siguientes.

Un fallo de descarga solo se registra en el log: es la lectura posterior de
la caché la que falla con `LocatorUnreachable`.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping

from core.domain.models import Credentials, Locator, ManifestRecord
from core.errors import LocatorUnreachable
from core.interfaces.manifest import ManifestFetcher, ManifestModel

logger = logging.getLogger(__name__)


class ManifestAccessor:
    def __init__(
        self,
        *,
        model: ManifestModel,
        cache_dir: Path,
        fetcher: ManifestFetcher | None = None,
    ) -> None:
        self._model = model
        self._cache_dir = cache_dir
        self._fetcher = fetcher

    def cache_path(self, locator: Locator) -> Path:
        return self._cache_dir / locator.file_name

    def fetch_manifest(
        self,
        locator: Locator,
        credentials: Credentials | None = None,
    ) -> Mapping[str, ManifestRecord]:
        if locator.is_local:
            data = self._read(locator.local_path, locator)
        else:
            cache_path = self.cache_path(locator)
            if cache_path.exists():
                logger.info("Using cached envelope %s", cache_path)
            else:
                self._download(locator, credentials, cache_path)
            data = self._read(cache_path, locator)

        plugins = self._model.parse(data)
        logger.info("Envelope %s lists %d plugins", locator.file_name, len(plugins))
        return plugins

    def _read(self, path: Path, locator: Locator) -> bytes:
        try:
            return path.read_bytes()
        except OSError as exc:
            raise LocatorUnreachable(f"Cannot open envelope {locator.url} ({path}): {exc}") from exc

    def _download(self, locator: Locator, credentials: Credentials | None, cache_path: Path) -> None:
        if self._fetcher is None:
            logger.error("No fetcher configured for remote envelope %s", locator.url)
            return

        logger.info("Downloading %s", locator.url)
        try:
            payload = self._fetcher.fetch(locator, credentials)
        except LocatorUnreachable as exc:
            for line in str(exc).splitlines():
                logger.error(line)
            return

        # Escritura vía fichero temporal: una descarga fallida no deja caché.
        tmp_path = cache_path.with_name(cache_path.name + ".part")
        try:
            cache_path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_bytes(payload)
            os.replace(tmp_path, cache_path)
        except OSError as exc:
            logger.error("Cannot write envelope cache %s: %s", cache_path, exc)

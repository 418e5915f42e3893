"""Carga del inventario local de plugins.

Formato (una línea por plugin, UTF-8):
    active-directory:2.4:not-pinned
    ant:1.4

Solo se usan los dos primeros campos; el resto (p.ej. el estado de pin) se
ignora.
"""

from __future__ import annotations

import logging
from pathlib import Path

from core.errors import ConfigurationError, InventoryNotFoundError, MalformedLineError

logger = logging.getLogger(__name__)

_DELIMITER = ":"


def load_inventory(path: Path) -> dict[str, str]:
    """Devuelve `clave -> versión instalada` en el orden del fichero.

    Claves duplicadas: gana la última versión leída.
    """

    if not path.is_file():
        raise InventoryNotFoundError(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise InventoryNotFoundError(path) from exc
    except UnicodeDecodeError as exc:
        raise ConfigurationError(f"{path} is not a UTF-8 text file") from exc

    plugins: dict[str, str] = {}
    # `read_text` ya normaliza CRLF/CR a "\n".
    for line_number, line in enumerate(text.split("\n"), start=1):
        # Los espacios forman parte de los campos; solo se saltan líneas en blanco.
        if not line.strip():
            continue
        tokens = [token for token in line.split(_DELIMITER) if token]
        if len(tokens) < 2:
            raise MalformedLineError(path, line_number, line)
        key, version = tokens[0], tokens[1]
        if key in plugins:
            logger.debug("Duplicate plugin %s in %s: %s replaces %s", key, path, version, plugins[key])
        plugins[key] = version

    logger.info("Loaded %d plugins from %s", len(plugins), path)
    return plugins

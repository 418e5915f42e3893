"""Coordenadas del envelope en un repositorio Maven.

Ejemplo:
    https://nexus-internal.cloudbees.com/content/repositories/releases/
    com/cloudbees/operations-center/server/operations-center-war/2.121.3.1/
    operations-center-war-2.121.3.1-envelope.json
"""

from __future__ import annotations

from urllib.parse import urlsplit

from core.domain.models import Locator, ProductIdentity
from core.errors import InvalidLocator


ENVELOPE_CLASSIFIER = "envelope"
ENVELOPE_EXTENSION = "json"

_URL_SEPARATOR = "/"
_SUPPORTED_SCHEMES = ("file", "http", "https")


def envelope_file_name(product: ProductIdentity, release: str) -> str:
    return f"{product.artifact_id}-{release}-{ENVELOPE_CLASSIFIER}.{ENVELOPE_EXTENSION}"


def build_manifest_locator(repo_root: str, product: ProductIdentity, release: str) -> Locator:
    """Construye la URL del envelope de `product` en la versión `release`.

    `repo_root` debe terminar en '/': no se normalizan separadores.
    """

    file_name = envelope_file_name(product, release)
    url = _URL_SEPARATOR.join(
        (
            repo_root + product.group_id.replace(".", _URL_SEPARATOR),
            product.artifact_id,
            release,
            file_name,
        )
    )
    _validate_url(url)
    return Locator(url=url, file_name=file_name)


def _validate_url(url: str) -> None:
    # Espacios permitidos (rutas locales con espacios); caracteres de control no.
    if any(not ch.isprintable() for ch in url):
        raise InvalidLocator(f"Locator contains control characters: {url!r}")
    try:
        parts = urlsplit(url)
        # `port` valida el puerto de forma perezosa.
        parts.port
    except ValueError as exc:
        raise InvalidLocator(f"Malformed locator {url!r}: {exc}") from exc

    scheme = parts.scheme.lower()
    if scheme not in _SUPPORTED_SCHEMES:
        raise InvalidLocator(f"Unsupported locator scheme in {url!r} (expected file, http or https)")
    if scheme != "file" and not parts.hostname:
        raise InvalidLocator(f"Locator has no host: {url!r}")
    if scheme != "file" and any(ch.isspace() for ch in parts.netloc):
        raise InvalidLocator(f"Locator host contains whitespace: {url!r}")

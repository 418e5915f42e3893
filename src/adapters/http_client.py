"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers, redirects y autenticación básica.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings
from core.domain.models import Credentials


def build_client(
    settings: AppSettings | None = None,
    *,
    credentials: Credentials | None = None,
    transport: httpx.BaseTransport | None = None,
    extra_headers: dict[str, str] | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` síncrono con defaults seguros.

    El análisis es secuencial, así que no hace falta un cliente asíncrono.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json, */*;q=0.8",
    }
    if extra_headers:
        headers.update(extra_headers)

    auth = None
    if credentials is not None:
        auth = httpx.BasicAuth(credentials.username, credentials.password.get_secret_value())

    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        auth=auth,
        transport=transport,
    )

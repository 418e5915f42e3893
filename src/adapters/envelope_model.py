"""Parser del envelope (implementa `ManifestModel`).

Lee el documento con `json5` y lo valida con el modelo `Envelope`; devuelve
su mapa `plugins`. La firma y la blacklist se leen pero no se interpretan.

Por qué json5: los envelopes publicados llevan comas finales (p.ej. tras el
último plugin) y el parser estricto de pydantic los rechazaría.
"""

from __future__ import annotations

import json5
from pydantic import ValidationError

from core.domain.models import Envelope, ManifestRecord
from core.errors import ManifestParseError
from core.interfaces.manifest import ManifestModel


def load_envelope(data: bytes) -> Envelope:
    try:
        document = json5.loads(data.decode("utf-8"))
    except ValueError as exc:
        # UnicodeDecodeError también es ValueError.
        raise ManifestParseError(f"Envelope is not valid JSON: {exc}") from exc
    try:
        return Envelope.model_validate(document)
    except ValidationError as exc:
        raise ManifestParseError(f"Invalid envelope: {exc}") from exc


class JsonEnvelopeModel(ManifestModel):
    def parse(self, data: bytes) -> dict[str, ManifestRecord]:
        return dict(load_envelope(data).plugins)

"""Exportación JSON del reporte.

Por qué JSON además del CSV:
- El CSV no escapa comas; el JSON conserva cada campo intacto.
- Los campos ausentes del envelope se exportan como `null`.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import Report


def export_report_json(*, report: Report, output_path: Path) -> Path:
    """Exporta `Report` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "header": list(report.header),
        "rows": [row.model_dump(mode="json") for row in report.rows],
    }
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2) + "\n",
        encoding="utf-8",
    )
    return output_path

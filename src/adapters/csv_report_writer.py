"""Exportación CSV del reporte.

Formato:
- Una línea por fila, campos unidos por ',' y terminada en '\\n'.
- Sin comillas ni escapado: un nombre con ',' desplaza las columnas de su
  fila. Los consumidores actuales esperan exactamente este formato.
- El fichero anterior se borra y se recrea; nunca se añade al final.
"""

from __future__ import annotations

import logging
from pathlib import Path

from core.domain.models import Report
from core.errors import WriteError

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ","
LINE_TERMINATOR = "\n"


def render_report(report: Report) -> str:
    return "".join(FIELD_SEPARATOR.join(cells) + LINE_TERMINATOR for cells in report.lines())


def write_report(report: Report, destination: Path) -> Path:
    content = render_report(report)
    try:
        if destination.exists():
            destination.unlink()
        # "x": falla si otro proceso lo recreó entre medias.
        with destination.open("x", encoding="utf-8", newline="") as fh:
            fh.write(content)
    except OSError as exc:
        raise WriteError(f"Cannot create the target file: {destination} ({exc})") from exc

    logger.info("Report written to %s (%d rows)", destination, len(report.rows))
    return destination

"""Cruce inventario ↔ envelope.

Left join por clave exacta: cada plugin del inventario produce una fila, en
el orden del inventario. Los plugins que solo están en el envelope no
aparecen.
"""

from __future__ import annotations

from typing import Mapping

from core.domain.models import ManifestRecord, Report, ReportRow


def build_row(key: str, installed_version: str, record: ManifestRecord | None) -> ReportRow:
    if record is None:
        return ReportRow(key=key, installed_version=installed_version, present_in_manifest=False)
    return ReportRow(
        key=key,
        display_name=record.display_name,
        installed_version=installed_version,
        present_in_manifest=True,
        manifest_version=record.manifest_version,
        tier=record.tier,
        scope=record.scope,
    )


def reconcile(inventory: Mapping[str, str], manifest: Mapping[str, ManifestRecord]) -> Report:
    rows = tuple(
        build_row(key, installed_version, manifest.get(key))
        for key, installed_version in inventory.items()
    )
    return Report(rows=rows)

"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- El CSV es el artefacto; esto solo es la vista en terminal.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import Report
from core.services.analysis_pipeline import AnalysisResult


def print_banner(console: Console) -> None:
    title = Text("Envelope Analyzer", style="bold cyan")
    subtitle = Text("Inventario de plugins • Envelope • Reporte CSV", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_report_table(report: Report) -> Table:
    """Tabla Rich con las mismas columnas que el CSV."""

    table = Table(title="Analyzed Plugins")
    styles = ("cyan", "white", "white", "green", "white", "magenta", "magenta")
    for name, style in zip(report.header, styles):
        table.add_column(name, style=style, no_wrap=name == "Id")

    for row in report.rows:
        cells = [Text(value) for value in row.cells()]
        if not row.present_in_manifest:
            cells[3].stylize("red")
        elif row.version_drift:
            cells[4].stylize("yellow")
        table.add_row(*cells)
    return table


def build_summary_panel(result: AnalysisResult) -> Panel:
    """Resumen de la ejecución (conteos + rutas de salida)."""

    report = result.report
    body = Text()
    body.append(f"Envelope: {result.locator.file_name}\n", style="bold")
    body.append(f"Plugins analizados: {len(report.rows)}\n")
    body.append(f"En el envelope: {report.present_count}\n", style="green")
    body.append(f"Fuera del envelope: {report.absent_count}\n", style="red")
    body.append(f"Con otra versión: {report.drift_count}\n", style="yellow")
    body.append(f"\nReporte: {result.report_path}", style="dim")
    for path in result.extra_outputs:
        body.append(f"\nExport: {path}", style="dim")

    return Panel(body, title=Text("Resumen", style="bold yellow"), border_style="yellow")

"""CLI entrypoint (Typer).

    envelope-analyzer analyze INVENTORY PRODUCT RELEASE [USERNAME PASSWORD]
    envelope-analyzer doctor run
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional
from urllib.parse import urlsplit

import typer
from rich.console import Console
from rich.logging import RichHandler

from adapters.json_exporter import export_report_json
from cli import doctor
from cli.ui_components import build_report_table, build_summary_panel, print_banner
from core.config import AppSettings
from core.domain.models import Credentials
from core.errors import AnalyzerError
from core.services.analysis_pipeline import (
    AnalysisRequest,
    PipelineHooks,
    default_credentials,
    run_analysis,
)

app = typer.Typer(
    no_args_is_help=True,
    help="Compare an installed plugin inventory with a product release envelope.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _resolve_repo_url(value: str | None) -> str | None:
    """Accept a local directory and turn it into a `file:` root."""

    if value is None:
        return None
    if "://" not in value and not value.startswith("file:"):
        path = Path(value).expanduser()
        if path.is_dir():
            return path.resolve().as_uri() + "/"
    return value


def _resolve_credentials(username: str | None, password: str | None) -> Credentials | None:
    if username is None and password is None:
        return None
    if not username or password is None:
        raise typer.BadParameter("USERNAME and PASSWORD must be given together")
    return Credentials(username=username, password=password)


def _require_remote_credentials(
    repo_url: str, credentials: Credentials | None, settings: AppSettings
) -> None:
    """A remote repository needs USERNAME and PASSWORD, from the arguments or the settings."""

    if urlsplit(repo_url).scheme.lower() == "file":
        return
    if credentials is None and default_credentials(settings) is None:
        raise typer.BadParameter(
            f"USERNAME and PASSWORD are required to download from {repo_url} "
            "(or set ENVELOPE_ANALYZER_REPO_USERNAME/ENVELOPE_ANALYZER_REPO_PASSWORD)"
        )


@app.command()
def analyze(
    inventory: Path = typer.Argument(..., help="Plugin list file (key:version[:extra] per line)."),
    product: str = typer.Argument(..., help="Product identifier: cje or cjoc."),
    release: str = typer.Argument(..., help="Product release, e.g. 2.107.3.4."),
    username: Optional[str] = typer.Argument(None, help="Repository user for the envelope download."),
    password: Optional[str] = typer.Argument(None, help="Repository password (quote special characters)."),
    repo_url: Optional[str] = typer.Option(
        None, "--repo-url", help="Repository root ending in '/': http(s) URL, file: URL or local directory."
    ),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", help="Directory for the CSV report."),
    json_output: Optional[Path] = typer.Option(None, "--json", help="Also export the report as JSON."),
    show_table: bool = typer.Option(False, "--table", help="Print every report row."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    """Analyze INVENTORY against the PRODUCT RELEASE envelope and write the CSV report."""

    overrides = {"output_dir": output_dir} if output_dir is not None else {}
    settings = AppSettings(**overrides)
    configure_logging("DEBUG" if verbose else settings.log_level)
    credentials = _resolve_credentials(username, password)

    print_banner(_err_console)
    logger.info("Processing...")
    try:
        request = AnalysisRequest.from_cli(
            inventory_path=inventory,
            product_id=product,
            release=release,
            credentials=credentials,
            repo_url=_resolve_repo_url(repo_url),
        )
        _require_remote_credentials(request.repo_url or settings.repo_url, credentials, settings)
        with _err_console.status("Analyzing...") as status:
            hooks = PipelineHooks(stage=lambda name: status.update(f"Analyzing: {name}"))
            result = run_analysis(settings=settings, request=request, hooks=hooks)
    except AnalyzerError as exc:
        logger.error("Process failed! %s: %s", type(exc).__name__, exc)
        raise typer.Exit(code=1) from exc

    if json_output is not None:
        try:
            result.extra_outputs.append(export_report_json(report=result.report, output_path=json_output))
        except OSError as exc:
            logger.error("Cannot export JSON to %s: %s", json_output, exc)
            raise typer.Exit(code=1) from exc

    if show_table:
        _console.print(build_report_table(result.report))
    _err_console.print(build_summary_panel(result))
    logger.info("That's it!")


def run() -> None:
    # Terminales Windows (cp1252): forzar UTF-8 para Rich.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")
    app()


if __name__ == "__main__":
    run()

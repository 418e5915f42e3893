"""Doctor command for environment diagnostics."""

from __future__ import annotations

import tempfile
from pathlib import Path

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_client
from core.config import AppSettings, write_user_env_vars
from core.services.analysis_pipeline import default_credentials

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_repo(settings: AppSettings) -> tuple[bool, str]:
    if not settings.repo_url.startswith(("http://", "https://")):
        return True, "Local repository, no connectivity needed"
    try:
        with build_client(settings, credentials=default_credentials(settings)) as client:
            response = client.head(settings.repo_url)
        return response.status_code < 400, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc)


def _check_output_dir(output_dir: Path) -> tuple[bool, str]:
    """Create the output directory and a scratch file inside it."""

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(dir=output_dir, prefix="_doctor_"):
            pass
        return True, str(output_dir.resolve())
    except OSError as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="Envelope Analyzer Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Repository URL", "OK", settings.repo_url)
    if default_credentials(settings) is not None:
        table.add_row("Credentials", "OK", f"user {settings.repo_username}")
    else:
        table.add_row("Credentials", "OPTIONAL", "Pass USERNAME PASSWORD to `analyze` or run `doctor setup-repo`")

    ok_dir, detail_dir = _check_output_dir(settings.output_dir)
    table.add_row("Output directory", "OK" if ok_dir else "FAIL", detail_dir)

    ok_repo, detail_repo = _check_repo(settings)
    table.add_row("Repository connectivity", "OK" if ok_repo else "FAIL", detail_repo)

    _console.print(table)

    if not (ok_dir and ok_repo):
        raise typer.Exit(code=1)


@app.command(name="setup-repo")
def setup_repo() -> None:
    """Interactive repository setup (stores config in the user config .env)."""

    settings = AppSettings()
    repo_url = typer.prompt("Repository URL", default=settings.repo_url, show_default=True).strip()
    username = typer.prompt("Username", default=settings.repo_username or "", show_default=True).strip()
    password = typer.prompt("Password", hide_input=True, default="", show_default=False)

    if not repo_url.endswith("/"):
        raise typer.BadParameter("Repository URL must end with '/'")

    env_path = write_user_env_vars(
        {
            "ENVELOPE_ANALYZER_REPO_URL": repo_url,
            "ENVELOPE_ANALYZER_REPO_USERNAME": username or None,
            "ENVELOPE_ANALYZER_REPO_PASSWORD": password or None,
        }
    )

    _console.print(f"[green]Saved repository config to:[/green] {env_path}")

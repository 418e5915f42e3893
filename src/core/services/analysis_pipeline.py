"""Envelope analysis orchestration.

The CLI delegates the whole run to `run_analysis`, which keeps the stages in
a fixed order: locator → envelope → inventory → reconciliation → report.
Nothing is written until every earlier stage has succeeded, so a failed run
never leaves a partial report behind.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from adapters.csv_report_writer import write_report
from adapters.envelope_model import JsonEnvelopeModel
from adapters.manifest_fetcher import HttpManifestFetcher
from core.config import AppSettings
from core.domain.models import Credentials, Locator, Report
from core.domain.products import Product
from core.errors import ConfigurationError, InventoryNotFoundError
from core.services.coordinates import build_manifest_locator
from core.services.inventory import load_inventory
from core.services.manifest_accessor import ManifestAccessor
from core.services.reconciler import reconcile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisRequest:
    """Parameters of one analysis run, validated before any I/O."""

    inventory_path: Path
    product: Product
    release: str
    credentials: Credentials | None = None
    repo_url: str | None = None

    def __post_init__(self) -> None:
        if not self.release or not self.release.strip():
            raise ConfigurationError("Product release must not be empty")
        if not self.inventory_path.exists():
            raise InventoryNotFoundError(self.inventory_path)

    @classmethod
    def from_cli(
        cls,
        *,
        inventory_path: Path,
        product_id: str,
        release: str,
        credentials: Credentials | None = None,
        repo_url: str | None = None,
    ) -> "AnalysisRequest":
        return cls(
            inventory_path=inventory_path,
            product=Product.parse(product_id),
            release=release,
            credentials=credentials,
            repo_url=repo_url,
        )


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers (progress)."""

    stage: Callable[[str], None] | None = None


@dataclass
class AnalysisResult:
    """Output of a pipeline invocation."""

    report: Report
    locator: Locator
    report_path: Path
    extra_outputs: list[Path] = field(default_factory=list)


def prepare_output_dir(output_dir: Path) -> None:
    """Create the output directory; a failure is only logged here."""

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.warning("Something went wrong with directory creation: %s (%s)", output_dir, exc)


def build_default_accessor(settings: AppSettings) -> ManifestAccessor:
    return ManifestAccessor(
        model=JsonEnvelopeModel(),
        fetcher=HttpManifestFetcher(settings),
        cache_dir=settings.manifest_cache_dir,
    )


def default_credentials(settings: AppSettings) -> Credentials | None:
    if settings.repo_username and settings.repo_password is not None:
        return Credentials(username=settings.repo_username, password=settings.repo_password)
    return None


def run_analysis(
    *,
    settings: AppSettings,
    request: AnalysisRequest,
    accessor: ManifestAccessor | None = None,
    hooks: PipelineHooks | None = None,
) -> AnalysisResult:
    hooks = hooks or PipelineHooks()

    def stage(name: str) -> None:
        logger.debug("Stage: %s", name)
        if hooks.stage:
            hooks.stage(name)

    prepare_output_dir(settings.output_dir)
    accessor = accessor or build_default_accessor(settings)
    credentials = request.credentials or default_credentials(settings)

    stage("locator")
    repo_url = request.repo_url or settings.repo_url
    locator = build_manifest_locator(repo_url, request.product.identity, request.release)
    logger.info("Envelope for %s %s: %s", request.product.label(), request.release, locator.url)

    stage("envelope")
    manifest = accessor.fetch_manifest(locator, credentials)

    stage("inventory")
    inventory = load_inventory(request.inventory_path)

    stage("reconcile")
    report = reconcile(inventory, manifest)

    stage("write")
    report_path = write_report(report, settings.report_path)

    return AnalysisResult(report=report, locator=locator, report_path=report_path)

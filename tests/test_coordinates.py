from __future__ import annotations

import pytest

from core.config import DEFAULT_REPO_URL
from core.domain.products import Product
from core.errors import InvalidLocator
from core.services.coordinates import build_manifest_locator, envelope_file_name


def test_envelope_file_name() -> None:
    assert envelope_file_name(Product.CJE.identity, "2.107.3.4") == "jenkins-enterprise-war-2.107.3.4-envelope.json"


def test_operations_center_locator() -> None:
    locator = build_manifest_locator(DEFAULT_REPO_URL, Product.CJOC.identity, "2.107.3.4")

    assert locator.url == (
        "https://nexus-internal.cloudbees.com/content/repositories/releases/"
        "com/cloudbees/operations-center/server/operations-center-war/2.107.3.4/"
        "operations-center-war-2.107.3.4-envelope.json"
    )
    assert locator.file_name == "operations-center-war-2.107.3.4-envelope.json"
    assert not locator.is_local


def test_enterprise_locator() -> None:
    locator = build_manifest_locator(DEFAULT_REPO_URL, Product.CJE.identity, "2.107.3.4")

    assert locator.url == (
        "https://nexus-internal.cloudbees.com/content/repositories/releases/"
        "com/cloudbees/jenkins/main/jenkins-enterprise-war/2.107.3.4/"
        "jenkins-enterprise-war-2.107.3.4-envelope.json"
    )


def test_locator_is_deterministic() -> None:
    first = build_manifest_locator(DEFAULT_REPO_URL, Product.CJE.identity, "2.89.4.2")
    second = build_manifest_locator(DEFAULT_REPO_URL, Product.CJE.identity, "2.89.4.2")

    assert first == second


def test_release_only_changes_release_segments() -> None:
    old = build_manifest_locator(DEFAULT_REPO_URL, Product.CJE.identity, "2.89.4.2").url.split("/")
    new = build_manifest_locator(DEFAULT_REPO_URL, Product.CJE.identity, "2.107.3.4").url.split("/")

    assert len(old) == len(new)
    changed = [i for i, (a, b) in enumerate(zip(old, new)) if a != b]
    assert changed == [len(old) - 2, len(old) - 1]


def test_file_locator(tmp_path) -> None:
    root = tmp_path.resolve().as_uri() + "/"
    locator = build_manifest_locator(root, Product.CJE.identity, "2.107.3.4")

    assert locator.is_local
    assert locator.local_path == (
        tmp_path.resolve()
        / "com/cloudbees/jenkins/main/jenkins-enterprise-war/2.107.3.4"
        / "jenkins-enterprise-war-2.107.3.4-envelope.json"
    )


def test_root_without_trailing_separator_is_not_normalized() -> None:
    locator = build_manifest_locator("https://repo.example.com/releases", Product.CJE.identity, "1.0")

    assert locator.url.startswith("https://repo.example.com/releasescom/cloudbees/")


@pytest.mark.parametrize(
    "root",
    [
        "nexus-internal/releases/",
        "ftp://repo.example.com/",
        "https:///releases/",
        "https://repo.example.com:99999/",
        "https://repo example.com/",
    ],
)
def test_invalid_locator(root: str) -> None:
    with pytest.raises(InvalidLocator):
        build_manifest_locator(root, Product.CJE.identity, "2.107.3.4")


def test_release_with_control_character_is_rejected() -> None:
    with pytest.raises(InvalidLocator):
        build_manifest_locator(DEFAULT_REPO_URL, Product.CJE.identity, "2.107.3.4\n")


def test_file_root_with_space_is_accepted() -> None:
    locator = build_manifest_locator("file:/tmp/my repo/", Product.CJE.identity, "2.107.3.4")

    assert locator.is_local
    assert "my repo" in locator.local_path.parts
    assert locator.local_path.name == "jenkins-enterprise-war-2.107.3.4-envelope.json"

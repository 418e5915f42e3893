from __future__ import annotations

import json
from pathlib import Path

import pytest

from core.config import AppSettings
from core.domain.models import ManifestRecord, Scope, Tier


RELEASE = "2.107.3.4"

INVENTORY_TEXT = (
    "async-http-client:1.7.24.1:not-pinned\n"
    "ant:1.4:not-pinned\n"
    "apache-httpcomponents-client-4-api:4.5.3-2.0:not-pinned\n"
    "active-directory:2.4:not-pinned\n"
)

ENVELOPE = {
    "product": "cje",
    "version": RELEASE,
    "distribution": "rolling",
    "commit": "76bc75c3d52602e354594cf412492a9868f3085c",
    "core": "2.107.3-cb-1",
    "plugins": {
        "async-http-client": {
            "name": "Async Http Client",
            "groupId": "org.jenkins-ci.plugins",
            "artifactId": "async-http-client",
            "version": "1.7.24.1",
            "scope": "bootstrap",
            "sha1": "SC/TzSN+eOrewaDZJZyzLpIQV7E=",
            "tier": "verified",
        },
        "structs": {
            "name": "Structs Plugin",
            "groupId": "org.jenkins-ci.plugins",
            "artifactId": "structs",
            "version": "1.14",
            "scope": "bootstrap",
            "sha1": "yQrTUhP5jDuBYEyVqyw06Zy9TqA=",
            "tier": "verified",
        },
        "ant": {
            "name": "Ant Plugin",
            "groupId": "org.jenkins-ci.plugins",
            "artifactId": "ant",
            "version": "1.8",
            "dependencies": {"structs": "1.6"},
            "scope": "fat",
            "sha1": "xwEeOLr2K9b3Vu5TvSI1jQYpMjE=",
            "tier": "verified",
        },
        "durable-task": {
            "name": "Durable Task Plugin",
            "groupId": "org.jenkins-ci.plugins",
            "artifactId": "durable-task",
            "version": "1.22",
            "scope": "fat",
            "sha1": "CAGRX6lT6zBhwr5XOsYAoPCc7kY=",
            "tier": "compatible",
        },
    },
    "blacklist": ["amazon-aws-cli", "castle", "tiger-client"],
    "signature": {
        "correct_digest": "USolqGOgWlXzLH7dsSAd6AUDvGo=",
        "digest": "hRn/Bt6ztaWl43IK5sq4eAjyW0Q=",
    },
}

EXPECTED_CSV = (
    "Id,Name,Version,Envelope,Version,Type,Scope\n"
    "async-http-client,Async Http Client,1.7.24.1,YES,1.7.24.1,VERIFIED,BOOTSTRAP\n"
    "ant,Ant Plugin,1.4,YES,1.8,VERIFIED,FAT\n"
    "apache-httpcomponents-client-4-api,,4.5.3-2.0,NO,,,\n"
    "active-directory,,2.4,NO,,,\n"
)


@pytest.fixture
def envelope_bytes() -> bytes:
    return json.dumps(ENVELOPE, indent=2).encode("utf-8")


@pytest.fixture
def inventory_file(tmp_path: Path) -> Path:
    path = tmp_path / "active.txt"
    path.write_text(INVENTORY_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def local_repo(tmp_path: Path, envelope_bytes: bytes) -> Path:
    """Maven-like tree holding the cje envelope for RELEASE."""

    repo = tmp_path / "m2"
    folder = repo / "com" / "cloudbees" / "jenkins" / "main" / "jenkins-enterprise-war" / RELEASE
    folder.mkdir(parents=True)
    (folder / f"jenkins-enterprise-war-{RELEASE}-envelope.json").write_bytes(envelope_bytes)
    return repo


@pytest.fixture
def local_repo_url(local_repo: Path) -> str:
    return local_repo.resolve().as_uri() + "/"


@pytest.fixture
def settings(tmp_path: Path) -> AppSettings:
    return AppSettings(
        output_dir=tmp_path / "target",
        repo_url="https://repo.example.com/releases/",
    )


@pytest.fixture
def manifest_records() -> dict[str, ManifestRecord]:
    return {
        "async-http-client": ManifestRecord(
            key="async-http-client",
            display_name="Async Http Client",
            manifest_version="1.7.24.1",
            tier=Tier.VERIFIED,
            scope=Scope.BOOTSTRAP,
        ),
        "structs": ManifestRecord(
            key="structs",
            display_name="Structs Plugin",
            manifest_version="1.14",
            tier=Tier.VERIFIED,
            scope=Scope.BOOTSTRAP,
        ),
        "ant": ManifestRecord(
            key="ant",
            display_name="Ant Plugin",
            manifest_version="1.8",
            tier=Tier.VERIFIED,
            scope=Scope.FAT,
        ),
        "durable-task": ManifestRecord(
            key="durable-task",
            display_name="Durable Task Plugin",
            manifest_version="1.22",
            tier=Tier.COMPATIBLE,
            scope=Scope.FAT,
        ),
    }

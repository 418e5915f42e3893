"""Known products whose envelopes can be analyzed.

The set is closed: each product maps to the Maven coordinates under which
its envelope is published. Keeping it in the domain layer lets the CLI, the
pipeline and the tests share one source of truth.
"""

from __future__ import annotations

from enum import Enum

from core.domain.models import ProductIdentity
from core.errors import ConfigurationError


class Product(str, Enum):
    """Products accepted on the command line (`cje`, `cjoc`)."""

    CJE = "cje"
    CJOC = "cjoc"

    @classmethod
    def parse(cls, value: str) -> "Product":
        """Resolve a product identifier case-insensitively."""

        normalized = (value or "").strip().lower()
        try:
            return cls(normalized)
        except ValueError:
            known = ", ".join(p.value for p in cls)
            raise ConfigurationError(f"Unknown product {value!r} (expected one of: {known})") from None

    @property
    def identity(self) -> ProductIdentity:
        return _IDENTITIES[self]

    def label(self) -> str:
        """Human readable label for the summary panel and logging."""

        return "Operations Center" if self is Product.CJOC else "Enterprise"


_IDENTITIES: dict[Product, ProductIdentity] = {
    Product.CJE: ProductIdentity(
        group_id="com.cloudbees.jenkins.main",
        artifact_id="jenkins-enterprise-war",
    ),
    Product.CJOC: ProductIdentity(
        group_id="com.cloudbees.operations-center.server",
        artifact_id="operations-center-war",
    ),
}

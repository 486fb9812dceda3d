from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol


class TaxonomyProvider(Protocol):
    @property
    def vocabulary(self) -> tuple[str, ...]:
        """Canonical skill names in vocabulary order."""

    @property
    def normalizations(self) -> Mapping[str, str]:
        """Lowercase variant spelling mapped to its canonical skill name."""

    def normalize_skill(self, raw: str) -> tuple[str, str | None]:
        """Return normalized text and optional canonical skill name."""

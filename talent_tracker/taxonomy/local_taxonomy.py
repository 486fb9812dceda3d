from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from .provider import TaxonomyProvider


class LocalTaxonomy(TaxonomyProvider):
    def __init__(self, skills_path: str | Path | None = None) -> None:
        path = Path(skills_path) if skills_path else Path(__file__).with_name("skills.json")
        vocabulary, normalizations = self._load_skills(path)
        self._vocabulary = vocabulary
        self._normalizations = MappingProxyType(normalizations)
        self._canonical_by_lower = {skill.lower(): skill for skill in vocabulary}

    @staticmethod
    def _load_skills(path: Path) -> tuple[tuple[str, ...], dict[str, str]]:
        with path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
        if not isinstance(raw, dict):
            raise RuntimeError(f"Invalid skills file '{path}': expected a top-level mapping.")
        vocabulary = tuple(
            dict.fromkeys(str(item).strip() for item in raw.get("vocabulary", []) if str(item).strip())
        )
        normalizations = {
            str(key).strip().lower(): str(value).strip()
            for key, value in (raw.get("normalizations") or {}).items()
            if str(key).strip() and str(value).strip()
        }
        return vocabulary, normalizations

    @property
    def vocabulary(self) -> tuple[str, ...]:
        return self._vocabulary

    @property
    def normalizations(self) -> Mapping[str, str]:
        return self._normalizations

    def normalize_skill(self, raw: str) -> tuple[str, str | None]:
        normalized = raw.strip().lower()
        canonical = self._normalizations.get(normalized) or self._canonical_by_lower.get(normalized)
        return normalized, canonical

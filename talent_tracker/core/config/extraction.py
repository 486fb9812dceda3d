from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

_EXTRACTION_CONFIG_CACHE: dict[str, Any] | None = None
_EXTRACTION_CONFIG_PATH = Path(__file__).with_name("extraction.yaml")


def get_extraction_config() -> dict[str, Any]:
    """Load extractor windows and thresholds from extraction.yaml and cache them."""
    global _EXTRACTION_CONFIG_CACHE

    if _EXTRACTION_CONFIG_CACHE is not None:
        return _EXTRACTION_CONFIG_CACHE

    if not _EXTRACTION_CONFIG_PATH.exists():
        raise RuntimeError(
            f"Extraction config not found at '{_EXTRACTION_CONFIG_PATH}'. "
            "Expected file: talent_tracker/core/config/extraction.yaml"
        )

    try:
        raw = _EXTRACTION_CONFIG_PATH.read_text(encoding="utf-8")
    except OSError as exc:
        raise RuntimeError(
            f"Failed to read extraction config '{_EXTRACTION_CONFIG_PATH}': {exc}"
        ) from exc

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise RuntimeError(
            f"Invalid YAML in extraction config '{_EXTRACTION_CONFIG_PATH}': {exc}"
        ) from exc

    if not isinstance(parsed, dict):
        raise RuntimeError(
            f"Invalid extraction config '{_EXTRACTION_CONFIG_PATH}': expected a top-level mapping."
        )

    _EXTRACTION_CONFIG_CACHE = parsed
    return _EXTRACTION_CONFIG_CACHE


def get_extraction_value(path: str, default: Any = None) -> Any:
    """Get nested config value using dot path notation, e.g. 'summary.max_chars'."""
    if not path:
        return default

    current: Any = get_extraction_config()
    for key in path.split("."):
        if not isinstance(current, dict):
            return default
        if key not in current:
            return default
        current = current[key]
    return current


def get_extraction_int(path: str, default: int) -> int:
    value = get_extraction_value(path, default)
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    return value

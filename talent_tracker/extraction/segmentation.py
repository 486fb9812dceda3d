from __future__ import annotations

import re

from .knowledge import KNOWN_SECTION_HEADERS

_BULLET_CHARS = "•◦▪▫●○■□◆◇▶►-–—*·"
_BULLET_PATTERN = re.compile(rf"^\s*(?:[{re.escape(_BULLET_CHARS)}]|(?:\d+[\.\)]))\s+")


def split_lines(text: str) -> list[str]:
    """Trimmed non-blank lines in document order."""
    lines = [line.strip() for line in (text or "").splitlines()]
    return [line for line in lines if line]


def normalize_line(line: str) -> str:
    return re.sub(r"\s+", " ", line).strip()


def heading_key(line: str) -> str:
    return normalize_line(line).lower().rstrip(":").strip()


def is_known_section_heading(line: str) -> bool:
    return heading_key(line) in KNOWN_SECTION_HEADERS


def is_bullet_like(line: str) -> bool:
    return bool(_BULLET_PATTERN.match(line))


def strip_bullet_prefix(line: str) -> str:
    return _BULLET_PATTERN.sub("", line).strip()


def is_all_caps_line(line: str, *, min_chars: int, max_chars: int) -> bool:
    """Short shouted line such as ``PROJECTS``; bounds are exclusive."""
    stripped = line.strip()
    return stripped == stripped.upper() and min_chars < len(stripped) < max_chars

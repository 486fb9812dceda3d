from __future__ import annotations

import re
from collections.abc import Sequence

from talent_tracker.core.config.extraction import get_extraction_int

EMAIL_RE = re.compile(r"[\w.-]+@[\w.-]+\.\w+")
# Optional country code, optional parenthesized area code, then 3-3-4 digit
# groups separated by a space, tab, dot or hyphen. Never spans lines.
PHONE_RE = re.compile(r"(?:\+?\d{1,3}[-. \t]?)?\(?\d{3}\)?[-. \t]?\d{3}[-. \t]?\d{4}")
_PARENTHESIZED_RE = re.compile(r"\([^)]*\)")
_PROFILE_LINK_MARKERS = ("linkedin", "github")


def extract_email(text: str) -> str:
    match = EMAIL_RE.search(text)
    return match.group() if match else ""


def extract_phone(text: str) -> str:
    match = PHONE_RE.search(text)
    return match.group() if match else ""


def is_name_like(line: str) -> bool:
    if not line:
        return False
    if EMAIL_RE.search(line) or PHONE_RE.search(line):
        return False
    lowered = line.lower()
    if any(marker in lowered for marker in _PROFILE_LINK_MARKERS):
        return False

    tokens = line.split()
    min_tokens = get_extraction_int("contact.name_min_tokens", 2)
    max_tokens = get_extraction_int("contact.name_max_tokens", 4)
    if len(tokens) < min_tokens or len(tokens) > max_tokens:
        return False

    min_chars = get_extraction_int("contact.name_min_chars", 3)
    max_chars = get_extraction_int("contact.name_max_chars", 50)
    return min_chars < len(line) < max_chars


def extract_name(lines: Sequence[str]) -> str:
    """First line near the top that reads like a person's name.

    A trailing job title in parentheses is dropped before the line is judged,
    so ``Jane Roe (Backend Engineer)`` yields ``Jane Roe``.
    """
    scan_lines = get_extraction_int("contact.name_scan_lines", 5)
    for raw_line in lines[:scan_lines]:
        line = _PARENTHESIZED_RE.sub("", raw_line).strip()
        if is_name_like(line):
            return line
    return ""

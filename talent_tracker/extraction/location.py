"""Location detection as a ranked list of search passes.

Each pass owns a search window and an acceptance rule. Passes run in order and
the first one that yields a value wins. Rules loosen near the contact header
and tighten further down the page, with two narrow shapes as a last resort.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from typing import NamedTuple

from talent_tracker.core.config.extraction import get_extraction_int

from .knowledge import KNOWN_CITIES, LOCATION_EXCLUSIONS

_WORDS = r"[A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+)*"

LOCATION_PATTERNS: tuple[re.Pattern[str], ...] = (
    # City, ST
    re.compile(rf"({_WORDS}),[ \t]*([A-Z]{{2}})(?=[ \t]|\||$|\d)", re.MULTILINE),
    # City - 523316
    re.compile(rf"({_WORDS})[ \t]*[-–—][ \t]*(\d{{6}})"),
    # City, Country
    re.compile(rf"({_WORDS}),[ \t]*([A-Z][a-z]+)(?=[ \t]|\||$)", re.MULTILINE),
    # City, State, Country
    re.compile(rf"({_WORDS}),[ \t]*([A-Z][a-z]+),[ \t]*([A-Z][a-z]+)"),
)

_CONTACT_LINE_RE = re.compile(rf"[\w.-]+@[\w.-]+\.\w+.*?\|.*?({_WORDS},[ \t]*[A-Z]{{2}})")
_STATE_CODE_RE = re.compile(r"^[A-Z]{2}$")
_POSTAL_CODE_RE = re.compile(r"\d{5,6}")


class LocationPass(NamedTuple):
    name: str
    search: Callable[[Sequence[str], str], str]


def is_excluded(candidate: str) -> bool:
    lowered = candidate.lower()
    return any(term in lowered for term in LOCATION_EXCLUSIONS)


def has_location_shape(candidate: str) -> bool:
    min_chars = get_extraction_int("location.min_chars", 5)
    max_chars = get_extraction_int("location.max_chars", 50)
    if not min_chars <= len(candidate) <= max_chars:
        return False
    return "," in candidate or "-" in candidate or bool(_POSTAL_CODE_RE.search(candidate))


def mentions_known_city(candidate: str) -> bool:
    lowered = candidate.lower()
    return any(city in lowered for city in KNOWN_CITIES)


def _accept_header_match(candidate: str) -> bool:
    return not is_excluded(candidate) and has_location_shape(candidate)


def _accept_extended_match(candidate: str) -> bool:
    return _accept_header_match(candidate) and mentions_known_city(candidate)


def _windowed_pass(
    start: int,
    stop: int,
    accept: Callable[[str], bool],
) -> Callable[[Sequence[str], str], str]:
    def search(lines: Sequence[str], text: str) -> str:
        window = "\n".join(lines[start:stop])
        if not window:
            return ""
        # Only the first hit of each pattern is judged.
        for pattern in LOCATION_PATTERNS:
            match = pattern.search(window)
            if not match:
                continue
            candidate = match.group().strip()
            if accept(candidate):
                return candidate
        return ""

    return search


def _search_contact_line(lines: Sequence[str], text: str) -> str:
    match = _CONTACT_LINE_RE.search(text)
    return match.group(1).strip() if match else ""


def _search_short_city_state(lines: Sequence[str], text: str) -> str:
    header_lines = get_extraction_int("location.header_lines", 5)
    max_chars = get_extraction_int("location.short_line_max_chars", 50)
    for line in lines[:header_lines]:
        if len(line) >= max_chars or "," not in line:
            continue
        parts = [part.strip() for part in line.split(",")]
        if len(parts) == 2 and _STATE_CODE_RE.match(parts[1]):
            return line.strip()
    return ""


def build_location_passes() -> tuple[LocationPass, ...]:
    header_lines = get_extraction_int("location.header_lines", 5)
    extended_end = get_extraction_int("location.extended_window_end", 15)
    return (
        LocationPass("contact_header", _windowed_pass(0, header_lines, _accept_header_match)),
        LocationPass("extended_header", _windowed_pass(header_lines, extended_end, _accept_extended_match)),
        LocationPass("contact_line", _search_contact_line),
        LocationPass("short_city_state", _search_short_city_state),
    )


def extract_location(
    lines: Sequence[str],
    text: str,
    passes: Sequence[LocationPass] | None = None,
) -> str:
    for location_pass in passes or build_location_passes():
        found = location_pass.search(lines, text)
        if found:
            return found
    return ""

from __future__ import annotations

import re
from collections.abc import Sequence

from talent_tracker.core.config.extraction import get_extraction_int
from talent_tracker.schemas.resume import WorkEntry

from .knowledge import EDUCATION_KEYWORDS, EXPERIENCE_SECTION_HEADERS, SUMMARY_KEYWORDS
from .segmentation import heading_key, is_bullet_like, is_known_section_heading, strip_bullet_prefix

# Fractional form first so "2.5+ years" is not read as 5.
EXPERIENCE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(\d+\.\d+)\+?\s*(?:years?|yrs?)(?:\s+of)?\s+(?:experience|exp)", re.IGNORECASE),
    re.compile(r"(\d+)\+?\s*(?:years?|yrs?)(?:\s+of)?\s+(?:experience|exp)", re.IGNORECASE),
)

_MONTH = r"(?:jan|feb|mar|apr|may|jun|jul|aug|sep|sept|oct|nov|dec)[a-z]*\.?"
_DATE = rf"(?:{_MONTH}\s+)?(?:\d{{1,2}}/)?(?:19|20)\d{{2}}"
_DATE_RANGE = rf"{_DATE}\s*(?:-|–|—|to)\s*(?:{_DATE}|present|current|now|today)"
_TRAILING_PAREN_RE = re.compile(r"\(([^()]*)\)\s*$")
_TRAILING_RANGE_RE = re.compile(rf"[\s,|]*({_DATE_RANGE})\s*$", re.IGNORECASE)
_DURATION_RE = re.compile(rf"^(?:{_DATE_RANGE}|{_DATE})$", re.IGNORECASE)
_HAS_YEAR_RE = re.compile(r"(?:19|20)\d{2}|present|current", re.IGNORECASE)
_ROLE_SEPARATORS = (" - ", " – ", " — ", " | ", " at ", " @ ", ", ")


def extract_experience_years(text: str) -> float:
    for pattern in EXPERIENCE_PATTERNS:
        match = pattern.search(text)
        if match:
            return float(match.group(1))
    return 0.0


def extract_education(lines: Sequence[str]) -> str:
    for line in lines:
        lowered = line.lower()
        if any(keyword in lowered for keyword in EDUCATION_KEYWORDS):
            return line
    return ""


def extract_summary(lines: Sequence[str]) -> str:
    scan_lines = get_extraction_int("summary.scan_lines", 10)
    follow_lines = get_extraction_int("summary.follow_lines", 4)
    min_line_chars = get_extraction_int("summary.min_line_chars", 20)
    max_chars = get_extraction_int("summary.max_chars", 500)

    for index, line in enumerate(lines[:scan_lines]):
        lowered = line.lower()
        if not any(keyword in lowered for keyword in SUMMARY_KEYWORDS):
            continue
        following = lines[index + 1 : index + 1 + follow_lines]
        picked = [item for item in following if len(item) > min_line_chars]
        if picked:
            return " ".join(picked)[:max_chars]
    return ""


def split_duration(line: str) -> tuple[str, str]:
    """Split a trailing date range off a job header line."""
    paren = _TRAILING_PAREN_RE.search(line)
    if paren and _HAS_YEAR_RE.search(paren.group(1)):
        return line[: paren.start()].strip(" ,|-–—"), paren.group(1).strip()
    trailing = _TRAILING_RANGE_RE.search(line)
    if trailing:
        return line[: trailing.start()].strip(" ,|-–—"), trailing.group(1).strip()
    return line.strip(), ""


def split_role(text: str) -> tuple[str, str]:
    for separator in _ROLE_SEPARATORS:
        if separator in text:
            position, company = text.split(separator, 1)
            return position.strip(), company.strip()
    return text.strip(), ""


def parse_job_header(line: str) -> WorkEntry:
    remainder, duration = split_duration(line)
    position, company = split_role(remainder)
    return WorkEntry(position=position, company=company, duration=duration)


def _experience_section(lines: Sequence[str]) -> list[str]:
    for index, line in enumerate(lines):
        if heading_key(line) not in EXPERIENCE_SECTION_HEADERS:
            continue
        section: list[str] = []
        for next_line in lines[index + 1 :]:
            if is_known_section_heading(next_line):
                break
            section.append(next_line)
        return section
    return []


def extract_work_experience(lines: Sequence[str]) -> list[WorkEntry]:
    entries: list[WorkEntry] = []
    current: WorkEntry | None = None

    for line in _experience_section(lines):
        if is_bullet_like(line):
            bullet = strip_bullet_prefix(line)
            if current is None:
                current = WorkEntry()
                entries.append(current)
            if bullet:
                current.description.append(bullet)
            continue

        if current is not None and current.description and line[:1].islower():
            current.description[-1] = f"{current.description[-1]} {line}"
            continue

        if current is not None and not current.description:
            if not current.duration and _DURATION_RE.match(line):
                current.duration = line
                continue
            if not current.company:
                remainder, duration = split_duration(line)
                current.company = remainder
                current.duration = current.duration or duration
                continue

        current = parse_job_header(line)
        entries.append(current)

    return entries

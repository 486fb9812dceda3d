"""Skill detection against the fixed vocabulary.

A dedicated skills section, when present, is trusted exclusively: the whole
document is only scanned when no section text was collected at all. A section
that holds text but no known terms yields no skills rather than falling back
to the global scan. Variant spellings are only honoured inside a section; the
global scan matches canonical names alone.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from functools import lru_cache

from talent_tracker.core.config.extraction import get_extraction_int
from talent_tracker.taxonomy import TaxonomyProvider, get_default_taxonomy_provider

from .knowledge import SECTION_STOP_HEADERS, SKILLS_SECTION_KEYWORDS
from .segmentation import is_all_caps_line


@lru_cache(maxsize=512)
def _term_pattern(term: str) -> re.Pattern[str]:
    # Word-boundary match that also works for terms ending in symbols (C++, C#).
    # A preceding dot blocks the match, so "js" never matches inside "Node.js".
    return re.compile(rf"(?<![\w.]){re.escape(term)}(?!\w)", re.IGNORECASE)


def is_skills_heading(line: str) -> bool:
    lowered = line.lower().strip()
    max_chars = get_extraction_int("skills.header_max_chars", 30)
    for keyword in SKILLS_SECTION_KEYWORDS:
        if lowered == keyword or lowered == f"{keyword}:" or lowered.startswith(f"{keyword}:"):
            return True
        if len(lowered) < max_chars and keyword in lowered:
            return True
    return False


def _closes_skills_section(line: str) -> bool:
    lowered = line.lower()
    if any(lowered.startswith(header) for header in SECTION_STOP_HEADERS):
        return True
    return is_all_caps_line(
        line,
        min_chars=get_extraction_int("skills.caps_header_min_chars", 3),
        max_chars=get_extraction_int("skills.caps_header_max_chars", 30),
    )


def _heading_remainder(line: str) -> str:
    _, separator, remainder = line.partition(":")
    return remainder.strip() if separator else ""


def find_skills_section(lines: Sequence[str]) -> str:
    """Return the text of the first skills section.

    Terms written after the heading's colon (``Skills: React, Node.js``) open
    the section. Collection stops at the line cap or at the next section
    heading. An empty string means no usable section was found.
    """
    max_lines = get_extraction_int("skills.section_max_lines", 10)
    for index, line in enumerate(lines):
        if not is_skills_heading(line):
            continue
        remainder = _heading_remainder(line)
        collected: list[str] = [remainder] if remainder else []
        for next_line in lines[index + 1 : index + 1 + max_lines]:
            if _closes_skills_section(next_line):
                break
            collected.append(next_line.strip())
        return " ".join(collected)
    return ""


def match_skills(text: str, taxonomy: TaxonomyProvider, *, include_variants: bool = True) -> set[str]:
    found: set[str] = set()
    if not text:
        return found
    for skill in taxonomy.vocabulary:
        if _term_pattern(skill.lower()).search(text):
            found.add(skill)
    if not include_variants:
        return found
    for variant, canonical in taxonomy.normalizations.items():
        if _term_pattern(variant).search(text):
            found.add(canonical)
    return found


def drop_redundant_skills(skills: Iterable[str]) -> list[str]:
    """Remove skills contained in a longer matched skill, then sort."""
    unique = list(dict.fromkeys(skills))
    kept = [
        skill
        for skill in unique
        if not any(
            other != skill and len(skill) < len(other) and skill.lower() in other.lower()
            for other in unique
        )
    ]
    return sorted(kept)


def extract_skills(
    lines: Sequence[str],
    text: str,
    taxonomy: TaxonomyProvider | None = None,
) -> list[str]:
    taxonomy = taxonomy or get_default_taxonomy_provider()
    section_text = find_skills_section(lines)
    # Only a missing section triggers the global scan, never a sparse one.
    if section_text:
        found = match_skills(section_text, taxonomy)
    else:
        found = match_skills(text, taxonomy, include_variants=False)
    return drop_redundant_skills(found)

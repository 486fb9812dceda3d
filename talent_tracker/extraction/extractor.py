from __future__ import annotations

import logging
from typing import Any

from talent_tracker.schemas.resume import ParsedResume
from talent_tracker.taxonomy import TaxonomyProvider

from .contact import extract_email, extract_name, extract_phone
from .history import extract_education, extract_experience_years, extract_summary, extract_work_experience
from .location import extract_location
from .segmentation import split_lines
from .skills import extract_skills

logger = logging.getLogger(__name__)


class InvalidInput(ValueError):
    """Raised when the extractor is handed something other than non-empty text."""


def _require_text(text: Any) -> str:
    if text is None:
        raise InvalidInput("Resume text is required.")
    if not isinstance(text, str):
        raise InvalidInput(f"Resume text must be a string, got {type(text).__name__}.")
    if not text.strip():
        raise InvalidInput("Resume text is empty.")
    return text


def extract_resume_fields(text: str, taxonomy: TaxonomyProvider | None = None) -> ParsedResume:
    """Recover candidate fields from decoded resume text.

    Every stage runs independently; a stage that finds nothing leaves its field
    at the default value. Only unusable input raises ``InvalidInput``.
    """
    text = _require_text(text)
    lines = split_lines(text)

    parsed = ParsedResume(
        name=extract_name(lines),
        email=extract_email(text),
        phone=extract_phone(text),
        skills=extract_skills(lines, text, taxonomy),
        experience_years=extract_experience_years(text),
        education=extract_education(lines),
        location=extract_location(lines, text),
        summary=extract_summary(lines),
        work_experience=extract_work_experience(lines),
    )
    logger.debug(
        "resume_extracted lines=%d skills=%d jobs=%d name=%d email=%d phone=%d location=%d",
        len(lines),
        len(parsed.skills),
        len(parsed.work_experience),
        int(bool(parsed.name)),
        int(bool(parsed.email)),
        int(bool(parsed.phone)),
        int(bool(parsed.location)),
    )
    return parsed

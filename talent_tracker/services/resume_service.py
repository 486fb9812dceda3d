from __future__ import annotations

import logging
from typing import Any

from talent_tracker.extraction import InvalidInput, extract_resume_fields
from talent_tracker.parsing.models import ParsedDoc
from talent_tracker.parsing.parse import DocumentDecodeError, decode_document, fetch_remote_document
from talent_tracker.schemas.intake import (
    CandidateDraft,
    CandidateFields,
    CandidateIntakeResponse,
    ParseResumeResponse,
)
from talent_tracker.schemas.resume import ParsedResume
from talent_tracker.taxonomy import get_default_taxonomy_provider

logger = logging.getLogger(__name__)

# Values API clients send when a form field was left at its placeholder.
_PLACEHOLDER_VALUES = {"", "string", "0"}
_CANDIDATE_STATUSES = {"New", "Screening", "Interview", "Offer", "Rejected"}


class ResumeIntakeError(RuntimeError):
    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


def _is_provided(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip() not in _PLACEHOLDER_VALUES
    if isinstance(value, (int, float)):
        return value != 0
    return bool(value)


def _coerce_experience(value: Any) -> float | None:
    if not _is_provided(value):
        return None
    try:
        years = float(value)
    except (TypeError, ValueError):
        return None
    return years if years > 0 else None


def _coerce_skills(value: Any) -> list[str] | None:
    if isinstance(value, str):
        if not _is_provided(value):
            return None
        skills = [item.strip() for item in value.split(",")]
    elif isinstance(value, list):
        skills = [str(item).strip() for item in value]
    else:
        return None
    taxonomy = get_default_taxonomy_provider()
    clean: list[str] = []
    for item in skills:
        if not item or item == "string":
            continue
        _, canonical = taxonomy.normalize_skill(item)
        clean.append(canonical or item)
    return list(dict.fromkeys(clean)) or None


def _pick(requested: Any, parsed: str, default: str = "") -> str:
    if _is_provided(requested):
        return str(requested).strip()
    return parsed or default


def _extract(text: str) -> ParsedResume:
    try:
        return extract_resume_fields(text)
    except InvalidInput as exc:
        raise ResumeIntakeError(f"Could not read any text from the resume: {exc}", status_code=422) from exc


def _decode(content: bytes, content_type: str | None, filename: str) -> ParsedDoc:
    try:
        return decode_document(content, content_type, filename=filename)
    except DocumentDecodeError as exc:
        logger.warning("resume_decode_failed filename=%s reason=%s", filename or "-", exc)
        raise ResumeIntakeError(str(exc), status_code=400) from exc


def parse_resume_text(text: str) -> ParseResumeResponse:
    parsed = _extract(text)
    return ParseResumeResponse(
        parsed_data=parsed,
        resume_text=text,
        characters=len(text),
        source_type="txt",
    )


def parse_resume_upload(filename: str, content: bytes, content_type: str | None) -> ParseResumeResponse:
    document = _decode(content, content_type, filename)
    parsed = _extract(document.text)
    return ParseResumeResponse(
        parsed_data=parsed,
        resume_text=document.text,
        characters=len(document.text),
        filename=filename,
        source_type=document.source_type,
        warnings=document.parsing_warnings,
    )


async def parse_resume_url(url: str, mime_type: str | None = None) -> ParseResumeResponse:
    try:
        content, content_type, filename = await fetch_remote_document(url)
    except DocumentDecodeError as exc:
        logger.warning("resume_fetch_failed reason=%s", exc)
        raise ResumeIntakeError(str(exc), status_code=400) from exc
    return parse_resume_upload(filename, content, mime_type or content_type)


def merge_candidate(parsed: ParsedResume, fields: CandidateFields) -> CandidateDraft:
    """Combine explicit form values with parsed resume data.

    An explicit value wins unless it is absent or a placeholder. Email and
    phone must be present after merging.
    """
    status = fields.status.strip() if _is_provided(fields.status) else "New"
    if status not in _CANDIDATE_STATUSES:
        raise ResumeIntakeError(
            f"Invalid status '{status}'. Allowed: {', '.join(sorted(_CANDIDATE_STATUSES))}.",
            status_code=400,
        )

    experience = _coerce_experience(fields.experience)
    skills = _coerce_skills(fields.skills)
    email = _pick(fields.email, parsed.email)
    phone = _pick(fields.phone, parsed.phone)

    if not email:
        raise ResumeIntakeError("Email is required. Could not extract from resume.")
    if not phone:
        raise ResumeIntakeError("Phone is required. Could not extract from resume.")

    return CandidateDraft(
        name=_pick(fields.name, parsed.name, "Unknown"),
        email=email.lower(),
        phone=phone,
        position=_pick(fields.position, "", "Not Specified"),
        experience=experience if experience is not None else parsed.experience_years,
        location=_pick(fields.location, parsed.location, "Not Specified"),
        skills=skills if skills is not None else list(parsed.skills),
        status=status,
        education=_pick(fields.education, parsed.education),
        summary=_pick(fields.summary, parsed.summary),
    )


def create_candidate_from_upload(
    filename: str,
    content: bytes,
    content_type: str | None,
    fields: CandidateFields,
) -> CandidateIntakeResponse:
    preview = parse_resume_upload(filename, content, content_type)
    try:
        draft = merge_candidate(preview.parsed_data, fields)
    except ResumeIntakeError as exc:
        logger.info("candidate_intake_rejected filename=%s reason=%s", filename or "-", exc)
        raise
    draft = draft.model_copy(update={"resume_filename": filename, "resume_text": preview.resume_text})
    logger.info("candidate_intake_accepted skills=%d", len(draft.skills))
    return CandidateIntakeResponse(candidate=draft, parsed_data=preview.parsed_data)

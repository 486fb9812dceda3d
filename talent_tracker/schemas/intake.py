from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from .resume import ParsedResume

CandidateStatus = Literal["New", "Screening", "Interview", "Offer", "Rejected"]
DocumentSourceType = Literal["pdf", "docx", "txt"]


class ParseTextRequest(BaseModel):
    resume_text: str = Field(min_length=1, max_length=200000)


class ParseUrlRequest(BaseModel):
    resume_url: str = Field(min_length=8, max_length=3000)
    mime_type: str | None = Field(default=None, max_length=200)


class ParseResumeResponse(BaseModel):
    message: str = "Resume parsed successfully"
    parsed_data: ParsedResume
    resume_text: str = ""
    characters: int = Field(default=0, ge=0)
    filename: str = ""
    source_type: DocumentSourceType = "txt"
    warnings: list[str] = Field(default_factory=list)


class CandidateFields(BaseModel):
    """Optional values supplied alongside an uploaded resume."""

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    position: str | None = None
    experience: float | str | None = None
    location: str | None = None
    skills: list[str] | str | None = None
    status: str | None = None
    education: str | None = None
    summary: str | None = None


class CandidateDraft(BaseModel):
    name: str
    email: str
    phone: str
    position: str
    experience: float = Field(default=0, ge=0)
    location: str
    skills: list[str] = Field(default_factory=list)
    status: CandidateStatus = "New"
    education: str = ""
    summary: str = ""
    resume_filename: str = ""
    resume_text: str = ""


class CandidateIntakeResponse(BaseModel):
    message: str = "Candidate created successfully with resume parsing"
    candidate: CandidateDraft
    parsed_data: ParsedResume

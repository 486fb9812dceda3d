from .intake import (
    CandidateDraft,
    CandidateFields,
    CandidateIntakeResponse,
    CandidateStatus,
    ParseResumeResponse,
    ParseTextRequest,
    ParseUrlRequest,
)
from .resume import ParsedResume, WorkEntry

__all__ = [
    "ParsedResume",
    "WorkEntry",
    "CandidateDraft",
    "CandidateFields",
    "CandidateIntakeResponse",
    "CandidateStatus",
    "ParseResumeResponse",
    "ParseTextRequest",
    "ParseUrlRequest",
]

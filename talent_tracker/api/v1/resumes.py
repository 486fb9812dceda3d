from fastapi import APIRouter, File, Request, UploadFile

from talent_tracker.core.rate_limit import rate_limit
from talent_tracker.schemas.intake import ParseResumeResponse, ParseTextRequest, ParseUrlRequest
from talent_tracker.services.resume_service import (
    ResumeIntakeError,
    parse_resume_text,
    parse_resume_upload,
    parse_resume_url,
)

from .uploads import raise_intake_error, read_resume_upload

router = APIRouter()


@router.post("/resumes/parse-text", response_model=ParseResumeResponse)
@rate_limit()
async def resumes_parse_text(request: Request, payload: ParseTextRequest):
    _ = request
    try:
        return parse_resume_text(payload.resume_text)
    except ResumeIntakeError as exc:
        raise_intake_error(exc)


@router.post("/resumes/parse", response_model=ParseResumeResponse)
@rate_limit()
async def resumes_parse_upload(request: Request, file: UploadFile = File(...)):
    _ = request
    filename, content = await read_resume_upload(file)
    try:
        return parse_resume_upload(filename, content, file.content_type)
    except ResumeIntakeError as exc:
        raise_intake_error(exc)


@router.post("/resumes/parse-url", response_model=ParseResumeResponse)
@rate_limit()
async def resumes_parse_url(request: Request, payload: ParseUrlRequest):
    _ = request
    try:
        return await parse_resume_url(payload.resume_url, payload.mime_type)
    except ResumeIntakeError as exc:
        raise_intake_error(exc)

from fastapi import APIRouter, File, Form, Request, UploadFile, status

from talent_tracker.core.rate_limit import rate_limit
from talent_tracker.schemas.intake import CandidateFields, CandidateIntakeResponse
from talent_tracker.services.resume_service import ResumeIntakeError, create_candidate_from_upload

from .uploads import raise_intake_error, read_resume_upload

router = APIRouter()


@router.post(
    "/candidates/from-resume",
    response_model=CandidateIntakeResponse,
    status_code=status.HTTP_201_CREATED,
)
@rate_limit()
async def candidates_from_resume(
    request: Request,
    resume: UploadFile = File(...),
    name: str | None = Form(default=None),
    email: str | None = Form(default=None),
    phone: str | None = Form(default=None),
    position: str | None = Form(default=None),
    experience: str | None = Form(default=None),
    location: str | None = Form(default=None),
    skills: str | None = Form(default=None),
    candidate_status: str | None = Form(default=None, alias="status"),
    education: str | None = Form(default=None),
    summary: str | None = Form(default=None),
):
    _ = request
    filename, content = await read_resume_upload(resume)
    fields = CandidateFields(
        name=name,
        email=email,
        phone=phone,
        position=position,
        experience=experience,
        location=location,
        skills=skills,
        status=candidate_status,
        education=education,
        summary=summary,
    )
    try:
        return create_candidate_from_upload(filename, content, resume.content_type, fields)
    except ResumeIntakeError as exc:
        raise_intake_error(exc)

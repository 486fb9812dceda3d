from __future__ import annotations

from fastapi import HTTPException, UploadFile, status

from talent_tracker.core.config import settings
from talent_tracker.services.resume_service import ResumeIntakeError

ALLOWED_EXTENSIONS = {"pdf", "docx", "doc", "txt"}


def raise_intake_error(exc: ResumeIntakeError) -> None:
    raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc


async def read_resume_upload(file: UploadFile) -> tuple[str, bytes]:
    filename = file.filename or "uploaded-resume"
    ext = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
    if ext not in ALLOWED_EXTENSIONS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unsupported file type '.{ext}'. Allowed: {', '.join(sorted(ALLOWED_EXTENSIONS))}.",
        )

    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await file.read(1024 * 64)
        if not chunk:
            break
        total += len(chunk)
        if total > settings.max_upload_bytes:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=f"File too large. Maximum allowed size is {settings.max_upload_bytes // (1024 * 1024)} MB.",
            )
        chunks.append(chunk)
    payload = b"".join(chunks)
    if not payload:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No resume file uploaded.")
    return filename, payload

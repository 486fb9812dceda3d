from __future__ import annotations

import hashlib
import logging
from io import BytesIO
from pathlib import Path
from urllib.parse import urlparse

import httpx
from docx import Document
from pypdf import PdfReader

from talent_tracker.core.config import settings

from .models import ParsedBlock, ParsedDoc

logger = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"
DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
MSWORD_MIME_TYPE = "application/msword"
TEXT_MIME_TYPE = "text/plain"

SUPPORTED_MIME_TYPES = {
    PDF_MIME_TYPE: "pdf",
    DOCX_MIME_TYPE: "docx",
    MSWORD_MIME_TYPE: "docx",
    TEXT_MIME_TYPE: "txt",
}

_EXTENSION_MIME_TYPES = {
    ".pdf": PDF_MIME_TYPE,
    ".docx": DOCX_MIME_TYPE,
    ".doc": MSWORD_MIME_TYPE,
    ".txt": TEXT_MIME_TYPE,
}


class DocumentDecodeError(ValueError):
    pass


def _compute_doc_id(text: str, seed_name: str) -> str:
    seed = text if text.strip() else seed_name
    digest = hashlib.sha256(seed.encode("utf-8", errors="ignore")).hexdigest()
    return digest[:16]


def normalize_mime_type(mime_type: str | None, filename: str = "") -> str:
    value = (mime_type or "").split(";", 1)[0].strip().lower()
    if value in SUPPORTED_MIME_TYPES:
        return value
    suffix = Path(filename).suffix.lower() if filename else ""
    guessed = _EXTENSION_MIME_TYPES.get(suffix)
    if guessed:
        return guessed
    raise DocumentDecodeError(
        f"Unsupported document type '{value or suffix or 'unknown'}'. "
        "Supported types: PDF, DOCX, DOC, TXT."
    )


def _decode_txt(content: bytes) -> tuple[str, list[ParsedBlock], list[str]]:
    for encoding in ("utf-8-sig", "cp1252"):
        try:
            return content.decode(encoding), [], []
        except UnicodeDecodeError:
            continue
    return content.decode("latin-1"), [], ["Text file is not UTF-8; decoded as Latin-1."]


def _decode_pdf(content: bytes) -> tuple[str, list[ParsedBlock], list[str]]:
    warnings: list[str] = []
    blocks: list[ParsedBlock] = []
    try:
        reader = PdfReader(BytesIO(content))
        text_parts: list[str] = []
        for index, page in enumerate(reader.pages, start=1):
            page_text = (page.extract_text() or "").strip()
            if page_text:
                text_parts.append(page_text)
                blocks.append(ParsedBlock(page=index, text=page_text))
    except Exception as exc:
        raise DocumentDecodeError("Unable to extract text from this PDF file.") from exc
    if not text_parts:
        warnings.append("No extractable text found in PDF.")
    return "\n".join(text_parts), blocks, warnings


def _decode_docx(content: bytes) -> tuple[str, list[ParsedBlock], list[str]]:
    warnings: list[str] = []
    try:
        document = Document(BytesIO(content))
    except Exception as exc:
        raise DocumentDecodeError(
            "Unable to extract text from this Word file. Legacy .doc files must be converted to .docx."
        ) from exc
    paragraphs = [p.text.strip() for p in document.paragraphs if p.text and p.text.strip()]
    blocks = [ParsedBlock(page=None, text=paragraph) for paragraph in paragraphs]
    if not paragraphs:
        warnings.append("No extractable text found in DOCX.")
    return "\n".join(paragraphs), blocks, warnings


def decode_document(content: bytes, mime_type: str | None, filename: str = "") -> ParsedDoc:
    if not content:
        raise DocumentDecodeError("Uploaded document is empty.")

    resolved = normalize_mime_type(mime_type, filename)
    source_type = SUPPORTED_MIME_TYPES[resolved]
    if source_type == "pdf":
        text, blocks, warnings = _decode_pdf(content)
    elif source_type == "docx":
        text, blocks, warnings = _decode_docx(content)
    else:
        text, blocks, warnings = _decode_txt(content)

    for warning in warnings:
        logger.warning("document_decode_warning source_type=%s detail=%s", source_type, warning)

    return ParsedDoc(
        doc_id=_compute_doc_id(text=text, seed_name=filename or resolved),
        source_type=source_type,
        text=text,
        blocks=blocks,
        parsing_warnings=warnings,
    )


def parse_document(file_path: str, mime_type: str | None = None) -> ParsedDoc:
    path = Path(file_path)
    if not path.exists():
        raise DocumentDecodeError(f"Input document not found: '{path}'")
    return decode_document(path.read_bytes(), mime_type, filename=path.name)


async def fetch_remote_document(
    url: str,
    transport: httpx.AsyncBaseTransport | None = None,
) -> tuple[bytes, str, str]:
    """Download a stored resume and return its bytes, content type and filename.

    The body is streamed and the download is abandoned once it exceeds
    ``remote_fetch_max_bytes``.
    """
    parsed = urlparse((url or "").strip())
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise DocumentDecodeError("Only http/https resume URLs are supported.")

    max_bytes = settings.remote_fetch_max_bytes
    chunks: list[bytes] = []
    total = 0
    try:
        async with httpx.AsyncClient(
            timeout=settings.remote_fetch_timeout_seconds,
            follow_redirects=True,
            transport=transport,
        ) as client:
            async with client.stream("GET", url) as response:
                if response.status_code >= 400:
                    raise DocumentDecodeError(f"Resume URL returned HTTP {response.status_code}.")
                async for chunk in response.aiter_bytes():
                    total += len(chunk)
                    if total > max_bytes:
                        raise DocumentDecodeError("Resume file from URL is too large.")
                    chunks.append(chunk)
                content_type = response.headers.get("content-type", "")
                final_url = str(response.url)
    except httpx.HTTPError as exc:
        raise DocumentDecodeError(f"Failed to download resume: {exc}") from exc

    body = b"".join(chunks)
    if not body:
        raise DocumentDecodeError("Resume URL returned an empty file.")
    filename = Path(urlparse(final_url).path).name
    return body, content_type, filename

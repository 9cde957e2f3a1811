"""Document tokenization API routes."""

import logging
from typing import List

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from rsvp.config import Settings, get_settings
from rsvp.models.enums import SourceType
from rsvp.schemas.document import DocumentFromTextRequest, ProcessedDocument
from rsvp.schemas.token import Token
from rsvp.services.playback import clamp_rate
from rsvp.services.tokenizer import estimate_reading_time_ms, tokenize

router = APIRouter()
logger = logging.getLogger(__name__)

ACCEPTED_EXTENSIONS = (".txt",)


def _build_document(
    tokens: List[Token],
    rate: int | None,
    settings: Settings,
    source_type: SourceType,
    file_name: str | None = None,
) -> ProcessedDocument:
    resolved_rate = clamp_rate(
        settings.default_rate if rate is None else rate,
        settings.min_rate,
        settings.max_rate,
    )
    return ProcessedDocument(
        source_type=source_type,
        tokens=tokens,
        total_tokens=len(tokens),
        rate=resolved_rate,
        estimated_seconds=estimate_reading_time_ms(tokens, resolved_rate) / 1000,
        file_name=file_name,
    )


@router.post("/text", response_model=ProcessedDocument)
def tokenize_text(
    payload: DocumentFromTextRequest,
    settings: Settings = Depends(get_settings),
) -> ProcessedDocument:
    """Tokenize pasted text into weighted tokens."""
    tokens = tokenize(payload.text)
    if not tokens:
        raise HTTPException(
            status_code=422,
            detail="No readable text found",
        )
    return _build_document(tokens, payload.rate, settings, SourceType.PASTE)


@router.post("/file", response_model=ProcessedDocument)
async def tokenize_file(
    file: UploadFile = File(...),
    rate: int | None = None,
    settings: Settings = Depends(get_settings),
) -> ProcessedDocument:
    """Tokenize an uploaded plain-text file."""
    file_name = file.filename or ""
    if not file_name.lower().endswith(ACCEPTED_EXTENSIONS):
        raise HTTPException(
            status_code=415,
            detail="Unsupported file type. Please upload a .txt file.",
        )

    content = await file.read(settings.max_upload_bytes + 1)
    if len(content) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"File exceeds {settings.max_upload_bytes} bytes",
        )

    try:
        text = content.decode("utf-8-sig")
    except UnicodeDecodeError:
        logger.warning("Rejected upload %s: not valid UTF-8", file_name)
        raise HTTPException(
            status_code=400,
            detail="Failed to read file as text",
        ) from None

    tokens = tokenize(text)
    if not tokens:
        raise HTTPException(
            status_code=422,
            detail="No readable text found in file",
        )

    logger.info("Processed %s into %d tokens", file_name, len(tokens))
    return _build_document(
        tokens, rate, settings, SourceType.TEXT_FILE, file_name=file_name
    )

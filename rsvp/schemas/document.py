"""Pydantic schemas for document tokenization endpoints."""

from pydantic import BaseModel, Field

from rsvp.models.enums import SourceType
from rsvp.schemas.token import Token


class DocumentFromTextRequest(BaseModel):
    text: str = Field(..., min_length=1)
    rate: int | None = None


class ProcessedDocument(BaseModel):
    source_type: SourceType
    tokens: list[Token]
    total_tokens: int
    rate: int
    estimated_seconds: float
    file_name: str | None = None

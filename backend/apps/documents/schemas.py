"""API schemas for stored documents."""

from datetime import datetime

from pydantic import BaseModel, Field

from storage import Document


class DocumentSummary(BaseModel):
    """Document metadata without its content."""

    id: str = Field(..., description="Document ID")
    filename: str = Field(..., description="Original filename")
    char_count: int = Field(..., description="Length of the extracted text")
    summary: str | None = Field(None, description="Generated summary, if any")
    created_at: datetime

    @classmethod
    def from_record(cls, document: Document) -> "DocumentSummary":
        return cls(
            id=document.id,
            filename=document.filename,
            char_count=len(document.content),
            summary=document.summary,
            created_at=document.created_at,
        )

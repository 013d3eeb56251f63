from __future__ import annotations

from pydantic import BaseModel, Field


class ExtractedDocument(BaseModel):
    text: str
    page_count: int = Field(ge=0)
    characters: int = Field(ge=0)
    filename: str = ""

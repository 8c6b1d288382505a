"""Pydantic schemas for the currents editor."""

from __future__ import annotations

from pydantic import BaseModel, Field


class EditorError(BaseModel):
    message: str
    code: str | None = None


class EditorEnvelope(BaseModel):
    success: bool
    data: dict[str, object] | list[dict[str, object]] | None = None
    error: EditorError | None = None
    trace_id: str


class EntryData(BaseModel):
    id: str | None = None
    date: str = ""
    title: str = ""
    status: str = "active"
    tags: list[str] = Field(default_factory=list)
    url_1: str = ""
    url_2: str = ""
    url_3: str = ""
    image_top: str = ""
    image_bottom: str = ""
    image_alt: str = ""
    audio_top: str = ""
    audio_bottom: str = ""
    audio_caption: str = ""


class CreateEntryRequest(BaseModel):
    data: EntryData
    body: str = ""


class SaveEntryRequest(BaseModel):
    file: str = Field(min_length=1)
    data: EntryData
    body: str = ""

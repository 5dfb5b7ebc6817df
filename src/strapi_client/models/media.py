"""Media file models for the upload plugin API.

The upload plugin returns file records flat (no ``data``/``meta`` envelope),
so these models validate the raw objects directly.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class MediaFormat(BaseModel):
    """A generated variant of an image (thumbnail, small, medium, large)."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: str
    hash: str
    ext: str
    mime: str
    width: int | None = None
    height: int | None = None
    size: float
    path: str | None = None
    url: str


class MediaFile(BaseModel):
    """A file stored in the media library.

    Instances are never mutated locally; each call to the files API returns a
    fresh one reflecting the server state.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    id: int
    document_id: str | None = Field(None, alias="documentId")
    name: str
    alternative_text: str | None = Field(None, alias="alternativeText")
    caption: str | None = None
    width: int | None = None
    height: int | None = None
    formats: dict[str, MediaFormat] | None = None
    hash: str
    ext: str | None = None
    mime: str
    size: float
    url: str
    preview_url: str | None = Field(None, alias="previewUrl")
    provider: str
    provider_metadata: dict[str, Any] | None = None
    folder_path: str | None = Field(None, alias="folderPath")
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")

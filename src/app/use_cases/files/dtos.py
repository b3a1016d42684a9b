"""
File Use Case DTOs
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field


class RegisterFileCommand(BaseModel):
    """An upload already stored in the blob store, to be made shareable"""

    title: str = Field(..., min_length=1, max_length=255)
    original_filename: str = Field(..., min_length=1, max_length=255)
    blob_url: str = Field(..., min_length=1, max_length=1024)
    file_size: int = Field(default=0, ge=0)
    mime_type: str = Field(default="application/zip", max_length=255)
    project_id: Optional[UUID] = None
    share_password: Optional[str] = Field(default=None, max_length=256)


class FileInfo(BaseModel):
    """Share-relevant view of a file"""

    id: str
    public_id: str
    title: str
    original_filename: str
    project_id: Optional[str]
    download_count: int
    expires_at: Optional[datetime]
    has_password: bool


class RegeneratedLink(BaseModel):
    file_id: str
    public_id: str


class RegenerateLinksResponse(BaseModel):
    count: int
    links: List[RegeneratedLink]

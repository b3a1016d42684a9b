"""
File Entity

A stored upload and its public share link.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import generate_public_id


class File(SQLModel, table=True):
    """
    File entity - metadata of an uploaded blob.

    Business Rules:
    - public_id is the unguessable share-link key; regenerating it kills old links
    - blob_url is returned by the blob store and is where downloads redirect to
    - expires_at is fixed at upload time from the effective expiry_days
    - download_count is only ever changed by an SQL-level increment
    """

    __tablename__ = "files"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    public_id: str = Field(default_factory=generate_public_id, max_length=32, unique=True)

    title: str = Field(max_length=255)
    original_filename: str = Field(max_length=255)
    blob_url: str = Field(max_length=1024)
    file_size: int = Field(default=0)
    mime_type: str = Field(default="application/zip", max_length=255)

    project_id: Optional[UUID] = Field(default=None, foreign_key="projects.id")

    download_count: int = Field(default=0)

    # Timestamps
    expires_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_files_project_id", "project_id"),
        Index("idx_files_created_at", "created_at"),
    )

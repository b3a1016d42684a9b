"""
DownloadLog Entity

One row per granted download; also the population of the per-IP rate window.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel, UniqueConstraint


class DownloadLog(SQLModel, table=True):
    """
    DownloadLog entity - appended in the same transaction as the counter increment.

    Business Rules:
    - Only written for granted downloads
    - request_id is the optional client idempotency key; unique per file
    """

    __tablename__ = "download_logs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    file_id: UUID = Field(foreign_key="files.id")
    ip_address: str = Field(max_length=45)
    user_agent: Optional[str] = Field(default=None)
    request_id: Optional[str] = Field(default=None, max_length=128)

    downloaded_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_download_logs_file_ip_time", "file_id", "ip_address", "downloaded_at"),
        UniqueConstraint("file_id", "request_id", name="uq_download_logs_file_request"),
    )

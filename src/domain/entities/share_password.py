"""
SharePassword Entity

Per-file share password (PBKDF2 hash + salt).
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel


class SharePassword(SQLModel, table=True):
    """
    SharePassword entity - 0 or 1 per file.

    Business Rules:
    - Exists independently of the effective password_required flag
    - hash is 64 bytes of PBKDF2-HMAC-SHA256 output, hex encoded
    """

    __tablename__ = "share_passwords"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    file_id: UUID = Field(foreign_key="files.id", unique=True)
    hash: str = Field(max_length=128)
    salt: str = Field(max_length=64)

    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

"""
AdminSession Entity

Opaque cookie sessions for the single administrator.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel


class AdminSession(SQLModel, table=True):
    """
    AdminSession entity - one row per issued admin cookie.

    Business Rules:
    - The raw token is 256 bits from secrets.token_urlsafe(32)
    - Only its SHA-256 hex digest is stored (O(1) lookup, useless if leaked)
    - Valid while now < expires_at (7 days by default)
    - Logout deletes the row; expired rows are left for external cleanup
    """

    __tablename__ = "admin_sessions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    token_hash: str = Field(max_length=64, unique=True)  # SHA-256 output

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))

    __table_args__ = (Index("idx_admin_session_expires_at", "expires_at"),)

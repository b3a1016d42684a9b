"""
LoginAttempt Entity

Append-only record of every admin authentication attempt.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel


class LoginAttempt(SQLModel, table=True):
    """
    LoginAttempt entity - audit trail and sliding-window input for the throttle.

    Business Rules:
    - Immutable (never updated or deleted by the service)
    - Exactly one row per call to login, whatever the outcome
    - failure_reason is an AuthFailureReason value, None on success
    - Rows with failure_reason=rate_limited do not count towards lockout
    """

    __tablename__ = "login_attempts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    ip_address: str = Field(max_length=45)
    user_agent: Optional[str] = Field(default=None)
    succeeded: bool = Field(default=False)
    failure_reason: Optional[str] = Field(default=None, max_length=50)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_login_attempt_ip_created", "ip_address", "created_at"),
        Index("idx_login_attempt_created_at", "created_at"),
    )

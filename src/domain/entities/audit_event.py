"""
AuditEvent Entity

Immutable log of administrative mutations.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, JSON, SQLModel


class AuditEvent(SQLModel, table=True):
    """
    AuditEvent entity - immutable log of destructive or policy-changing actions.

    Business Rules:
    - Immutable (never updated or deleted)
    - resource_type/resource_id identify what was touched
    - Metadata stores additional context (old/new values, counts)
    """

    __tablename__ = "audit_events"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    action: str = Field(max_length=50)  # AuditAction value
    resource_type: str = Field(max_length=50)  # "file", "project", "settings", "session"
    resource_id: Optional[str] = Field(default=None, max_length=100)
    event_metadata: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    ip_address: Optional[str] = Field(default=None, max_length=45)
    user_agent: Optional[str] = Field(default=None)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_audit_action", "action"),
        Index("idx_audit_resource_type", "resource_type"),
        Index("idx_audit_created_at", "created_at"),
    )

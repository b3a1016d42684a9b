"""
Share Settings Entities

Three tiers of sharing configuration: global, per-project and per-file.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

GLOBAL_SETTINGS_ID = 1
DEFAULT_DOWNLOAD_WINDOW_MINUTES = 60


class GlobalShareSettings(SQLModel, table=True):
    """
    GlobalShareSettings entity - the resolution floor (single row, id=1).

    Business Rules:
    - Every field is defined; None for the integer caps means "none", not "inherit"
    - Defaults apply when the row has never been written
    """

    __tablename__ = "global_share_settings"

    id: int = Field(default=GLOBAL_SETTINGS_ID, primary_key=True)

    sharing_enabled: bool = Field(default=True)
    password_required: bool = Field(default=False)
    default_expiry_days: Optional[int] = Field(default=None)
    download_limit_per_ip: Optional[int] = Field(default=None)
    download_limit_window_minutes: int = Field(default=DEFAULT_DOWNLOAD_WINDOW_MINUTES)

    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )


class ProjectShareSettings(SQLModel, table=True):
    """
    ProjectShareSettings entity - optional override for every file of a project.

    Business Rules:
    - NULL means inherit from global
    - 0 for expiry_days / download_limit_per_ip means "explicitly none"
    """

    __tablename__ = "project_share_settings"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    project_id: UUID = Field(foreign_key="projects.id", unique=True)

    sharing_enabled: Optional[bool] = Field(default=None)
    password_required: Optional[bool] = Field(default=None)
    expiry_days: Optional[int] = Field(default=None)
    download_limit_per_ip: Optional[int] = Field(default=None)
    download_limit_window_minutes: Optional[int] = Field(default=None)

    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )


class FileShareSettings(SQLModel, table=True):
    """
    FileShareSettings entity - optional override for a single file.

    Same NULL / 0 conventions as ProjectShareSettings.
    """

    __tablename__ = "file_share_settings"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    file_id: UUID = Field(foreign_key="files.id", unique=True)

    sharing_enabled: Optional[bool] = Field(default=None)
    password_required: Optional[bool] = Field(default=None)
    expiry_days: Optional[int] = Field(default=None)
    download_limit_per_ip: Optional[int] = Field(default=None)
    download_limit_window_minutes: Optional[int] = Field(default=None)

    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

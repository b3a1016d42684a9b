"""
Share Settings DTOs

Tier payloads for reads and writes. At the project and file tiers ``None``
means "inherit"; ``0`` for expiry_days / download_limit_per_ip means
"explicitly none".
"""

from typing import Optional

from pydantic import BaseModel, Field

from src.domain.entities.share_settings import DEFAULT_DOWNLOAD_WINDOW_MINUTES


class GlobalShareSettingsData(BaseModel):
    """Global tier - every field defined; None caps mean no expiry / no cap"""

    sharing_enabled: bool = True
    password_required: bool = False
    default_expiry_days: Optional[int] = Field(default=None, ge=1)
    download_limit_per_ip: Optional[int] = Field(default=None, ge=1)
    download_limit_window_minutes: int = Field(default=DEFAULT_DOWNLOAD_WINDOW_MINUTES, ge=1)


class TierShareSettingsData(BaseModel):
    """Project or file tier overrides"""

    sharing_enabled: Optional[bool] = None
    password_required: Optional[bool] = None
    expiry_days: Optional[int] = Field(default=None, ge=0)
    download_limit_per_ip: Optional[int] = Field(default=None, ge=0)
    download_limit_window_minutes: Optional[int] = Field(default=None, ge=1)


class FileShareSettingsData(TierShareSettingsData):
    """File tier overrides plus whether a share password is stored"""

    has_password: bool = False


class UpdateFileShareSettingsCommand(TierShareSettingsData):
    """
    File tier write.

    share_password: None leaves the stored password alone, "" removes it,
    anything else replaces it.
    """

    share_password: Optional[str] = Field(default=None, max_length=256)


class EffectiveSettingsData(BaseModel):
    """Resolved policy for one file"""

    sharing_enabled: bool
    password_required: bool
    expiry_days: Optional[int]
    download_limit_per_ip: Optional[int]
    download_limit_window_minutes: int
    has_password: bool

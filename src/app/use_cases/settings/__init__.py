"""
Share Settings Use Cases
"""

from .share_settings_use_case import ShareSettingsUseCase
from .dtos import (
    EffectiveSettingsData,
    FileShareSettingsData,
    GlobalShareSettingsData,
    TierShareSettingsData,
    UpdateFileShareSettingsCommand,
)

__all__ = [
    "ShareSettingsUseCase",
    "EffectiveSettingsData",
    "FileShareSettingsData",
    "GlobalShareSettingsData",
    "TierShareSettingsData",
    "UpdateFileShareSettingsCommand",
]

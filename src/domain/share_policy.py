"""
Share Policy Resolution

Merges the global, project and file share settings tiers into the effective
policy for one file. Each override-tier field is either ``INHERIT`` or an
``Override`` carrying a concrete value (which may itself be ``None`` for
"explicitly no expiry" / "explicitly no cap"). Resolution walks the ordered
tier list per field; the first ``Override`` wins, otherwise the global value
is used.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Generic, Optional, Sequence, TypeVar, Union

from src.domain.entities import (
    FileShareSettings,
    GlobalShareSettings,
    ProjectShareSettings,
)

T = TypeVar("T")

# Stored at an override tier for the integer caps to mean "explicitly none"
EXPLICIT_NONE = 0


class _Inherit:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "INHERIT"


INHERIT = _Inherit()


@dataclass(frozen=True)
class Override(Generic[T]):
    value: T


TierValue = Union[_Inherit, Override]


@dataclass(frozen=True)
class EffectiveSettings:
    """Fully resolved share policy. None caps mean unlimited / never expires."""

    sharing_enabled: bool
    password_required: bool
    expiry_days: Optional[int]
    download_limit_per_ip: Optional[int]
    download_limit_window_minutes: int


@dataclass(frozen=True)
class SettingsTier:
    sharing_enabled: TierValue = INHERIT
    password_required: TierValue = INHERIT
    expiry_days: TierValue = INHERIT
    download_limit_per_ip: TierValue = INHERIT
    download_limit_window_minutes: TierValue = INHERIT


def _flag(value: Optional[bool]) -> TierValue:
    return INHERIT if value is None else Override(value)


def _cap(value: Optional[int]) -> TierValue:
    if value is None:
        return INHERIT
    if value <= EXPLICIT_NONE:
        return Override(None)
    return Override(value)


def _window(value: Optional[int]) -> TierValue:
    if value is None or value <= 0:
        return INHERIT
    return Override(value)


def tier_from_record(
    record: Union[ProjectShareSettings, FileShareSettings, None],
) -> SettingsTier:
    """Convert a stored override row (nullable columns) into a tier."""
    if record is None:
        return SettingsTier()
    return SettingsTier(
        sharing_enabled=_flag(record.sharing_enabled),
        password_required=_flag(record.password_required),
        expiry_days=_cap(record.expiry_days),
        download_limit_per_ip=_cap(record.download_limit_per_ip),
        download_limit_window_minutes=_window(record.download_limit_window_minutes),
    )


def global_floor(record: Optional[GlobalShareSettings]) -> EffectiveSettings:
    """Global tier as effective settings; hard defaults when never configured."""
    if record is None:
        record = GlobalShareSettings()
    return EffectiveSettings(
        sharing_enabled=record.sharing_enabled,
        password_required=record.password_required,
        expiry_days=record.default_expiry_days or None,
        download_limit_per_ip=record.download_limit_per_ip or None,
        download_limit_window_minutes=record.download_limit_window_minutes,
    )


def resolve_tiers(floor: EffectiveSettings, tiers: Sequence[SettingsTier]) -> EffectiveSettings:
    """Resolve each field against ``tiers`` (most specific first), then ``floor``."""
    resolved: Dict[str, Any] = {}
    for field in fields(EffectiveSettings):
        value = getattr(floor, field.name)
        for tier in tiers:
            candidate = getattr(tier, field.name)
            if isinstance(candidate, Override):
                value = candidate.value
                break
        resolved[field.name] = value
    return EffectiveSettings(**resolved)


def resolve(
    global_settings: Optional[GlobalShareSettings],
    project: Optional[ProjectShareSettings] = None,
    file: Optional[FileShareSettings] = None,
) -> EffectiveSettings:
    return resolve_tiers(
        global_floor(global_settings),
        [tier_from_record(file), tier_from_record(project)],
    )

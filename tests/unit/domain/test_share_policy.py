from uuid import uuid4

from src.domain import share_policy
from src.domain.entities import (
    FileShareSettings,
    GlobalShareSettings,
    ProjectShareSettings,
)
from src.domain.share_policy import (
    INHERIT,
    EffectiveSettings,
    Override,
    SettingsTier,
    resolve,
    resolve_tiers,
)


def test_defaults_when_global_never_saved():
    effective = resolve(None)

    assert effective == EffectiveSettings(
        sharing_enabled=True,
        password_required=False,
        expiry_days=None,
        download_limit_per_ip=None,
        download_limit_window_minutes=60,
    )


def test_project_override_with_empty_file_tier():
    global_settings = GlobalShareSettings(
        sharing_enabled=True,
        password_required=False,
        default_expiry_days=None,
        download_limit_per_ip=None,
    )
    project = ProjectShareSettings(project_id=uuid4(), password_required=True)
    file = FileShareSettings(file_id=uuid4())

    effective = resolve(global_settings, project, file)

    assert effective.sharing_enabled is True
    assert effective.password_required is True
    assert effective.expiry_days is None
    assert effective.download_limit_per_ip is None


def test_file_tier_wins_over_project_per_field():
    global_settings = GlobalShareSettings(default_expiry_days=30, download_limit_per_ip=10)
    project = ProjectShareSettings(
        project_id=uuid4(), password_required=True, download_limit_per_ip=5
    )
    file = FileShareSettings(file_id=uuid4(), password_required=False)

    effective = resolve(global_settings, project, file)

    assert effective.password_required is False  # file
    assert effective.download_limit_per_ip == 5  # project
    assert effective.expiry_days == 30  # global


def test_explicit_disable_is_not_inherit():
    global_settings = GlobalShareSettings(sharing_enabled=True)
    project = ProjectShareSettings(project_id=uuid4(), sharing_enabled=False)

    assert resolve(global_settings, project).sharing_enabled is False


def test_zero_cap_removes_broader_limit():
    global_settings = GlobalShareSettings(download_limit_per_ip=3, default_expiry_days=7)
    project = ProjectShareSettings(project_id=uuid4(), download_limit_per_ip=0)
    file = FileShareSettings(file_id=uuid4(), expiry_days=0)

    effective = resolve(global_settings, project, file)

    assert effective.download_limit_per_ip is None
    assert effective.expiry_days is None


def test_tier_from_record_uses_tagged_values():
    record = ProjectShareSettings(
        project_id=uuid4(), sharing_enabled=False, download_limit_per_ip=0
    )

    tier = share_policy.tier_from_record(record)

    assert tier.sharing_enabled == Override(False)
    assert tier.password_required is INHERIT
    assert tier.download_limit_per_ip == Override(None)
    assert tier.download_limit_window_minutes is INHERIT


def test_resolve_tiers_first_override_wins():
    floor = share_policy.global_floor(None)
    tiers = [
        SettingsTier(download_limit_window_minutes=Override(5)),
        SettingsTier(download_limit_window_minutes=Override(120), password_required=Override(True)),
    ]

    effective = resolve_tiers(floor, tiers)

    assert effective.download_limit_window_minutes == 5
    assert effective.password_required is True


def test_resolution_reflects_latest_project_settings():
    global_settings = GlobalShareSettings()
    project = ProjectShareSettings(project_id=uuid4(), download_limit_per_ip=3)

    assert resolve(global_settings, project).download_limit_per_ip == 3

    project.download_limit_per_ip = 8

    assert resolve(global_settings, project).download_limit_per_ip == 8

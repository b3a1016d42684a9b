import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.sessions = MagicMock()
    uow.sessions.create = AsyncMock(side_effect=lambda session: session)
    uow.sessions.get_by_token_hash = AsyncMock(return_value=None)
    uow.sessions.delete_by_token_hash = AsyncMock(return_value=False)

    uow.login_attempts = MagicMock()
    uow.login_attempts.create = AsyncMock(side_effect=lambda attempt: attempt)
    uow.login_attempts.count_failures_since = AsyncMock(return_value=0)
    uow.login_attempts.get_paginated = AsyncMock(return_value=([], None))

    uow.audit_events = MagicMock()
    uow.audit_events.create = AsyncMock()
    uow.audit_events.list_recent = AsyncMock(return_value=[])

    uow.projects = MagicMock()
    uow.projects.get_by_id = AsyncMock(return_value=None)

    uow.files = MagicMock()
    uow.files.get_by_id = AsyncMock(return_value=None)
    uow.files.get_by_public_id = AsyncMock(return_value=None)
    uow.files.get_by_project_id = AsyncMock(return_value=[])
    uow.files.create = AsyncMock(side_effect=lambda file: file)
    uow.files.update = AsyncMock(side_effect=lambda file: file)
    uow.files.increment_download_count = AsyncMock()

    uow.share_settings = MagicMock()
    uow.share_settings.get_global = AsyncMock(return_value=None)
    uow.share_settings.save_global = AsyncMock(side_effect=lambda settings: settings)
    uow.share_settings.get_for_project = AsyncMock(return_value=None)
    uow.share_settings.save_project = AsyncMock(side_effect=lambda settings: settings)
    uow.share_settings.get_for_file = AsyncMock(return_value=None)
    uow.share_settings.save_file = AsyncMock(side_effect=lambda settings: settings)

    uow.share_passwords = MagicMock()
    uow.share_passwords.get_by_file_id = AsyncMock(return_value=None)
    uow.share_passwords.save = AsyncMock(side_effect=lambda record: record)
    uow.share_passwords.delete_by_file_id = AsyncMock(return_value=False)

    uow.download_logs = MagicMock()
    uow.download_logs.create = AsyncMock(side_effect=lambda log: log)
    uow.download_logs.count_for_ip_since = AsyncMock(return_value=0)
    uow.download_logs.get_by_request_id = AsyncMock(return_value=None)
    uow.download_logs.count_for_file = AsyncMock(return_value=0)

    return uow


class FrozenClock:
    """Callable clock for use cases; advance() moves time forward"""

    def __init__(self, now):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, delta):
        self.now = self.now + delta


@pytest.fixture
def clock():
    from datetime import datetime

    return FrozenClock(datetime(2026, 3, 1, 9, 0, 0))

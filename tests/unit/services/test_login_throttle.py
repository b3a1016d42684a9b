from datetime import datetime, timedelta

import pytest

from src.app.services.login_throttle import LoginThrottle
from src.domain.entities import AuthFailureReason

NOW = datetime(2026, 1, 10, 12, 0, 0)


@pytest.mark.asyncio
async def test_locked_when_failures_reach_max(mock_uow):
    mock_uow.login_attempts.count_failures_since.return_value = 5
    throttle = LoginThrottle(mock_uow.login_attempts, max_attempts=5, window_minutes=15)

    assert await throttle.is_locked("203.0.113.9", NOW) is True


@pytest.mark.asyncio
async def test_open_below_max(mock_uow):
    mock_uow.login_attempts.count_failures_since.return_value = 4
    throttle = LoginThrottle(mock_uow.login_attempts, max_attempts=5, window_minutes=15)

    assert await throttle.is_locked("203.0.113.9", NOW) is False


@pytest.mark.asyncio
async def test_window_start_and_excluded_reason(mock_uow):
    throttle = LoginThrottle(mock_uow.login_attempts, max_attempts=3, window_minutes=15)

    await throttle.is_locked("203.0.113.9", NOW)

    mock_uow.login_attempts.count_failures_since.assert_called_once_with(
        "203.0.113.9",
        NOW - timedelta(minutes=15),
        exclude_reason=AuthFailureReason.rate_limited.value,
    )


@pytest.mark.asyncio
async def test_record_failed_attempt(mock_uow):
    throttle = LoginThrottle(mock_uow.login_attempts)

    attempt = await throttle.record_attempt(
        "203.0.113.9",
        False,
        NOW,
        user_agent="curl/8",
        failure_reason=AuthFailureReason.invalid_password,
    )

    assert attempt.ip_address == "203.0.113.9"
    assert attempt.succeeded is False
    assert attempt.failure_reason == "invalid_password"
    assert attempt.created_at == NOW
    mock_uow.login_attempts.create.assert_called_once()


@pytest.mark.asyncio
async def test_record_success_has_no_reason(mock_uow):
    throttle = LoginThrottle(mock_uow.login_attempts)

    attempt = await throttle.record_attempt("203.0.113.9", True, NOW)

    assert attempt.succeeded is True
    assert attempt.failure_reason is None


def test_defaults_when_config_is_zero(mock_uow):
    throttle = LoginThrottle(mock_uow.login_attempts, max_attempts=0, window_minutes=0)

    assert throttle.max_attempts == 5
    assert throttle.window_minutes == 15

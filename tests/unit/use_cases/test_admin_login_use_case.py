from datetime import timedelta

import pytest

from src.app.services.ip_allowlist import IpAllowlist
from src.app.services.session_tokens import hash_session_token
from src.app.use_cases.auth import AdminCredentials, AdminLoginUseCase

IP = "203.0.113.50"
CREDENTIALS = AdminCredentials(password="correct-horse", bypass_token="break-glass")


def make_use_case(mock_uow, clock, **kwargs):
    return AdminLoginUseCase(mock_uow, CREDENTIALS, clock=clock, **kwargs)


def recorded_attempts(mock_uow):
    return [call.args[0] for call in mock_uow.login_attempts.create.call_args_list]


@pytest.mark.asyncio
async def test_successful_login_issues_seven_day_session(mock_uow, clock):
    use_case = make_use_case(mock_uow, clock)

    result = await use_case.execute("correct-horse", None, IP, "Mozilla/5.0")

    assert result.is_ok()
    data = result.value
    assert len(data.session_token) >= 43  # 32 random bytes, urlsafe base64
    assert data.expires_at == clock.now + timedelta(days=7)

    session = mock_uow.sessions.create.call_args.args[0]
    assert session.token_hash == hash_session_token(data.session_token)
    assert session.token_hash != data.session_token

    attempts = recorded_attempts(mock_uow)
    assert len(attempts) == 1
    assert attempts[0].succeeded is True
    assert attempts[0].user_agent == "Mozilla/5.0"
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_wrong_password(mock_uow, clock):
    use_case = make_use_case(mock_uow, clock)

    result = await use_case.execute("wrong", None, IP)

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"
    assert result.error.message == "Invalid password"

    attempts = recorded_attempts(mock_uow)
    assert len(attempts) == 1
    assert attempts[0].succeeded is False
    assert attempts[0].failure_reason == "invalid_password"
    mock_uow.sessions.create.assert_not_called()
    # Failed attempt must be durable
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_missing_password(mock_uow, clock):
    result = await make_use_case(mock_uow, clock).execute("", None, IP)

    assert result.error.code == "INVALID_CREDENTIALS"
    assert recorded_attempts(mock_uow)[0].failure_reason == "missing_password"


@pytest.mark.asyncio
async def test_locked_ip_rejected_without_checking_password(mock_uow, clock):
    mock_uow.login_attempts.count_failures_since.return_value = 5
    use_case = make_use_case(mock_uow, clock)

    result = await use_case.execute("correct-horse", None, IP)

    assert result.is_err()
    assert result.error.code == "RATE_LIMITED"
    attempts = recorded_attempts(mock_uow)
    assert len(attempts) == 1
    assert attempts[0].failure_reason == "rate_limited"
    mock_uow.sessions.create.assert_not_called()


@pytest.mark.asyncio
async def test_bypass_token_ignores_lockout_and_password(mock_uow, clock):
    mock_uow.login_attempts.count_failures_since.return_value = 50
    use_case = make_use_case(mock_uow, clock)

    result = await use_case.execute(None, "break-glass", IP)

    assert result.is_ok()
    mock_uow.login_attempts.count_failures_since.assert_not_called()
    attempts = recorded_attempts(mock_uow)
    assert len(attempts) == 1
    assert attempts[0].succeeded is True
    mock_uow.sessions.create.assert_called_once()


@pytest.mark.asyncio
async def test_bypass_token_ignores_allowlist(mock_uow, clock):
    use_case = make_use_case(mock_uow, clock, allowlist=IpAllowlist(["10.0.0.0/8"]))

    result = await use_case.execute(None, "break-glass", IP)

    assert result.is_ok()


@pytest.mark.asyncio
async def test_invalid_bypass_token_is_a_failed_attempt(mock_uow, clock):
    use_case = make_use_case(mock_uow, clock)

    result = await use_case.execute("correct-horse", "guess", IP)

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"
    assert recorded_attempts(mock_uow)[0].failure_reason == "bypass_invalid"
    mock_uow.sessions.create.assert_not_called()


@pytest.mark.asyncio
async def test_bypass_disabled_when_not_configured(mock_uow, clock):
    use_case = AdminLoginUseCase(
        mock_uow, AdminCredentials(password="correct-horse", bypass_token=""), clock=clock
    )

    result = await use_case.execute(None, "", IP)

    # Empty bypass token falls through to the password path
    assert result.error.code == "INVALID_CREDENTIALS"
    assert recorded_attempts(mock_uow)[0].failure_reason == "missing_password"


@pytest.mark.asyncio
async def test_ip_not_in_allowlist(mock_uow, clock):
    use_case = make_use_case(mock_uow, clock, allowlist=IpAllowlist(["10.0.0.0/8"]))

    result = await use_case.execute("correct-horse", None, IP)

    assert result.error.code == "INVALID_CREDENTIALS"
    assert recorded_attempts(mock_uow)[0].failure_reason == "ip_blocked"


@pytest.mark.asyncio
async def test_unconfigured_admin_password_never_matches(mock_uow, clock):
    use_case = AdminLoginUseCase(mock_uow, AdminCredentials(password=""), clock=clock)

    result = await use_case.execute("", None, IP)
    assert result.error.code == "INVALID_CREDENTIALS"

    result = await use_case.execute("anything", None, IP)
    assert result.error.code == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_every_call_records_exactly_one_attempt(mock_uow, clock):
    use_case = make_use_case(mock_uow, clock)

    await use_case.execute("correct-horse", None, IP)
    await use_case.execute("wrong", None, IP)
    await use_case.execute(None, "break-glass", IP)
    await use_case.execute(None, "bad-bypass", IP)

    assert mock_uow.login_attempts.create.call_count == 4

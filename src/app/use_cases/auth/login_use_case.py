"""
Admin Login Use Case

Authenticates the single administrator and issues an opaque session token.
"""

import hmac
import logging
from datetime import datetime, timedelta
from typing import Callable, Optional

from libs.result import Error, Result, Return
from src.app.services.ip_allowlist import IpAllowlist
from src.app.services.login_throttle import LoginThrottle
from src.app.services.session_tokens import generate_session_token, hash_session_token
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import AdminSession, AuthFailureReason
from .dtos import AdminCredentials, LoginResponse

logger = logging.getLogger(__name__)

SESSION_DURATION_DAYS = 7

INVALID_CREDENTIALS = Error("INVALID_CREDENTIALS", "Invalid password")
RATE_LIMITED = Error("RATE_LIMITED", "Too many attempts, try again later")


def _secrets_match(supplied: str, expected: str) -> bool:
    # compare_digest does not short-circuit on the first differing byte
    return hmac.compare_digest(supplied.encode(), expected.encode())


class AdminLoginUseCase:
    """
    Use case for admin login and session issuance.

    Business Rules:
    - A valid bypass token grants a session without allowlist, throttle or
      password checks (recovery from lockout)
    - An invalid bypass token is a failed attempt like a wrong password
    - Locked IPs are rejected before the password is looked at
    - Secrets are compared in constant time
    - Every call records exactly one LoginAttempt and commits it
    - Sessions last SESSION_DURATION_DAYS (7 days)
    """

    def __init__(
        self,
        uow: UnitOfWork,
        credentials: AdminCredentials,
        allowlist: Optional[IpAllowlist] = None,
        max_attempts: int = 5,
        window_minutes: int = 15,
        session_days: int = SESSION_DURATION_DAYS,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.uow = uow
        self.credentials = credentials
        self.allowlist = allowlist or IpAllowlist()
        self.max_attempts = max_attempts
        self.window_minutes = window_minutes
        self.session_days = session_days
        self.clock = clock

    async def execute(
        self,
        password: Optional[str],
        bypass_token: Optional[str],
        ip: str,
        user_agent: Optional[str] = None,
    ) -> Result[LoginResponse]:
        """
        Execute admin login.

        Args:
            password: Submitted admin password
            bypass_token: Optional emergency bypass token
            ip: Client IP address
            user_agent: Client user agent

        Returns:
            Result with LoginResponse (raw token + expiry), or Error
        """
        now = self.clock()

        async with self.uow:
            throttle = LoginThrottle(
                self.uow.login_attempts, self.max_attempts, self.window_minutes
            )

            async def reject(reason: AuthFailureReason, error: Error) -> Result:
                await throttle.record_attempt(
                    ip, False, now, user_agent=user_agent, failure_reason=reason
                )
                await self.uow.commit()
                return Return.err(error)

            if bypass_token:
                if self._is_valid_bypass(bypass_token):
                    logger.warning(f"Admin login via emergency bypass token from {ip}")
                    return await self._grant(throttle, ip, user_agent, now)
                if await throttle.is_locked(ip, now):
                    return await reject(AuthFailureReason.rate_limited, RATE_LIMITED)
                return await reject(AuthFailureReason.bypass_invalid, INVALID_CREDENTIALS)

            if not self.allowlist.is_allowed(ip):
                return await reject(AuthFailureReason.ip_blocked, INVALID_CREDENTIALS)

            # Checked before the password so a locked IP learns nothing
            if await throttle.is_locked(ip, now):
                return await reject(AuthFailureReason.rate_limited, RATE_LIMITED)

            if not password:
                return await reject(AuthFailureReason.missing_password, INVALID_CREDENTIALS)

            if not self._is_valid_password(password):
                return await reject(AuthFailureReason.invalid_password, INVALID_CREDENTIALS)

            return await self._grant(throttle, ip, user_agent, now)

    def _is_valid_password(self, password: str) -> bool:
        if not self.credentials.password:
            logger.error("ADMIN_PASSWORD is not configured; admin login is impossible")
            return False
        return _secrets_match(password, self.credentials.password)

    def _is_valid_bypass(self, bypass_token: str) -> bool:
        if not self.credentials.bypass_token:
            return False
        return _secrets_match(bypass_token, self.credentials.bypass_token)

    async def _grant(
        self,
        throttle: LoginThrottle,
        ip: str,
        user_agent: Optional[str],
        now: datetime,
    ) -> Result[LoginResponse]:
        await throttle.record_attempt(ip, True, now, user_agent=user_agent)

        token = generate_session_token()
        session = AdminSession(
            token_hash=hash_session_token(token),
            created_at=now,
            expires_at=now + timedelta(days=self.session_days),
        )
        await self.uow.sessions.create(session)

        await self.uow.commit()
        logger.info(f"Admin session {session.id} issued for {ip}")

        return Return.ok(LoginResponse(session_token=token, expires_at=session.expires_at))

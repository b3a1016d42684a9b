"""
Login Throttle

Sliding-window brute-force guard for the admin login, keyed by client IP.
"""

import logging
from datetime import datetime, timedelta
from typing import Optional

from src.app.repositories.login_attempt_repository import ILoginAttemptRepository
from src.domain.entities import AuthFailureReason, LoginAttempt

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 5
DEFAULT_WINDOW_MINUTES = 15


class LoginThrottle:
    """
    OPEN/LOCKED state per IP derived from the login_attempts table.

    Business Rules:
    - LOCKED iff counted failures in (now - window, now] >= max_attempts
    - A success does not clear earlier failures; they age out of the window
    - Attempts rejected because the IP was already locked are recorded
      (reason=rate_limited) but not counted, so the lockout cannot be extended
    """

    def __init__(
        self,
        attempts: ILoginAttemptRepository,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        window_minutes: int = DEFAULT_WINDOW_MINUTES,
    ):
        self.attempts = attempts
        self.max_attempts = max_attempts or DEFAULT_MAX_ATTEMPTS
        self.window_minutes = window_minutes or DEFAULT_WINDOW_MINUTES

    async def is_locked(self, ip: str, now: datetime) -> bool:
        since = now - timedelta(minutes=self.window_minutes)
        failures = await self.attempts.count_failures_since(
            ip, since, exclude_reason=AuthFailureReason.rate_limited.value
        )
        return failures >= self.max_attempts

    async def record_attempt(
        self,
        ip: str,
        succeeded: bool,
        now: datetime,
        user_agent: Optional[str] = None,
        failure_reason: Optional[AuthFailureReason] = None,
    ) -> LoginAttempt:
        attempt = LoginAttempt(
            ip_address=ip,
            user_agent=user_agent,
            succeeded=succeeded,
            failure_reason=None if succeeded or failure_reason is None else failure_reason.value,
            created_at=now,
        )
        if not succeeded:
            logger.warning(f"Failed admin login from {ip}: {attempt.failure_reason}")
        return await self.attempts.create(attempt)

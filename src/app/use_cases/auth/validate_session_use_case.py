"""
Validate Session Use Case

Resolves a session cookie to its AdminSession, if still valid.
"""

from datetime import datetime
from typing import Callable, Optional

from src.app.services.session_tokens import hash_session_token
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import AdminSession


class ValidateSessionUseCase:
    """
    Business Rules:
    - Valid iff a row exists for the token and now < expires_at
    - Expired rows are not deleted here
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utc_now):
        self.uow = uow
        self.clock = clock

    async def execute(self, token: Optional[str]) -> Optional[AdminSession]:
        if not token:
            return None

        async with self.uow:
            session = await self.uow.sessions.get_by_token_hash(hash_session_token(token))

        if session is None:
            return None
        if self.clock() >= session.expires_at:
            return None
        return session

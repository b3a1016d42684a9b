"""
Logout Use Case

Revokes the current admin session.
"""

from typing import Optional

from libs.result import Result, Return
from src.app.services.session_tokens import hash_session_token
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditAction, AuditEvent
from .dtos import LogoutResponse


class LogoutUseCase:
    """
    Business Rules:
    - Deletes the session row; revoking an absent token is not an error
    - An audit event is written only when a session was actually removed
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        token: Optional[str],
        ip: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> Result[LogoutResponse]:
        if not token:
            return Return.ok(LogoutResponse(revoked=False))

        async with self.uow:
            revoked = await self.uow.sessions.delete_by_token_hash(hash_session_token(token))

            if revoked:
                audit = AuditEvent(
                    action=AuditAction.logout.value,
                    resource_type="session",
                    ip_address=ip,
                    user_agent=user_agent,
                )
                await self.uow.audit_events.create(audit)

            await self.uow.commit()

        return Return.ok(LogoutResponse(revoked=revoked))

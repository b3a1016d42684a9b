import base64
from datetime import datetime
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import and_, func, or_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.login_attempt_repository import ILoginAttemptRepository
from src.domain.entities import LoginAttempt


class LoginAttemptRepository(ILoginAttemptRepository):
    """Login attempt repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, attempt: LoginAttempt) -> LoginAttempt:
        """Append a login attempt (immutable)"""
        self.session.add(attempt)
        await self.session.flush()
        await self.session.refresh(attempt)
        return attempt

    async def count_failures_since(
        self, ip: str, since: datetime, exclude_reason: Optional[str] = None
    ) -> int:
        """Count failed attempts from ip inside the window"""
        stmt = (
            select(func.count())
            .select_from(LoginAttempt)
            .where(
                LoginAttempt.ip_address == ip,
                LoginAttempt.succeeded == False,
                LoginAttempt.created_at > since,
            )
        )
        if exclude_reason is not None:
            stmt = stmt.where(
                or_(
                    LoginAttempt.failure_reason.is_(None),
                    LoginAttempt.failure_reason != exclude_reason,
                )
            )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def get_paginated(
        self, limit: int = 50, cursor: Optional[str] = None
    ) -> Tuple[List[LoginAttempt], Optional[str]]:
        """
        Get login attempts with cursor-based pagination.

        Cursor format: base64-encoded "<created_at ISO>|<id>" of the last row
        on the previous page. Rows sharing a timestamp are ordered by id, so
        ties are split across pages without being skipped.
        """
        stmt = select(LoginAttempt)

        # Apply cursor if provided
        if cursor:
            try:
                timestamp_str, id_str = base64.b64decode(cursor).decode("utf-8").split("|")
                cursor_timestamp = datetime.fromisoformat(timestamp_str)
                cursor_id = UUID(id_str)
                stmt = stmt.where(
                    or_(
                        LoginAttempt.created_at < cursor_timestamp,
                        and_(
                            LoginAttempt.created_at == cursor_timestamp,
                            LoginAttempt.id < cursor_id,
                        ),
                    )
                )
            except (ValueError, TypeError):
                # Invalid cursor, ignore and return from beginning
                pass

        # Newest first, one extra row to detect another page
        stmt = stmt.order_by(LoginAttempt.created_at.desc(), LoginAttempt.id.desc()).limit(
            limit + 1
        )

        result = await self.session.exec(stmt)
        attempts = list(result.all())

        has_more = len(attempts) > limit
        if has_more:
            attempts = attempts[:limit]

        next_cursor = None
        if has_more and attempts:
            last = attempts[-1]
            raw = f"{last.created_at.isoformat()}|{last.id}"
            next_cursor = base64.b64encode(raw.encode("utf-8")).decode("utf-8")

        return attempts, next_cursor

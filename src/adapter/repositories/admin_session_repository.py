from typing import Optional

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.admin_session_repository import IAdminSessionRepository
from src.domain.entities import AdminSession


class AdminSessionRepository(IAdminSessionRepository):
    """Admin session repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, session_obj: AdminSession) -> AdminSession:
        """Create a new session"""
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return session_obj

    async def get_by_token_hash(self, token_hash: str) -> Optional[AdminSession]:
        """Get session by token digest"""
        stmt = select(AdminSession).where(AdminSession.token_hash == token_hash)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def delete_by_token_hash(self, token_hash: str) -> bool:
        """Delete a session by token digest"""
        stmt = delete(AdminSession).where(AdminSession.token_hash == token_hash)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

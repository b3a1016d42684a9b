from typing import Optional
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.share_password_repository import ISharePasswordRepository
from src.domain.entities import SharePassword


class SharePasswordRepository(ISharePasswordRepository):
    """Share password repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_file_id(self, file_id: UUID) -> Optional[SharePassword]:
        """Get the stored password record of a file"""
        stmt = select(SharePassword).where(SharePassword.file_id == file_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def save(self, record: SharePassword) -> SharePassword:
        """Insert or update a file's password record"""
        self.session.add(record)
        await self.session.flush()
        await self.session.refresh(record)
        return record

    async def delete_by_file_id(self, file_id: UUID) -> bool:
        """Remove a file's password"""
        stmt = delete(SharePassword).where(SharePassword.file_id == file_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

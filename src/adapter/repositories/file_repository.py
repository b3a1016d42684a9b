from typing import List, Optional
from uuid import UUID

from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.file_repository import IFileRepository
from src.domain.entities import File


class FileRepository(IFileRepository):
    """File repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, file_id: UUID) -> Optional[File]:
        """Get file by ID"""
        stmt = select(File).where(File.id == file_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_public_id(self, public_id: str) -> Optional[File]:
        """Get file by share-link key"""
        stmt = select(File).where(File.public_id == public_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_project_id(self, project_id: UUID) -> List[File]:
        """Get all files of a project"""
        stmt = select(File).where(File.project_id == project_id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, file: File) -> File:
        """Create a new file record"""
        self.session.add(file)
        await self.session.flush()
        await self.session.refresh(file)
        return file

    async def update(self, file: File) -> File:
        """Update existing file"""
        self.session.add(file)
        await self.session.flush()
        await self.session.refresh(file)
        return file

    async def increment_download_count(self, file_id: UUID) -> None:
        """Single UPDATE ... SET download_count = download_count + 1"""
        stmt = (
            update(File)
            .where(File.id == file_id)
            .values(download_count=File.download_count + 1)
            .execution_options(synchronize_session=False)
        )
        await self.session.execute(stmt)
        await self.session.flush()

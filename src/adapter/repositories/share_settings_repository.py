from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.share_settings_repository import IShareSettingsRepository
from src.domain.entities import (
    FileShareSettings,
    GlobalShareSettings,
    ProjectShareSettings,
)
from src.domain.entities.share_settings import GLOBAL_SETTINGS_ID


class ShareSettingsRepository(IShareSettingsRepository):
    """Share settings repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _save(self, settings):
        self.session.add(settings)
        await self.session.flush()
        await self.session.refresh(settings)
        return settings

    async def get_global(self) -> Optional[GlobalShareSettings]:
        """Get the global row"""
        stmt = select(GlobalShareSettings).where(
            GlobalShareSettings.id == GLOBAL_SETTINGS_ID
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def save_global(self, settings: GlobalShareSettings) -> GlobalShareSettings:
        """Insert or update the global row"""
        return await self._save(settings)

    async def get_for_project(self, project_id: UUID) -> Optional[ProjectShareSettings]:
        """Get project-level overrides"""
        stmt = select(ProjectShareSettings).where(
            ProjectShareSettings.project_id == project_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def save_project(self, settings: ProjectShareSettings) -> ProjectShareSettings:
        """Insert or update project-level overrides"""
        return await self._save(settings)

    async def get_for_file(self, file_id: UUID) -> Optional[FileShareSettings]:
        """Get file-level overrides"""
        stmt = select(FileShareSettings).where(FileShareSettings.file_id == file_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def save_file(self, settings: FileShareSettings) -> FileShareSettings:
        """Insert or update file-level overrides"""
        return await self._save(settings)

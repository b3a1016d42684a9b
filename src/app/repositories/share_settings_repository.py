from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import (
    FileShareSettings,
    GlobalShareSettings,
    ProjectShareSettings,
)


class IShareSettingsRepository(ABC):
    """Share settings repository interface (all three tiers) - application layer"""

    @abstractmethod
    async def get_global(self) -> Optional[GlobalShareSettings]:
        """Get the global row, None if never written"""
        pass

    @abstractmethod
    async def save_global(self, settings: GlobalShareSettings) -> GlobalShareSettings:
        """Insert or update the global row"""
        pass

    @abstractmethod
    async def get_for_project(self, project_id: UUID) -> Optional[ProjectShareSettings]:
        """Get project-level overrides"""
        pass

    @abstractmethod
    async def save_project(self, settings: ProjectShareSettings) -> ProjectShareSettings:
        """Insert or update project-level overrides"""
        pass

    @abstractmethod
    async def get_for_file(self, file_id: UUID) -> Optional[FileShareSettings]:
        """Get file-level overrides"""
        pass

    @abstractmethod
    async def save_file(self, settings: FileShareSettings) -> FileShareSettings:
        """Insert or update file-level overrides"""
        pass

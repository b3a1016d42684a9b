from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import Project


class IProjectRepository(ABC):
    """Project repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, project_id: UUID) -> Optional[Project]:
        """Get project by ID"""
        pass

    @abstractmethod
    async def create(self, project: Project) -> Project:
        """Create a new project"""
        pass

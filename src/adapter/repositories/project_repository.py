from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.project_repository import IProjectRepository
from src.domain.entities import Project


class ProjectRepository(IProjectRepository):
    """Project repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, project_id: UUID) -> Optional[Project]:
        """Get project by ID"""
        stmt = select(Project).where(Project.id == project_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, project: Project) -> Project:
        """Create a new project"""
        self.session.add(project)
        await self.session.flush()
        await self.session.refresh(project)
        return project

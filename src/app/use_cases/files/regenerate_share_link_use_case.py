"""
Regenerate Share Link Use Case

Replaces public ids so previously handed-out links stop working.
"""

from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import generate_public_id
from src.domain.entities import AuditAction, AuditEvent
from .dtos import RegeneratedLink, RegenerateLinksResponse


class RegenerateShareLinkUseCase:
    """
    Business Rules:
    - Old public ids resolve to NOT_FOUND afterwards
    - Download counters and logs are kept
    - Audit-logged per call
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def regenerate_file(
        self,
        file_id: UUID,
        ip: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> Result[RegeneratedLink]:
        async with self.uow:
            file = await self.uow.files.get_by_id(file_id)
            if file is None:
                return Return.err(Error("FILE_NOT_FOUND", "File not found"))

            file.public_id = generate_public_id()
            await self.uow.files.update(file)

            audit = AuditEvent(
                action=AuditAction.regenerate_share_link.value,
                resource_type="file",
                resource_id=str(file_id),
                ip_address=ip,
                user_agent=user_agent,
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            return Return.ok(RegeneratedLink(file_id=str(file.id), public_id=file.public_id))

    async def regenerate_project(
        self,
        project_id: UUID,
        ip: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> Result[RegenerateLinksResponse]:
        async with self.uow:
            project = await self.uow.projects.get_by_id(project_id)
            if project is None:
                return Return.err(Error("PROJECT_NOT_FOUND", "Project not found"))

            links = []
            for file in await self.uow.files.get_by_project_id(project_id):
                file.public_id = generate_public_id()
                await self.uow.files.update(file)
                links.append(RegeneratedLink(file_id=str(file.id), public_id=file.public_id))

            audit = AuditEvent(
                action=AuditAction.regenerate_project_links.value,
                resource_type="project",
                resource_id=str(project_id),
                event_metadata={"count": len(links)},
                ip_address=ip,
                user_agent=user_agent,
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            return Return.ok(RegenerateLinksResponse(count=len(links), links=links))

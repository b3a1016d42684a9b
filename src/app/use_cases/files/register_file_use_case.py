"""
Register File Use Case

Makes an uploaded blob shareable: assigns its public id and fixes its
absolute expiry from the effective settings at upload time.
"""

from datetime import datetime, timedelta
from typing import Callable, Optional

from libs.result import Error, Result, Return
from src.app.services.password_vault import SharePasswordVault
from src.app.services.unit_of_work import UnitOfWork
from src.domain import share_policy
from src.domain.base import utc_now
from src.domain.entities import AuditAction, AuditEvent, File, SharePassword
from .dtos import FileInfo, RegisterFileCommand


class RegisterFileUseCase:
    """
    Business Rules:
    - expires_at = now + effective expiry_days (global + project tiers);
      later settings changes never move it
    - public_id is 128 random bits
    - An optional share password is hashed with the vault
    """

    def __init__(
        self,
        uow: UnitOfWork,
        vault: Optional[SharePasswordVault] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.uow = uow
        self.vault = vault or SharePasswordVault()
        self.clock = clock

    async def execute(
        self,
        command: RegisterFileCommand,
        ip: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> Result[FileInfo]:
        now = self.clock()

        async with self.uow:
            project_settings = None
            if command.project_id is not None:
                project = await self.uow.projects.get_by_id(command.project_id)
                if project is None:
                    return Return.err(Error("PROJECT_NOT_FOUND", "Project not found"))
                project_settings = await self.uow.share_settings.get_for_project(
                    command.project_id
                )

            global_settings = await self.uow.share_settings.get_global()
            effective = share_policy.resolve(global_settings, project_settings)

            expires_at = None
            if effective.expiry_days:
                expires_at = now + timedelta(days=effective.expiry_days)

            file = File(
                title=command.title,
                original_filename=command.original_filename,
                blob_url=command.blob_url,
                file_size=command.file_size,
                mime_type=command.mime_type,
                project_id=command.project_id,
                expires_at=expires_at,
                created_at=now,
            )
            file = await self.uow.files.create(file)

            has_password = False
            if command.share_password:
                hashed = self.vault.hash(command.share_password)
                await self.uow.share_passwords.save(
                    SharePassword(file_id=file.id, hash=hashed.hash, salt=hashed.salt)
                )
                has_password = True

            audit = AuditEvent(
                action=AuditAction.register_file.value,
                resource_type="file",
                resource_id=str(file.id),
                event_metadata={
                    "title": file.title,
                    "original_filename": file.original_filename,
                    "expires_at": expires_at.isoformat() if expires_at else None,
                },
                ip_address=ip,
                user_agent=user_agent,
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            return Return.ok(
                FileInfo(
                    id=str(file.id),
                    public_id=file.public_id,
                    title=file.title,
                    original_filename=file.original_filename,
                    project_id=str(file.project_id) if file.project_id else None,
                    download_count=file.download_count,
                    expires_at=file.expires_at,
                    has_password=has_password,
                )
            )

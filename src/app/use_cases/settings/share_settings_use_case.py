"""
Share Settings Use Case

Reads and writes each share settings tier independently. Resolution only
happens at access time (and for the effective-settings preview).
"""

import logging
from dataclasses import asdict
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.password_vault import SharePasswordVault
from src.app.services.unit_of_work import UnitOfWork
from src.domain import share_policy
from src.domain.base import utc_now
from src.domain.entities import (
    AuditAction,
    AuditEvent,
    FileShareSettings,
    GlobalShareSettings,
    ProjectShareSettings,
    SharePassword,
)
from src.domain.entities.share_settings import GLOBAL_SETTINGS_ID
from .dtos import (
    EffectiveSettingsData,
    FileShareSettingsData,
    GlobalShareSettingsData,
    TierShareSettingsData,
    UpdateFileShareSettingsCommand,
)

logger = logging.getLogger(__name__)

TIER_FIELDS = (
    "sharing_enabled",
    "password_required",
    "expiry_days",
    "download_limit_per_ip",
    "download_limit_window_minutes",
)


def _tier_data(record) -> dict:
    if record is None:
        return {}
    return {name: getattr(record, name) for name in TIER_FIELDS}


class ShareSettingsUseCase:
    """
    Use case for share settings CRUD.

    Business Rules:
    - Global tier always has a value for every field (defaults if never saved)
    - Project/file writes replace the whole tier; None fields inherit
    - A file's share password can be set or removed with its file settings
    - Every write is audit-logged
    """

    def __init__(self, uow: UnitOfWork, vault: Optional[SharePasswordVault] = None):
        self.uow = uow
        self.vault = vault or SharePasswordVault()

    # ---------------------------------------------------------------- global

    async def get_global(self) -> Result[GlobalShareSettingsData]:
        async with self.uow:
            record = await self.uow.share_settings.get_global()
        if record is None:
            return Return.ok(GlobalShareSettingsData())
        return Return.ok(GlobalShareSettingsData.model_validate(record, from_attributes=True))

    async def set_global(
        self,
        data: GlobalShareSettingsData,
        ip: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> Result[GlobalShareSettingsData]:
        async with self.uow:
            record = await self.uow.share_settings.get_global()
            if record is None:
                record = GlobalShareSettings(id=GLOBAL_SETTINGS_ID)

            for name, value in data.model_dump().items():
                setattr(record, name, value)
            record.updated_at = utc_now()
            await self.uow.share_settings.save_global(record)

            await self._audit(
                AuditAction.update_global_share_settings,
                "settings",
                None,
                data.model_dump(),
                ip,
                user_agent,
            )
            await self.uow.commit()

        return Return.ok(data)

    # --------------------------------------------------------------- project

    async def get_project(self, project_id: UUID) -> Result[TierShareSettingsData]:
        async with self.uow:
            project = await self.uow.projects.get_by_id(project_id)
            if project is None:
                return Return.err(Error("PROJECT_NOT_FOUND", "Project not found"))
            record = await self.uow.share_settings.get_for_project(project_id)
        return Return.ok(TierShareSettingsData(**_tier_data(record)))

    async def set_project(
        self,
        project_id: UUID,
        data: TierShareSettingsData,
        ip: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> Result[TierShareSettingsData]:
        async with self.uow:
            project = await self.uow.projects.get_by_id(project_id)
            if project is None:
                return Return.err(Error("PROJECT_NOT_FOUND", "Project not found"))

            record = await self.uow.share_settings.get_for_project(project_id)
            if record is None:
                record = ProjectShareSettings(project_id=project_id)

            values = data.model_dump(include=set(TIER_FIELDS))
            for name, value in values.items():
                setattr(record, name, value)
            record.updated_at = utc_now()
            await self.uow.share_settings.save_project(record)

            await self._audit(
                AuditAction.update_project_share_settings,
                "project",
                str(project_id),
                values,
                ip,
                user_agent,
            )
            await self.uow.commit()

        return Return.ok(TierShareSettingsData(**values))

    # ------------------------------------------------------------------ file

    async def get_file(self, file_id: UUID) -> Result[FileShareSettingsData]:
        async with self.uow:
            file = await self.uow.files.get_by_id(file_id)
            if file is None:
                return Return.err(Error("FILE_NOT_FOUND", "File not found"))
            record = await self.uow.share_settings.get_for_file(file_id)
            password = await self.uow.share_passwords.get_by_file_id(file_id)
        return Return.ok(
            FileShareSettingsData(**_tier_data(record), has_password=password is not None)
        )

    async def set_file(
        self,
        file_id: UUID,
        command: UpdateFileShareSettingsCommand,
        ip: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> Result[FileShareSettingsData]:
        async with self.uow:
            file = await self.uow.files.get_by_id(file_id)
            if file is None:
                return Return.err(Error("FILE_NOT_FOUND", "File not found"))

            record = await self.uow.share_settings.get_for_file(file_id)
            if record is None:
                record = FileShareSettings(file_id=file_id)

            values = command.model_dump(include=set(TIER_FIELDS))
            for name, value in values.items():
                setattr(record, name, value)
            record.updated_at = utc_now()
            await self.uow.share_settings.save_file(record)

            password_change = None
            if command.share_password == "":
                await self.uow.share_passwords.delete_by_file_id(file_id)
                password_change = "removed"
            elif command.share_password is not None:
                await self._store_password(file_id, command.share_password)
                password_change = "set"

            has_password = await self.uow.share_passwords.get_by_file_id(file_id) is not None

            await self._audit(
                AuditAction.update_file_share_settings,
                "file",
                str(file_id),
                {**values, "password": password_change},
                ip,
                user_agent,
            )
            await self.uow.commit()

        return Return.ok(FileShareSettingsData(**values, has_password=has_password))

    async def get_effective(self, file_id: UUID) -> Result[EffectiveSettingsData]:
        """Preview of what the download gate will apply to this file right now"""
        async with self.uow:
            file = await self.uow.files.get_by_id(file_id)
            if file is None:
                return Return.err(Error("FILE_NOT_FOUND", "File not found"))

            global_settings = await self.uow.share_settings.get_global()
            project_settings = None
            if file.project_id is not None:
                project_settings = await self.uow.share_settings.get_for_project(file.project_id)
            file_settings = await self.uow.share_settings.get_for_file(file_id)
            password = await self.uow.share_passwords.get_by_file_id(file_id)

        effective = share_policy.resolve(global_settings, project_settings, file_settings)
        if effective.password_required and password is None:
            logger.warning(f"File {file_id} requires a share password but none is set")

        return Return.ok(
            EffectiveSettingsData(**asdict(effective), has_password=password is not None)
        )

    async def _store_password(self, file_id: UUID, password: str) -> None:
        hashed = self.vault.hash(password)
        record = await self.uow.share_passwords.get_by_file_id(file_id)
        if record is None:
            record = SharePassword(file_id=file_id, hash=hashed.hash, salt=hashed.salt)
        else:
            record.hash = hashed.hash
            record.salt = hashed.salt
        await self.uow.share_passwords.save(record)

    async def _audit(self, action, resource_type, resource_id, metadata, ip, user_agent):
        audit = AuditEvent(
            action=action.value,
            resource_type=resource_type,
            resource_id=resource_id,
            event_metadata=metadata,
            ip_address=ip,
            user_agent=user_agent,
        )
        await self.uow.audit_events.create(audit)

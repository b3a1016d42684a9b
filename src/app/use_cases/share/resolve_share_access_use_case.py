"""
Resolve Share Access Use Case

Decides, for one anonymous download request, whether it may proceed.
"""

import logging
from datetime import datetime, timedelta
from typing import Callable, Optional

from libs.result import Error, Result, Return
from src.app.repositories.download_log_repository import DuplicateDownloadRequest
from src.app.services.password_vault import SharePasswordVault
from src.app.services.unit_of_work import UnitOfWork
from src.domain import share_policy
from src.domain.base import utc_now
from src.domain.entities import DownloadLog, File
from .dtos import ShareAccessGranted

logger = logging.getLogger(__name__)

# Unknown, expired and disabled links are indistinguishable to the caller
NOT_FOUND = Error("NOT_FOUND", "File not found")
PASSWORD_REQUIRED = Error("PASSWORD_REQUIRED", "Password required")
FORBIDDEN = Error("FORBIDDEN", "Access denied")
RATE_LIMITED = Error("RATE_LIMITED", "Too many downloads, try again later")


class ResolveShareAccessUseCase:
    """
    Use case behind the public download endpoint.

    Business Rules:
    - Lookup -> absolute expiry -> effective settings -> enabled ->
      password -> idempotency replay -> per-IP rate window -> grant
    - Only a grant writes anything: the DownloadLog row and the
      download_count increment are committed in one transaction
    - download_count is incremented in SQL, never read-modify-write
    - The increment comes first and locks the file row, so concurrent
      requests for one file see each other's log rows when they count
      the window; a rejected request rolls the increment back
    - password_required with no stored password is a misconfiguration:
      logged as an error and denied like a wrong password
    - A repeated request_id for the same file is answered again without
      being counted a second time
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
        public_id: str,
        password: Optional[str],
        ip: str,
        user_agent: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> Result[ShareAccessGranted]:
        """
        Execute the download gate.

        Args:
            public_id: Share-link key from the URL
            password: Share password supplied by the visitor, if any
            ip: Client IP address
            user_agent: Client user agent
            request_id: Optional idempotency key for retried requests

        Returns:
            Result with the blob URL to redirect to, or Error
            (NOT_FOUND, PASSWORD_REQUIRED, FORBIDDEN, RATE_LIMITED)
        """
        now = self.clock()

        async with self.uow:
            file = await self.uow.files.get_by_public_id(public_id)
            if file is None:
                return Return.err(NOT_FOUND)

            if file.expires_at is not None and now >= file.expires_at:
                return Return.err(NOT_FOUND)

            settings = await self._effective_settings(file)

            if not settings.sharing_enabled:
                return Return.err(NOT_FOUND)

            if settings.password_required:
                denied = await self._check_password(file, password)
                if denied is not None:
                    return Return.err(denied)

            # Rollback expires `file`, so everything needed afterwards is read now
            file_id = file.id
            granted = self._granted(file, request_id)
            replayed = granted.model_copy(update={"replayed": True})

            # Takes the file row lock; the replay check and the rate window
            # below are read under it and rolled back unless granted
            await self.uow.files.increment_download_count(file_id)

            if request_id:
                previous = await self.uow.download_logs.get_by_request_id(file_id, request_id)
                if previous is not None:
                    await self.uow.rollback()
                    return Return.ok(replayed)

            if settings.download_limit_per_ip:
                since = now - timedelta(minutes=settings.download_limit_window_minutes)
                recent = await self.uow.download_logs.count_for_ip_since(file_id, ip, since)
                if recent >= settings.download_limit_per_ip:
                    await self.uow.rollback()
                    logger.warning(
                        f"Download limit reached for file {file_id} from {ip} "
                        f"({recent}/{settings.download_limit_per_ip})"
                    )
                    return Return.err(RATE_LIMITED)

            log = DownloadLog(
                file_id=file_id,
                ip_address=ip,
                user_agent=user_agent,
                request_id=request_id,
                downloaded_at=now,
            )
            try:
                await self.uow.download_logs.create(log)
            except DuplicateDownloadRequest:
                await self.uow.rollback()
                return Return.ok(replayed)

            await self.uow.commit()

            return Return.ok(granted)

    async def _effective_settings(self, file: File) -> share_policy.EffectiveSettings:
        global_settings = await self.uow.share_settings.get_global()
        project_settings = None
        if file.project_id is not None:
            project_settings = await self.uow.share_settings.get_for_project(file.project_id)
        file_settings = await self.uow.share_settings.get_for_file(file.id)
        return share_policy.resolve(global_settings, project_settings, file_settings)

    async def _check_password(self, file: File, password: Optional[str]) -> Optional[Error]:
        record = await self.uow.share_passwords.get_by_file_id(file.id)
        if record is None:
            logger.error(
                f"Share misconfiguration: file {file.id} requires a password "
                f"but none is stored; denying access"
            )
            return FORBIDDEN
        if not password:
            return PASSWORD_REQUIRED
        if not self.vault.verify(password, record.hash, record.salt):
            return FORBIDDEN
        return None

    @staticmethod
    def _granted(file: File, request_id: Optional[str]) -> ShareAccessGranted:
        return ShareAccessGranted(
            file_id=str(file.id),
            redirect_url=file.blob_url,
            original_filename=file.original_filename,
            request_id=request_id,
        )

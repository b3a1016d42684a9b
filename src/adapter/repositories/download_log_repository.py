from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.download_log_repository import (
    DuplicateDownloadRequest,
    IDownloadLogRepository,
)
from src.domain.entities import DownloadLog


class DownloadLogRepository(IDownloadLogRepository):
    """Download log repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, log: DownloadLog) -> DownloadLog:
        """Append a download log entry"""
        self.session.add(log)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            if log.request_id is None:
                raise
            raise DuplicateDownloadRequest(log.request_id) from exc
        await self.session.refresh(log)
        return log

    async def count_for_ip_since(self, file_id: UUID, ip: str, since: datetime) -> int:
        """Count downloads of file_id by ip inside the window"""
        stmt = (
            select(func.count())
            .select_from(DownloadLog)
            .where(
                DownloadLog.file_id == file_id,
                DownloadLog.ip_address == ip,
                DownloadLog.downloaded_at > since,
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def get_by_request_id(
        self, file_id: UUID, request_id: str
    ) -> Optional[DownloadLog]:
        """Find an earlier grant for the same idempotency key"""
        stmt = select(DownloadLog).where(
            DownloadLog.file_id == file_id, DownloadLog.request_id == request_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def count_for_file(self, file_id: UUID) -> int:
        """Total logged downloads of a file"""
        stmt = select(func.count()).select_from(DownloadLog).where(DownloadLog.file_id == file_id)
        result = await self.session.execute(stmt)
        return result.scalar_one()

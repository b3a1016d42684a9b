from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from src.domain.entities import DownloadLog


class DuplicateDownloadRequest(Exception):
    """A log row for this (file_id, request_id) already exists"""


class IDownloadLogRepository(ABC):
    """Download log repository interface - application layer"""

    @abstractmethod
    async def create(self, log: DownloadLog) -> DownloadLog:
        """
        Append a download log entry.

        Raises:
            DuplicateDownloadRequest: request_id was already logged for the file
        """
        pass

    @abstractmethod
    async def count_for_ip_since(self, file_id: UUID, ip: str, since: datetime) -> int:
        """Count downloads of file_id by ip with downloaded_at > since"""
        pass

    @abstractmethod
    async def get_by_request_id(
        self, file_id: UUID, request_id: str
    ) -> Optional[DownloadLog]:
        """Find an earlier grant for the same idempotency key"""
        pass

    @abstractmethod
    async def count_for_file(self, file_id: UUID) -> int:
        """Total logged downloads of a file"""
        pass

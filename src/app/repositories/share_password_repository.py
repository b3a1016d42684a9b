from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import SharePassword


class ISharePasswordRepository(ABC):
    """Share password repository interface - application layer"""

    @abstractmethod
    async def get_by_file_id(self, file_id: UUID) -> Optional[SharePassword]:
        """Get the stored password record of a file"""
        pass

    @abstractmethod
    async def save(self, record: SharePassword) -> SharePassword:
        """Insert or update a file's password record"""
        pass

    @abstractmethod
    async def delete_by_file_id(self, file_id: UUID) -> bool:
        """Remove a file's password. Returns True if one existed."""
        pass

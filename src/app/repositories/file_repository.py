from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import File


class IFileRepository(ABC):
    """File repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, file_id: UUID) -> Optional[File]:
        """Get file by ID"""
        pass

    @abstractmethod
    async def get_by_public_id(self, public_id: str) -> Optional[File]:
        """Get file by its share-link key"""
        pass

    @abstractmethod
    async def get_by_project_id(self, project_id: UUID) -> List[File]:
        """Get all files of a project"""
        pass

    @abstractmethod
    async def create(self, file: File) -> File:
        """Create a new file record"""
        pass

    @abstractmethod
    async def update(self, file: File) -> File:
        """Update existing file"""
        pass

    @abstractmethod
    async def increment_download_count(self, file_id: UUID) -> None:
        """
        Atomically add one to download_count at the datastore level.

        The UPDATE holds the file row's write lock until the transaction ends,
        so concurrent grants for the same file run one after another.
        """
        pass

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import AdminSession


class IAdminSessionRepository(ABC):
    """Admin session repository interface - application layer"""

    @abstractmethod
    async def create(self, session: AdminSession) -> AdminSession:
        """Create a new session"""
        pass

    @abstractmethod
    async def get_by_token_hash(self, token_hash: str) -> Optional[AdminSession]:
        """Get session by SHA-256 digest of its token (expired rows included)"""
        pass

    @abstractmethod
    async def delete_by_token_hash(self, token_hash: str) -> bool:
        """Delete a session. Returns True if a row was removed."""
        pass

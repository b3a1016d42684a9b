from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Tuple

from src.domain.entities import LoginAttempt


class ILoginAttemptRepository(ABC):
    """Login attempt repository interface - application layer"""

    @abstractmethod
    async def create(self, attempt: LoginAttempt) -> LoginAttempt:
        """Append a login attempt (immutable)"""
        pass

    @abstractmethod
    async def count_failures_since(
        self, ip: str, since: datetime, exclude_reason: Optional[str] = None
    ) -> int:
        """Count failed attempts from ip with created_at > since"""
        pass

    @abstractmethod
    async def get_paginated(
        self, limit: int = 50, cursor: Optional[str] = None
    ) -> Tuple[List[LoginAttempt], Optional[str]]:
        """
        Get login attempts with cursor-based pagination.

        Returns:
            Tuple of (attempts list, next_cursor)
            - attempts: ordered by created_at DESC, then id DESC
            - next_cursor: Cursor for next page, None if no more attempts
        """
        pass

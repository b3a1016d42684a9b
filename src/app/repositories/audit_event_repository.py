from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import AuditEvent


class IAuditEventRepository(ABC):
    """AuditEvent repository interface - application layer"""

    @abstractmethod
    async def create(self, audit_event: AuditEvent) -> AuditEvent:
        """Append an admin audit event (immutable)"""
        pass

    @abstractmethod
    async def list_recent(
        self,
        limit: int = 50,
        action: Optional[str] = None,
        resource_type: Optional[str] = None,
    ) -> List[AuditEvent]:
        """Newest events first, optionally filtered"""
        pass

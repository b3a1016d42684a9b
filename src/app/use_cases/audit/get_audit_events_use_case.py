"""
Get Audit Events Use Case

Lists administrative mutations (settings, uploads, link regeneration, logout).
"""

from typing import Any, Dict, List, Optional

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork


class GetAuditEventsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        limit: int = 50,
        action: Optional[str] = None,
        resource_type: Optional[str] = None,
    ) -> Result[List[Dict[str, Any]]]:
        async with self.uow:
            events = await self.uow.audit_events.list_recent(
                limit=limit, action=action, resource_type=resource_type
            )

        return Return.ok(
            [
                {
                    "action": event.action,
                    "resource_type": event.resource_type,
                    "resource_id": event.resource_id,
                    "metadata": event.event_metadata or {},
                    "ip_address": event.ip_address,
                    "timestamp": event.created_at.isoformat() + "Z",
                }
                for event in events
            ]
        )

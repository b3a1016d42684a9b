"""
Get Auth Events Use Case

Lists admin login attempts for the dashboard with pagination.
"""

from typing import Any, Dict, Optional

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork


class GetAuthEventsUseCase:
    """
    Business Rules:
    - Newest first
    - Cursor-based pagination
    - Each event includes ip, user agent, outcome and failure reason
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, limit: int = 50, cursor: Optional[str] = None
    ) -> Result[Dict[str, Any]]:
        async with self.uow:
            attempts, next_cursor = await self.uow.login_attempts.get_paginated(
                limit=limit, cursor=cursor
            )

        events = [
            {
                "ip_address": attempt.ip_address,
                "user_agent": attempt.user_agent,
                "success": attempt.succeeded,
                "failure_reason": attempt.failure_reason,
                "timestamp": attempt.created_at.isoformat() + "Z",
            }
            for attempt in attempts
        ]
        return Return.ok({"events": events, "next_cursor": next_cursor})

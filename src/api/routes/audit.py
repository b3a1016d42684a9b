"""
Audit API Routes

Login attempt and admin audit listings.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel

from src.api.error import ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.audit import GetAuditEventsUseCase, GetAuthEventsUseCase
from src.depends import get_unit_of_work, require_session

router = APIRouter(prefix="/audit", tags=["Audit"])


class AuthEventResponse(BaseModel):
    """Single login attempt in response"""

    ip_address: str
    user_agent: Optional[str]
    success: bool
    failure_reason: Optional[str]
    timestamp: str


class AuditEventResponse(BaseModel):
    """Single admin mutation in response"""

    action: str
    resource_type: str
    resource_id: Optional[str]
    metadata: Dict[str, Any]
    ip_address: Optional[str]
    timestamp: str


class AuditEventsResponse(BaseModel):
    events: List[AuditEventResponse]


class AuthEventsResponse(BaseModel):
    """GET /audit/auth-events response payload"""

    events: List[AuthEventResponse]
    next_cursor: Optional[str]


@router.get(
    "/auth-events",
    status_code=status.HTTP_200_OK,
    response_model=AuthEventsResponse,
    dependencies=[Depends(require_session)],
)
async def get_auth_events(
    uow: UnitOfWork = Depends(get_unit_of_work),
    limit: int = Query(50, ge=1, le=100, description="Maximum number of events to return"),
    cursor: Optional[str] = Query(None, description="Pagination cursor"),
):
    """
    Get Admin Login Attempts

    Query Parameters:
        - limit: Maximum number of events to return (1-100, default 50)
        - cursor: Pagination cursor for fetching next page

    Returns:
        - events: Login attempts ordered by newest first
        - next_cursor: Cursor for next page (null if no more events)

    Raises:
        - 401 Unauthorized: No valid admin session
    """
    result = await GetAuthEventsUseCase(uow).execute(limit=limit, cursor=cursor)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.get(
    "/events",
    status_code=status.HTTP_200_OK,
    response_model=AuditEventsResponse,
    dependencies=[Depends(require_session)],
)
async def get_audit_events(
    uow: UnitOfWork = Depends(get_unit_of_work),
    limit: int = Query(50, ge=1, le=100),
    action: Optional[str] = Query(None, description="e.g. update_file_share_settings"),
    resource_type: Optional[str] = Query(None, description="file, project, settings or session"),
):
    """Admin mutations, newest first"""
    result = await GetAuditEventsUseCase(uow).execute(
        limit=limit, action=action, resource_type=resource_type
    )

    if result.is_err():
        raise ServerError(result.error)

    return AuditEventsResponse(events=result.value)

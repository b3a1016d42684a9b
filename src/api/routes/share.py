"""
Share API Routes

Public download endpoint behind every share link. Responses never say why a
link is unusable beyond the generic error code.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Form, Header, Query, Request, status
from fastapi.responses import RedirectResponse

from src.api.error import ClientError, ServerError
from src.api.utils.client_info import get_client_ip, get_user_agent
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.share import ResolveShareAccessUseCase
from src.depends import get_unit_of_work

router = APIRouter(prefix="/share", tags=["Share"])

ERROR_STATUS = {
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "PASSWORD_REQUIRED": status.HTTP_401_UNAUTHORIZED,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "RATE_LIMITED": status.HTTP_429_TOO_MANY_REQUESTS,
}


async def _resolve(
    public_id: str,
    password: Optional[str],
    request_id: Optional[str],
    request: Request,
    uow: UnitOfWork,
):
    use_case = ResolveShareAccessUseCase(uow)
    result = await use_case.execute(
        public_id,
        password,
        ip=get_client_ip(request),
        user_agent=get_user_agent(request),
        request_id=request_id,
    )

    if result.is_err():
        error = result.error
        status_code = ERROR_STATUS.get(error.code)
        if status_code is None:
            raise ServerError(error)
        raise ClientError(error, status_code=status_code, headers={"Cache-Control": "no-store"})

    return RedirectResponse(
        url=result.value.redirect_url,
        status_code=status.HTTP_307_TEMPORARY_REDIRECT,
        headers={"Cache-Control": "no-store"},
    )


@router.get("/{public_id}")
async def download(
    public_id: str,
    request: Request,
    password: Optional[str] = Query(None, description="Share password"),
    x_share_password: Optional[str] = Header(None),
    idempotency_key: Optional[str] = Header(None, max_length=128),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Download via share link

    Redirects (307) to the stored object when allowed.

    Raises:
        - 404 Not Found: Unknown, expired or disabled link
        - 401 Unauthorized: Password required
        - 403 Forbidden: Wrong password
        - 429 Too Many Requests: Per-IP download limit reached
    """
    return await _resolve(
        public_id, x_share_password or password, idempotency_key, request, uow
    )


@router.post("/{public_id}")
async def download_with_password(
    public_id: str,
    request: Request,
    password: Optional[str] = Form(None),
    idempotency_key: Optional[str] = Header(None, max_length=128),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Password form submission for protected share links"""
    return await _resolve(public_id, password, idempotency_key, request, uow)

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.api.utils.client_info import get_client_ip, get_user_agent
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import AdminLoginUseCase, LogoutUseCase
from src.depends import get_config, get_login_use_case, get_unit_of_work, require_session
from src.domain.entities import AdminSession

router = APIRouter(prefix="/auth", tags=["Authentication"])


class LoginRequest(BaseModel):
    """
    Admin login HTTP request payload

    bypass_token is the emergency recovery secret; when valid it grants a
    session even while the client IP is locked out.
    """

    password: Optional[str] = Field(default=None, description="Admin password")
    bypass_token: Optional[str] = Field(default=None, description="Emergency bypass token")


class LoginResult(BaseModel):
    success: bool
    expires_at: datetime


class LogoutResult(BaseModel):
    success: bool


class SessionStatus(BaseModel):
    valid: bool
    expires_at: datetime


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResult)
async def login(
    body: LoginRequest,
    request: Request,
    response: Response,
    use_case: AdminLoginUseCase = Depends(get_login_use_case),
    config=Depends(get_config),
):
    """
    Admin Login

    Sets an HTTP-only session cookie on success.

    Raises:
        - 401 Unauthorized: Invalid password (or invalid bypass token, or IP not allowed)
        - 429 Too Many Requests: Too many failed attempts from this IP
        - 500 Internal Server Error: Server error
    """
    result = await use_case.execute(
        body.password,
        body.bypass_token,
        ip=get_client_ip(request),
        user_agent=get_user_agent(request),
    )

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        elif error.code == "RATE_LIMITED":
            raise ClientError(error, status_code=status.HTTP_429_TOO_MANY_REQUESTS)
        raise ServerError(error)

    data = result.value
    response.set_cookie(
        key=config.SESSION_COOKIE_NAME,
        value=data.session_token,
        max_age=config.SESSION_DURATION_DAYS * 24 * 60 * 60,
        path="/",
        secure=config.SESSION_COOKIE_SECURE,
        httponly=True,
        samesite="lax",
    )
    return LoginResult(success=True, expires_at=data.expires_at)


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=LogoutResult)
async def logout(
    request: Request,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
    config=Depends(get_config),
):
    """
    Logout

    Revokes the session behind the cookie (if any) and clears the cookie.
    Always succeeds.
    """
    use_case = LogoutUseCase(uow)
    result = await use_case.execute(
        request.cookies.get(config.SESSION_COOKIE_NAME),
        ip=get_client_ip(request),
        user_agent=get_user_agent(request),
    )

    if result.is_err():
        raise ServerError(result.error)

    response.delete_cookie(
        key=config.SESSION_COOKIE_NAME,
        path="/",
        secure=config.SESSION_COOKIE_SECURE,
        httponly=True,
        samesite="lax",
    )
    return LogoutResult(success=True)


@router.get("/session", status_code=status.HTTP_200_OK, response_model=SessionStatus)
async def session_status(session: AdminSession = Depends(require_session)):
    """
    Current Session

    Raises:
        - 401 Unauthorized: No valid session (the dashboard redirects to login)
    """
    return SessionStatus(valid=True, expires_at=session.expires_at)

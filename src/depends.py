from fastapi import Depends, Request, status
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from libs.result import Error
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.app.services.ip_allowlist import IpAllowlist
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import AdminCredentials, AdminLoginUseCase, ValidateSessionUseCase
from src.domain.entities import AdminSession

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_config(request: Request):
    """Config class handed to create_app()"""
    return request.app.state.config


def get_login_use_case(
    uow: UnitOfWork = Depends(get_unit_of_work),
    config=Depends(get_config),
) -> AdminLoginUseCase:
    """Admin login wired with secrets and throttle parameters from config"""
    return AdminLoginUseCase(
        uow,
        AdminCredentials(
            password=config.ADMIN_PASSWORD,
            bypass_token=config.EMERGENCY_BYPASS_TOKEN,
        ),
        allowlist=IpAllowlist(config.ALLOWED_IPS),
        max_attempts=config.RATE_LIMIT_MAX_ATTEMPTS,
        window_minutes=config.RATE_LIMIT_WINDOW_MINUTES,
        session_days=config.SESSION_DURATION_DAYS,
    )


async def require_session(
    request: Request,
    uow: UnitOfWork = Depends(get_unit_of_work),
    config=Depends(get_config),
) -> AdminSession:
    """
    Dependency guarding every dashboard endpoint.

    Reads the session cookie and validates it against the sessions table.

    Raises:
        ClientError: 401 SESSION_EXPIRED if the cookie is missing, unknown or expired
    """
    token = request.cookies.get(config.SESSION_COOKIE_NAME)
    session = await ValidateSessionUseCase(uow).execute(token)

    if session is None:
        raise ClientError(
            Error("SESSION_EXPIRED", "Session expired or invalid"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return session

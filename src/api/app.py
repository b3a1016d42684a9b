from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel
from .error import ClientError, ServerError
from .security_headers import add_security_headers
import logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(
        status_code=exc.status_code, content={"error": error_dict}, headers=exc.headers
    )


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


async def handle_datastore_error(request: Request, exc: SQLAlchemyError):
    # Fail closed: nothing is granted when the datastore misbehaves
    logger.exception(f"Datastore error on {request.method} {request.url.path}")
    error_dict = {"code": "DATASTORE_ERROR", "message": "Internal server error"}
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    from src.depends import engine
    import src.domain.entities  # noqa: F401  registers tables on SQLModel.metadata

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield


def create_app(ApplicationConfig) -> FastAPI:
    app = FastAPI(title="Zip Share API", version="0.1.0", lifespan=lifespan)
    app.state.config = ApplicationConfig

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(add_security_headers)
    # Outermost, so every layer below sees the resolved client address
    app.add_middleware(ProxyHeadersMiddleware, trusted_hosts=ApplicationConfig.TRUSTED_PROXIES)

    from src.api.routes import audit, auth, files, health_check, settings, share

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, tags=["Authentication"])
    app.include_router(share.router, tags=["Share"])
    app.include_router(settings.router, tags=["Share Settings"])
    app.include_router(files.router, tags=["Files"])
    app.include_router(audit.router, tags=["Audit"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(SQLAlchemyError, handle_datastore_error)

    return app

"""
Share Settings API Routes

Per-tier reads and writes. Every endpoint requires an admin session.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from src.api.error import ClientError, ServerError
from src.api.utils.client_info import get_client_ip, get_user_agent
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.settings import (
    EffectiveSettingsData,
    FileShareSettingsData,
    GlobalShareSettingsData,
    ShareSettingsUseCase,
    TierShareSettingsData,
    UpdateFileShareSettingsCommand,
)
from src.depends import get_unit_of_work, require_session

router = APIRouter(
    prefix="/settings", tags=["Share Settings"], dependencies=[Depends(require_session)]
)


def _raise_for(error):
    if error.code in ("PROJECT_NOT_FOUND", "FILE_NOT_FOUND"):
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    raise ServerError(error)


@router.get("/global", response_model=GlobalShareSettingsData)
async def get_global_settings(uow: UnitOfWork = Depends(get_unit_of_work)):
    """Global share settings (defaults if never saved)"""
    result = await ShareSettingsUseCase(uow).get_global()
    if result.is_err():
        _raise_for(result.error)
    return result.value


@router.put("/global", response_model=GlobalShareSettingsData)
async def set_global_settings(
    body: GlobalShareSettingsData,
    request: Request,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Replace global share settings"""
    result = await ShareSettingsUseCase(uow).set_global(
        body, ip=get_client_ip(request), user_agent=get_user_agent(request)
    )
    if result.is_err():
        _raise_for(result.error)
    return result.value


@router.get("/projects/{project_id}", response_model=TierShareSettingsData)
async def get_project_settings(
    project_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """Project overrides (null = inherit)"""
    result = await ShareSettingsUseCase(uow).get_project(project_id)
    if result.is_err():
        _raise_for(result.error)
    return result.value


@router.put("/projects/{project_id}", response_model=TierShareSettingsData)
async def set_project_settings(
    project_id: UUID,
    body: TierShareSettingsData,
    request: Request,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Replace project overrides

    null inherits from global; 0 for expiry_days / download_limit_per_ip
    removes the limit for this project.
    """
    result = await ShareSettingsUseCase(uow).set_project(
        project_id, body, ip=get_client_ip(request), user_agent=get_user_agent(request)
    )
    if result.is_err():
        _raise_for(result.error)
    return result.value


@router.get("/files/{file_id}", response_model=FileShareSettingsData)
async def get_file_settings(file_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    """File overrides (null = inherit) and whether a share password is set"""
    result = await ShareSettingsUseCase(uow).get_file(file_id)
    if result.is_err():
        _raise_for(result.error)
    return result.value


@router.put("/files/{file_id}", response_model=FileShareSettingsData)
async def set_file_settings(
    file_id: UUID,
    body: UpdateFileShareSettingsCommand,
    request: Request,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Replace file overrides

    share_password: omitted/null keeps the current password, "" removes it,
    any other value replaces it.
    """
    result = await ShareSettingsUseCase(uow).set_file(
        file_id, body, ip=get_client_ip(request), user_agent=get_user_agent(request)
    )
    if result.is_err():
        _raise_for(result.error)
    return result.value


@router.get("/files/{file_id}/effective", response_model=EffectiveSettingsData)
async def get_effective_file_settings(
    file_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """Policy the download gate currently applies to this file"""
    result = await ShareSettingsUseCase(uow).get_effective(file_id)
    if result.is_err():
        _raise_for(result.error)
    return result.value

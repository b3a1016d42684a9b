from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from src.api.error import ClientError, ServerError
from src.api.utils.client_info import get_client_ip, get_user_agent
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.files import (
    FileInfo,
    RegenerateLinksResponse,
    RegenerateShareLinkUseCase,
    RegeneratedLink,
    RegisterFileCommand,
    RegisterFileUseCase,
)
from src.depends import get_unit_of_work, require_session

router = APIRouter(tags=["Files"], dependencies=[Depends(require_session)])


def _raise_for(error):
    if error.code in ("PROJECT_NOT_FOUND", "FILE_NOT_FOUND"):
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    raise ServerError(error)


@router.post("/files", status_code=status.HTTP_201_CREATED, response_model=FileInfo)
async def register_file(
    body: RegisterFileCommand,
    request: Request,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Register Uploaded File

    The bytes are already in the blob store; this makes them shareable and
    fixes the link's expiry from the effective settings.

    Raises:
        - 404 Not Found: Project not found
    """
    result = await RegisterFileUseCase(uow).execute(
        body, ip=get_client_ip(request), user_agent=get_user_agent(request)
    )
    if result.is_err():
        _raise_for(result.error)
    return result.value


@router.post("/files/{file_id}/regenerate-link", response_model=RegeneratedLink)
async def regenerate_file_link(
    file_id: UUID,
    request: Request,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """New share link for one file; the old link stops working"""
    result = await RegenerateShareLinkUseCase(uow).regenerate_file(
        file_id, ip=get_client_ip(request), user_agent=get_user_agent(request)
    )
    if result.is_err():
        _raise_for(result.error)
    return result.value


@router.post("/projects/{project_id}/regenerate-links", response_model=RegenerateLinksResponse)
async def regenerate_project_links(
    project_id: UUID,
    request: Request,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """New share links for every file of a project"""
    result = await RegenerateShareLinkUseCase(uow).regenerate_project(
        project_id, ip=get_client_ip(request), user_agent=get_user_agent(request)
    )
    if result.is_err():
        _raise_for(result.error)
    return result.value

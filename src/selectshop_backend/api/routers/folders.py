"""Folder endpoints for the authenticated user."""

from __future__ import annotations

from fastapi import APIRouter, Response, status
from fastapi.responses import JSONResponse

from selectshop_backend.api.dependencies import CurrentUserDep, FolderServiceDep
from selectshop_backend.api.models import (
    ApiErrorResponse,
    FolderCreateRequest,
    FolderResponse,
)
from selectshop_backend.api.services import InvalidArgumentError
from selectshop_backend.database import SessionDep

router = APIRouter(prefix="/api", tags=["folders"])


def handle_invalid_argument(exc: InvalidArgumentError) -> JSONResponse:
    """Render a rejected folder request as a 400 ``{message, statusCode}`` body."""

    error = ApiErrorResponse(
        message=str(exc), status_code=status.HTTP_400_BAD_REQUEST
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error.model_dump(by_alias=True),
    )


@router.post(
    "/folders",
    response_class=Response,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ApiErrorResponse}},
)
def add_folders(
    payload: FolderCreateRequest,
    user: CurrentUserDep,
    session: SessionDep,
    folder_service: FolderServiceDep,
) -> Response:
    """Create the requested folders for the current user."""

    try:
        folder_service.add_folders(
            session=session, folder_names=payload.folder_names, user=user
        )
    except InvalidArgumentError as exc:
        return handle_invalid_argument(exc)
    return Response(status_code=status.HTTP_200_OK)


@router.get("/folders", response_model=list[FolderResponse])
def get_folders(
    user: CurrentUserDep,
    session: SessionDep,
    folder_service: FolderServiceDep,
) -> list[FolderResponse]:
    """List every folder owned by the current user."""

    folders = folder_service.get_folders(session=session, user=user)
    return [FolderResponse.model_validate(folder) for folder in folders]

"""Installed-app API router."""

from fastapi import APIRouter, Depends

from devicehub.apps.schemas import AppCreate, AppResponse, AppUpdate
from devicehub.apps.service import AppService
from devicehub.common.schemas import MessageResponse
from devicehub.deps import get_app_service

router = APIRouter(prefix="/apps", tags=["apps"])


@router.get("", response_model=list[AppResponse])
async def list_apps(svc: AppService = Depends(get_app_service)):
    apps = await svc.list_apps()
    return [AppResponse(**a) for a in apps]


@router.get("/{app_id}", response_model=AppResponse)
async def get_app(app_id: str, svc: AppService = Depends(get_app_service)):
    return AppResponse(**await svc.get_app(app_id))


@router.post("", response_model=AppResponse, status_code=201)
async def create_installed_app(
    body: AppCreate, svc: AppService = Depends(get_app_service)
):
    app = await svc.create_app(**body.model_dump())
    return AppResponse(**app)


@router.put("/{app_id}", response_model=AppResponse)
async def update_app(
    app_id: str, body: AppUpdate, svc: AppService = Depends(get_app_service)
):
    app = await svc.update_app(app_id, **body.model_dump(exclude_unset=True))
    return AppResponse(**app)


@router.delete("/{app_id}", response_model=MessageResponse)
async def delete_app(app_id: str, svc: AppService = Depends(get_app_service)):
    await svc.delete_app(app_id)
    return MessageResponse(message="App deleted successfully")

"""Tenant API router."""

from fastapi import APIRouter, Depends

from devicehub.common.schemas import MessageResponse
from devicehub.deps import get_tenant_service
from devicehub.tenants.schemas import (
    TenantCreate,
    TenantResponse,
    TenantSummary,
    TenantUpdate,
)
from devicehub.tenants.service import TenantService

router = APIRouter(prefix="/tenants", tags=["tenants"])


@router.get("", response_model=list[TenantSummary])
async def list_tenants(svc: TenantService = Depends(get_tenant_service)):
    tenants = await svc.list_tenants()
    return [TenantSummary(**t) for t in tenants]


@router.get("/{tenant_id}", response_model=TenantSummary)
async def get_tenant(tenant_id: str, svc: TenantService = Depends(get_tenant_service)):
    tenant = await svc.get_tenant(tenant_id)
    return TenantSummary(**tenant)


@router.post("", response_model=TenantResponse, status_code=201)
async def create_tenant(
    body: TenantCreate, svc: TenantService = Depends(get_tenant_service)
):
    tenant = await svc.create_tenant(name=body.name)
    return TenantResponse(**tenant)


@router.put("/{tenant_id}", response_model=TenantResponse)
async def update_tenant(
    tenant_id: str,
    body: TenantUpdate,
    svc: TenantService = Depends(get_tenant_service),
):
    tenant = await svc.update_tenant(tenant_id, **body.model_dump(exclude_unset=True))
    return TenantResponse(**tenant)


@router.delete("/{tenant_id}", response_model=MessageResponse)
async def delete_tenant(tenant_id: str, svc: TenantService = Depends(get_tenant_service)):
    await svc.delete_tenant(tenant_id)
    return MessageResponse(message="Tenant deleted successfully")

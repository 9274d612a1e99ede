"""Device API router."""

from fastapi import APIRouter, Depends

from devicehub.common.schemas import MessageResponse
from devicehub.deps import get_device_service
from devicehub.devices.schemas import DeviceCreate, DeviceResponse, DeviceUpdate
from devicehub.devices.service import DeviceService

router = APIRouter(prefix="/devices", tags=["devices"])


@router.get("", response_model=list[DeviceResponse])
async def list_devices(svc: DeviceService = Depends(get_device_service)):
    devices = await svc.list_devices()
    return [DeviceResponse(**d) for d in devices]


@router.get("/{device_id}", response_model=DeviceResponse)
async def get_device(device_id: str, svc: DeviceService = Depends(get_device_service)):
    return DeviceResponse(**await svc.get_device(device_id))


@router.post("", response_model=DeviceResponse, status_code=201)
async def create_device(
    body: DeviceCreate, svc: DeviceService = Depends(get_device_service)
):
    device = await svc.create_device(**body.model_dump())
    return DeviceResponse(**device)


@router.put("/{device_id}", response_model=DeviceResponse)
async def update_device(
    device_id: str,
    body: DeviceUpdate,
    svc: DeviceService = Depends(get_device_service),
):
    device = await svc.update_device(device_id, **body.model_dump(exclude_unset=True))
    return DeviceResponse(**device)


@router.delete("/{device_id}", response_model=MessageResponse)
async def delete_device(device_id: str, svc: DeviceService = Depends(get_device_service)):
    await svc.delete_device(device_id)
    return MessageResponse(message="Device deleted successfully")

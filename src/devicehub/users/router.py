"""User API router."""

from fastapi import APIRouter, Depends

from devicehub.common.schemas import MessageResponse
from devicehub.deps import get_user_service
from devicehub.users.schemas import UserCreate, UserResponse, UserUpdate
from devicehub.users.service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
async def list_users(svc: UserService = Depends(get_user_service)):
    users = await svc.list_users()
    return [UserResponse(**u) for u in users]


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str, svc: UserService = Depends(get_user_service)):
    return UserResponse(**await svc.get_user(user_id))


@router.post("", response_model=UserResponse, status_code=201)
async def create_user(body: UserCreate, svc: UserService = Depends(get_user_service)):
    user = await svc.create_user(
        tenant_id=body.tenant_id,
        external_auth_id=body.external_auth_id,
        email=body.email,
        name=body.name,
        role=body.role,
    )
    return UserResponse(**user)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str, body: UserUpdate, svc: UserService = Depends(get_user_service)
):
    user = await svc.update_user(user_id, **body.model_dump(exclude_unset=True))
    return UserResponse(**user)


@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(user_id: str, svc: UserService = Depends(get_user_service)):
    await svc.delete_user(user_id)
    return MessageResponse(message="User deleted successfully")

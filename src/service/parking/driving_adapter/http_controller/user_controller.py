from typing import List

from fastapi import APIRouter, Depends

from src.platform.logging.loguru_io import Logger
from src.service.parking.app.command.create_user_use_case import CreateUserUseCase
from src.service.parking.app.query.list_users_use_case import ListUsersUseCase
from src.service.parking.driving_adapter.http_controller.schema.user_schema import (
    CreateUserRequest,
    UserResponse,
)


router = APIRouter()


@router.get('', response_model=List[UserResponse])
@Logger.io
async def list_users(
    use_case: ListUsersUseCase = Depends(ListUsersUseCase.depends),
) -> List[UserResponse]:
    users = await use_case.execute()
    return [UserResponse(user_id=user.id or 0, name=user.name, role=user.role) for user in users]


@router.post('', response_model=UserResponse)
@Logger.io
async def create_user(
    request: CreateUserRequest,
    use_case: CreateUserUseCase = Depends(CreateUserUseCase.depends),
) -> UserResponse:
    user = await use_case.execute(name=request.name, role=request.role)
    return UserResponse(user_id=user.id or 0, name=user.name, role=user.role)

from typing import AsyncContextManager, Callable

from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.parking.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.parking.domain.entity.user_entity import UserEntity
from src.service.parking.driven_adapter.model.user_model import UserModel


class UserCommandRepoImpl(IUserCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, *, user: UserEntity) -> UserEntity:
        async with self.session_factory() as session:
            user_model = UserModel(name=user.name, role=user.role)

            session.add(user_model)
            await session.commit()
            await session.refresh(user_model)

            return UserEntity(id=user_model.user_id, name=user_model.name, role=user_model.role)

from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.parking.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.parking.domain.entity.user_entity import UserEntity


class CreateUserUseCase:
    def __init__(self, *, user_command_repo: IUserCommandRepo) -> None:
        self.user_command_repo = user_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        user_command_repo: IUserCommandRepo = Depends(Provide[Container.user_command_repo]),
    ) -> Self:
        return cls(user_command_repo=user_command_repo)

    @Logger.io
    async def execute(self, *, name: str, role: str) -> UserEntity:
        user = UserEntity.create(name=name, role=role)
        return await self.user_command_repo.create(user=user)

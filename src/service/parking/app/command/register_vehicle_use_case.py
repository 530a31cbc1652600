from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.parking.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.parking.app.interface.i_vehicle_command_repo import IVehicleCommandRepo
from src.service.parking.domain.entity.vehicle_entity import VehicleEntity


class RegisterVehicleUseCase:
    """Validate the type first (400), then the owner (404), then insert."""

    def __init__(
        self,
        *,
        user_query_repo: IUserQueryRepo,
        vehicle_command_repo: IVehicleCommandRepo,
    ) -> None:
        self.user_query_repo = user_query_repo
        self.vehicle_command_repo = vehicle_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        vehicle_command_repo: IVehicleCommandRepo = Depends(
            Provide[Container.vehicle_command_repo]
        ),
    ) -> Self:
        return cls(user_query_repo=user_query_repo, vehicle_command_repo=vehicle_command_repo)

    @Logger.io
    async def execute(self, *, user_id: int, reg_no: str, type: str) -> VehicleEntity:
        vehicle = VehicleEntity.create(user_id=user_id, reg_no=reg_no, type=type)

        if not await self.user_query_repo.get_by_id(user_id=user_id):
            raise NotFoundError('User not found. Cannot assign vehicle.')

        return await self.vehicle_command_repo.create(vehicle=vehicle)

from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.parking.app.interface.i_vehicle_query_repo import IVehicleQueryRepo
from src.service.parking.domain.entity.vehicle_entity import VehicleEntity


class ListVehiclesUseCase:
    def __init__(self, *, vehicle_query_repo: IVehicleQueryRepo) -> None:
        self.vehicle_query_repo = vehicle_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        vehicle_query_repo: IVehicleQueryRepo = Depends(Provide[Container.vehicle_query_repo]),
    ) -> Self:
        return cls(vehicle_query_repo=vehicle_query_repo)

    @Logger.io
    async def execute(self) -> List[VehicleEntity]:
        return await self.vehicle_query_repo.list_all()

from typing import AsyncContextManager, Callable

from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.parking.app.interface.i_vehicle_command_repo import IVehicleCommandRepo
from src.service.parking.domain.entity.vehicle_entity import VehicleEntity
from src.service.parking.domain.enum.vehicle_type import VehicleType
from src.service.parking.driven_adapter.model.vehicle_model import VehicleModel


class VehicleCommandRepoImpl(IVehicleCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, *, vehicle: VehicleEntity) -> VehicleEntity:
        async with self.session_factory() as session:
            vehicle_model = VehicleModel(
                user_id=vehicle.user_id,
                reg_no=vehicle.reg_no,
                type=vehicle.type.code,
            )

            session.add(vehicle_model)
            await session.commit()
            await session.refresh(vehicle_model)

            return VehicleEntity(
                id=vehicle_model.vehicle_id,
                user_id=vehicle_model.user_id,
                reg_no=vehicle_model.reg_no,
                type=VehicleType.from_code(vehicle_model.type),
            )

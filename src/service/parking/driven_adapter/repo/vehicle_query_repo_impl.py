from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.parking.app.interface.i_vehicle_query_repo import IVehicleQueryRepo
from src.service.parking.domain.entity.vehicle_entity import VehicleEntity
from src.service.parking.domain.enum.vehicle_type import VehicleType
from src.service.parking.driven_adapter.model.vehicle_model import VehicleModel


class VehicleQueryRepoImpl(IVehicleQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, vehicle_id: int) -> Optional[VehicleEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(VehicleModel).where(VehicleModel.vehicle_id == vehicle_id)
            )
            vehicle_model = result.scalar_one_or_none()

            if not vehicle_model:
                return None

            return self._model_to_entity(vehicle_model)

    @Logger.io
    async def list_all(self) -> List[VehicleEntity]:
        async with self.session_factory() as session:
            result = await session.execute(select(VehicleModel).order_by(VehicleModel.vehicle_id))
            return [self._model_to_entity(model) for model in result.scalars()]

    @staticmethod
    def _model_to_entity(vehicle_model: VehicleModel) -> VehicleEntity:
        return VehicleEntity(
            id=vehicle_model.vehicle_id,
            user_id=vehicle_model.user_id,
            reg_no=vehicle_model.reg_no,
            type=VehicleType.from_code(vehicle_model.type),
        )

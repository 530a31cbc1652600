from typing import AsyncContextManager, Callable, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.parking.app.dto.reservation_view import ReservationView
from src.service.parking.app.interface.i_reservation_query_repo import IReservationQueryRepo
from src.service.parking.driven_adapter.model.reservation_model import ReservationModel
from src.service.parking.driven_adapter.model.slot_model import SlotModel
from src.service.parking.driven_adapter.model.user_model import UserModel
from src.service.parking.driven_adapter.model.vehicle_model import VehicleModel


class ReservationQueryRepoImpl(IReservationQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io(truncate_content=True)
    async def list_with_details(self) -> List[ReservationView]:
        async with self.session_factory() as session:
            stmt = (
                select(
                    ReservationModel,
                    UserModel.name,
                    VehicleModel.reg_no,
                    SlotModel.slot_name,
                )
                .join(UserModel, ReservationModel.user_id == UserModel.user_id)
                .join(VehicleModel, ReservationModel.vehicle_id == VehicleModel.vehicle_id)
                .join(SlotModel, ReservationModel.slot_id == SlotModel.slot_id)
                .order_by(ReservationModel.start_time.desc(), ReservationModel.res_id.desc())
            )
            result = await session.execute(stmt)

            return [
                ReservationView(
                    res_id=reservation.res_id,
                    user_id=reservation.user_id,
                    vehicle_id=reservation.vehicle_id,
                    slot_id=reservation.slot_id,
                    start_time=reservation.start_time,
                    end_time=reservation.end_time,
                    status=reservation.status,
                    name=name,
                    reg_no=reg_no,
                    slot_name=slot_name,
                )
                for reservation, name, reg_no, slot_name in result.all()
            ]

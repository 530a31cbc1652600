from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.parking.app.interface.i_reservation_command_repo import IReservationCommandRepo
from src.service.parking.domain.entity.reservation_entity import ReservationEntity
from src.service.parking.domain.enum.reservation_status import ReservationStatus
from src.service.parking.driven_adapter.model.reservation_model import ReservationModel


class ReservationCommandRepoImpl(IReservationCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def create(self, *, reservation: ReservationEntity) -> ReservationEntity:
        async with self.session_factory() as session:
            reservation_model = ReservationModel(
                user_id=reservation.user_id,
                vehicle_id=reservation.vehicle_id,
                slot_id=reservation.slot_id,
                start_time=reservation.start_time,
                status=reservation.status.value,
            )
            session.add(reservation_model)
            # flush to obtain res_id; the unit of work commits
            await session.flush()

            reservation.id = reservation_model.res_id
            return reservation

    @Logger.io
    async def get_for_update(self, *, res_id: int) -> Optional[ReservationEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(ReservationModel)
                .where(ReservationModel.res_id == res_id)
                .with_for_update()
            )
            reservation_model = result.scalar_one_or_none()

            if not reservation_model:
                return None

            return ReservationEntity(
                id=reservation_model.res_id,
                user_id=reservation_model.user_id,
                vehicle_id=reservation_model.vehicle_id,
                slot_id=reservation_model.slot_id,
                start_time=reservation_model.start_time,
                end_time=reservation_model.end_time,
                status=ReservationStatus(reservation_model.status),
            )

    @Logger.io
    async def save_completion(self, *, reservation: ReservationEntity) -> None:
        async with self.session_factory() as session:
            await session.execute(
                update(ReservationModel)
                .where(ReservationModel.res_id == reservation.id)
                .values(status=reservation.status.value, end_time=reservation.end_time)
                .execution_options(synchronize_session=False)
            )

    @Logger.io
    async def delete(self, *, res_id: int) -> bool:
        async with self.session_factory() as session:
            result = await session.execute(
                delete(ReservationModel)
                .where(ReservationModel.res_id == res_id)
                .execution_options(synchronize_session=False)
            )
            return result.rowcount == 1  # type: ignore[attr-defined]

from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.parking.app.interface.i_unit_of_work import AbstractUnitOfWork
from src.service.parking.domain.entity.reservation_entity import ReservationEntity


class CompleteReservationUseCase:
    """Mark an active reservation completed and free its slot, atomically."""

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
    ) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(self, *, res_id: int) -> ReservationEntity:
        async with self.uow:
            reservation = await self.uow.reservations.get_for_update(res_id=res_id)
            if not reservation:
                raise NotFoundError('Reservation not found')

            # Raises ConflictError unless active
            reservation.complete()

            await self.uow.reservations.save_completion(reservation=reservation)
            await self.uow.slots.mark_available(slot_id=reservation.slot_id)
            await self.uow.commit()

        Logger.base.info(f'✅ [COMPLETE] res_id={res_id} slot={reservation.slot_id} freed')
        return reservation

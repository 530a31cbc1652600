from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.parking.app.interface.i_unit_of_work import AbstractUnitOfWork


class CancelReservationUseCase:
    """
    Delete a reservation outright.

    Unlike completion there is no status precondition: active and completed
    reservations can both be cancelled. The slot is set available only when
    the deleted reservation was the active one holding it; a completed
    reservation released its slot already, and the slot may since belong to
    someone else.
    """

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
    async def execute(self, *, res_id: int) -> int:
        async with self.uow:
            reservation = await self.uow.reservations.get_for_update(res_id=res_id)
            if not reservation:
                raise NotFoundError('Reservation not found')

            if reservation.is_active:
                await self.uow.slots.mark_available(slot_id=reservation.slot_id)

            if not await self.uow.reservations.delete(res_id=res_id):
                raise NotFoundError('Reservation not found')

            await self.uow.commit()

        Logger.base.info(
            f'🗑️ [CANCEL] res_id={res_id} slot={reservation.slot_id} was_active={reservation.is_active}'
        )
        return res_id

from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.parking.app.interface.i_unit_of_work import AbstractUnitOfWork
from src.service.parking.domain.entity.reservation_entity import ReservationEntity


class ReserveSlotUseCase:
    """
    Reserve a parking slot for a user's vehicle.

    Flow (single transaction, slot row locked from the first read until commit):
    1. Slot, user and vehicle must exist (404)
    2. Slot restricted to another role (403)
    3. Slot not available (409)
    4. Vehicle type does not fit the slot type; cars may use handicap slots (403)
    5. Insert active reservation and flip slot to reserved, commit both together

    Any failure leaves the unit of work without commit, so it rolls back.
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
    async def execute(self, *, user_id: int, vehicle_id: int, slot_id: int) -> ReservationEntity:
        async with self.uow:
            slot = await self.uow.slots.get_for_update(slot_id=slot_id)
            if not slot:
                raise NotFoundError('Slot not found')

            user = await self.uow.users.get_by_id(user_id=user_id)
            if not user:
                raise NotFoundError('User not found')

            vehicle = await self.uow.vehicles.get_by_id(vehicle_id=vehicle_id)
            if not vehicle:
                raise NotFoundError('Vehicle not found')

            slot.ensure_role_allowed(user)
            slot.ensure_available()
            slot.ensure_fits(vehicle)

            reservation = await self.uow.reservations.create(
                reservation=ReservationEntity.start(
                    user_id=user_id, vehicle_id=vehicle_id, slot_id=slot_id
                )
            )

            if not await self.uow.slots.mark_reserved(slot_id=slot_id):
                raise ConflictError('Slot not available')

            await self.uow.commit()

        Logger.base.info(
            f'🅿️ [RESERVE] res_id={reservation.id} slot={slot_id} user={user_id} vehicle={vehicle_id}'
        )
        return reservation

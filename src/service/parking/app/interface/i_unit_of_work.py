"""
Unit of Work - one database transaction shared by several repositories.

Usage:
    async with uow:
        slot = await uow.slots.get_for_update(slot_id=...)
        ...
        await uow.commit()

Leaving the block without commit() rolls everything back.
"""

from __future__ import annotations

import abc
from types import TracebackType
from typing import Optional

from src.service.parking.app.interface.i_reservation_command_repo import IReservationCommandRepo
from src.service.parking.app.interface.i_slot_command_repo import ISlotCommandRepo
from src.service.parking.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.parking.app.interface.i_vehicle_query_repo import IVehicleQueryRepo


class AbstractUnitOfWork(abc.ABC):
    slots: ISlotCommandRepo
    reservations: IReservationCommandRepo
    users: IUserQueryRepo
    vehicles: IVehicleQueryRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        await self.rollback()

    async def commit(self) -> None:
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError

from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.parking.app.interface.i_slot_command_repo import ISlotCommandRepo
from src.service.parking.domain.entity.slot_entity import SlotEntity
from src.service.parking.domain.enum.slot_status import SlotStatus
from src.service.parking.domain.enum.slot_type import SlotType
from src.service.parking.driven_adapter.model.slot_model import SlotModel


class SlotCommandRepoImpl(ISlotCommandRepo):
    """
    Slot writes inside a unit of work.

    get_for_update() issues SELECT ... FOR UPDATE so concurrent reservations of
    the same slot queue on the row lock (SQLite ignores the clause and relies on
    BEGIN IMMEDIATE instead). mark_reserved() is additionally a compare-and-set
    on status, so a stale read can never double-book.
    """

    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_for_update(self, *, slot_id: int) -> Optional[SlotEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(SlotModel).where(SlotModel.slot_id == slot_id).with_for_update()
            )
            slot_model = result.scalar_one_or_none()

            if not slot_model:
                return None

            return SlotEntity(
                id=slot_model.slot_id,
                lot_id=slot_model.lot_id,
                slot_name=slot_model.slot_name,
                slot_type=SlotType(slot_model.slot_type),
                status=SlotStatus(slot_model.status),
                fixed_for=slot_model.fixed_for,
            )

    @Logger.io
    async def mark_reserved(self, *, slot_id: int) -> bool:
        async with self.session_factory() as session:
            result = await session.execute(
                update(SlotModel)
                .where(
                    SlotModel.slot_id == slot_id,
                    SlotModel.status == SlotStatus.AVAILABLE.value,
                )
                .values(status=SlotStatus.RESERVED.value)
                .execution_options(synchronize_session=False)
            )
            return result.rowcount == 1  # type: ignore[attr-defined]

    @Logger.io
    async def mark_available(self, *, slot_id: int) -> None:
        async with self.session_factory() as session:
            await session.execute(
                update(SlotModel)
                .where(SlotModel.slot_id == slot_id)
                .values(status=SlotStatus.AVAILABLE.value)
                .execution_options(synchronize_session=False)
            )

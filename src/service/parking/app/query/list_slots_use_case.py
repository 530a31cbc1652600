from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.parking.app.dto.slot_view import SlotView
from src.service.parking.app.interface.i_slot_reader import ISlotReader


class ListSlotsUseCase:
    def __init__(self, *, slot_reader: ISlotReader) -> None:
        self.slot_reader = slot_reader

    @classmethod
    @inject
    def depends(
        cls,
        slot_reader: ISlotReader = Depends(Provide[Container.slot_reader]),
    ) -> Self:
        return cls(slot_reader=slot_reader)

    @Logger.io
    async def execute(self) -> List[SlotView]:
        return await self.slot_reader.list_slots()

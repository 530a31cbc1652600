from abc import ABC, abstractmethod
from typing import List

from src.service.parking.app.dto.slot_view import SlotView


class ISlotReader(ABC):
    """
    Slot listing strategy.

    One implementation is picked at startup depending on whether the database
    carries lot metadata and the fixed_for column.
    """

    name: str

    @abstractmethod
    async def list_slots(self) -> List[SlotView]:
        pass

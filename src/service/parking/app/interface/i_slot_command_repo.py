from abc import ABC, abstractmethod
from typing import Optional

from src.service.parking.domain.entity.slot_entity import SlotEntity


class ISlotCommandRepo(ABC):
    """
    Slot writes. Only usable inside a unit of work: nothing here commits.
    """

    @abstractmethod
    async def get_for_update(self, *, slot_id: int) -> Optional[SlotEntity]:
        """
        Read the slot while taking the exclusive lock that is held until
        the surrounding transaction ends.
        """
        pass

    @abstractmethod
    async def mark_reserved(self, *, slot_id: int) -> bool:
        """
        Flip available → reserved.

        Returns:
            False if the slot was no longer available (nothing written)
        """
        pass

    @abstractmethod
    async def mark_available(self, *, slot_id: int) -> None:
        pass

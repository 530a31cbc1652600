from abc import ABC, abstractmethod
from typing import Optional

from src.service.parking.domain.entity.reservation_entity import ReservationEntity


class IReservationCommandRepo(ABC):
    """Reservation writes. Only usable inside a unit of work: nothing here commits."""

    @abstractmethod
    async def create(self, *, reservation: ReservationEntity) -> ReservationEntity:
        pass

    @abstractmethod
    async def get_for_update(self, *, res_id: int) -> Optional[ReservationEntity]:
        pass

    @abstractmethod
    async def save_completion(self, *, reservation: ReservationEntity) -> None:
        pass

    @abstractmethod
    async def delete(self, *, res_id: int) -> bool:
        pass

from abc import ABC, abstractmethod
from typing import List

from src.service.parking.app.dto.reservation_view import ReservationView


class IReservationQueryRepo(ABC):
    @abstractmethod
    async def list_with_details(self) -> List[ReservationView]:
        """Reservations joined with user name, vehicle reg_no and slot name, newest first."""
        pass

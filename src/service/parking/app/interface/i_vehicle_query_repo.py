from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.parking.domain.entity.vehicle_entity import VehicleEntity


class IVehicleQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, vehicle_id: int) -> Optional[VehicleEntity]:
        pass

    @abstractmethod
    async def list_all(self) -> List[VehicleEntity]:
        pass

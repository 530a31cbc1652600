from abc import ABC, abstractmethod

from src.service.parking.domain.entity.vehicle_entity import VehicleEntity


class IVehicleCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, vehicle: VehicleEntity) -> VehicleEntity:
        pass

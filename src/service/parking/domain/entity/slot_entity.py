from typing import Optional

import attrs

from src.platform.exception.exceptions import ConflictError, ForbiddenError
from src.service.parking.domain.entity.user_entity import UserEntity
from src.service.parking.domain.entity.vehicle_entity import VehicleEntity
from src.service.parking.domain.enum.slot_status import SlotStatus
from src.service.parking.domain.enum.slot_type import SlotType


@attrs.define
class SlotEntity:
    id: int
    lot_id: int
    slot_name: str
    slot_type: SlotType
    status: SlotStatus = SlotStatus.AVAILABLE
    fixed_for: Optional[str] = None

    def ensure_role_allowed(self, user: UserEntity) -> None:
        if self.fixed_for and self.fixed_for != user.role:
            raise ForbiddenError(f'Slot reserved for {self.fixed_for} only')

    def ensure_available(self) -> None:
        if self.status != SlotStatus.AVAILABLE:
            raise ConflictError('Slot not available')

    def ensure_fits(self, vehicle: VehicleEntity) -> None:
        """
        A vehicle needs the slot type matching its own type.

        The one exception: cars may park in handicap slots.
        """
        required = vehicle.type.required_slot_type
        if required == self.slot_type:
            return
        if required == SlotType.CAR and self.slot_type == SlotType.HANDICAP:
            return
        raise ForbiddenError(
            f'Vehicle type ({required}) does not match slot type ({self.slot_type})'
        )

from typing import Optional

import attrs

from src.platform.exception.exceptions import DomainError
from src.service.parking.domain.enum.vehicle_type import VehicleType


@attrs.define
class VehicleEntity:
    user_id: int
    reg_no: str
    type: VehicleType
    id: Optional[int] = None

    @classmethod
    def create(cls, *, user_id: int, reg_no: str, type: str) -> 'VehicleEntity':
        reg_no = (reg_no or '').strip()
        if not reg_no:
            raise DomainError('user_id, reg_no, type required')
        return cls(user_id=user_id, reg_no=reg_no, type=VehicleType.parse(type))

from datetime import datetime, timezone
from typing import Optional

import attrs

from src.platform.exception.exceptions import ConflictError
from src.service.parking.domain.enum.reservation_status import ReservationStatus


@attrs.define
class ReservationEntity:
    user_id: int
    vehicle_id: int
    slot_id: int
    start_time: datetime
    status: ReservationStatus = ReservationStatus.ACTIVE
    end_time: Optional[datetime] = None
    id: Optional[int] = None

    @classmethod
    def start(cls, *, user_id: int, vehicle_id: int, slot_id: int) -> 'ReservationEntity':
        return cls(
            user_id=user_id,
            vehicle_id=vehicle_id,
            slot_id=slot_id,
            start_time=datetime.now(timezone.utc),
        )

    @property
    def is_active(self) -> bool:
        return self.status == ReservationStatus.ACTIVE

    def complete(self) -> 'ReservationEntity':
        if not self.is_active:
            raise ConflictError('Reservation not active')
        self.status = ReservationStatus.COMPLETED
        self.end_time = datetime.now(timezone.utc)
        return self

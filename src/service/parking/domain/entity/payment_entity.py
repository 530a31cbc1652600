from datetime import datetime, timezone
from typing import Optional

import attrs

from src.platform.exception.exceptions import DomainError
from src.service.parking.domain.enum.payment_status import PaymentStatus


@attrs.define
class PaymentEntity:
    reservation_id: int
    amount: float
    mode: str
    status: PaymentStatus = PaymentStatus.DONE
    paid_at: Optional[datetime] = None
    id: Optional[int] = None

    @classmethod
    def record(cls, *, reservation_id: int, amount: float, mode: str) -> 'PaymentEntity':
        # Reservation existence and status are not checked
        if amount is None or amount <= 0:
            raise DomainError('Invalid amount.')
        mode = (mode or '').strip()
        if not mode:
            raise DomainError('reservation_id, amount, mode required')
        return cls(
            reservation_id=reservation_id,
            amount=amount,
            mode=mode,
            paid_at=datetime.now(timezone.utc),
        )

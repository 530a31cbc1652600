from datetime import datetime
from typing import Optional

import attrs


@attrs.define(frozen=True)
class ReservationView:
    res_id: int
    user_id: int
    vehicle_id: int
    slot_id: int
    start_time: datetime
    status: str
    name: str
    reg_no: str
    slot_name: str
    end_time: Optional[datetime] = None

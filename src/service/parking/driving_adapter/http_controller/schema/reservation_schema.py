from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class ReserveRequest(BaseModel):
    user_id: int
    vehicle_id: int
    slot_id: int

    model_config = {
        'json_schema_extra': {'example': {'user_id': 1, 'vehicle_id': 1, 'slot_id': 3}}
    }


class ReserveResponse(BaseModel):
    res_id: int
    message: str = 'Reservation created successfully'


class CompleteRequest(BaseModel):
    res_id: int


class CompleteResponse(BaseModel):
    message: str = 'Reservation completed and slot freed'


class CancelResponse(BaseModel):
    message: str = 'Reservation deleted and slot freed'
    res_id: int


class ReservationDetailResponse(BaseModel):
    res_id: int
    user_id: int
    vehicle_id: int
    slot_id: int
    start_time: datetime
    end_time: Optional[datetime] = None
    status: str
    name: str
    reg_no: str
    slot_name: str

from typing import Optional

from pydantic import BaseModel


class SlotResponse(BaseModel):
    slot_id: int
    lot_id: int
    lot_name: Optional[str] = None
    lot_owner: Optional[str] = None
    slot_name: str
    slot_type: str
    status: str
    fixed_for: Optional[str] = None

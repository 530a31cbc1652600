from typing import Optional

import attrs


@attrs.define(frozen=True)
class SlotView:
    """Slot joined with its lot; lot fields and fixed_for are None on a legacy schema."""

    slot_id: int
    lot_id: int
    slot_name: str
    slot_type: str
    status: str
    lot_name: Optional[str] = None
    lot_owner: Optional[str] = None
    fixed_for: Optional[str] = None

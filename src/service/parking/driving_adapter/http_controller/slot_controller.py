from typing import List

from fastapi import APIRouter, Depends

from src.platform.logging.loguru_io import Logger
from src.service.parking.app.query.list_slots_use_case import ListSlotsUseCase
from src.service.parking.driving_adapter.http_controller.schema.slot_schema import SlotResponse


router = APIRouter()


@router.get('', response_model=List[SlotResponse])
@Logger.io
async def list_slots(
    use_case: ListSlotsUseCase = Depends(ListSlotsUseCase.depends),
) -> List[SlotResponse]:
    slots = await use_case.execute()
    return [
        SlotResponse(
            slot_id=slot.slot_id,
            lot_id=slot.lot_id,
            lot_name=slot.lot_name,
            lot_owner=slot.lot_owner,
            slot_name=slot.slot_name,
            slot_type=slot.slot_type,
            status=slot.status,
            fixed_for=slot.fixed_for,
        )
        for slot in slots
    ]

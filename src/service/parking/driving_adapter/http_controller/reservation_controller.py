from typing import List

from fastapi import APIRouter, Depends

from src.platform.logging.loguru_io import Logger
from src.service.parking.app.command.cancel_reservation_use_case import CancelReservationUseCase
from src.service.parking.app.command.complete_reservation_use_case import (
    CompleteReservationUseCase,
)
from src.service.parking.app.command.reserve_slot_use_case import ReserveSlotUseCase
from src.service.parking.app.query.list_reservations_use_case import ListReservationsUseCase
from src.service.parking.driving_adapter.http_controller.schema.reservation_schema import (
    CancelResponse,
    CompleteRequest,
    CompleteResponse,
    ReservationDetailResponse,
    ReserveRequest,
    ReserveResponse,
)


router = APIRouter()


@router.get('/reservations', response_model=List[ReservationDetailResponse])
@Logger.io
async def list_reservations(
    use_case: ListReservationsUseCase = Depends(ListReservationsUseCase.depends),
) -> List[ReservationDetailResponse]:
    views = await use_case.execute()
    return [
        ReservationDetailResponse(
            res_id=view.res_id,
            user_id=view.user_id,
            vehicle_id=view.vehicle_id,
            slot_id=view.slot_id,
            start_time=view.start_time,
            end_time=view.end_time,
            status=view.status,
            name=view.name,
            reg_no=view.reg_no,
            slot_name=view.slot_name,
        )
        for view in views
    ]


@router.post('/reserve', response_model=ReserveResponse)
@Logger.io
async def reserve_slot(
    request: ReserveRequest,
    use_case: ReserveSlotUseCase = Depends(ReserveSlotUseCase.depends),
) -> ReserveResponse:
    reservation = await use_case.execute(
        user_id=request.user_id,
        vehicle_id=request.vehicle_id,
        slot_id=request.slot_id,
    )
    return ReserveResponse(res_id=reservation.id or 0)


@router.post('/complete', response_model=CompleteResponse)
@Logger.io
async def complete_reservation(
    request: CompleteRequest,
    use_case: CompleteReservationUseCase = Depends(CompleteReservationUseCase.depends),
) -> CompleteResponse:
    await use_case.execute(res_id=request.res_id)
    return CompleteResponse()


@router.delete('/reservations/{res_id}', response_model=CancelResponse)
@Logger.io
async def cancel_reservation(
    res_id: int,
    use_case: CancelReservationUseCase = Depends(CancelReservationUseCase.depends),
) -> CancelResponse:
    return CancelResponse(res_id=await use_case.execute(res_id=res_id))

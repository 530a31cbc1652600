from fastapi import APIRouter, Depends

from src.platform.logging.loguru_io import Logger
from src.service.parking.app.command.record_payment_use_case import RecordPaymentUseCase
from src.service.parking.driving_adapter.http_controller.schema.payment_schema import (
    PaymentRequest,
    PaymentResponse,
)


router = APIRouter()


@router.post('', response_model=PaymentResponse)
@Logger.io
async def record_payment(
    request: PaymentRequest,
    use_case: RecordPaymentUseCase = Depends(RecordPaymentUseCase.depends),
) -> PaymentResponse:
    payment = await use_case.execute(
        reservation_id=request.reservation_id, amount=request.amount, mode=request.mode
    )
    return PaymentResponse(payment_id=payment.id or 0)

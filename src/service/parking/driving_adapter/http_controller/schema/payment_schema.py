from pydantic import BaseModel, Field


class PaymentRequest(BaseModel):
    reservation_id: int
    amount: float = Field(gt=0)
    mode: str

    model_config = {
        'json_schema_extra': {'example': {'reservation_id': 1, 'amount': 20.0, 'mode': 'upi'}}
    }


class PaymentResponse(BaseModel):
    payment_id: int
    message: str = 'Payment recorded'

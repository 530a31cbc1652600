from typing import AsyncContextManager, Callable

from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.parking.app.interface.i_payment_command_repo import IPaymentCommandRepo
from src.service.parking.domain.entity.payment_entity import PaymentEntity
from src.service.parking.driven_adapter.model.payment_model import PaymentModel


class PaymentCommandRepoImpl(IPaymentCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, *, payment: PaymentEntity) -> PaymentEntity:
        async with self.session_factory() as session:
            payment_model = PaymentModel(
                reservation_id=payment.reservation_id,
                amount=payment.amount,
                mode=payment.mode,
                status=payment.status.value,
                paid_at=payment.paid_at,
            )

            session.add(payment_model)
            await session.commit()
            await session.refresh(payment_model)

            payment.id = payment_model.payment_id
            return payment

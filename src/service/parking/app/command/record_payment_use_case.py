from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.parking.app.interface.i_payment_command_repo import IPaymentCommandRepo
from src.service.parking.domain.entity.payment_entity import PaymentEntity


class RecordPaymentUseCase:
    """
    Append a payment to the ledger.

    The referenced reservation is not looked up: a payment may be recorded for
    a reservation in any state, or one that no longer exists.
    """

    def __init__(self, *, payment_command_repo: IPaymentCommandRepo) -> None:
        self.payment_command_repo = payment_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        payment_command_repo: IPaymentCommandRepo = Depends(
            Provide[Container.payment_command_repo]
        ),
    ) -> Self:
        return cls(payment_command_repo=payment_command_repo)

    @Logger.io
    async def execute(self, *, reservation_id: int, amount: float, mode: str) -> PaymentEntity:
        payment = PaymentEntity.record(reservation_id=reservation_id, amount=amount, mode=mode)
        payment = await self.payment_command_repo.create(payment=payment)
        Logger.base.info(
            f'💳 [PAYMENT] payment_id={payment.id} reservation={reservation_id} amount={amount}'
        )
        return payment

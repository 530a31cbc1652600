from abc import ABC, abstractmethod

from src.service.parking.domain.entity.payment_entity import PaymentEntity


class IPaymentCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, payment: PaymentEntity) -> PaymentEntity:
        pass

from enum import StrEnum


class PaymentStatus(StrEnum):
    DONE = 'done'

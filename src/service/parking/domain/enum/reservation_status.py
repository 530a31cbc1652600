from enum import StrEnum


class ReservationStatus(StrEnum):
    """Cancellation deletes the row, so there is no cancelled status."""

    ACTIVE = 'active'
    COMPLETED = 'completed'

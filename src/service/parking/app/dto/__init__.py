"""Read-model rows returned by the parking query side."""

from src.service.parking.app.dto.reservation_view import ReservationView
from src.service.parking.app.dto.slot_view import SlotView

__all__ = ['ReservationView', 'SlotView']

"""Parking Domain Enums"""

from src.service.parking.domain.enum.payment_status import PaymentStatus
from src.service.parking.domain.enum.reservation_status import ReservationStatus
from src.service.parking.domain.enum.slot_status import SlotStatus
from src.service.parking.domain.enum.slot_type import SlotType
from src.service.parking.domain.enum.vehicle_type import VehicleType

__all__ = ['PaymentStatus', 'ReservationStatus', 'SlotStatus', 'SlotType', 'VehicleType']

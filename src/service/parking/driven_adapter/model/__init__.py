"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.parking.driven_adapter.model.lot_model import LotModel
from src.service.parking.driven_adapter.model.payment_model import PaymentModel
from src.service.parking.driven_adapter.model.reservation_model import ReservationModel
from src.service.parking.driven_adapter.model.slot_model import SlotModel
from src.service.parking.driven_adapter.model.user_model import UserModel
from src.service.parking.driven_adapter.model.vehicle_model import VehicleModel

__all__ = [
    'LotModel',
    'PaymentModel',
    'ReservationModel',
    'SlotModel',
    'UserModel',
    'VehicleModel',
]

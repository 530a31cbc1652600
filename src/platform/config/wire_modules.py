"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.parking.app.command import (
    cancel_reservation_use_case,
    complete_reservation_use_case,
    create_user_use_case,
    record_payment_use_case,
    register_vehicle_use_case,
    reserve_slot_use_case,
)
from src.service.parking.app.query import (
    list_reservations_use_case,
    list_slots_use_case,
    list_users_use_case,
    list_vehicles_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    reserve_slot_use_case,
    complete_reservation_use_case,
    cancel_reservation_use_case,
    create_user_use_case,
    register_vehicle_use_case,
    record_payment_use_case,
    list_slots_use_case,
    list_reservations_use_case,
    list_users_use_case,
    list_vehicles_use_case,
]

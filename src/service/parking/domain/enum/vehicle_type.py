"""
Vehicle type and its storage code.

Rows in the vehicles table hold a one-letter code (c / b / e). The API
accepts and returns full words. Both directions must stay exact because
persisted data depends on them.
"""

from enum import StrEnum
from typing import Final

from src.platform.exception.exceptions import DomainError
from src.service.parking.domain.enum.slot_type import SlotType


class VehicleType(StrEnum):
    CAR = 'car'
    BIKE = 'bike'
    ELECTRIC = 'electric'

    @classmethod
    def parse(cls, raw: str) -> 'VehicleType':
        """Accept car / bike / ev / electric in any case."""
        vehicle_type = _INPUT_ALIASES.get(raw.strip().lower()) if raw else None
        if vehicle_type is None:
            raise DomainError('Invalid vehicle type provided. Must be car, bike, or ev/electric.')
        return vehicle_type

    @classmethod
    def from_code(cls, code: str) -> 'VehicleType':
        for vehicle_type, vehicle_code in _STORAGE_CODES.items():
            if vehicle_code == code:
                return vehicle_type
        raise ValueError(f'Unknown vehicle type code: {code!r}')

    @property
    def code(self) -> str:
        return _STORAGE_CODES[self]

    @property
    def required_slot_type(self) -> SlotType:
        return _REQUIRED_SLOT_TYPES[self]


_INPUT_ALIASES: Final[dict[str, VehicleType]] = {
    'car': VehicleType.CAR,
    'bike': VehicleType.BIKE,
    'ev': VehicleType.ELECTRIC,
    'electric': VehicleType.ELECTRIC,
}

_STORAGE_CODES: Final[dict[VehicleType, str]] = {
    VehicleType.CAR: 'c',
    VehicleType.BIKE: 'b',
    VehicleType.ELECTRIC: 'e',
}

_REQUIRED_SLOT_TYPES: Final[dict[VehicleType, SlotType]] = {
    VehicleType.CAR: SlotType.CAR,
    VehicleType.BIKE: SlotType.BIKE,
    VehicleType.ELECTRIC: SlotType.ELECTRIC,
}

from enum import StrEnum


class SlotStatus(StrEnum):
    AVAILABLE = 'available'
    RESERVED = 'reserved'

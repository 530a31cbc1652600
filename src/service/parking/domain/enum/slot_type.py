from enum import StrEnum


class SlotType(StrEnum):
    CAR = 'car'
    BIKE = 'bike'
    ELECTRIC = 'electric'
    HANDICAP = 'handicap'

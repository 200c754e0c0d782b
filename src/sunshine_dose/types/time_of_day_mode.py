from enum import StrEnum, auto


class TimeOfDayMode(StrEnum):
    around_noon = auto()
    now = auto()
    custom = auto()

from enum import StrEnum, auto


class DoseEndpoint(StrEnum):
    vitamin_d = auto()
    erythema = auto()

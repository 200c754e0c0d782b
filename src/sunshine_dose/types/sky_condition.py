from enum import StrEnum, auto


class SkyCondition(StrEnum):
    cloudless = auto()
    scattered = auto()
    broken = auto()
    overcast = auto()

    @property
    def index(self) -> int:
        # position in declaration order, as understood by index-based radiative transfer models
        return list(SkyCondition).index(self)

    @classmethod
    def all_sky_conditions(cls):
        return [x for x in cls]

from enum import StrEnum, auto
from typing import Iterable


class BodyPart(StrEnum):
    face = auto()
    neck = auto()
    arms = auto()
    hands = auto()
    torso = auto()
    thighs = auto()
    legs = auto()

    @classmethod
    def all_body_parts(cls):
        return [x for x in cls]


# percentage of total body surface area
_body_part_surface_percent = {
    BodyPart.face: 3.5,
    BodyPart.neck: 2.0,
    BodyPart.arms: 14.0,
    BodyPart.hands: 6.0,
    BodyPart.torso: 26.0,
    BodyPart.thighs: 18.0,
    BodyPart.legs: 14.0,
}


def body_part_surface_percent(body_part: BodyPart) -> float:
    return _body_part_surface_percent[body_part]


def exposed_skin_fraction(body_parts: Iterable[BodyPart]) -> float:
    """
    Fraction of body surface [0, 1] left uncovered when the given body parts are exposed.
    Listing a part more than once does not count it twice.
    """
    percent = sum(_body_part_surface_percent[BodyPart(x)] for x in set(body_parts))
    return min(max(percent / 100.0, 0.0), 1.0)

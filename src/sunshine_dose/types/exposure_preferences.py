from dataclasses import dataclass, field

from astropy.time import Time

from sunshine_dose.types.body_part import BodyPart
from sunshine_dose.types.fitzpatrick_skin_type import FitzpatrickSkinType
from sunshine_dose.types.sky_condition import SkyCondition
from sunshine_dose.types.time_of_day_mode import TimeOfDayMode


@dataclass
class ExposurePreferences:
    """
    User choices that are remembered between calculations
    """

    skin_type: FitzpatrickSkinType = FitzpatrickSkinType.type_iii
    sky_condition: SkyCondition = SkyCondition.cloudless
    time_of_day_mode: TimeOfDayMode = TimeOfDayMode.around_noon
    exposed_body_parts: list[BodyPart] = field(
        default_factory=lambda: [BodyPart.face, BodyPart.neck, BodyPart.hands]
    )
    # only consulted when time_of_day_mode is custom
    custom_time: Time | None = None
    utc_offset_s: int = 0

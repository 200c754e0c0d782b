from dataclasses import dataclass


@dataclass(frozen=True)
class SunAngleSample:
    # local seconds since midnight
    time_of_day_s: float
    elevation_deg: float
    in_exposure_window: bool = False
    # True for the point inserted at the exposure start, not returned by the position oracle
    synthetic: bool = False

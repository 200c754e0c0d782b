from dataclasses import dataclass, replace

from sunshine_dose.types.sky_condition import SkyCondition


_seconds_per_day = 86400


@dataclass(frozen=True)
class ExposureParameters:
    """
    Everything needed to estimate the dose collected during one exposure, starting at
    seconds_since_midnight_utc on day_of_year
    """

    exposed_skin_fraction: float
    skin_phototype: int  # zero-based Fitzpatrick phototype, 0..5
    day_of_year: int
    latitude_deg: float
    longitude_deg: float  # east positive
    altitude_km: float
    seconds_since_midnight_utc: int
    sky_condition: SkyCondition = SkyCondition.cloudless

    def __post_init__(self):
        if not 0.0 <= self.exposed_skin_fraction <= 1.0:
            raise ValueError(
                f"Exposed skin fraction must be in [0, 1], got {self.exposed_skin_fraction}"
            )
        if not 1 <= self.day_of_year <= 366:
            raise ValueError(f"Day of year must be in [1, 366], got {self.day_of_year}")
        if not 0 <= self.seconds_since_midnight_utc < _seconds_per_day:
            raise ValueError(
                f"Seconds since midnight must be in [0, {_seconds_per_day}), got {self.seconds_since_midnight_utc}"
            )

    def advanced_by(self, seconds: int) -> "ExposureParameters":
        """Copy of these parameters with the time of day moved forward, wrapping at midnight"""
        return replace(
            self,
            seconds_since_midnight_utc=(self.seconds_since_midnight_utc + seconds)
            % _seconds_per_day,
        )

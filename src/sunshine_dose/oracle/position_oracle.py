from typing import Protocol

import numpy as np


class SolarPositionOracle(Protocol):
    def get_day_sun_angle_data(
        self,
        num_samples: int,
        day_of_year: int,
        utc_offset_s: int,
        latitude_deg: float,
        longitude_deg: float,
        altitude_km: float,
    ) -> tuple[int, np.ndarray, np.ndarray]:
        """
        Samples the sun's elevation at num_samples evenly spaced instants of the local day.
        Returns (status, elevation angles in degrees, local seconds since midnight); status 0
        on success, anything else means neither array may be used.
        """
        ...

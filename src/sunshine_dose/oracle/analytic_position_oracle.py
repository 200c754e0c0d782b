import numpy as np

from sunshine_dose.solar.solar_geometry import solar_elevation_deg


_seconds_per_day = 86400


class AnalyticPositionOracle:
    """Sun elevations from the analytic solar geometry; altitude has no effect"""

    def get_day_sun_angle_data(
        self,
        num_samples: int,
        day_of_year: int,
        utc_offset_s: int,
        latitude_deg: float,
        longitude_deg: float,
        altitude_km: float,
    ) -> tuple[int, np.ndarray, np.ndarray]:
        if num_samples <= 0:
            return 1, np.array([]), np.array([])

        local_times_s = np.linspace(
            0.0, _seconds_per_day, num=num_samples, endpoint=False
        )
        utc_times_s = local_times_s - utc_offset_s

        angles_deg = solar_elevation_deg(
            utc_times_s, day_of_year, latitude_deg, longitude_deg
        )

        return 0, angles_deg, local_times_s

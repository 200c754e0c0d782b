import logging as log
from typing import Iterable, Iterator

import numpy as np

from sunshine_dose.oracle.position_oracle import SolarPositionOracle
from sunshine_dose.types.dose_result import DoseResult
from sunshine_dose.types.exposure_parameters import ExposureParameters
from sunshine_dose.types.sun_angle_sample import SunAngleSample


__all__ = [
    "sample_day_sun_angles",
    "exposure_window_s",
    "mark_exposure_window",
    "sample_exposure_day",
]


_seconds_per_day = 86400


def sample_day_sun_angles(
    exposure_parameters: ExposureParameters,
    num_samples: int,
    position_oracle: SolarPositionOracle,
    utc_offset_s: int = 0,
) -> Iterator[SunAngleSample]:
    """
    Queries the position oracle once and returns an iterator over the samples, ordered by
    local time of day.  The iterator can only be consumed once, and is empty when the
    oracle fails.
    """
    status, angles_deg, times_s = position_oracle.get_day_sun_angle_data(
        num_samples,
        exposure_parameters.day_of_year,
        utc_offset_s,
        exposure_parameters.latitude_deg,
        exposure_parameters.longitude_deg,
        exposure_parameters.altitude_km,
    )
    if status != 0:
        log.info("Solar position model failed with status %s", status)
        return iter(())

    angles_deg = np.asarray(angles_deg, dtype=np.float64)
    times_s = np.asarray(times_s, dtype=np.float64)
    if len(angles_deg) != len(times_s):
        log.info(
            "Solar position model returned %s angles but %s times",
            len(angles_deg),
            len(times_s),
        )
        return iter(())

    order = np.argsort(times_s, kind="stable")
    return (
        SunAngleSample(time_of_day_s=float(times_s[i]), elevation_deg=float(angles_deg[i]))
        for i in order
    )


def exposure_window_s(dose_result: DoseResult) -> float:
    """Length of exposure needed to reach every target that can be reached today"""
    return max(dose_result.vitamin_d_time_s, dose_result.erythema_time_s, 0.0)


def _in_window(time_of_day_s: float, start_s: float, duration_s: float) -> bool:
    if duration_s <= 0.0:
        return False
    return (time_of_day_s - start_s) % _seconds_per_day <= duration_s


def mark_exposure_window(
    samples: Iterable[SunAngleSample],
    exposure_start_s: float,
    dose_result: DoseResult,
) -> Iterator[SunAngleSample]:
    """
    Flags the samples that fall inside the exposure, and inserts one synthetic sample at
    the exposure start just before the first sample that comes after it.  The synthetic
    elevation is interpolated from its neighbours.  A sample taken exactly at the exposure
    start serves as the boundary itself, and nothing is inserted.
    """
    duration_s = exposure_window_s(dose_result)
    previous = None
    inserted = False

    for sample in samples:
        if not inserted and sample.time_of_day_s == exposure_start_s:
            inserted = True
        elif not inserted and sample.time_of_day_s > exposure_start_s:
            if previous is None:
                elevation_deg = sample.elevation_deg
            else:
                elevation_deg = float(
                    np.interp(
                        exposure_start_s,
                        [previous.time_of_day_s, sample.time_of_day_s],
                        [previous.elevation_deg, sample.elevation_deg],
                    )
                )
            yield SunAngleSample(
                time_of_day_s=exposure_start_s,
                elevation_deg=elevation_deg,
                in_exposure_window=duration_s > 0.0,
                synthetic=True,
            )
            inserted = True

        yield SunAngleSample(
            time_of_day_s=sample.time_of_day_s,
            elevation_deg=sample.elevation_deg,
            in_exposure_window=_in_window(
                sample.time_of_day_s, exposure_start_s, duration_s
            ),
        )
        previous = sample

    # exposure starts after the last sample of the day
    if not inserted and previous is not None:
        yield SunAngleSample(
            time_of_day_s=exposure_start_s,
            elevation_deg=previous.elevation_deg,
            in_exposure_window=duration_s > 0.0,
            synthetic=True,
        )


def sample_exposure_day(
    exposure_parameters: ExposureParameters,
    dose_result: DoseResult,
    num_samples: int,
    position_oracle: SolarPositionOracle,
    utc_offset_s: int = 0,
) -> Iterator[SunAngleSample]:
    exposure_start_s = (
        exposure_parameters.seconds_since_midnight_utc + utc_offset_s
    ) % _seconds_per_day

    return mark_exposure_window(
        sample_day_sun_angles(
            exposure_parameters=exposure_parameters,
            num_samples=num_samples,
            position_oracle=position_oracle,
            utc_offset_s=utc_offset_s,
        ),
        exposure_start_s=exposure_start_s,
        dose_result=dose_result,
    )

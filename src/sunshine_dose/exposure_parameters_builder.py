import logging as log
from typing import Iterable

import astropy.units as u
from astropy.time import Time

from sunshine_dose.oracle.irradiance_oracle import IrradianceOracle, query_sunrise_sunset
from sunshine_dose.types.body_part import BodyPart, exposed_skin_fraction
from sunshine_dose.types.exposure_parameters import ExposureParameters
from sunshine_dose.types.exposure_preferences import ExposurePreferences
from sunshine_dose.types.fitzpatrick_skin_type import FitzpatrickSkinType
from sunshine_dose.types.sky_condition import SkyCondition
from sunshine_dose.types.time_of_day_mode import TimeOfDayMode


__all__ = [
    "exposure_parameters_at",
    "solar_noon_utc_s",
    "exposure_parameters_from_preferences",
]


_seconds_per_day = 86400


def _local_day_of_year(t: Time, utc_offset_s: int) -> int:
    local_t = t.utc + utc_offset_s * u.s  # type: ignore
    return local_t.to_datetime().timetuple().tm_yday  # type: ignore


def _seconds_since_midnight_utc(t: Time) -> int:
    dt = t.utc.to_datetime()  # type: ignore
    return (dt.hour * 3600 + dt.minute * 60 + dt.second) % _seconds_per_day


def exposure_parameters_at(
    t: Time,
    latitude_deg: float,
    longitude_deg: float,
    altitude_m: float,
    skin_type: FitzpatrickSkinType,
    sky_condition: SkyCondition,
    exposed_body_parts: Iterable[BodyPart],
    utc_offset_s: int = 0,
) -> ExposureParameters:
    """
    Parameters for an exposure beginning at time t.  The day of year is the local calendar
    day, while the time of day is measured from midnight UTC.
    """
    return ExposureParameters(
        exposed_skin_fraction=exposed_skin_fraction(exposed_body_parts),
        skin_phototype=skin_type.phototype_index,
        day_of_year=_local_day_of_year(t, utc_offset_s),
        latitude_deg=latitude_deg,
        longitude_deg=longitude_deg,
        altitude_km=(altitude_m * u.m).to_value(u.km),  # type: ignore
        seconds_since_midnight_utc=_seconds_since_midnight_utc(t),
        sky_condition=sky_condition,
    )


def solar_noon_utc_s(
    exposure_parameters: ExposureParameters, irradiance_oracle: IrradianceOracle
) -> int | None:
    sunrise_sunset = query_sunrise_sunset(irradiance_oracle, exposure_parameters)
    if sunrise_sunset is None:
        return None

    sunrise_s, sunset_s = sunrise_sunset
    if sunset_s < sunrise_s:
        sunset_s += _seconds_per_day

    return int((sunrise_s + sunset_s) / 2) % _seconds_per_day


def exposure_parameters_from_preferences(
    exposure_preferences: ExposurePreferences,
    latitude_deg: float,
    longitude_deg: float,
    altitude_m: float,
    irradiance_oracle: IrradianceOracle,
    now: Time | None = None,
) -> ExposureParameters:
    if now is None:
        now = Time.now()

    if exposure_preferences.time_of_day_mode == TimeOfDayMode.custom:
        if exposure_preferences.custom_time is None:
            raise ValueError("Custom time of day selected, but no custom time given")
        start_time = exposure_preferences.custom_time
    else:
        start_time = now

    exposure_parameters = exposure_parameters_at(
        t=start_time,
        latitude_deg=latitude_deg,
        longitude_deg=longitude_deg,
        altitude_m=altitude_m,
        skin_type=exposure_preferences.skin_type,
        sky_condition=exposure_preferences.sky_condition,
        exposed_body_parts=exposure_preferences.exposed_body_parts,
        utc_offset_s=exposure_preferences.utc_offset_s,
    )

    if exposure_preferences.time_of_day_mode != TimeOfDayMode.around_noon:
        return exposure_parameters

    noon_utc_s = solar_noon_utc_s(exposure_parameters, irradiance_oracle)
    if noon_utc_s is None:
        log.info("No sunrise or sunset on day %s, using local noon", exposure_parameters.day_of_year)
        noon_utc_s = (12 * 3600 - exposure_preferences.utc_offset_s) % _seconds_per_day

    return exposure_parameters.advanced_by(
        noon_utc_s - exposure_parameters.seconds_since_midnight_utc
    )

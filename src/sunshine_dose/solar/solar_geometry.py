"""
Analytic solar geometry after Iqbal, "An Introduction to Solar Radiation" (1983).

Times are seconds since midnight, longitudes are east positive, angles are in degrees.
Every function accepts numpy arrays as well as scalars.
"""

import numpy as np


_seconds_per_day = 86400
_seconds_per_half_day = 43200


def day_angle(day_of_year):
    """Day angle in radians (Iqbal, page 3)"""
    return 2.0 * np.pi * (np.asarray(day_of_year) - 1) / 365.0


def eccentricity_correction(day_of_year):
    """Sun-earth distance correction (r0/r)^2 for the given day (Iqbal, page 3)"""
    angle = day_angle(day_of_year)
    return (
        1.000110
        + 0.034221 * np.cos(angle)
        + 0.001280 * np.sin(angle)
        + 0.000719 * np.cos(2 * angle)
        + 0.000077 * np.sin(2 * angle)
    )


def declination_deg(day_of_year):
    """Solar declination (Iqbal, page 7)"""
    angle = day_angle(day_of_year)
    delta = (
        0.006918
        - 0.399912 * np.cos(angle)
        + 0.07257 * np.sin(angle)
        - 0.006758 * np.cos(2 * angle)
        + 0.000907 * np.sin(2 * angle)
        - 0.002697 * np.cos(3 * angle)
        + 0.00148 * np.sin(3 * angle)
    )
    return np.rad2deg(delta)


def equation_of_time_s(day_of_year):
    """Equation of time in seconds (Iqbal, page 11)"""
    angle = day_angle(day_of_year)
    # 13750.8 = seconds per radian of earth rotation
    return (
        0.000075
        + 0.001868 * np.cos(angle)
        - 0.032077 * np.sin(angle)
        - 0.014615 * np.cos(2 * angle)
        - 0.04089 * np.sin(2 * angle)
    ) * 13750.8


def local_apparent_time_s(utc_seconds, day_of_year, longitude_deg):
    # the sun crosses 1 degree of longitude every 240 seconds
    return utc_seconds + 240.0 * np.asarray(longitude_deg) + equation_of_time_s(day_of_year)


def utc_from_local_apparent_time_s(local_apparent_seconds, day_of_year, longitude_deg):
    return (
        local_apparent_seconds
        - 240.0 * np.asarray(longitude_deg)
        - equation_of_time_s(day_of_year)
    )


def hour_angle_deg(local_apparent_seconds):
    """Hour angle, positive in the morning and zero at solar noon (Iqbal, page 15)"""
    return 180.0 * (1.0 - np.asarray(local_apparent_seconds) / _seconds_per_half_day)


def solar_zenith_deg(utc_seconds, day_of_year, latitude_deg, longitude_deg):
    phi = np.deg2rad(latitude_deg)
    delta = np.deg2rad(declination_deg(day_of_year))
    omega = np.deg2rad(
        hour_angle_deg(local_apparent_time_s(utc_seconds, day_of_year, longitude_deg))
    )

    cos_theta = np.sin(delta) * np.sin(phi) + np.cos(delta) * np.cos(phi) * np.cos(
        omega
    )
    return np.rad2deg(np.arccos(np.clip(cos_theta, -1.0, 1.0)))


def solar_elevation_deg(utc_seconds, day_of_year, latitude_deg, longitude_deg):
    return 90.0 - solar_zenith_deg(utc_seconds, day_of_year, latitude_deg, longitude_deg)


def zenith_to_utc_times(
    zenith_deg: float, day_of_year: int, latitude_deg: float, longitude_deg: float
) -> tuple[float, float] | None:
    """
    The two UTC times (seconds since midnight, morning first) at which the sun reaches the
    given zenith angle, or None if it never does on that day (polar day or night).
    Times are not wrapped into [0, 86400).
    """
    delta = np.deg2rad(declination_deg(day_of_year))
    phi = np.deg2rad(latitude_deg)
    theta = np.deg2rad(zenith_deg)

    cos_phi = np.cos(phi)
    if np.isclose(cos_phi, 0.0):
        return None

    cos_omega = (np.cos(theta) - np.sin(delta) * np.sin(phi)) / np.cos(delta) / cos_phi
    if np.abs(cos_omega) > 1.0:
        return None

    omega = np.arccos(cos_omega)
    morning_lat = _seconds_per_half_day * (1.0 - omega / np.pi)
    evening_lat = _seconds_per_half_day * (1.0 + omega / np.pi)

    return (
        float(utc_from_local_apparent_time_s(morning_lat, day_of_year, longitude_deg)),
        float(utc_from_local_apparent_time_s(evening_lat, day_of_year, longitude_deg)),
    )


def sunrise_sunset_utc_s(
    day_of_year: int, latitude_deg: float, longitude_deg: float
) -> tuple[float, float] | None:
    return zenith_to_utc_times(
        zenith_deg=90.0,
        day_of_year=day_of_year,
        latitude_deg=latitude_deg,
        longitude_deg=longitude_deg,
    )

"""Tests for the analytic solar geometry."""
from __future__ import annotations

import numpy as np
import pytest

from sunshine_dose.solar.solar_geometry import (
    declination_deg,
    eccentricity_correction,
    solar_elevation_deg,
    solar_zenith_deg,
    sunrise_sunset_utc_s,
    utc_from_local_apparent_time_s,
    zenith_to_utc_times,
)

_march_equinox = 80
_june_solstice = 172
_december_solstice = 355


def test_declination_follows_the_seasons() -> None:
    assert abs(declination_deg(_march_equinox)) < 1.0
    assert declination_deg(_june_solstice) == pytest.approx(23.44, abs=0.5)
    assert declination_deg(_december_solstice) == pytest.approx(-23.44, abs=0.5)


def test_earth_is_closest_to_the_sun_in_january() -> None:
    assert eccentricity_correction(3) > eccentricity_correction(185)
    assert eccentricity_correction(3) == pytest.approx(1.034, abs=0.005)


@pytest.mark.parametrize("latitude_deg", [-45.0, 0.0, 30.0, 51.48])
def test_equinox_noon_zenith_is_the_latitude(latitude_deg) -> None:
    longitude_deg = 15.0
    noon_utc_s = utc_from_local_apparent_time_s(43200.0, _march_equinox, longitude_deg)
    zenith = solar_zenith_deg(noon_utc_s, _march_equinox, latitude_deg, longitude_deg)
    assert zenith == pytest.approx(abs(latitude_deg), abs=1.0)


def test_sun_is_down_at_midnight() -> None:
    assert solar_elevation_deg(0.0, _march_equinox, 51.48, 0.0) < 0.0


def test_works_on_arrays() -> None:
    times = np.linspace(0.0, 86400.0, 24, endpoint=False)
    elevations = solar_elevation_deg(times, _june_solstice, 51.48, 0.0)
    assert elevations.shape == (24,)
    assert np.argmax(elevations) == 12


def test_sunrise_comes_before_sunset() -> None:
    sunrise_s, sunset_s = sunrise_sunset_utc_s(_march_equinox, 51.48, 0.0)
    assert sunrise_s < sunset_s
    # about twelve hours of daylight at the equinox
    assert sunset_s - sunrise_s == pytest.approx(12 * 3600, abs=1200)
    assert solar_zenith_deg(sunrise_s, _march_equinox, 51.48, 0.0) == pytest.approx(90.0, abs=0.01)


def test_summer_days_are_longer_in_the_north() -> None:
    june = sunrise_sunset_utc_s(_june_solstice, 51.48, 0.0)
    december = sunrise_sunset_utc_s(_december_solstice, 51.48, 0.0)
    assert june[1] - june[0] > december[1] - december[0]


@pytest.mark.parametrize("day_of_year", [_june_solstice, _december_solstice])
def test_no_sunrise_in_polar_day_or_night(day_of_year) -> None:
    assert sunrise_sunset_utc_s(day_of_year, 80.0, 0.0) is None


def test_unreachable_zenith_gives_none() -> None:
    # the noon sun never gets within 10 degrees of the zenith at 51 degrees north
    assert zenith_to_utc_times(10.0, _march_equinox, 51.48, 0.0) is None

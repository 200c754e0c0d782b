"""Stand-in oracles shared by the dose and sampling tests."""
from __future__ import annotations

import numpy as np
import pytest

from sunshine_dose.config.sunshine_dose_config import DoseCalculationConfig
from sunshine_dose.spectrum.action_spectra import (
    erythema_action_spectrum,
    vitamin_d_action_spectrum,
)
from sunshine_dose.types.exposure_parameters import ExposureParameters
from sunshine_dose.types.sky_condition import SkyCondition


class ConstantSpectrumOracle:
    """Fills every wavelength with the same irradiance, at any time of day"""

    def __init__(self, irradiance: float, sunrise_sunset: tuple[int, int] = (21600, 64800)):
        self.irradiance = irradiance
        self.sunrise_sunset = sunrise_sunset
        self.calls: list[dict] = []

    def run_model(
        self,
        out_spectral_irradiance,
        start_wavelength_nm,
        end_wavelength_nm,
        step_wavelength_nm,
        day_of_year,
        latitude_deg,
        longitude_deg,
        altitude_km,
        seconds_since_midnight_utc,
        sky_condition,
        silent,
    ) -> int:
        self.calls.append(
            {
                "wavelengths_nm": (start_wavelength_nm, end_wavelength_nm, step_wavelength_nm),
                "seconds_since_midnight_utc": seconds_since_midnight_utc,
                "silent": silent,
                "num_wavelengths": len(out_spectral_irradiance),
            }
        )
        out_spectral_irradiance[:] = self.irradiance
        return 0

    def get_sunrise_sunset(self, day_of_year, latitude_deg, longitude_deg, altitude_km):
        return self.sunrise_sunset


class FixedSpectrumOracle(ConstantSpectrumOracle):
    """Returns a copy of one given spectrum, NaNs and all"""

    def __init__(self, spectrum: np.ndarray):
        super().__init__(irradiance=0.0)
        self.spectrum = np.asarray(spectrum, dtype=np.float64)

    def run_model(self, out_spectral_irradiance, *args) -> int:
        super().run_model(out_spectral_irradiance, *args)
        out_spectral_irradiance[:] = self.spectrum
        return 0


class FailingOracle:
    """Reports failure for every request, scribbling over the buffer first"""

    def __init__(self):
        self.num_calls = 0

    def run_model(self, out_spectral_irradiance, *args) -> int:
        self.num_calls += 1
        out_spectral_irradiance[:] = 1.0e6
        return 1

    def get_sunrise_sunset(self, day_of_year, latitude_deg, longitude_deg, altitude_km):
        return -1, -1

    def get_day_sun_angle_data(
        self, num_samples, day_of_year, utc_offset_s, latitude_deg, longitude_deg, altitude_km
    ):
        self.num_calls += 1
        return 1, np.full(num_samples, 45.0), np.arange(num_samples, dtype=np.float64)


class FakePositionOracle:
    """Hands back the given angles and times unchanged"""

    def __init__(self, angles_deg, times_s, status: int = 0):
        self.angles_deg = np.asarray(angles_deg, dtype=np.float64)
        self.times_s = np.asarray(times_s, dtype=np.float64)
        self.status = status

    def get_day_sun_angle_data(
        self, num_samples, day_of_year, utc_offset_s, latitude_deg, longitude_deg, altitude_km
    ):
        return self.status, self.angles_deg, self.times_s


def uniform_irradiance_for_vitamin_d_rate(
    vitamin_d_rate_W_m2: float,
    exposed_skin_fraction: float,
    correction_factor: float = 0.8,
) -> float:
    """Irradiance that, flat across the grid, gives the requested weighted vitamin D rate"""
    weight_sum = float(np.sum(vitamin_d_action_spectrum().weights))
    return vitamin_d_rate_W_m2 / (weight_sum * correction_factor * exposed_skin_fraction)


def uniform_irradiance_for_erythema_rate(
    erythema_rate_W_m2: float, correction_factor: float = 0.8
) -> float:
    weight_sum = float(np.sum(erythema_action_spectrum().weights))
    return erythema_rate_W_m2 / (weight_sum * correction_factor)


@pytest.fixture
def dose_config() -> DoseCalculationConfig:
    return DoseCalculationConfig()


@pytest.fixture
def exposure_parameters() -> ExposureParameters:
    # phototype III at noon UTC on the March equinox, Greenwich
    return ExposureParameters(
        exposed_skin_fraction=0.25,
        skin_phototype=2,
        day_of_year=80,
        latitude_deg=51.48,
        longitude_deg=0.0,
        altitude_km=0.0,
        seconds_since_midnight_utc=43200,
        sky_condition=SkyCondition.cloudless,
    )

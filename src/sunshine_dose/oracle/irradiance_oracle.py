import logging as log
from typing import Protocol

import numpy as np

from sunshine_dose.spectrum.wavelength_grid import (
    uv_end_wavelength_nm,
    uv_start_wavelength_nm,
    uv_step_wavelength_nm,
    uv_wavelength_grid,
)
from sunshine_dose.types.exposure_parameters import ExposureParameters
from sunshine_dose.types.sky_condition import SkyCondition
from sunshine_dose.types.uv_spectrum import UVSpectrum


__all__ = ["IrradianceOracle", "query_uv_spectrum", "query_sunrise_sunset"]


class IrradianceOracle(Protocol):
    """
    A radiative transfer model producing the spectral irradiance reaching the ground.
    Implementations may wrap a compiled model, a lookup table, or a web service.
    """

    def run_model(
        self,
        out_spectral_irradiance: np.ndarray,
        start_wavelength_nm: int,
        end_wavelength_nm: int,
        step_wavelength_nm: float,
        day_of_year: int,
        latitude_deg: float,
        longitude_deg: float,
        altitude_km: float,
        seconds_since_midnight_utc: int,
        sky_condition: SkyCondition,
        silent: bool,
    ) -> int:
        """
        Fills out_spectral_irradiance (W/m^2/nm) and returns 0 on success.  Any other status
        means the buffer contents are undefined.
        """
        ...

    def get_sunrise_sunset(
        self,
        day_of_year: int,
        latitude_deg: float,
        longitude_deg: float,
        altitude_km: float,
    ) -> tuple[int, int]:
        """UTC seconds since midnight of sunrise and sunset, or (-1, -1) on failure"""
        ...


def query_uv_spectrum(
    oracle: IrradianceOracle,
    exposure_parameters: ExposureParameters,
    silent: bool = True,
) -> UVSpectrum | None:
    """
    Runs the oracle on the shared 290 - 400 nm grid for the instant described by
    exposure_parameters, returning None when the oracle reports failure
    """
    lambdas_nm = uv_wavelength_grid().copy()
    spectral_irradiance = np.zeros_like(lambdas_nm)

    status = oracle.run_model(
        spectral_irradiance,
        uv_start_wavelength_nm,
        uv_end_wavelength_nm,
        uv_step_wavelength_nm,
        exposure_parameters.day_of_year,
        exposure_parameters.latitude_deg,
        exposure_parameters.longitude_deg,
        exposure_parameters.altitude_km,
        exposure_parameters.seconds_since_midnight_utc,
        exposure_parameters.sky_condition,
        silent,
    )
    if status != 0:
        log.info(
            "Irradiance model failed with status %s at day %s, %s s UTC",
            status,
            exposure_parameters.day_of_year,
            exposure_parameters.seconds_since_midnight_utc,
        )
        return None

    return UVSpectrum(lambdas_nm=lambdas_nm, spectral_irradiances_Wm2_nm=spectral_irradiance)


def query_sunrise_sunset(
    oracle: IrradianceOracle, exposure_parameters: ExposureParameters
) -> tuple[int, int] | None:
    sunrise_s, sunset_s = oracle.get_sunrise_sunset(
        exposure_parameters.day_of_year,
        exposure_parameters.latitude_deg,
        exposure_parameters.longitude_deg,
        exposure_parameters.altitude_km,
    )
    if sunrise_s == -1 and sunset_s == -1:
        return None

    return sunrise_s, sunset_s

"""
A clear-sky Beer-Lambert stand-in for a full radiative transfer model.

Global irradiance is the extraterrestrial spectrum, corrected for the sun-earth distance,
projected onto a horizontal surface and attenuated by ozone absorption, Rayleigh
scattering and aerosol extinction, with half of the scattered light assumed to reach
the ground as diffuse irradiance.  Clouds scale the result by a per-sky-condition
modification factor.  Good enough to drive the dose calculation end to end, not a
substitute for a validated model.
"""

import logging as log

import numpy as np

from sunshine_dose.config.sunshine_dose_config import AtmosphereConfig
from sunshine_dose.solar.solar_geometry import (
    eccentricity_correction,
    solar_zenith_deg,
    sunrise_sunset_utc_s,
)
from sunshine_dose.spectrum.extraterrestrial_spectrum import (
    interpolate_uv_spectrum_onto,
    read_extraterrestrial_uv_spectrum,
)
from sunshine_dose.spectrum.wavelength_grid import num_wavelengths
from sunshine_dose.types.sky_condition import SkyCondition


__all__ = [
    "AnalyticIrradianceOracle",
    "status_ok",
    "status_sun_below_horizon",
    "status_bad_wavelength_request",
]

status_ok = 0
status_sun_below_horizon = 1
status_bad_wavelength_request = 2

# molecules per cm^2 in one Dobson unit
_dobson_unit_molecules_cm2 = 2.687e16
# ozone absorption cross section in the Huggins band, log-linear fit through 290 - 330 nm
_ozone_cross_section_290nm_cm2 = 1.5e-18
_ozone_cross_section_decay_per_nm = 0.13
_pressure_scale_height_km = 8.0
_angstrom_exponent = 1.3
_seconds_per_day = 86400


def ozone_optical_depth(lambdas_nm: np.ndarray, ozone_column_du: float) -> np.ndarray:
    cross_section_cm2 = _ozone_cross_section_290nm_cm2 * np.exp(
        -_ozone_cross_section_decay_per_nm * (lambdas_nm - 290.0)
    )
    return cross_section_cm2 * ozone_column_du * _dobson_unit_molecules_cm2


def rayleigh_optical_depth(lambdas_nm: np.ndarray, altitude_km: float) -> np.ndarray:
    lambdas_um = lambdas_nm / 1000.0
    sea_level_tau = (
        0.008569
        * lambdas_um**-4
        * (1.0 + 0.0113 * lambdas_um**-2 + 0.00013 * lambdas_um**-4)
    )
    return sea_level_tau * np.exp(-altitude_km / _pressure_scale_height_km)


def aerosol_optical_depth(lambdas_nm: np.ndarray, angstrom_beta: float) -> np.ndarray:
    return angstrom_beta * (lambdas_nm / 1000.0) ** -_angstrom_exponent


class AnalyticIrradianceOracle:
    def __init__(
        self, atmosphere_config: AtmosphereConfig, output_scale: float = 1000.0
    ):
        """
        output_scale converts the W/m^2/nm of the extraterrestrial table into the unit the
        dose thresholds were calibrated against; the default reports mW/m^2/nm
        """
        self.atmosphere_config = atmosphere_config
        self.output_scale = output_scale

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
        if not silent:
            log.info(
                "Lat %s, long %s, alt %s km, seconds from midnight %s, sky %s",
                latitude_deg,
                longitude_deg,
                altitude_km,
                seconds_since_midnight_utc,
                sky_condition,
            )

        if altitude_km < 0.0:
            log.warning("Surface altitude %s km is below 0 km", altitude_km)
        if altitude_km > 6.0:
            log.warning("Surface altitude %s km is above 6 km", altitude_km)

        zenith_deg = solar_zenith_deg(
            seconds_since_midnight_utc % _seconds_per_day,
            day_of_year,
            latitude_deg,
            longitude_deg,
        )
        if zenith_deg > 90.0 or zenith_deg < 0.0:
            return status_sun_below_horizon

        et_spectrum = read_extraterrestrial_uv_spectrum(
            self.atmosphere_config.extraterrestrial_uv_path
        )
        lambdas_nm = np.linspace(
            start_wavelength_nm,
            end_wavelength_nm,
            num=num_wavelengths(
                start_wavelength_nm, end_wavelength_nm, step_wavelength_nm
            ),
            endpoint=True,
        )
        if (
            len(lambdas_nm) != len(out_spectral_irradiance)
            or lambdas_nm[0] < et_spectrum.lambdas_nm[0]
            or lambdas_nm[-1] > et_spectrum.lambdas_nm[-1]
        ):
            return status_bad_wavelength_request

        et_on_grid = interpolate_uv_spectrum_onto(
            uv_spectrum=et_spectrum, lambdas_nm=lambdas_nm
        )

        mu = np.cos(np.deg2rad(zenith_deg))
        tau_ozone = ozone_optical_depth(
            lambdas_nm, self.atmosphere_config.ozone_column_du
        )
        tau_scattering = rayleigh_optical_depth(
            lambdas_nm, altitude_km
        ) + aerosol_optical_depth(lambdas_nm, self.atmosphere_config.angstrom_beta)

        ozone_transmittance = np.exp(-tau_ozone / np.maximum(mu, 1e-3))
        direct_transmittance = np.exp(-tau_scattering / np.maximum(mu, 1e-3))
        diffuse_transmittance = 0.5 * (1.0 - direct_transmittance)

        cloud_factor = self.atmosphere_config.cloud_modification_factor.get(
            sky_condition, 1.0
        )

        out_spectral_irradiance[:] = (
            self.output_scale
            * et_on_grid.spectral_irradiances_Wm2_nm
            * eccentricity_correction(day_of_year)
            * mu
            * ozone_transmittance
            * (direct_transmittance + diffuse_transmittance)
            * cloud_factor
        )

        return status_ok

    def get_sunrise_sunset(
        self,
        day_of_year: int,
        latitude_deg: float,
        longitude_deg: float,
        altitude_km: float,
    ) -> tuple[int, int]:
        sunrise_sunset = sunrise_sunset_utc_s(
            day_of_year=day_of_year,
            latitude_deg=latitude_deg,
            longitude_deg=longitude_deg,
        )
        if sunrise_sunset is None:
            return -1, -1

        sunrise_s, sunset_s = sunrise_sunset
        return (
            int(round(sunrise_s)) % _seconds_per_day,
            int(round(sunset_s)) % _seconds_per_day,
        )

import numpy as np

from sunshine_dose.spectrum.action_spectra import (
    erythema_action_spectrum,
    vitamin_d_action_spectrum,
)
from sunshine_dose.types.action_spectrum import ActionSpectrum
from sunshine_dose.types.dose_rates import DoseRates


__all__ = ["sanitized_irradiance", "weighted_dose_rate", "convert_to_dose_rates"]


def sanitized_irradiance(spectral_irradiance: np.ndarray) -> np.ndarray:
    """
    Copy of the irradiance with NaN, infinite and negative samples replaced by zero.
    Radiative transfer models emit these for wavelengths outside their valid domain.
    """
    irradiance = np.asarray(spectral_irradiance, dtype=np.float64)
    return np.where(np.isfinite(irradiance) & (irradiance > 0.0), irradiance, 0.0)


def weighted_dose_rate(
    spectral_irradiance: np.ndarray, action_spectrum: ActionSpectrum
) -> float:
    """Sum over the wavelength grid of irradiance times biological effectiveness"""
    if len(spectral_irradiance) != len(action_spectrum):
        raise ValueError(
            f"Spectrum with {len(spectral_irradiance)} samples cannot be weighted by the {action_spectrum.endpoint} action spectrum with {len(action_spectrum)} samples"
        )

    dose_rate = float(
        np.sum(sanitized_irradiance(spectral_irradiance) * action_spectrum.weights)
    )
    return max(dose_rate, 0.0)


def convert_to_dose_rates(
    spectral_irradiance: np.ndarray,
    exposed_skin_fraction: float,
    correction_factor: float,
) -> DoseRates:
    """
    Vitamin D and erythema dose rates for the given irradiance spectrum.  Only exposed skin
    makes vitamin D, while any exposed patch can burn, so only the vitamin D rate scales
    with exposed_skin_fraction.  correction_factor applies to both endpoints.
    """
    vitamin_d_rate = (
        exposed_skin_fraction
        * weighted_dose_rate(spectral_irradiance, vitamin_d_action_spectrum())
        * correction_factor
    )
    erythema_rate = (
        weighted_dose_rate(spectral_irradiance, erythema_action_spectrum())
        * correction_factor
    )

    return DoseRates(vitamin_d_W_m2=vitamin_d_rate, erythema_W_m2=erythema_rate)

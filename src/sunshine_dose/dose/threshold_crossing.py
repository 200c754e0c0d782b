import logging as log
from dataclasses import dataclass

import numpy as np

from sunshine_dose.config.sunshine_dose_config import DoseCalculationConfig
from sunshine_dose.dose.spectral_dose import convert_to_dose_rates, sanitized_irradiance
from sunshine_dose.oracle.irradiance_oracle import IrradianceOracle, query_uv_spectrum
from sunshine_dose.spectrum.wavelength_grid import uv_wavelength_grid
from sunshine_dose.types.dose_rates import DoseRates
from sunshine_dose.types.dose_result import DoseResult, InstantaneousDoseEstimate
from sunshine_dose.types.dose_threshold import DoseThreshold
from sunshine_dose.types.exposure_parameters import ExposureParameters


__all__ = ["integrate_exposure_dose", "instantaneous_dose_estimate"]


@dataclass
class _DoseAccumulator:
    target_J_m2: float
    dose_J_m2: float = 0.0
    # seconds after the start of exposure
    crossing_time_s: float = 0.0
    reached: bool = False

    def accumulate(self, dose_rate: float, slice_index: int, slice_duration_s: int) -> None:
        if self.reached:
            return

        self.dose_J_m2 += dose_rate * slice_duration_s
        if self.dose_J_m2 < self.target_J_m2:
            return

        # the target was crossed part way through this slice: back up by the overshoot,
        # taking the rate as constant across the slice
        overshoot_s = (self.dose_J_m2 - self.target_J_m2) / dose_rate
        self.crossing_time_s = (slice_index + 1) * slice_duration_s - overshoot_s
        self.dose_J_m2 = self.target_J_m2
        self.reached = True

    @property
    def fraction_of_target(self) -> float:
        return min(self.dose_J_m2 / self.target_J_m2, 1.0)


def _slice_dose_rates(
    oracle: IrradianceOracle,
    slice_parameters: ExposureParameters,
    dose_config: DoseCalculationConfig,
) -> tuple[DoseRates, np.ndarray | None]:
    uv_spectrum = query_uv_spectrum(
        oracle=oracle, exposure_parameters=slice_parameters, silent=True
    )
    if uv_spectrum is None:
        return DoseRates.no_light(), None

    dose_rates = convert_to_dose_rates(
        uv_spectrum.spectral_irradiances_Wm2_nm,
        exposed_skin_fraction=slice_parameters.exposed_skin_fraction,
        correction_factor=dose_config.dose_rate_correction_factor,
    )
    return dose_rates, sanitized_irradiance(uv_spectrum.spectral_irradiances_Wm2_nm)


def integrate_exposure_dose(
    exposure_parameters: ExposureParameters,
    dose_threshold: DoseThreshold,
    oracle: IrradianceOracle,
    dose_config: DoseCalculationConfig | None = None,
) -> DoseResult:
    """
    Steps through the day from the start of exposure in fixed slices, collecting vitamin D
    and erythema dose until both targets are reached, the light fades to nothing, or a full
    day has been simulated.  A failed oracle query counts as a slice with no light.
    """
    if dose_config is None:
        dose_config = DoseCalculationConfig()

    slice_duration_s = dose_config.slice_duration_s

    vitamin_d = _DoseAccumulator(target_J_m2=dose_threshold.vitamin_d_target_J_m2)
    erythema = _DoseAccumulator(target_J_m2=dose_threshold.erythema_target_J_m2)
    accumulated_spectral_dose = np.zeros(len(uv_wavelength_grid()))

    slices_evaluated = 0
    night = False
    slice_index = 0
    while (
        slice_index < dose_config.max_slices
        and not night
        and not (vitamin_d.reached and erythema.reached)
    ):
        slice_parameters = exposure_parameters.advanced_by(slice_index * slice_duration_s)
        dose_rates, slice_irradiance = _slice_dose_rates(
            oracle=oracle, slice_parameters=slice_parameters, dose_config=dose_config
        )
        slices_evaluated += 1

        log.debug(
            "slice %s at %s s UTC: vitamin D rate %s, erythema rate %s",
            slice_index,
            slice_parameters.seconds_since_midnight_utc,
            dose_rates.vitamin_d_W_m2,
            dose_rates.erythema_W_m2,
        )

        # no light now, assume none for the rest of the day
        night = dose_rates.both_below(dose_config.near_zero_dose_rate_W_m2)
        if not night:
            vitamin_d.accumulate(
                dose_rates.vitamin_d_W_m2, slice_index, slice_duration_s
            )
            erythema.accumulate(dose_rates.erythema_W_m2, slice_index, slice_duration_s)
            if slice_irradiance is not None and len(slice_irradiance) == len(
                accumulated_spectral_dose
            ):
                accumulated_spectral_dose += slice_irradiance * slice_duration_s

        slice_index += 1

    if night:
        log.info("Dose rates near zero after %s slices, stopping", slices_evaluated)
    log.debug(
        "vitamin D dose %s of %s J/m^2, erythema dose %s of %s J/m^2",
        vitamin_d.dose_J_m2,
        vitamin_d.target_J_m2,
        erythema.dose_J_m2,
        erythema.target_J_m2,
    )

    return DoseResult(
        vitamin_d_time_s=vitamin_d.crossing_time_s,
        erythema_time_s=erythema.crossing_time_s,
        vitamin_d_percent_of_target=vitamin_d.fraction_of_target,
        erythema_percent_of_target=erythema.fraction_of_target,
        vitamin_d_target_J_m2=vitamin_d.target_J_m2,
        erythema_target_J_m2=erythema.target_J_m2,
        accumulated_spectral_dose_J_m2_nm=accumulated_spectral_dose,
        slices_evaluated=slices_evaluated,
    )


def _time_to_dose(dose_J_m2: float, dose_rate_W_m2: float) -> float:
    if dose_rate_W_m2 <= 0.0:
        return 0.0
    return dose_J_m2 / dose_rate_W_m2


def instantaneous_dose_estimate(
    exposure_parameters: ExposureParameters,
    dose_threshold: DoseThreshold,
    oracle: IrradianceOracle,
    dose_config: DoseCalculationConfig | None = None,
) -> InstantaneousDoseEstimate:
    """
    How long it would take to reach each target if the sun stayed exactly as it is right
    now.  One oracle query, no integration over the day.
    """
    if dose_config is None:
        dose_config = DoseCalculationConfig()

    uv_spectrum = query_uv_spectrum(
        oracle=oracle, exposure_parameters=exposure_parameters, silent=False
    )
    if uv_spectrum is None:
        dose_rates = DoseRates.no_light()
    else:
        dose_rates = convert_to_dose_rates(
            uv_spectrum.spectral_irradiances_Wm2_nm,
            exposed_skin_fraction=exposure_parameters.exposed_skin_fraction,
            correction_factor=dose_config.dose_rate_correction_factor,
        )

    return InstantaneousDoseEstimate(
        vitamin_d_W_m2=dose_rates.vitamin_d_W_m2,
        erythema_W_m2=dose_rates.erythema_W_m2,
        vitamin_d_time_s=_time_to_dose(
            dose_threshold.vitamin_d_target_J_m2, dose_rates.vitamin_d_W_m2
        ),
        erythema_time_s=_time_to_dose(
            dose_threshold.erythema_target_J_m2, dose_rates.erythema_W_m2
        ),
    )

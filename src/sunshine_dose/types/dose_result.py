from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class DoseResult:
    # seconds after the start of exposure; 0.0 if the target was not reached that day
    vitamin_d_time_s: float
    erythema_time_s: float
    # in [0, 1]
    vitamin_d_percent_of_target: float
    erythema_percent_of_target: float
    vitamin_d_target_J_m2: float
    erythema_target_J_m2: float
    # J/m^2/nm of unweighted irradiance collected on the wavelength grid
    accumulated_spectral_dose_J_m2_nm: np.ndarray
    slices_evaluated: int

    @property
    def vitamin_d_reached(self) -> bool:
        return self.vitamin_d_time_s > 0.0

    @property
    def erythema_reached(self) -> bool:
        return self.erythema_time_s > 0.0


@dataclass(frozen=True)
class InstantaneousDoseEstimate:
    vitamin_d_W_m2: float
    erythema_W_m2: float
    # 0.0 when there is no light to make progress with
    vitamin_d_time_s: float
    erythema_time_s: float

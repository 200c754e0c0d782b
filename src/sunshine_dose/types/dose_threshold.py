from dataclasses import dataclass


@dataclass(frozen=True)
class DoseThreshold:
    # J/m^2 of weighted dose needed to reach each endpoint
    vitamin_d_target_J_m2: float
    erythema_target_J_m2: float

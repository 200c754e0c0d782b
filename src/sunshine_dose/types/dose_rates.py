from dataclasses import dataclass


# biologically weighted irradiance, W/m^2
@dataclass(frozen=True)
class DoseRates:
    vitamin_d_W_m2: float
    erythema_W_m2: float

    @classmethod
    def no_light(cls) -> "DoseRates":
        return cls(vitamin_d_W_m2=0.0, erythema_W_m2=0.0)

    def both_below(self, threshold_W_m2: float) -> bool:
        return self.vitamin_d_W_m2 < threshold_W_m2 and self.erythema_W_m2 < threshold_W_m2

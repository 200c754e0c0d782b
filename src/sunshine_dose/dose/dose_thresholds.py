from sunshine_dose.types.dose_threshold import DoseThreshold
from sunshine_dose.types.fitzpatrick_skin_type import FitzpatrickSkinType


__all__ = ["OutOfRangeError", "thresholds_for", "thresholds_for_skin_type"]


class OutOfRangeError(ValueError):
    """Raised when a skin phototype index has no entry in the threshold table"""

    def __init__(self, phototype: int):
        super().__init__(
            f"Skin phototype {phototype} out of range, must be in 0..{len(_dose_thresholds) - 1}"
        )
        self.phototype = phototype


# J/m^2, indexed by zero-based Fitzpatrick phototype
_dose_thresholds = [
    DoseThreshold(vitamin_d_target_J_m2=21000.9, erythema_target_J_m2=200000.0),
    DoseThreshold(vitamin_d_target_J_m2=27000.35, erythema_target_J_m2=250000.0),
    DoseThreshold(vitamin_d_target_J_m2=32000.825, erythema_target_J_m2=300000.0),
    DoseThreshold(vitamin_d_target_J_m2=49000.25, erythema_target_J_m2=450000.0),
    DoseThreshold(vitamin_d_target_J_m2=65000.7, erythema_target_J_m2=600000.0),
    DoseThreshold(vitamin_d_target_J_m2=109000.45, erythema_target_J_m2=1000000.0),
]


def thresholds_for(phototype: int) -> DoseThreshold:
    # bool is an int, but never a phototype
    if isinstance(phototype, bool) or phototype not in range(len(_dose_thresholds)):
        raise OutOfRangeError(phototype)

    return _dose_thresholds[phototype]


def thresholds_for_skin_type(skin_type: FitzpatrickSkinType) -> DoseThreshold:
    return thresholds_for(skin_type.phototype_index)

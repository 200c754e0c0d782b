from dataclasses import dataclass

import numpy as np

from sunshine_dose.types.dose_endpoint import DoseEndpoint


@dataclass(frozen=True)
class ActionSpectrum:
    """
    Relative biological effectiveness of each wavelength for producing a given endpoint
    """

    endpoint: DoseEndpoint
    lambdas_nm: np.ndarray
    weights: np.ndarray  # dimensionless, 1.0 at peak effectiveness

    def __post_init__(self):
        if len(self.lambdas_nm) != len(self.weights):
            raise ValueError(
                f"Action spectrum for {self.endpoint} has {len(self.lambdas_nm)} wavelengths but {len(self.weights)} weights"
            )

    def __len__(self) -> int:
        return len(self.weights)

from dataclasses import dataclass

import numpy as np


@dataclass
class UVSpectrum:
    lambdas_nm: np.ndarray  # nanometers
    spectral_irradiances_Wm2_nm: np.ndarray  # watts per meter squared per nanometer

    def __post_init__(self):
        if len(self.lambdas_nm) != len(self.spectral_irradiances_Wm2_nm):
            raise ValueError(
                f"Spectrum has {len(self.lambdas_nm)} wavelengths but {len(self.spectral_irradiances_Wm2_nm)} irradiance values"
            )

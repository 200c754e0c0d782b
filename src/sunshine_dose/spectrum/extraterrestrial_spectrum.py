import pathlib
from functools import cache

import numpy as np
import pandas as pd
from scipy.interpolate import interp1d

from sunshine_dose.types.uv_spectrum import UVSpectrum


# TODO: replace the smoothed 5 nm table with the full-resolution ASTM E-490 spectrum
@cache
def read_extraterrestrial_uv_spectrum(spectrum_path: pathlib.Path) -> UVSpectrum:
    df = pd.read_csv(spectrum_path)

    return UVSpectrum(
        lambdas_nm=df["lambda_nm"].to_numpy(dtype=np.float64),
        spectral_irradiances_Wm2_nm=df["irradiance_W_m2_nm"].to_numpy(dtype=np.float64),
    )


def interpolate_uv_spectrum_onto(
    uv_spectrum: UVSpectrum, lambdas_nm: np.ndarray
) -> UVSpectrum:
    irradiance_interpolation = interp1d(
        uv_spectrum.lambdas_nm, uv_spectrum.spectral_irradiances_Wm2_nm
    )
    irradiances_on_lambdas = irradiance_interpolation(lambdas_nm)

    return UVSpectrum(
        lambdas_nm=lambdas_nm.copy(),
        spectral_irradiances_Wm2_nm=irradiances_on_lambdas,
    )

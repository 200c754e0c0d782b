from functools import cache

import numpy as np

from sunshine_dose.spectrum.wavelength_grid import uv_wavelength_grid
from sunshine_dose.types.action_spectrum import ActionSpectrum
from sunshine_dose.types.dose_endpoint import DoseEndpoint


# previtamin D3 synthesis in skin, 290 - 400 nm in 1 nm steps
# zero above 330 nm
_vitamin_d_weights = [
    8.780e-01, 9.030e-01, 9.280e-01, 9.520e-01, 9.760e-01, 9.830e-01, 9.900e-01, 9.960e-01,
    1.000e00, 9.770e-01, 9.510e-01, 9.170e-01, 8.780e-01, 7.710e-01, 7.010e-01, 6.340e-01,
    5.660e-01, 4.880e-01, 3.950e-01, 3.060e-01, 2.200e-01, 1.560e-01, 1.190e-01, 8.300e-02,
    4.900e-02, 3.400e-02, 2.000e-02, 1.410e-02, 9.760e-03, 6.520e-03, 4.360e-03, 2.920e-03,
    1.950e-03, 1.310e-03, 8.730e-04, 5.840e-04, 3.900e-04, 2.610e-04, 1.750e-04, 1.170e-04,
    7.800e-05,
] + [0.0] * 70

# CIE erythema reference action spectrum, 290 - 400 nm in 1 nm steps
_erythema_weights = [
    1.000e00, 1.000e00, 1.000e00, 1.000e00, 1.000e00, 1.000e00, 1.000e00, 1.000e00,
    1.000e00, 8.054e-01, 6.486e-01, 5.224e-01, 4.207e-01, 3.388e-01, 2.729e-01, 2.198e-01,
    1.770e-01, 1.426e-01, 1.148e-01, 9.247e-02, 7.447e-02, 5.998e-02, 4.831e-02, 3.891e-02,
    3.133e-02, 2.524e-02, 2.032e-02, 1.637e-02, 1.318e-02, 1.062e-02, 8.551e-03, 6.887e-03,
    5.546e-03, 4.467e-03, 3.598e-03, 2.897e-03, 2.334e-03, 1.879e-03, 1.514e-03, 1.412e-03,
    1.365e-03, 1.318e-03, 1.273e-03, 1.230e-03, 1.189e-03, 1.148e-03, 1.109e-03, 1.071e-03,
    1.035e-03, 1.000e-03, 9.660e-04, 9.333e-04, 9.016e-04, 8.710e-04, 8.414e-04, 8.128e-04,
    7.852e-04, 7.586e-04, 7.328e-04, 7.080e-04, 6.839e-04, 6.607e-04, 6.383e-04, 6.166e-04,
    5.957e-04, 5.754e-04, 5.559e-04, 5.370e-04, 5.188e-04, 5.012e-04, 4.842e-04, 4.677e-04,
    4.519e-04, 4.365e-04, 4.217e-04, 4.074e-04, 3.935e-04, 3.802e-04, 3.673e-04, 3.548e-04,
    3.428e-04, 3.311e-04, 3.199e-04, 3.090e-04, 2.985e-04, 2.884e-04, 2.786e-04, 2.692e-04,
    2.600e-04, 2.512e-04, 2.427e-04, 2.344e-04, 2.265e-04, 2.188e-04, 2.113e-04, 2.042e-04,
    1.972e-04, 1.905e-04, 1.841e-04, 1.778e-04, 1.718e-04, 1.660e-04, 1.603e-04, 1.549e-04,
    1.496e-04, 1.445e-04, 1.396e-04, 1.349e-04, 1.303e-04, 1.259e-04, 1.216e-04,
]

_endpoint_weights = {
    DoseEndpoint.vitamin_d: _vitamin_d_weights,
    DoseEndpoint.erythema: _erythema_weights,
}


@cache
def action_spectrum_for(endpoint: DoseEndpoint) -> ActionSpectrum:
    weights = np.array(_endpoint_weights[endpoint], dtype=np.float64)
    weights.setflags(write=False)

    return ActionSpectrum(
        endpoint=endpoint, lambdas_nm=uv_wavelength_grid(), weights=weights
    )


def vitamin_d_action_spectrum() -> ActionSpectrum:
    return action_spectrum_for(DoseEndpoint.vitamin_d)


def erythema_action_spectrum() -> ActionSpectrum:
    return action_spectrum_for(DoseEndpoint.erythema)

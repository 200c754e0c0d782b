from functools import cache

import numpy as np


uv_start_wavelength_nm = 290
uv_end_wavelength_nm = 400
uv_step_wavelength_nm = 1


def num_wavelengths(
    start_wavelength_nm: int, end_wavelength_nm: int, step_wavelength_nm: float
) -> int:
    return 1 + int((end_wavelength_nm - start_wavelength_nm) / step_wavelength_nm)


@cache
def _uv_wavelength_grid() -> np.ndarray:
    grid = np.linspace(
        uv_start_wavelength_nm,
        uv_end_wavelength_nm,
        num=num_wavelengths(
            uv_start_wavelength_nm, uv_end_wavelength_nm, uv_step_wavelength_nm
        ),
        endpoint=True,
    )
    grid.setflags(write=False)
    return grid


def uv_wavelength_grid() -> np.ndarray:
    """
    The 290 - 400 nm grid, 1 nm apart, shared by every spectrum in the package.
    The returned array is read-only.
    """
    return _uv_wavelength_grid()

import os
import yaml
import pathlib
import logging as log
from dataclasses import dataclass, field
from functools import cache

from sunshine_dose.types.sky_condition import SkyCondition


__all__ = [
    "DoseCalculationConfig",
    "AtmosphereConfig",
    "SunshineDoseConfig",
    "read_dose_config",
    "default_dose_config",
]


def _config_dir() -> pathlib.Path:
    return pathlib.Path(os.path.realpath(os.path.dirname(__file__)))


@dataclass(frozen=True)
class DoseCalculationConfig:
    slice_duration_s: int = 600
    seconds_per_day: int = 86400
    # both dose rates below this are treated as night
    near_zero_dose_rate_W_m2: float = 1e-4
    # empirical, brings the weighted rates in line with the reference model
    dose_rate_correction_factor: float = 0.8

    def __post_init__(self):
        if self.slice_duration_s <= 0:
            raise ValueError(
                f"Slice duration must be positive, got {self.slice_duration_s}"
            )

    @property
    def max_slices(self) -> int:
        return self.seconds_per_day // self.slice_duration_s


@dataclass(frozen=True)
class AtmosphereConfig:
    extraterrestrial_uv_path: pathlib.Path = field(
        default_factory=lambda: _config_dir() / pathlib.Path("../data/extraterrestrial_uv.csv")
    )
    ozone_column_du: float = 400.0
    angstrom_beta: float = 0.2
    cloud_modification_factor: dict[SkyCondition, float] = field(
        default_factory=lambda: {
            SkyCondition.cloudless: 1.0,
            SkyCondition.scattered: 0.89,
            SkyCondition.broken: 0.73,
            SkyCondition.overcast: 0.31,
        }
    )


@dataclass(frozen=True)
class SunshineDoseConfig:
    dose_calculation: DoseCalculationConfig
    atmosphere: AtmosphereConfig


def _read_yaml(filepath: pathlib.Path) -> dict | None:
    """Read YAML file from disk and return dictionary with the contents"""
    with open(filepath, "r") as stream:
        try:
            param_yaml = yaml.safe_load(stream)
        except yaml.YAMLError as exc:
            param_yaml = None
            log.info("Reading file %s resulted in yaml error: %s", filepath, exc)

    return param_yaml


def _dose_calculation_from_yaml(yaml_dict: dict) -> DoseCalculationConfig:
    defaults = DoseCalculationConfig()
    return DoseCalculationConfig(
        slice_duration_s=int(
            yaml_dict.get("slice_duration_s", defaults.slice_duration_s)
        ),
        seconds_per_day=int(yaml_dict.get("seconds_per_day", defaults.seconds_per_day)),
        near_zero_dose_rate_W_m2=float(
            yaml_dict.get("near_zero_dose_rate_W_m2", defaults.near_zero_dose_rate_W_m2)
        ),
        dose_rate_correction_factor=float(
            yaml_dict.get(
                "dose_rate_correction_factor", defaults.dose_rate_correction_factor
            )
        ),
    )


def _atmosphere_from_yaml(
    yaml_dict: dict, relative_to: pathlib.Path
) -> AtmosphereConfig:
    defaults = AtmosphereConfig()

    et_path = yaml_dict.get("extraterrestrial_uv_path", None)
    if et_path is None:
        extraterrestrial_uv_path = defaults.extraterrestrial_uv_path
    else:
        extraterrestrial_uv_path = relative_to / pathlib.Path(et_path).expanduser()

    cloud_factors = dict(defaults.cloud_modification_factor)
    for sky_condition_str, factor in (
        yaml_dict.get("cloud_modification_factor", {}) or {}
    ).items():
        # unknown sky conditions are an error, not silently ignored
        cloud_factors[SkyCondition(sky_condition_str)] = float(factor)

    return AtmosphereConfig(
        extraterrestrial_uv_path=extraterrestrial_uv_path.resolve(),
        ozone_column_du=float(yaml_dict.get("ozone_column_du", defaults.ozone_column_du)),
        angstrom_beta=float(yaml_dict.get("angstrom_beta", defaults.angstrom_beta)),
        cloud_modification_factor=cloud_factors,
    )


@cache
def read_dose_config(
    config_path: pathlib.Path | None = None,
) -> SunshineDoseConfig | None:
    """
    Reads the dose configuration from config_path, or from the configuration shipped
    with the package when no path is given.  Relative paths inside the file are taken
    relative to the directory holding the file.
    """
    if config_path is None:
        config_path = _config_dir() / pathlib.Path("dose_config.yaml")

    config_yaml = _read_yaml(config_path)
    if config_yaml is None:
        return None

    return SunshineDoseConfig(
        dose_calculation=_dose_calculation_from_yaml(
            config_yaml.get("dose_calculation", {}) or {}
        ),
        atmosphere=_atmosphere_from_yaml(
            config_yaml.get("atmosphere", {}) or {},
            relative_to=pathlib.Path(config_path).parent,
        ),
    )


def default_dose_config() -> SunshineDoseConfig:
    sdc = read_dose_config()
    if sdc is None:
        log.info("Could not read bundled dose configuration, using built-in defaults")
        return SunshineDoseConfig(
            dose_calculation=DoseCalculationConfig(), atmosphere=AtmosphereConfig()
        )

    return sdc

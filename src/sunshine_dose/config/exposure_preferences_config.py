import pathlib
import logging as log

import yaml
from astropy.time import Time

from sunshine_dose.types.body_part import BodyPart
from sunshine_dose.types.exposure_preferences import ExposurePreferences
from sunshine_dose.types.fitzpatrick_skin_type import FitzpatrickSkinType
from sunshine_dose.types.sky_condition import SkyCondition
from sunshine_dose.types.time_of_day_mode import TimeOfDayMode


__all__ = ["read_exposure_preferences", "write_exposure_preferences"]


def read_exposure_preferences(
    preferences_path: pathlib.Path,
) -> ExposurePreferences | None:
    """
    Returns the ExposurePreferences stored in the given yaml file.  Entries that are missing
    take their default values, but entries that are present must name a known enum member.
    """
    with open(preferences_path, "r") as stream:
        try:
            prefs_yaml = yaml.safe_load(stream)
        except yaml.YAMLError as exc:
            log.info("Reading file %s resulted in yaml error: %s", preferences_path, exc)
            return None

    if prefs_yaml is None:
        return ExposurePreferences()
    if not isinstance(prefs_yaml, dict):
        log.info(
            "Preferences file %s does not hold a mapping of preferences", preferences_path
        )
        return None

    defaults = ExposurePreferences()

    try:
        skin_type = FitzpatrickSkinType(prefs_yaml.get("skin_type", defaults.skin_type))
        sky_condition = SkyCondition(
            prefs_yaml.get("sky_condition", defaults.sky_condition)
        )
        time_of_day_mode = TimeOfDayMode(
            prefs_yaml.get("time_of_day_mode", defaults.time_of_day_mode)
        )
        exposed_body_parts = [
            BodyPart(x)
            for x in prefs_yaml.get("exposed_body_parts", defaults.exposed_body_parts)
        ]
        custom_time_str = prefs_yaml.get("custom_time", None)
        custom_time = Time(custom_time_str) if custom_time_str is not None else None
        utc_offset_s = int(prefs_yaml.get("utc_offset_s", defaults.utc_offset_s))
    except (ValueError, TypeError) as exc:
        log.info("Invalid entry in preferences file %s: %s", preferences_path, exc)
        return None

    return ExposurePreferences(
        skin_type=skin_type,
        sky_condition=sky_condition,
        time_of_day_mode=time_of_day_mode,
        exposed_body_parts=exposed_body_parts,
        custom_time=custom_time,
        utc_offset_s=utc_offset_s,
    )


def write_exposure_preferences(
    preferences_path: pathlib.Path, exposure_preferences: ExposurePreferences
) -> None:
    dict_to_write = {
        "skin_type": str(exposure_preferences.skin_type),
        "sky_condition": str(exposure_preferences.sky_condition),
        "time_of_day_mode": str(exposure_preferences.time_of_day_mode),
        "exposed_body_parts": [str(x) for x in exposure_preferences.exposed_body_parts],
        "utc_offset_s": exposure_preferences.utc_offset_s,
    }
    if exposure_preferences.custom_time is not None:
        dict_to_write["custom_time"] = exposure_preferences.custom_time.isot

    with open(preferences_path, "w") as stream:
        yaml.safe_dump(dict_to_write, stream)

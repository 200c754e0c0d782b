"""Tests for merging command line options into exposure preferences."""
from __future__ import annotations

import pathlib
from argparse import Namespace

from sunshine_dose.config.exposure_preferences_config import write_exposure_preferences
from sunshine_dose.sunshine_dose_cli import preferences_from_args
from sunshine_dose.types.body_part import BodyPart
from sunshine_dose.types.exposure_preferences import ExposurePreferences
from sunshine_dose.types.fitzpatrick_skin_type import FitzpatrickSkinType
from sunshine_dose.types.sky_condition import SkyCondition
from sunshine_dose.types.time_of_day_mode import TimeOfDayMode


def _args(**kwargs) -> Namespace:
    defaults = dict(
        preferences=None,
        skin_type=None,
        sky=None,
        body_parts=None,
        utc_offset=None,
        now=False,
        time=None,
    )
    defaults.update(kwargs)
    return Namespace(**defaults)


def test_no_options_gives_default_preferences() -> None:
    assert preferences_from_args(_args()) == ExposurePreferences()


def test_options_override_the_preferences_file(tmp_path: pathlib.Path) -> None:
    prefs_path = tmp_path / "preferences.yaml"
    write_exposure_preferences(
        prefs_path,
        ExposurePreferences(
            skin_type=FitzpatrickSkinType.type_i, sky_condition=SkyCondition.overcast
        ),
    )
    prefs = preferences_from_args(
        _args(preferences=str(prefs_path), sky="broken", body_parts=["torso", "arms"])
    )
    assert prefs.skin_type == FitzpatrickSkinType.type_i
    assert prefs.sky_condition == SkyCondition.broken
    assert prefs.exposed_body_parts == [BodyPart.torso, BodyPart.arms]


def test_time_option_selects_custom_mode() -> None:
    prefs = preferences_from_args(_args(time="2024-06-21T10:30:00"))
    assert prefs.time_of_day_mode == TimeOfDayMode.custom
    assert prefs.custom_time.isot == "2024-06-21T10:30:00.000"

    prefs = preferences_from_args(_args(now=True))
    assert prefs.time_of_day_mode == TimeOfDayMode.now


def test_unreadable_preferences_give_none(tmp_path: pathlib.Path) -> None:
    prefs_path = tmp_path / "preferences.yaml"
    prefs_path.write_text("sky_condition: hazy\n")
    assert preferences_from_args(_args(preferences=str(prefs_path))) is None

"""Tests for describing dose results to a person."""
from __future__ import annotations

import numpy as np

from sunshine_dose.dose.result_summary import (
    describe_progress,
    format_duration,
    summarize_dose_result,
)
from sunshine_dose.types.dose_endpoint import DoseEndpoint
from sunshine_dose.types.dose_result import DoseResult


def test_format_duration() -> None:
    assert format_duration(3852.0) == "1h 4m 12s"
    assert format_duration(65.4) == "1m 5s"
    assert format_duration(7.0) == "7s"
    assert format_duration(-3.0) == "0s"


def test_describe_progress() -> None:
    assert describe_progress(DoseEndpoint.vitamin_d, 0.0, 0.0).startswith("Not enough light")
    assert describe_progress(DoseEndpoint.erythema, 0.42, 0.0) == (
        "42% of sunburn dose by the end of the day"
    )
    assert describe_progress(DoseEndpoint.vitamin_d, 1.0, 6400.165) == (
        "Daily vitamin D: 1h 46m 40s"
    )


def test_summarize_dose_result() -> None:
    result = DoseResult(
        vitamin_d_time_s=900.0,
        erythema_time_s=0.0,
        vitamin_d_percent_of_target=1.0,
        erythema_percent_of_target=0.5,
        vitamin_d_target_J_m2=32000.825,
        erythema_target_J_m2=300000.0,
        accumulated_spectral_dose_J_m2_nm=np.zeros(111),
        slices_evaluated=40,
    )
    summary = summarize_dose_result(result)
    assert summary[DoseEndpoint.vitamin_d] == "Daily vitamin D: 15m 0s"
    assert summary[DoseEndpoint.erythema] == "50% of sunburn dose by the end of the day"


def test_reached_targets_keep_their_capitals() -> None:
    assert describe_progress(DoseEndpoint.vitamin_d, 1.0, 60.0) == "Daily vitamin D: 1m 0s"
    assert describe_progress(DoseEndpoint.erythema, 1.0, 60.0) == "Sunburn: 1m 0s"

"""Tests for sampling the sun's elevation across the day."""
from __future__ import annotations

import numpy as np
import pytest

from conftest import FailingOracle, FakePositionOracle
from sunshine_dose.oracle.analytic_position_oracle import AnalyticPositionOracle
from sunshine_dose.sampling.sun_angle_sampler import (
    exposure_window_s,
    mark_exposure_window,
    sample_day_sun_angles,
    sample_exposure_day,
)
from sunshine_dose.types.dose_result import DoseResult
from sunshine_dose.types.sun_angle_sample import SunAngleSample


def _dose_result(vitamin_d_time_s: float, erythema_time_s: float) -> DoseResult:
    return DoseResult(
        vitamin_d_time_s=vitamin_d_time_s,
        erythema_time_s=erythema_time_s,
        vitamin_d_percent_of_target=1.0 if vitamin_d_time_s > 0.0 else 0.5,
        erythema_percent_of_target=1.0 if erythema_time_s > 0.0 else 0.5,
        vitamin_d_target_J_m2=32000.825,
        erythema_target_J_m2=300000.0,
        accumulated_spectral_dose_J_m2_nm=np.zeros(111),
        slices_evaluated=1,
    )


def _hourly_samples() -> list[SunAngleSample]:
    return [
        SunAngleSample(time_of_day_s=3600.0 * hour, elevation_deg=float(hour))
        for hour in range(24)
    ]


def test_failing_oracle_gives_no_samples(exposure_parameters) -> None:
    oracle = FailingOracle()
    samples = list(
        sample_day_sun_angles(exposure_parameters, num_samples=500, position_oracle=oracle)
    )
    assert samples == []
    assert oracle.num_calls == 1


def test_mismatched_angles_and_times_give_no_samples(exposure_parameters) -> None:
    oracle = FakePositionOracle(angles_deg=[10.0, 20.0, 30.0], times_s=[0.0, 1.0])
    assert list(sample_day_sun_angles(exposure_parameters, 3, oracle)) == []


def test_samples_are_ordered_by_time(exposure_parameters) -> None:
    oracle = FakePositionOracle(
        angles_deg=[30.0, 10.0, 20.0], times_s=[7200.0, 0.0, 3600.0]
    )
    samples = list(sample_day_sun_angles(exposure_parameters, 3, oracle))
    assert [s.time_of_day_s for s in samples] == [0.0, 3600.0, 7200.0]
    assert [s.elevation_deg for s in samples] == [10.0, 20.0, 30.0]
    assert not any(s.in_exposure_window or s.synthetic for s in samples)


def test_exposure_window_is_the_longer_crossing() -> None:
    assert exposure_window_s(_dose_result(3600.0, 5400.0)) == 5400.0
    assert exposure_window_s(_dose_result(3600.0, 0.0)) == 3600.0
    assert exposure_window_s(_dose_result(0.0, 0.0)) == 0.0


def test_synthetic_sample_is_interpolated_at_the_exposure_start() -> None:
    marked = list(
        mark_exposure_window(
            _hourly_samples(),
            exposure_start_s=37800.0,
            dose_result=_dose_result(3600.0, 5400.0),
        )
    )

    assert len(marked) == 25
    synthetic = [s for s in marked if s.synthetic]
    assert len(synthetic) == 1
    assert synthetic[0].time_of_day_s == 37800.0
    assert synthetic[0].elevation_deg == pytest.approx(10.5)
    assert synthetic[0].in_exposure_window

    times = [s.time_of_day_s for s in marked]
    assert times == sorted(times)
    in_window = [s.time_of_day_s for s in marked if s.in_exposure_window]
    assert in_window == [37800.0, 39600.0, 43200.0]


def test_exposure_window_wraps_past_midnight() -> None:
    marked = list(
        mark_exposure_window(
            _hourly_samples(),
            exposure_start_s=84600.0,
            dose_result=_dose_result(7200.0, 0.0),
        )
    )

    in_window = [s.time_of_day_s for s in marked if s.in_exposure_window and not s.synthetic]
    assert in_window == [0.0, 3600.0]
    # no sample follows the start, so the synthetic one closes the day
    assert marked[-1].synthetic
    assert marked[-1].time_of_day_s == 84600.0
    assert marked[-1].elevation_deg == 23.0


def test_no_window_when_no_target_is_reached() -> None:
    marked = list(
        mark_exposure_window(
            _hourly_samples(), exposure_start_s=37800.0, dose_result=_dose_result(0.0, 0.0)
        )
    )
    assert not any(s.in_exposure_window for s in marked)
    assert sum(s.synthetic for s in marked) == 1


def test_nothing_is_marked_without_samples() -> None:
    marked = list(
        mark_exposure_window([], exposure_start_s=37800.0, dose_result=_dose_result(1.0, 1.0))
    )
    assert marked == []


def test_sample_exposure_day_uses_local_time(exposure_parameters) -> None:
    # noon UTC is 14:00 two hours east of Greenwich
    samples = list(
        sample_exposure_day(
            exposure_parameters,
            _dose_result(1800.0, 3600.0),
            num_samples=96,
            position_oracle=AnalyticPositionOracle(),
            utc_offset_s=7200,
        )
    )

    # 14:00 falls on the 15 minute grid, so no synthetic sample is needed
    assert len(samples) == 96
    assert not any(s.synthetic for s in samples)
    in_window = [s.time_of_day_s for s in samples if s.in_exposure_window]
    assert min(in_window) == 50400.0
    assert max(in_window) == 54000.0


def test_sample_at_the_exposure_start_is_the_boundary() -> None:
    marked = list(
        mark_exposure_window(
            _hourly_samples(),
            exposure_start_s=43200.0,
            dose_result=_dose_result(3600.0, 0.0),
        )
    )

    times = [s.time_of_day_s for s in marked]
    assert len(marked) == 24
    assert len(set(times)) == len(times)
    assert not any(s.synthetic for s in marked)
    in_window = [s.time_of_day_s for s in marked if s.in_exposure_window]
    assert in_window == [43200.0, 46800.0]

from __future__ import annotations

import logging

import pytest

from edr_kinematics.analysis import AnalysisConfig, analyze_segments
from edr_kinematics.ingestion import build_sample_set


def test_imperial_braking_example() -> None:
    sample_set = build_sample_set([-2.0, -1.0, 0.0], [40.0, 20.0, 0.0])

    first, second = analyze_segments(sample_set)

    assert first.index == 1
    assert first.time_interval == pytest.approx(1.0)
    assert first.speed_change == pytest.approx(-20.0)
    assert first.decel_accel_rate == pytest.approx(-29.32)
    assert first.drag_factor == pytest.approx(0.621, abs=1e-3)
    assert first.segment_distance == pytest.approx(43.98)
    assert first.cumulative_distance == pytest.approx(43.98)
    assert first.is_significant is True

    assert second.decel_accel_rate == pytest.approx(-29.32)
    assert second.drag_factor == pytest.approx(0.621, abs=1e-3)
    assert second.segment_distance == pytest.approx(14.66)
    assert second.cumulative_distance == pytest.approx(58.64)


def test_metric_conversion() -> None:
    sample_set = build_sample_set([-1.0, 0.0], [36.0, 0.0])
    config = AnalysisConfig(unit_system="metric")

    (segment,) = analyze_segments(sample_set, config)

    assert segment.decel_accel_rate == pytest.approx(-10.0)
    assert segment.drag_factor == pytest.approx(36.0 / 9.81)
    assert segment.segment_distance == pytest.approx(5.0)


def test_one_segment_per_adjacent_pair_with_non_negative_distance() -> None:
    times = [-4.5, -3.0, -2.5, -1.0, -0.5]
    speeds = [30.0, 35.0, 33.0, 10.0, 12.0]
    segments = analyze_segments(build_sample_set(times, speeds))

    assert len(segments) == len(times) - 1
    assert all(segment.segment_distance >= 0 for segment in segments)
    assert [segment.index for segment in segments] == [1, 2, 3, 4]
    assert segments[-1].cumulative_distance == pytest.approx(
        sum(segment.segment_distance for segment in segments)
    )


def test_significance_threshold_is_strict_and_configurable() -> None:
    sample_set = build_sample_set([-3.0, -2.0, -1.0], [50.0, 40.0, 25.0])

    default = analyze_segments(sample_set)
    assert [segment.is_significant for segment in default] == [False, True]

    strict = analyze_segments(sample_set, AnalysisConfig(significant_threshold=5.0))
    assert [segment.is_significant for segment in strict] == [True, True]


def test_zero_interval_leaves_rate_and_drag_undefined(caplog) -> None:
    sample_set = build_sample_set([-2.0, -1.0, -1.0, 0.0], [40.0, 30.0, 20.0, 0.0])

    with caplog.at_level(logging.WARNING, logger="edr_kinematics.analysis.segments"):
        segments = analyze_segments(sample_set)

    assert len(segments) == 3
    zero = segments[1]
    assert zero.time_interval == 0.0
    assert zero.decel_accel_rate is None
    assert zero.drag_factor is None
    assert zero.segment_distance == 0.0
    assert segments[2].drag_factor == pytest.approx(20.0 / 32.2)
    assert "zero-length interval" in caplog.text


def test_zero_interval_without_speed_change() -> None:
    (segment,) = analyze_segments(build_sample_set([-1.0, -1.0], [10.0, 10.0]))

    assert segment.decel_accel_rate is None
    assert segment.drag_factor is None
    assert segment.speed_change == 0.0


def test_conversion_constants_can_be_overridden() -> None:
    sample_set = build_sample_set([-1.0, 0.0], [10.0, 0.0])
    config = AnalysisConfig(speed_to_distance_rate=1.0, gravity=10.0)

    (segment,) = analyze_segments(sample_set, config)

    assert segment.decel_accel_rate == pytest.approx(-10.0)
    assert segment.drag_factor == pytest.approx(1.0)
    assert segment.segment_distance == pytest.approx(5.0)


def test_warning_names_zero_length_interval(caplog) -> None:
    sample_set = build_sample_set([-1.0, -1.0, 0.0], [10.0, 10.0, 0.0])

    with caplog.at_level(logging.WARNING, logger="edr_kinematics.analysis.segments"):
        analyze_segments(sample_set)

    assert "zero-length interval" in caplog.text
    assert "non-finite rate or drag factor" not in caplog.text


def test_warning_names_overflowing_segment(caplog) -> None:
    sample_set = build_sample_set([-1e-300, 0.0], [1e308, 0.0])

    with caplog.at_level(logging.WARNING, logger="edr_kinematics.analysis.segments"):
        (segment,) = analyze_segments(sample_set)

    assert segment.time_interval > 0
    assert segment.decel_accel_rate is None
    assert segment.drag_factor is None
    assert "non-finite rate or drag factor" in caplog.text
    assert "zero-length interval" not in caplog.text

"""Per-interval kinematics between consecutive EDR samples."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np

from edr_kinematics.ingestion.samples import SampleSet

from .config import AnalysisConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SegmentResult:
    """Kinematics of the interval between sample ``index - 1`` and ``index``.

    ``decel_accel_rate`` is in distance units per second squared and
    ``drag_factor`` is dimensionless; both are ``None`` when the interval has
    zero length. Distances are in the unit system's distance unit.
    """

    index: int
    start_time: float
    end_time: float
    time_interval: float
    speed_change: float
    decel_accel_rate: float | None
    drag_factor: float | None
    segment_distance: float
    cumulative_distance: float
    is_significant: bool


def _finite_or_none(value: float) -> float | None:
    return float(value) if math.isfinite(value) else None


def analyze_segments(
    sample_set: SampleSet,
    config: AnalysisConfig | None = None,
) -> tuple[SegmentResult, ...]:
    """Derive one :class:`SegmentResult` per adjacent sample pair.

    Distance is integrated with the trapezoidal rule, one segment at a time:
    the mean of the two bounding speeds, converted to distance per second,
    times the interval length.
    """

    config = config or AnalysisConfig()
    units = config.units

    times = sample_set.times
    speeds = sample_set.speeds

    intervals = np.abs(np.diff(times))
    speed_change = np.diff(speeds)
    converted_change = speed_change * units.speed_to_distance_rate

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        rates = np.divide(converted_change, intervals)
        drag = np.divide(-speed_change, units.gravity * intervals)

    mean_speed = (speeds[:-1] + speeds[1:]) / 2.0
    distances = mean_speed * units.speed_to_distance_rate * intervals
    cumulative = np.cumsum(distances)
    significant = np.abs(speed_change) > config.significant_threshold

    results: list[SegmentResult] = []
    for i in range(len(intervals)):
        rate = _finite_or_none(rates[i])
        drag_factor = _finite_or_none(drag[i])
        if rate is None or drag_factor is None:
            if intervals[i] == 0:
                reason = "zero-length interval"
            else:
                reason = "non-finite rate or drag factor"
            logger.warning(
                "Segment %d (%.3f s -> %.3f s) has a %s; rate and drag factor left undefined",
                i + 1,
                times[i],
                times[i + 1],
                reason,
            )
        results.append(
            SegmentResult(
                index=i + 1,
                start_time=float(times[i]),
                end_time=float(times[i + 1]),
                time_interval=float(intervals[i]),
                speed_change=float(speed_change[i]),
                decel_accel_rate=rate,
                drag_factor=drag_factor,
                segment_distance=float(distances[i]),
                cumulative_distance=float(cumulative[i]),
                is_significant=bool(significant[i]),
            )
        )

    logger.debug(
        "Analyzed %d segments, %d significant", len(results), int(significant.sum())
    )
    return tuple(results)


__all__ = ["SegmentResult", "analyze_segments"]

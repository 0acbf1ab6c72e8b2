"""Reduction of per-segment kinematics into a single analysis summary."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from statistics import fmean
from typing import Any, Iterable, Sequence

from edr_kinematics.ingestion.samples import SampleSet

from .config import AnalysisConfig, UnitSystem
from .distance import DistanceEstimate
from .segments import SegmentResult


@dataclass(frozen=True, slots=True)
class AnalysisSummary:
    """Overall figures for one EDR record.

    Averages are ``None`` when no segment contributes a defined value.
    """

    unit_system: UnitSystem
    sample_count: int
    segment_count: int
    measured_distance: float
    extrapolated_distance: float
    total_distance: float
    has_reference_sample: bool
    time_to_reference: float
    min_speed: float
    max_speed: float
    avg_speed_change: float | None
    avg_decel_accel_rate: float | None
    avg_drag_factor: float | None
    peak_decel_accel_rate: float | None
    significant_event_count: int
    time_span: float

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["unit_system"] = self.unit_system.value
        return payload


def _mean(values: Iterable[float | None]) -> float | None:
    defined = [value for value in values if value is not None]
    if not defined:
        return None
    return fmean(defined)


def summarize(
    sample_set: SampleSet,
    segments: Sequence[SegmentResult],
    distance: DistanceEstimate,
    config: AnalysisConfig | None = None,
) -> AnalysisSummary:
    """Aggregate samples, segments and the distance estimate."""

    config = config or AnalysisConfig()
    times = sample_set.times
    speeds = sample_set.speeds

    rates = [
        segment.decel_accel_rate
        for segment in segments
        if segment.decel_accel_rate is not None
    ]
    peak = max(rates, key=abs) if rates else None

    return AnalysisSummary(
        unit_system=config.unit_system,
        sample_count=len(sample_set),
        segment_count=len(segments),
        measured_distance=distance.measured_distance,
        extrapolated_distance=distance.extrapolated_distance,
        total_distance=distance.total_distance,
        has_reference_sample=distance.has_reference_sample,
        time_to_reference=distance.time_to_reference,
        min_speed=float(speeds.min()),
        max_speed=float(speeds.max()),
        avg_speed_change=_mean(segment.speed_change for segment in segments),
        avg_decel_accel_rate=_mean(rates),
        avg_drag_factor=_mean(segment.drag_factor for segment in segments),
        peak_decel_accel_rate=peak,
        significant_event_count=sum(1 for segment in segments if segment.is_significant),
        time_span=float(times.max() - times.min()),
    )


__all__ = ["AnalysisSummary", "summarize"]

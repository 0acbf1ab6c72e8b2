"""Distance integration and extrapolation to the reference instant."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from edr_kinematics.ingestion.samples import SampleSet

from .config import AnalysisConfig
from .segments import SegmentResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DistanceEstimate:
    measured_distance: float
    extrapolated_distance: float
    total_distance: float
    has_reference_sample: bool
    time_to_reference: float


def has_reference_sample(sample_set: SampleSet, tolerance_s: float = 0.0) -> bool:
    """Whether any sample sits at the reference instant (within ``tolerance_s``)."""

    return any(abs(sample.time) <= tolerance_s for sample in sample_set)


def estimate_distance(
    sample_set: SampleSet,
    segments: Sequence[SegmentResult],
    config: AnalysisConfig | None = None,
) -> DistanceEstimate:
    """Combine measured segment distance with the gap to time zero.

    When no sample exists at the reference instant, the final recorded speed
    is held constant from the last sample up to time zero.
    """

    config = config or AnalysisConfig()
    measured = float(sum(segment.segment_distance for segment in segments))

    if has_reference_sample(sample_set, config.reference_tolerance_s):
        return DistanceEstimate(
            measured_distance=measured,
            extrapolated_distance=0.0,
            total_distance=measured,
            has_reference_sample=True,
            time_to_reference=0.0,
        )

    final = sample_set.final_sample
    time_to_reference = abs(final.time)
    extrapolated = config.units.to_distance_rate(final.speed) * time_to_reference
    logger.info(
        "No sample at the reference instant; extrapolating %.3f s at %.3f %s",
        time_to_reference,
        final.speed,
        config.units.speed_unit,
    )
    return DistanceEstimate(
        measured_distance=measured,
        extrapolated_distance=extrapolated,
        total_distance=measured + extrapolated,
        has_reference_sample=False,
        time_to_reference=time_to_reference,
    )


__all__ = ["DistanceEstimate", "estimate_distance", "has_reference_sample"]

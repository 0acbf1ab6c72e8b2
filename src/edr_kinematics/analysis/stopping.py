"""Stopping distance from an initial speed, final speed and deceleration time."""

from __future__ import annotations

import math
from dataclasses import dataclass

from edr_kinematics.errors import InvalidSpeedError

from .config import AnalysisConfig


@dataclass(frozen=True, slots=True)
class StoppingEstimate:
    distance: float
    average_deceleration: float
    drag_factor: float


def estimate_stopping(
    initial_speed: float,
    final_speed: float,
    deceleration_time: float,
    config: AnalysisConfig | None = None,
) -> StoppingEstimate:
    """Distance and deceleration for a uniform slow-down.

    Uses the same conventions as the segment analyzer: distance is the mean
    speed times the elapsed time, deceleration is positive when slowing down.
    """

    config = config or AnalysisConfig()
    units = config.units

    bad_speeds = [
        s for s in (initial_speed, final_speed) if not (s >= 0 and math.isfinite(s))
    ]
    if bad_speeds:
        raise InvalidSpeedError(bad_speeds)
    if not (math.isfinite(deceleration_time) and deceleration_time > 0):
        raise ValueError("deceleration_time must be a positive number of seconds")

    speed_drop = initial_speed - final_speed
    mean_speed = (initial_speed + final_speed) / 2.0
    return StoppingEstimate(
        distance=units.to_distance_rate(mean_speed) * deceleration_time,
        average_deceleration=units.to_distance_rate(speed_drop) / deceleration_time,
        drag_factor=speed_drop / (units.gravity * deceleration_time),
    )


__all__ = ["StoppingEstimate", "estimate_stopping"]

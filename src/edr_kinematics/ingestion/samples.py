"""Sample records and the validator/normalizer that builds them."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterator, Sequence

import numpy as np

from edr_kinematics.errors import (
    InsufficientSamplesError,
    InvalidSpeedError,
    InvalidTimeError,
    LengthMismatchError,
)

logger = logging.getLogger(__name__)

MIN_SAMPLES = 2


def _bad_times(times: Sequence[float]) -> list[float]:
    # NaN and infinities are rejected along with out-of-range values
    return [float(t) for t in times if not (t <= 0 and math.isfinite(t))]


def _bad_speeds(speeds: Sequence[float]) -> list[float]:
    return [float(s) for s in speeds if not (s >= 0 and math.isfinite(s))]


@dataclass(frozen=True, slots=True)
class Sample:
    """A single EDR reading: seconds relative to the reference instant and speed."""

    time: float
    speed: float

    def __post_init__(self) -> None:
        if _bad_times([self.time]):
            raise InvalidTimeError([self.time])
        if _bad_speeds([self.speed]):
            raise InvalidSpeedError([self.speed])


@dataclass(frozen=True, slots=True)
class SampleSet:
    """Time-ordered, validated collection of at least two samples."""

    samples: tuple[Sample, ...]

    def __post_init__(self) -> None:
        if len(self.samples) < MIN_SAMPLES:
            raise InsufficientSamplesError(len(self.samples))
        for prev, cur in zip(self.samples, self.samples[1:]):
            if cur.time < prev.time:
                raise ValueError("SampleSet samples must be ordered ascending by time")

    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self) -> Iterator[Sample]:
        return iter(self.samples)

    @property
    def times(self) -> np.ndarray:
        return np.array([sample.time for sample in self.samples], dtype=float)

    @property
    def speeds(self) -> np.ndarray:
        return np.array([sample.speed for sample in self.samples], dtype=float)

    @property
    def final_sample(self) -> Sample:
        """The sample closest to the reference instant."""

        return self.samples[-1]


def build_sample_set(times: Sequence[float], speeds: Sequence[float]) -> SampleSet:
    """Cross-validate the two channels and return them as a sorted :class:`SampleSet`.

    Checks run in a fixed order and the first failure aborts the run:

    1. :class:`LengthMismatchError` when the channels differ in length.
    2. :class:`InsufficientSamplesError` for fewer than two pairs.
    3. :class:`InvalidTimeError` listing every time greater than zero.
    4. :class:`InvalidSpeedError` listing every negative speed.

    Samples with equal times keep their input order.
    """

    if len(times) != len(speeds):
        raise LengthMismatchError(len(times), len(speeds))
    if len(times) < MIN_SAMPLES:
        raise InsufficientSamplesError(len(times))

    pairs = list(zip(times, speeds))

    bad_times = _bad_times([t for t, _ in pairs])
    if bad_times:
        raise InvalidTimeError(bad_times)
    bad_speeds = _bad_speeds([s for _, s in pairs])
    if bad_speeds:
        raise InvalidSpeedError(bad_speeds)

    ordered = sorted((Sample(float(t), float(s)) for t, s in pairs), key=lambda s: s.time)
    logger.debug(
        "Built sample set with %d samples spanning %.3f s",
        len(ordered),
        ordered[-1].time - ordered[0].time,
    )
    return SampleSet(tuple(ordered))


__all__ = ["MIN_SAMPLES", "Sample", "SampleSet", "build_sample_set"]

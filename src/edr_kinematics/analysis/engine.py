"""End-to-end EDR kinematic analysis: parse, validate, analyze, summarize."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Mapping, Sequence

import pandas as pd
import pint

from edr_kinematics.errors import EDRAnalysisError
from edr_kinematics.ingestion.parser import parse_channels
from edr_kinematics.ingestion.samples import SampleSet, build_sample_set
from edr_kinematics.utils.units import to_quantity

from .config import AnalysisConfig, UnitProfile, UnitSystem
from .distance import estimate_distance
from .segments import SegmentResult, analyze_segments
from .summary import AnalysisSummary, summarize

logger = logging.getLogger(__name__)

SEGMENT_COLUMNS = [
    "index",
    "start_time",
    "end_time",
    "time_interval",
    "speed_change",
    "decel_accel_rate",
    "drag_factor",
    "segment_distance",
    "cumulative_distance",
    "is_significant",
]


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Container holding the validated samples, per-segment results and summary."""

    sample_set: SampleSet
    segments: tuple[SegmentResult, ...]
    summary: AnalysisSummary
    units: UnitProfile

    def to_frame(self) -> pd.DataFrame:
        """Segments as a dataframe; undefined rates and drag factors become NaN."""

        rows = [asdict(segment) for segment in self.segments]
        df = pd.DataFrame(rows, columns=SEGMENT_COLUMNS)
        for col in ("decel_accel_rate", "drag_factor"):
            df[col] = pd.to_numeric(df[col], errors="coerce").astype("float64")
        return df

    def to_dict(self) -> dict[str, Any]:
        return {
            "units": {
                "system": self.units.system.value,
                "speed": self.units.speed_unit,
                "distance": self.units.distance_unit,
                "acceleration": self.units.acceleration_unit,
            },
            "summary": self.summary.to_dict(),
            "segments": [asdict(segment) for segment in self.segments],
        }

    def quantities(self) -> Mapping[str, pint.Quantity]:
        """Headline summary values with their physical units attached."""

        units = self.units
        summary = self.summary
        values: dict[str, pint.Quantity] = {
            "measured_distance": to_quantity(summary.measured_distance, units.distance_pint),
            "extrapolated_distance": to_quantity(summary.extrapolated_distance, units.distance_pint),
            "total_distance": to_quantity(summary.total_distance, units.distance_pint),
            "time_to_reference": to_quantity(summary.time_to_reference, "second"),
            "time_span": to_quantity(summary.time_span, "second"),
            "min_speed": to_quantity(summary.min_speed, units.speed_pint),
            "max_speed": to_quantity(summary.max_speed, units.speed_pint),
        }
        if summary.avg_decel_accel_rate is not None:
            values["avg_decel_accel_rate"] = to_quantity(
                summary.avg_decel_accel_rate, units.acceleration_pint
            )
        if summary.peak_decel_accel_rate is not None:
            values["peak_decel_accel_rate"] = to_quantity(
                summary.peak_decel_accel_rate, units.acceleration_pint
            )
        return values


class EDRAnalysisEngine:
    """Run the EDR pipeline under a fixed :class:`AnalysisConfig`.

    The engine keeps no state between calls; one instance can serve any
    number of concurrent analyses.
    """

    def __init__(self, config: AnalysisConfig | None = None) -> None:
        self.config = config or AnalysisConfig()

    def analyze(self, time_text: str, speed_text: str) -> AnalysisResult:
        """Parse both channel blobs and analyze them."""

        times, speeds = parse_channels(time_text, speed_text)
        return self.analyze_values(times, speeds)

    def analyze_values(self, times: Sequence[float], speeds: Sequence[float]) -> AnalysisResult:
        """Analyze already-numeric channels."""

        sample_set = build_sample_set(times, speeds)
        return self.analyze_samples(sample_set)

    def analyze_samples(self, sample_set: SampleSet) -> AnalysisResult:
        segments = analyze_segments(sample_set, self.config)
        distance = estimate_distance(sample_set, segments, self.config)
        summary = summarize(sample_set, segments, distance, self.config)
        logger.debug(
            "EDR analysis (%s): %d samples, total distance %.3f %s",
            self.config.unit_system.value,
            len(sample_set),
            summary.total_distance,
            self.config.units.distance_unit,
        )
        return AnalysisResult(
            sample_set=sample_set,
            segments=segments,
            summary=summary,
            units=self.config.units,
        )


@dataclass(frozen=True, slots=True)
class AnalysisOutcome:
    """Either a successful :class:`AnalysisResult` or the error that stopped the run."""

    result: AnalysisResult | None = None
    error: EDRAnalysisError | None = None

    def __post_init__(self) -> None:
        if (self.result is None) == (self.error is None):
            raise ValueError("AnalysisOutcome needs exactly one of result or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> AnalysisResult:
        """Return the result or raise the recorded error."""

        if self.error is not None:
            raise self.error
        assert self.result is not None
        return self.result


def _resolve_config(
    unit_system: str | UnitSystem,
    config: AnalysisConfig | None,
) -> AnalysisConfig:
    if config is not None:
        return config
    return AnalysisConfig(unit_system=unit_system)


def analyze_edr(
    time_text: str,
    speed_text: str,
    unit_system: str | UnitSystem = UnitSystem.IMPERIAL,
    *,
    config: AnalysisConfig | None = None,
) -> AnalysisResult:
    """Analyze one EDR record; raises :class:`EDRAnalysisError` on invalid input.

    ``config`` takes precedence over ``unit_system`` when both are given.
    """

    engine = EDRAnalysisEngine(_resolve_config(unit_system, config))
    return engine.analyze(time_text, speed_text)


def run_analysis(
    time_text: str,
    speed_text: str,
    unit_system: str | UnitSystem = UnitSystem.IMPERIAL,
    *,
    config: AnalysisConfig | None = None,
) -> AnalysisOutcome:
    """Like :func:`analyze_edr` but reports validation failures as an outcome."""

    try:
        result = analyze_edr(time_text, speed_text, unit_system, config=config)
    except EDRAnalysisError as exc:
        logger.info("EDR analysis rejected input: %s", exc)
        return AnalysisOutcome(error=exc)
    return AnalysisOutcome(result=result)


__all__ = [
    "SEGMENT_COLUMNS",
    "AnalysisOutcome",
    "AnalysisResult",
    "EDRAnalysisEngine",
    "analyze_edr",
    "run_analysis",
]

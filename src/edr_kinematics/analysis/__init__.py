"""Kinematic analysis of EDR speed traces."""

from .config import (
    AnalysisConfig,
    UnitProfile,
    UnitSystem,
    get_unit_profile,
    load_config,
)
from .distance import DistanceEstimate, estimate_distance, has_reference_sample
from .engine import (
    AnalysisOutcome,
    AnalysisResult,
    EDRAnalysisEngine,
    analyze_edr,
    run_analysis,
)
from .segments import SegmentResult, analyze_segments
from .stopping import StoppingEstimate, estimate_stopping
from .summary import AnalysisSummary, summarize

__all__ = [
    "AnalysisConfig",
    "AnalysisOutcome",
    "AnalysisResult",
    "AnalysisSummary",
    "DistanceEstimate",
    "EDRAnalysisEngine",
    "SegmentResult",
    "StoppingEstimate",
    "UnitProfile",
    "UnitSystem",
    "analyze_edr",
    "analyze_segments",
    "estimate_distance",
    "estimate_stopping",
    "get_unit_profile",
    "has_reference_sample",
    "load_config",
    "run_analysis",
    "summarize",
]

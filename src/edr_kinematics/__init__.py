"""Event data recorder (EDR) speed-trace kinematics."""

from .analysis import (
    AnalysisConfig,
    AnalysisOutcome,
    AnalysisResult,
    AnalysisSummary,
    EDRAnalysisEngine,
    SegmentResult,
    UnitSystem,
    analyze_edr,
    run_analysis,
)
from .errors import (
    EDRAnalysisError,
    InsufficientSamplesError,
    InvalidSpeedError,
    InvalidTimeError,
    LengthMismatchError,
    ParseError,
)

__all__ = [
    "AnalysisConfig",
    "AnalysisOutcome",
    "AnalysisResult",
    "AnalysisSummary",
    "EDRAnalysisEngine",
    "EDRAnalysisError",
    "InsufficientSamplesError",
    "InvalidSpeedError",
    "InvalidTimeError",
    "LengthMismatchError",
    "ParseError",
    "SegmentResult",
    "UnitSystem",
    "analyze_edr",
    "run_analysis",
]

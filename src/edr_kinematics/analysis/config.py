"""Unit systems and analysis configuration for the EDR engine."""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Any, Mapping

import yaml

SIGNIFICANT_SPEED_CHANGE = 10.0
REFERENCE_TIME_TOLERANCE_S = 0.0

MPH_TO_FT_PER_S = 1.466
KMH_PER_M_PER_S = 3.6
GRAVITY_FT_S2 = 32.2
GRAVITY_M_S2 = 9.81


class UnitSystem(str, Enum):
    """Unit system selector for speed inputs and distance outputs."""

    IMPERIAL = "imperial"
    METRIC = "metric"


@dataclass(frozen=True)
class UnitProfile:
    """Conversion constants and labels for one unit system.

    ``speed_to_distance_rate`` converts the input speed unit into distance per
    second (mph -> ft/s, km/h -> m/s). The ``*_pint`` names are the registry
    spellings used when attaching units to results.
    """

    system: UnitSystem
    speed_unit: str
    distance_unit: str
    acceleration_unit: str
    speed_to_distance_rate: float
    gravity: float
    speed_pint: str
    distance_pint: str
    acceleration_pint: str

    def to_distance_rate(self, speed: float) -> float:
        return speed * self.speed_to_distance_rate


UNIT_PROFILES: Mapping[UnitSystem, UnitProfile] = {
    UnitSystem.IMPERIAL: UnitProfile(
        system=UnitSystem.IMPERIAL,
        speed_unit="mph",
        distance_unit="ft",
        acceleration_unit="ft/s²",
        speed_to_distance_rate=MPH_TO_FT_PER_S,
        gravity=GRAVITY_FT_S2,
        speed_pint="mile / hour",
        distance_pint="foot",
        acceleration_pint="foot / second ** 2",
    ),
    UnitSystem.METRIC: UnitProfile(
        system=UnitSystem.METRIC,
        speed_unit="km/h",
        distance_unit="m",
        acceleration_unit="m/s²",
        speed_to_distance_rate=1.0 / KMH_PER_M_PER_S,
        gravity=GRAVITY_M_S2,
        speed_pint="kilometer / hour",
        distance_pint="meter",
        acceleration_pint="meter / second ** 2",
    ),
}


def get_unit_profile(system: str | UnitSystem) -> UnitProfile:
    """Return the :class:`UnitProfile` for ``system`` (case-insensitive)."""

    try:
        key = UnitSystem(system.strip().lower() if isinstance(system, str) else system)
    except ValueError as exc:
        allowed = ", ".join(member.value for member in UnitSystem)
        raise ValueError(f"Unknown unit system {system!r}. Expected one of: {allowed}") from exc
    return UNIT_PROFILES[key]


@dataclass(frozen=True)
class AnalysisConfig:
    """Tunable parameters of one analysis run.

    ``reference_tolerance_s`` decides which sample counts as the reference
    instant: a sample qualifies when ``abs(time) <= reference_tolerance_s``.
    The default of 0 requires an exact ``time == 0``.
    """

    unit_system: UnitSystem = UnitSystem.IMPERIAL
    significant_threshold: float = SIGNIFICANT_SPEED_CHANGE
    reference_tolerance_s: float = REFERENCE_TIME_TOLERANCE_S
    speed_to_distance_rate: float | None = None
    gravity: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "unit_system", get_unit_profile(self.unit_system).system)
        if not self.significant_threshold >= 0:
            raise ValueError("significant_threshold must be non-negative")
        if not self.reference_tolerance_s >= 0:
            raise ValueError("reference_tolerance_s must be non-negative")
        if self.speed_to_distance_rate is not None and not self.speed_to_distance_rate > 0:
            raise ValueError("speed_to_distance_rate must be positive")
        if self.gravity is not None and not self.gravity > 0:
            raise ValueError("gravity must be positive")

    @property
    def units(self) -> UnitProfile:
        """Unit profile for :attr:`unit_system` with any constant overrides applied."""

        profile = UNIT_PROFILES[self.unit_system]
        overrides: dict[str, float] = {}
        if self.speed_to_distance_rate is not None:
            overrides["speed_to_distance_rate"] = self.speed_to_distance_rate
        if self.gravity is not None:
            overrides["gravity"] = self.gravity
        return replace(profile, **overrides) if overrides else profile

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> "AnalysisConfig":
        return cls(
            unit_system=config.get("unit_system", UnitSystem.IMPERIAL),
            significant_threshold=float(
                config.get("significant_threshold", SIGNIFICANT_SPEED_CHANGE)
            ),
            reference_tolerance_s=float(
                config.get("reference_tolerance_s", REFERENCE_TIME_TOLERANCE_S)
            ),
            speed_to_distance_rate=config.get("speed_to_distance_rate"),
            gravity=config.get("gravity"),
        )


def _load_mapping_from_file(path: Path) -> Mapping[str, Any]:
    text = path.read_text()

    # JSON is a subset of YAML, so try JSON first for clearer error messages.
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        data = yaml.safe_load(text)
    if not isinstance(data, Mapping):
        raise TypeError("Analysis configuration must evaluate to a mapping")
    return data


def load_config(config: str | Path | Mapping[str, Any] | None = None) -> AnalysisConfig:
    """Load :class:`AnalysisConfig` from a mapping or a JSON/YAML file."""

    if config is None:
        return AnalysisConfig()
    if isinstance(config, Mapping):
        mapping = config
    else:
        mapping = _load_mapping_from_file(Path(config))

    return AnalysisConfig.from_mapping(mapping)


__all__ = [
    "GRAVITY_FT_S2",
    "GRAVITY_M_S2",
    "KMH_PER_M_PER_S",
    "MPH_TO_FT_PER_S",
    "REFERENCE_TIME_TOLERANCE_S",
    "SIGNIFICANT_SPEED_CHANGE",
    "UNIT_PROFILES",
    "AnalysisConfig",
    "UnitProfile",
    "UnitSystem",
    "get_unit_profile",
    "load_config",
]

"""Typed request/response models for the EDR analysis API."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

UnitSystemName = Literal["imperial", "metric"]


class AnalyzeRequest(BaseModel):
    """Raw channel text as pasted from an EDR download."""

    model_config = ConfigDict(extra="forbid")

    time: str = Field(description="Delimited sample times in seconds (<= 0)")
    speed: str = Field(description="Delimited speeds in mph (imperial) or km/h (metric)")
    unit_system: UnitSystemName = "imperial"
    significant_threshold: float | None = Field(default=None, ge=0)
    reference_tolerance_s: float | None = Field(default=None, ge=0)


class UnitLabels(BaseModel):
    system: UnitSystemName
    speed: str
    distance: str
    acceleration: str


class SegmentOut(BaseModel):
    index: int
    start_time: float
    end_time: float
    time_interval: float
    speed_change: float
    decel_accel_rate: float | None = None
    drag_factor: float | None = None
    segment_distance: float
    cumulative_distance: float
    is_significant: bool


class SummaryOut(BaseModel):
    unit_system: UnitSystemName
    sample_count: int
    segment_count: int
    measured_distance: float
    extrapolated_distance: float
    total_distance: float
    has_reference_sample: bool
    time_to_reference: float
    min_speed: float
    max_speed: float
    avg_speed_change: float | None = None
    avg_decel_accel_rate: float | None = None
    avg_drag_factor: float | None = None
    peak_decel_accel_rate: float | None = None
    significant_event_count: int
    time_span: float


class AnalyzeResponse(BaseModel):
    units: UnitLabels
    summary: SummaryOut
    segments: list[SegmentOut]


class StoppingRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    initial_speed: float
    final_speed: float = 0.0
    deceleration_time: float = Field(gt=0)
    unit_system: UnitSystemName = "imperial"


class StoppingResponse(BaseModel):
    unit_system: UnitSystemName
    distance: float
    average_deceleration: float
    drag_factor: float


__all__ = [
    "AnalyzeRequest",
    "AnalyzeResponse",
    "SegmentOut",
    "StoppingRequest",
    "StoppingResponse",
    "SummaryOut",
    "UnitLabels",
    "UnitSystemName",
]

"""EDR analysis endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from edr_kinematics.analysis import AnalysisConfig, EDRAnalysisEngine, estimate_stopping
from edr_kinematics.errors import EDRAnalysisError
from edr_kinematics.ingestion import demo_channels

from ..schemas import (
    AnalyzeRequest,
    AnalyzeResponse,
    StoppingRequest,
    StoppingResponse,
    UnitSystemName,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/edr", tags=["edr"])


def _config_from_request(payload: AnalyzeRequest) -> AnalysisConfig:
    options: dict[str, float] = {}
    if payload.significant_threshold is not None:
        options["significant_threshold"] = payload.significant_threshold
    if payload.reference_tolerance_s is not None:
        options["reference_tolerance_s"] = payload.reference_tolerance_s
    return AnalysisConfig(unit_system=payload.unit_system, **options)


def _run(engine: EDRAnalysisEngine, time_text: str, speed_text: str) -> AnalyzeResponse:
    try:
        result = engine.analyze(time_text, speed_text)
    except EDRAnalysisError as exc:
        logger.info("Rejected EDR payload: %s", exc)
        raise HTTPException(status_code=422, detail=exc.to_dict()) from exc
    return AnalyzeResponse.model_validate(result.to_dict())


@router.post("/analyze", response_model=AnalyzeResponse)
def analyze(payload: AnalyzeRequest) -> AnalyzeResponse:
    """Analyze pasted time/speed channels."""

    engine = EDRAnalysisEngine(_config_from_request(payload))
    return _run(engine, payload.time, payload.speed)


@router.get("/demo", response_model=AnalyzeResponse)
def analyze_demo(unit_system: UnitSystemName = "imperial") -> AnalyzeResponse:
    """Analyze the bundled demonstration record."""

    time_text, speed_text = demo_channels()
    engine = EDRAnalysisEngine(AnalysisConfig(unit_system=unit_system))
    return _run(engine, time_text, speed_text)


@router.post("/stopping", response_model=StoppingResponse)
def stopping(payload: StoppingRequest) -> StoppingResponse:
    """Stopping distance and deceleration for a uniform slow-down."""

    config = AnalysisConfig(unit_system=payload.unit_system)
    try:
        estimate = estimate_stopping(
            payload.initial_speed,
            payload.final_speed,
            payload.deceleration_time,
            config,
        )
    except EDRAnalysisError as exc:
        raise HTTPException(status_code=422, detail=exc.to_dict()) from exc
    return StoppingResponse(
        unit_system=payload.unit_system,
        distance=estimate.distance,
        average_deceleration=estimate.average_deceleration,
        drag_factor=estimate.drag_factor,
    )


__all__ = ["router"]

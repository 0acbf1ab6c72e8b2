"""FastAPI application entrypoint (``uvicorn edr_kinematics.main:app``)."""

from __future__ import annotations

from edr_kinematics.api.main import app, health

__all__ = ["app", "health"]

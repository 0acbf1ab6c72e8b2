"""FastAPI application wiring for the EDR analysis service."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from .routes import edr_router

app = FastAPI(title="EDR Kinematics")


@app.get("/health")
def health() -> JSONResponse:
    """Simple liveness endpoint used by deployment probes."""

    return JSONResponse({"status": "ok"})


app.include_router(edr_router)


__all__ = ["app", "health"]

"""API routers."""

from .edr import router as edr_router

__all__ = ["edr_router"]

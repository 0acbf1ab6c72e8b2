"""Unit handling utilities built on top of :mod:`pint`."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

import pint


@lru_cache(maxsize=1)
def ureg() -> pint.UnitRegistry:
    """Return a process-wide :class:`~pint.UnitRegistry` instance."""

    return pint.UnitRegistry()


def to_quantity(value: Any, unit: str) -> pint.Quantity:
    """Create a :class:`~pint.Quantity` from ``value`` and ``unit``."""

    return float(value) * ureg()(unit)


def convert_value(value: float, src_unit: str, dst_unit: str) -> float:
    """Convert ``value`` from ``src_unit`` to ``dst_unit``."""

    quantity = float(value) * ureg()(src_unit)
    return quantity.to(dst_unit).magnitude


__all__ = ["convert_value", "to_quantity", "ureg"]

from __future__ import annotations

import pytest

from edr_kinematics.analysis.config import (
    GRAVITY_FT_S2,
    GRAVITY_M_S2,
    KMH_PER_M_PER_S,
    MPH_TO_FT_PER_S,
)
from edr_kinematics.utils.units import convert_value, to_quantity, ureg


def test_registry_is_shared() -> None:
    assert ureg() is ureg()


def test_customary_factors_track_exact_conversions() -> None:
    exact_mph = convert_value(1.0, "mile / hour", "foot / second")

    assert exact_mph == pytest.approx(22 / 15)
    assert MPH_TO_FT_PER_S == pytest.approx(exact_mph, rel=1e-3)
    assert 1 / KMH_PER_M_PER_S == pytest.approx(
        convert_value(1.0, "kilometer / hour", "meter / second")
    )


def test_gravity_constants_track_standard_gravity() -> None:
    assert GRAVITY_FT_S2 == pytest.approx(
        convert_value(1.0, "standard_gravity", "foot / second ** 2"), rel=2e-3
    )
    assert GRAVITY_M_S2 == pytest.approx(
        convert_value(1.0, "standard_gravity", "meter / second ** 2"), rel=1e-3
    )


def test_to_quantity() -> None:
    quantity = to_quantity("58.64", "foot")

    assert quantity.magnitude == 58.64
    assert quantity.to("meter").magnitude == pytest.approx(17.873472)

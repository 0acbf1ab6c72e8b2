"""Bundled demonstration EDR record used by the UI and the API demo endpoint."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

# Speeds are read in the active unit system's speed unit (mph for imperial,
# km/h for metric).
DEMO_RECORD: Mapping[str, Any] = MappingProxyType(
    {
        "vehicle": "Honda Accord 2022",
        "event_trigger": "Event Trigger",
        "pre_event_duration_s": 5.0,
        "delta_v": 25.3,
        "max_delta_v": 27.1,
        "time_to_max_delta_v_s": 0.12,
        "seatbelt_status": "Buckled",
        "event_data": (
            {"time": -5.0, "speed": 45.2, "throttle_pct": 15, "brake": False},
            {"time": -4.0, "speed": 44.8, "throttle_pct": 12, "brake": False},
            {"time": -3.0, "speed": 44.1, "throttle_pct": 8, "brake": False},
            {"time": -2.0, "speed": 43.5, "throttle_pct": 5, "brake": True},
            {"time": -1.0, "speed": 42.9, "throttle_pct": 0, "brake": True},
            {"time": 0.0, "speed": 0.0, "throttle_pct": 0, "brake": True},
        ),
    }
)


def demo_channels() -> tuple[str, str]:
    """Return the demo record as newline-delimited ``(time, speed)`` text blobs."""

    rows = DEMO_RECORD["event_data"]
    time_text = "\n".join(f"{row['time']:.1f}" for row in rows)
    speed_text = "\n".join(f"{row['speed']:.1f}" for row in rows)
    return time_text, speed_text


__all__ = ["DEMO_RECORD", "demo_channels"]

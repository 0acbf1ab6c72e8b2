"""Failure taxonomy for EDR analysis runs.

Every error is terminal for the run that raised it. Each one keeps its payload
as attributes so callers (and the HTTP layer) can report the offending values
verbatim.
"""

from __future__ import annotations

from typing import Any, Iterable


class EDRAnalysisError(ValueError):
    """Base class for all validation failures of an EDR analysis."""

    code = "edr_error"

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.code, "message": str(self)}


class ParseError(EDRAnalysisError):
    """A channel token is not a valid number."""

    code = "parse_error"

    def __init__(self, token: str, channel: str | None = None) -> None:
        self.token = token
        self.channel = channel
        where = f" in {channel} channel" if channel else ""
        super().__init__(f"Unable to parse {token!r}{where} as a number")

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["token"] = self.token
        payload["channel"] = self.channel
        return payload


class LengthMismatchError(EDRAnalysisError):
    """Time and speed channels carry a different number of samples."""

    code = "length_mismatch"

    def __init__(self, time_count: int, speed_count: int) -> None:
        self.time_count = time_count
        self.speed_count = speed_count
        super().__init__(
            f"Time channel has {time_count} values but speed channel has {speed_count}"
        )

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["time_count"] = self.time_count
        payload["speed_count"] = self.speed_count
        return payload


class InsufficientSamplesError(EDRAnalysisError):
    """Fewer than two samples were supplied."""

    code = "insufficient_samples"

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"At least 2 samples are required, got {count}")

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["count"] = self.count
        return payload


class InvalidTimeError(EDRAnalysisError):
    """One or more sample times lie after the reference instant."""

    code = "invalid_time"

    def __init__(self, offending_times: Iterable[float]) -> None:
        self.offending_times = tuple(offending_times)
        listed = ", ".join(f"{value:g}" for value in self.offending_times)
        super().__init__(f"Sample times must be <= 0; offending values: {listed}")

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["offending_times"] = list(self.offending_times)
        return payload


class InvalidSpeedError(EDRAnalysisError):
    """One or more speeds are negative."""

    code = "invalid_speed"

    def __init__(self, offending_speeds: Iterable[float]) -> None:
        self.offending_speeds = tuple(offending_speeds)
        listed = ", ".join(f"{value:g}" for value in self.offending_speeds)
        super().__init__(f"Speeds must be >= 0; offending values: {listed}")

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["offending_speeds"] = list(self.offending_speeds)
        return payload


__all__ = [
    "EDRAnalysisError",
    "InsufficientSamplesError",
    "InvalidSpeedError",
    "InvalidTimeError",
    "LengthMismatchError",
    "ParseError",
]

"""Turn raw delimited channel text into numeric sequences."""

from __future__ import annotations

import math
import re

from edr_kinematics.errors import ParseError

# Any run of newline, comma, tab or carriage return separates two values.
_DELIMITERS = re.compile(r"[\n,\t\r]+")
# Plain decimal notation only; rejects nan/inf and python-specific forms like 1_000.
_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def split_tokens(text: str) -> list[str]:
    """Return the trimmed, non-empty tokens contained in *text*."""

    if not text:
        return []
    tokens = (token.strip() for token in _DELIMITERS.split(text))
    return [token for token in tokens if token]


def parse_channel(text: str, channel: str | None = None) -> tuple[float, ...]:
    """Parse a single channel blob into floats, preserving input order.

    Raises :class:`~edr_kinematics.errors.ParseError` naming the first token
    that is not a number.
    """

    values: list[float] = []
    for token in split_tokens(text):
        if not _NUMBER.fullmatch(token):
            raise ParseError(token, channel)
        value = float(token)
        # well-formed tokens like 1e400 still overflow to inf
        if not math.isfinite(value):
            raise ParseError(token, channel)
        values.append(value)
    return tuple(values)


def parse_channels(time_text: str, speed_text: str) -> tuple[tuple[float, ...], tuple[float, ...]]:
    """Parse the time and speed channels of one EDR record."""

    return parse_channel(time_text, "time"), parse_channel(speed_text, "speed")


__all__ = ["parse_channel", "parse_channels", "split_tokens"]

from __future__ import annotations

import pytest

from edr_kinematics.errors import ParseError
from edr_kinematics.ingestion.parser import parse_channel, parse_channels, split_tokens


def test_parse_channel_accepts_mixed_delimiters() -> None:
    text = "-5,-4\t-3\r\n-2\n\n-1,,0"

    assert parse_channel(text) == (-5.0, -4.0, -3.0, -2.0, -1.0, 0.0)


def test_parse_channel_trims_tokens_and_skips_empty_edges() -> None:
    assert parse_channel("\n 40 ,\t20 \n0\n") == (40.0, 20.0, 0.0)
    assert parse_channel("") == ()
    assert split_tokens(",\n,") == []


def test_parse_channel_handles_decimal_forms() -> None:
    assert parse_channel("1e-1\n+5\n.5\n-0.25\n3.") == (0.1, 5.0, 0.5, -0.25, 3.0)


@pytest.mark.parametrize(
    "token",
    ["abc", "12mph", "40 20", "nan", "inf", "1_000", "--1", "1e400", "-1e400"],
)
def test_parse_channel_rejects_non_numeric_tokens(token: str) -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_channel(f"1\n{token}\n3", channel="speed")

    assert excinfo.value.token == token
    assert excinfo.value.channel == "speed"
    assert token in str(excinfo.value)


def test_parse_channel_reports_first_bad_token() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_channel("x,y")

    assert excinfo.value.token == "x"


def test_parse_channels_names_the_failing_channel() -> None:
    times, speeds = parse_channels("-2\n-1\n0", "40\n20\n0")
    assert times == (-2.0, -1.0, 0.0)
    assert speeds == (40.0, 20.0, 0.0)

    with pytest.raises(ParseError) as excinfo:
        parse_channels("-2\n-1", "40\nfast")
    assert excinfo.value.channel == "speed"
    assert excinfo.value.to_dict() == {
        "error": "parse_error",
        "message": str(excinfo.value),
        "token": "fast",
        "channel": "speed",
    }

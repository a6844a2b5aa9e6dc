"""Tests for SRT timestamp formatting and parsing."""

import math

import pytest

from audiosrt.subtitles.timecode import code_to_seconds, parse_code, seconds_to_code


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0.0, "00:00:00,000"),
        (3661.5, "01:01:01,500"),
        (3.5, "00:00:03,500"),
        (7.2, "00:00:07,200"),
        (59.999, "00:00:59,999"),
        (86399.0, "23:59:59,000"),
    ],
)
def test_seconds_to_code(seconds, expected):
    assert seconds_to_code(seconds) == expected


def test_rounding_carries_into_seconds():
    assert seconds_to_code(1.9996) == "00:00:02,000"
    assert seconds_to_code(3599.9999) == "01:00:00,000"


def test_hours_are_not_wrapped():
    assert seconds_to_code(100 * 3600 + 1.25) == "100:00:01,250"


@pytest.mark.parametrize("bad", [-0.001, math.inf, math.nan])
def test_seconds_to_code_rejects_invalid(bad):
    with pytest.raises(ValueError):
        seconds_to_code(bad)


def test_code_to_seconds():
    assert code_to_seconds(1, 1, 1, 500) == 3661.5
    assert code_to_seconds(0, 0, 0, 0) == 0.0


def test_parse_code():
    assert parse_code("01:02:03,045") == (1, 2, 3, 45)
    assert parse_code("123:00:00,000") == (123, 0, 0, 0)


@pytest.mark.parametrize("bad", ["00:00:00.000", "0:00:00,000", "00:00:00,00", "garbage"])
def test_parse_code_rejects_malformed(bad):
    with pytest.raises(ValueError):
        parse_code(bad)


@pytest.mark.parametrize("x", [0.0, 0.0004, 1.2345, 7.2, 15.3, 3599.9995, 45296.789, 400000.1])
def test_format_then_parse_recovers_value(x):
    assert code_to_seconds(*parse_code(seconds_to_code(x))) == pytest.approx(x, abs=0.001)

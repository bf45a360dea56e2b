"""Unit tests for timestamp helpers."""

import re

import pytest

from dotbatch.utils.timestamp import format_duration, now


@pytest.mark.unit
def test_now_is_filesystem_safe():
    assert re.fullmatch(r"\d{8}_\d{6}", now())


@pytest.mark.unit
@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0.4, "0.40s"),
        (59.999, "60.00s"),
        (75.2, "1m 15s"),
        (3725, "1h 2m"),
    ],
)
def test_format_duration(seconds, expected):
    assert format_duration(seconds) == expected

import base64
import calendar

import pytest

from chordlet.jsonfields import (
    base64_encode,
    bool_not_null,
    int8_not_null,
    int16_not_null,
    int32_not_null,
    int64_not_null,
    snowflake_not_null,
    string_not_null,
    timestamp_not_null,
)


def test_snowflake_from_string():
    assert snowflake_not_null({"id": "189759562910400512"}, "id") == 189759562910400512


def test_snowflake_from_number():
    assert snowflake_not_null({"id": 12345}, "id") == 12345


@pytest.mark.parametrize("data", [{}, {"id": None}, None])
def test_snowflake_missing_is_zero(data):
    assert snowflake_not_null(data, "id") == 0


def test_string_present_and_missing():
    assert string_not_null({"name": "chord"}, "name") == "chord"
    assert string_not_null({"name": None}, "name") == ""
    assert string_not_null({}, "name") == ""


def test_string_wrong_type_raises():
    with pytest.raises(TypeError):
        string_not_null({"name": 5}, "name")


def test_integer_widths_stay_in_range():
    huge = {"v": (1 << 70) + 7}
    assert int8_not_null(huge, "v") < 1 << 8
    assert int16_not_null(huge, "v") < 1 << 16
    assert int32_not_null(huge, "v") < 1 << 32
    assert int64_not_null(huge, "v") < 1 << 64


def test_int8_wraps_at_boundary():
    assert int8_not_null({"v": 255}, "v") == 255
    assert int8_not_null({"v": 256}, "v") == 0


def test_integers_missing_are_zero():
    for getter in (int8_not_null, int16_not_null, int32_not_null, int64_not_null):
        assert getter({"v": None}, "v") == 0
        assert getter({}, "v") == 0


def test_integer_from_string_raises():
    with pytest.raises(TypeError):
        int32_not_null({"v": "12"}, "v")


def test_bool_values():
    assert bool_not_null({"b": True}, "b") is True
    assert bool_not_null({"b": False}, "b") is False
    assert bool_not_null({}, "b") is False
    assert bool_not_null({"b": None}, "b") is False


def test_bool_from_string_raises():
    with pytest.raises(TypeError):
        bool_not_null({"b": "true"}, "b")


def test_timestamp_parses_utc():
    data = {"ts": "2021-05-21T12:34:56.123000+00:00"}
    expected = calendar.timegm((2021, 5, 21, 12, 34, 56, 0, 0, 0))
    assert timestamp_not_null(data, "ts") == expected


def test_timestamp_epoch_and_missing():
    assert timestamp_not_null({"ts": "1970-01-01T00:00:00"}, "ts") == 0
    assert timestamp_not_null({}, "ts") == 0
    assert timestamp_not_null({"ts": "not a date"}, "ts") == 0


@pytest.mark.parametrize("payload", [b"", b"a", b"ab", b"abc", bytes(range(256))])
def test_base64_round_trip(payload):
    encoded = base64_encode(payload)
    assert len(encoded) % 4 == 0
    assert base64.b64decode(encoded) == payload
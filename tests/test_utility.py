import datetime

import pytest

from chordlet.utility import (
    IconHash,
    LogLevel,
    Uptime,
    current_date_time,
    debug_dump,
    exec_command,
    human_bytes,
    loglevel_name,
)


@pytest.mark.parametrize(
    "level, name",
    [
        (LogLevel.TRACE, "TRACE"),
        (LogLevel.DEBUG, "DEBUG"),
        (LogLevel.INFO, "INFO"),
        (LogLevel.WARNING, "WARN"),
        (LogLevel.ERROR, "ERROR"),
        (LogLevel.CRITICAL, "CRIT"),
    ],
)
def test_loglevel_names(level, name):
    assert loglevel_name(level) == name


def test_loglevel_unknown():
    assert loglevel_name(99) == "???"


@pytest.mark.parametrize("seconds", [0, 59, 65, 3600, 86399, 90061, 3 * 86400 + 7])
def test_uptime_round_trip(seconds):
    uptime = Uptime.from_seconds(seconds)
    assert uptime.to_secs() == seconds
    assert uptime.to_msecs() == uptime.to_secs() * 1000
    assert 0 <= uptime.hours < 24 and 0 <= uptime.mins < 60 and 0 <= uptime.secs < 60


def test_uptime_short_form():
    assert Uptime.from_seconds(65).to_string() == "01:05"


def test_uptime_with_one_day():
    assert Uptime(days=1, hours=1, mins=1, secs=1).to_string() == "1 day, 01:01:01"


def test_uptime_plural_days():
    text = Uptime(days=2, hours=0, mins=0, secs=0).to_string()
    assert text.startswith("2 days, ")
    assert text.endswith("00:00:00")


def test_iconhash_round_trip():
    value = "0123456789abcdef" + "fedcba9876543210"
    assert IconHash(value).to_string() == value


def test_iconhash_keeps_leading_zeros():
    value = "0000000000000001" + "0" * 16
    assert IconHash(value).to_string() == value


def test_iconhash_empty_and_cleared():
    icon = IconHash("a" * 32)
    icon.set("")
    assert icon.to_string() == ""
    assert icon == IconHash()


def test_iconhash_wrong_length():
    with pytest.raises(ValueError):
        IconHash("abc")


def test_debug_dump_aligned():
    text = debug_dump(b"\x01\xab", 0)
    assert text.startswith("\n[0000000000000000] : ")
    assert "01 AB " in text
    assert text.endswith("\n")


def test_debug_dump_unaligned_pads():
    text = debug_dump(b"\xff", 3)
    assert text.startswith("[0000000000000000] : " + "-- " * 3)
    assert "FF " in text


def test_human_bytes_small_values_are_plain():
    assert human_bytes(512) == "512"
    assert human_bytes(1024) == "1024"


def test_human_bytes_kilobytes():
    assert human_bytes(2048) == "2.00K"


@pytest.mark.parametrize(
    "count, suffix",
    [(1048576 * 3, "M"), (1073741824 * 3, "G"), (1099511627776 * 3, "T")],
)
def test_human_bytes_units(count, suffix):
    assert human_bytes(count).endswith(suffix)


def test_current_date_time_is_now():
    text = current_date_time()
    parsed = datetime.datetime.strptime(text, "%Y-%m-%d %H:%M:%S")
    assert abs((datetime.datetime.now() - parsed).total_seconds()) < 5


def test_exec_command_passes_output():
    results = []
    thread = exec_command("echo", ["hello world"], results.append)
    thread.join(timeout=10)
    assert results == ["hello world\n"]
    
"""Assorted utilities: log levels, uptime, icon hashes, byte sizes and commands."""

from __future__ import annotations

import enum
import os
import subprocess
import threading
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from chordlet.stringops import from_string

_SECONDS_PER_DAY = 3600 * 24
_ICONHASH_LENGTH = 32
_UNITS = (
    (1099511627776, "T"),
    (1073741824, "G"),
    (1048576, "M"),
    (1024, "K"),
)


class LogLevel(enum.IntEnum):
    """Severity of a log message."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    CRITICAL = 5


_LEVEL_NAMES = {
    LogLevel.TRACE: "TRACE",
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARNING: "WARN",
    LogLevel.ERROR: "ERROR",
    LogLevel.CRITICAL: "CRIT",
}


def has_voice() -> bool:
    """Return whether voice support is available; it is not in this package."""
    return False


def current_date_time() -> str:
    """Return the local date and time as 'YYYY-MM-DD HH:MM:SS'."""
    return time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())


def loglevel_name(level: int) -> str:
    """Return the short display name of a log level, or '???' if unknown."""
    try:
        return _LEVEL_NAMES[LogLevel(level)]
    except ValueError:
        return "???"


@dataclass
class Uptime:
    """A duration broken into days, hours, minutes and seconds."""

    days: int = 0
    hours: int = 0
    mins: int = 0
    secs: int = 0

    @classmethod
    def from_seconds(cls, diff: int) -> Uptime:
        """Split a number of seconds into its parts."""
        diff = int(diff)
        return cls(
            days=(diff // _SECONDS_PER_DAY) & 0xFFFF,
            hours=diff % _SECONDS_PER_DAY // 3600,
            mins=diff % 3600 // 60,
            secs=diff % 60,
        )

    def to_string(self) -> str:
        """Format as 'MM:SS', or '[N day(s), ]HH:MM:SS' once hours or days are set."""
        if self.hours == 0 and self.days == 0:
            return f"{self.mins:02d}:{self.secs:02d}"
        prefix = ""
        if self.days:
            prefix = f"{self.days} day{'s' if self.days > 1 else ''}, "
        return f"{prefix}{self.hours:02d}:{self.mins:02d}:{self.secs:02d}"

    def to_secs(self) -> int:
        """Return the total number of seconds."""
        return self.secs + self.mins * 60 + self.hours * 3600 + self.days * _SECONDS_PER_DAY

    def to_msecs(self) -> int:
        """Return the total number of milliseconds."""
        return self.to_secs() * 1000

    def __str__(self) -> str:
        return self.to_string()


class IconHash:
    """A 128 bit icon hash held as two 64 bit halves."""

    def __init__(self, value: str = "") -> None:
        self.first = 0
        self.second = 0
        self.set(value)

    def set(self, value: str) -> None:
        """Set from a 32 character hex string; an empty string clears it."""
        if not value:
            self.first = self.second = 0
            return
        if len(value) != _ICONHASH_LENGTH:
            raise ValueError("iconhash must be exactly 32 characters in length")
        self.first = from_string(value[:16], 16)
        self.second = from_string(value[16:], 16)

    def to_string(self) -> str:
        """Return the 32 character hex form, or '' if the hash is empty."""
        if self.first == 0 and self.second == 0:
            return ""
        return f"{self.first:016x}{self.second:016x}"

    def __str__(self) -> str:
        return self.to_string()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IconHash):
            return NotImplemented
        return (self.first, self.second) == (other.first, other.second)

    def __repr__(self) -> str:
        return f"IconHash({self.to_string()!r})"


def debug_dump(data: bytes, address: int = 0) -> str:
    """Return a hex dump of data as if it were loaded at the given address."""
    parts: list[str] = []
    extra = address % 16
    if extra:
        parts.append(f"[{address - extra:016X}] : ")
        parts.append("-- " * extra)
    for offset, byte in enumerate(bytes(data)):
        position = address + offset
        if position % 16 == 0:
            parts.append(f"\n[{position:016X}] : ")
        parts.append(f"{byte:02X} ")
    parts.append("\n")
    return "".join(parts)


def human_bytes(count: int) -> str:
    """Return a byte count with a T, G, M or K suffix where it exceeds that unit."""
    for size, suffix in _UNITS:
        if count > size:
            return f"{count / size:.2f}{suffix}"
    return str(count)


def _quoted(parameter: str) -> str:
    escaped = parameter.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def exec_command(
    cmd: str,
    parameters: Iterable[str],
    callback: Callable[[str], None] | None,
) -> threading.Thread | None:
    """Run a shell command in the background and pass its combined output to callback.

    Returns the worker thread, or None where commands are not supported.
    """
    if os.name == "nt":
        return None
    command_line = " ".join([cmd, *(_quoted(p) for p in parameters)]) + " 2>&1"

    def worker() -> None:
        try:
            completed = subprocess.run(
                command_line,
                shell=True,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors="replace",
                check=False,
            )
        except OSError:
            return
        if callback is not None:
            callback(completed.stdout)

    thread = threading.Thread(target=worker, daemon=True)
    thread.start()
    return thread
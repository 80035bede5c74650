"""User presence: online status per client and activities."""

from __future__ import annotations

import enum
import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from chordlet.jsonfields import (
    int8_not_null,
    int64_not_null,
    snowflake_not_null,
    string_not_null,
)

_STATUS_MASK = 0b11
_SHIFT_DESKTOP = 0
_SHIFT_WEB = 2
_SHIFT_MOBILE = 4
_SHIFT_MAIN = 6


class PresenceStatus(enum.IntEnum):
    """Online status."""

    OFFLINE = 0
    ONLINE = 1
    DND = 2
    IDLE = 3


_STATUS_FROM_NAME = {
    "online": PresenceStatus.ONLINE,
    "idle": PresenceStatus.IDLE,
    "dnd": PresenceStatus.DND,
}
_STATUS_NAMES = {
    PresenceStatus.ONLINE: "online",
    PresenceStatus.OFFLINE: "offline",
    PresenceStatus.IDLE: "idle",
    PresenceStatus.DND: "dnd",
}
_CLIENTS = (
    ("desktop", _SHIFT_DESKTOP),
    ("mobile", _SHIFT_MOBILE),
    ("web", _SHIFT_WEB),
)


def _with_status(flags: int, shift: int, status: PresenceStatus) -> int:
    return (flags & ~(_STATUS_MASK << shift)) | (int(status) << shift)


def _dump(obj: Any) -> str:
    return json.dumps(obj, separators=(",", ":"), sort_keys=True, ensure_ascii=False)


@dataclass
class Activity:
    """Something a user is doing, such as playing a game."""

    name: str = ""
    state: str = ""
    type: int = 0
    url: str = ""
    created_at: int = 0
    start: int = 0
    end: int = 0
    application_id: int = 0
    flags: int = 0


@dataclass
class Presence:
    """A user's presence in a guild."""

    guild_id: int = 0
    user_id: int = 0
    flags: int = 0
    activities: list[Activity] = field(default_factory=list)

    @classmethod
    def with_activity(
        cls, status: PresenceStatus, activity_type: int, description: str
    ) -> Presence:
        """Build a presence with a main status and a single activity."""
        presence = cls(activities=[Activity(name=description, type=activity_type)])
        presence.flags = _with_status(0, _SHIFT_MAIN, PresenceStatus(status))
        return presence

    def fill_from_json(self, data: Mapping[str, Any]) -> Presence:
        """Update from a decoded JSON object and return self."""
        self.guild_id = snowflake_not_null(data, "guild_id")
        self.user_id = snowflake_not_null(data.get("user"), "id")
        client_status = data.get("client_status")
        if isinstance(client_status, Mapping):
            for key, shift in _CLIENTS:
                if key in client_status:
                    name = string_not_null(client_status, key)
                    status = _STATUS_FROM_NAME.get(name, PresenceStatus.OFFLINE)
                    self.flags = _with_status(self.flags, shift, status)
        if "status" in data:
            name = string_not_null(data, "status")
            status = _STATUS_FROM_NAME.get(name, PresenceStatus.OFFLINE)
            self.flags = _with_status(self.flags, _SHIFT_MAIN, status)
        if "activities" in data:
            self.activities = [self._activity(a) for a in data["activities"] or ()]
        return self

    @staticmethod
    def _activity(data: Mapping[str, Any]) -> Activity:
        activity = Activity(
            name=string_not_null(data, "name"),
            state=string_not_null(data, "state"),
            type=int8_not_null(data, "type"),
            url=string_not_null(data, "url"),
            created_at=int64_not_null(data, "created_at"),
            application_id=snowflake_not_null(data, "application_id"),
            flags=int8_not_null(data, "flags"),
        )
        if "timestamps" in data:
            timestamps = data["timestamps"]
            activity.start = int64_not_null(timestamps, "start")
            activity.end = int64_not_null(timestamps, "end")
        return activity

    def build_json(self) -> str:
        """Return the gateway presence update payload as JSON."""
        body: dict[str, Any] = {
            "op": 3,
            "d": {"status": _STATUS_NAMES[self.status()], "since": None, "afk": False},
        }
        if self.activities:
            first = self.activities[0]
            body["d"]["game"] = {"name": first.name, "type": int(first.type)}
        return _dump(body)

    def _status_at(self, shift: int) -> PresenceStatus:
        return PresenceStatus((self.flags >> shift) & _STATUS_MASK)

    def desktop_status(self) -> PresenceStatus:
        """Status on the desktop client."""
        return self._status_at(_SHIFT_DESKTOP)

    def web_status(self) -> PresenceStatus:
        """Status on the web client."""
        return self._status_at(_SHIFT_WEB)

    def mobile_status(self) -> PresenceStatus:
        """Status on the mobile client."""
        return self._status_at(_SHIFT_MOBILE)

    def status(self) -> PresenceStatus:
        """Overall status."""
        return self._status_at(_SHIFT_MAIN)
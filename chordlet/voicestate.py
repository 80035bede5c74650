"""Voice state of a user in a guild voice channel."""

from __future__ import annotations

import enum
import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from chordlet.jsonfields import bool_not_null, snowflake_not_null, string_not_null


class VoiceStateFlags(enum.IntFlag):
    """Bits stored in VoiceState.flags."""

    DEAF = 1 << 0
    MUTE = 1 << 1
    SELF_MUTE = 1 << 2
    SELF_DEAF = 1 << 3
    SELF_STREAM = 1 << 4
    SELF_VIDEO = 1 << 5
    SUPPRESS = 1 << 6


_FIELDS = (
    ("deaf", VoiceStateFlags.DEAF),
    ("mute", VoiceStateFlags.MUTE),
    ("self_mute", VoiceStateFlags.SELF_MUTE),
    ("self_deaf", VoiceStateFlags.SELF_DEAF),
    ("self_stream", VoiceStateFlags.SELF_STREAM),
    ("self_video", VoiceStateFlags.SELF_VIDEO),
    ("supress", VoiceStateFlags.SUPPRESS),
)


@dataclass
class VoiceState:
    """Where a user is connected for voice, and their mute and deafen state."""

    shard: Any = None
    guild_id: int = 0
    channel_id: int = 0
    user_id: int = 0
    session_id: str = ""
    flags: int = 0

    def fill_from_json(self, data: Mapping[str, Any]) -> VoiceState:
        """Fill from a decoded JSON object and return self."""
        self.guild_id = snowflake_not_null(data, "guild_id")
        self.channel_id = snowflake_not_null(data, "channel_id")
        self.user_id = snowflake_not_null(data, "user_id")
        self.session_id = string_not_null(data, "session_id")
        flags = VoiceStateFlags(0)
        for key, flag in _FIELDS:
            if bool_not_null(data, key):
                flags |= flag
        self.flags = int(flags)
        return self

    def _has(self, flag: VoiceStateFlags) -> bool:
        return bool(self.flags & flag)

    def is_deaf(self) -> bool:
        """True if deafened by the server."""
        return self._has(VoiceStateFlags.DEAF)

    def is_mute(self) -> bool:
        """True if muted by the server."""
        return self._has(VoiceStateFlags.MUTE)

    def is_self_mute(self) -> bool:
        """True if the user muted themselves."""
        return self._has(VoiceStateFlags.SELF_MUTE)

    def is_self_deaf(self) -> bool:
        """True if the user deafened themselves."""
        return self._has(VoiceStateFlags.SELF_DEAF)

    def self_stream(self) -> bool:
        """True if the user is streaming."""
        return self._has(VoiceStateFlags.SELF_STREAM)

    def self_video(self) -> bool:
        """True if the user's camera is on."""
        return self._has(VoiceStateFlags.SELF_VIDEO)

    def is_suppressed(self) -> bool:
        """True if the user is suppressed."""
        return self._has(VoiceStateFlags.SUPPRESS)

    def build_json(self) -> str:
        """Return the JSON form, which is always an empty object."""
        return json.dumps({})
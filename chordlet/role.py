"""Guild roles."""

from __future__ import annotations

import enum
import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from chordlet.jsonfields import (
    bool_not_null,
    int8_not_null,
    int32_not_null,
    snowflake_not_null,
    string_not_null,
)


class RoleFlags(enum.IntFlag):
    """Bits stored in Role.flags."""

    HOIST = 1 << 0
    MANAGED = 1 << 1
    MENTIONABLE = 1 << 2
    PREMIUM_SUBSCRIBER = 1 << 3


_FIELDS = (
    ("hoist", RoleFlags.HOIST),
    ("managed", RoleFlags.MANAGED),
    ("mentionable", RoleFlags.MENTIONABLE),
)


def _dump(obj: Any) -> str:
    return json.dumps(obj, separators=(",", ":"), sort_keys=True, ensure_ascii=False)


@dataclass
class Role:
    """A role within a guild."""

    id: int = 0
    guild_id: int = 0
    name: str = ""
    colour: int = 0
    position: int = 0
    permissions: int = 0
    flags: int = 0
    integration_id: int = 0
    bot_id: int = 0

    def fill_from_json(self, guild_id: int, data: Mapping[str, Any]) -> Role:
        """Fill from a decoded JSON object for the given guild and return self."""
        self.guild_id = guild_id
        self.name = string_not_null(data, "name")
        self.id = snowflake_not_null(data, "id")
        self.colour = int32_not_null(data, "color")
        self.position = int8_not_null(data, "position")
        self.permissions = snowflake_not_null(data, "permissions")
        for key, flag in _FIELDS:
            if bool_not_null(data, key):
                self.flags |= int(flag)
        if "tags" in data:
            tags = data["tags"]
            if bool_not_null(tags, "premium_subscriber"):
                self.flags |= int(RoleFlags.PREMIUM_SUBSCRIBER)
            self.bot_id = snowflake_not_null(tags, "bot_id")
            self.integration_id = snowflake_not_null(tags, "integration_id")
        return self

    def build_json(self, with_id: bool = False) -> str:
        """Return this role as compact JSON; colour is left out when zero."""
        body: dict[str, Any] = {
            "position": self.position,
            "permissions": self.permissions,
            "hoist": self.is_hoisted(),
            "mentionable": self.is_mentionable(),
        }
        if with_id:
            body["id"] = str(self.id)
        if self.colour:
            body["color"] = self.colour
        return _dump(body)

    def is_hoisted(self) -> bool:
        """True if the role is shown separately in the member list."""
        return bool(self.flags & RoleFlags.HOIST)

    def is_mentionable(self) -> bool:
        """True if the role can be mentioned."""
        return bool(self.flags & RoleFlags.MENTIONABLE)

    def is_managed(self) -> bool:
        """True if the role is managed by an integration."""
        return bool(self.flags & RoleFlags.MANAGED)

    def is_premium_subscriber(self) -> bool:
        """True if this is the guild's booster role."""
        return bool(self.flags & RoleFlags.PREMIUM_SUBSCRIBER)
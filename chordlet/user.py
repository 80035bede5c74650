"""Users and their flag bits."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from chordlet.jsonfields import (
    bool_not_null,
    int32_not_null,
    snowflake_not_null,
    string_not_null,
)
from chordlet.utility import IconHash

_CDN_AVATARS = "https://cdn.discordapp.com/avatars"
_ANIMATED_PREFIX = "a_"


class UserFlags(enum.IntFlag):
    """Bits stored in User.flags."""

    BOT = 1 << 0
    SYSTEM = 1 << 1
    MFA_ENABLED = 1 << 2
    VERIFIED = 1 << 3
    NITRO_FULL = 1 << 4
    NITRO_CLASSIC = 1 << 5
    DISCORD_EMPLOYEE = 1 << 6
    PARTNERED_OWNER = 1 << 7
    HYPESQUAD_EVENTS = 1 << 8
    BUGHUNTER_1 = 1 << 9
    HOUSE_BRAVERY = 1 << 10
    HOUSE_BRILLIANCE = 1 << 11
    HOUSE_BALANCE = 1 << 12
    EARLY_SUPPORTER = 1 << 13
    TEAM_USER = 1 << 14
    BUGHUNTER_2 = 1 << 15
    VERIFIED_BOT = 1 << 16
    VERIFIED_BOT_DEV = 1 << 17
    ANIMATED_ICON = 1 << 18


# Public flag bits as sent by the API, mapped onto our own bit layout.
_PUBLIC_FLAGS = {
    1 << 0: UserFlags.DISCORD_EMPLOYEE,
    1 << 1: UserFlags.PARTNERED_OWNER,
    1 << 2: UserFlags.HYPESQUAD_EVENTS,
    1 << 3: UserFlags.BUGHUNTER_1,
    1 << 6: UserFlags.HOUSE_BRAVERY,
    1 << 7: UserFlags.HOUSE_BRILLIANCE,
    1 << 8: UserFlags.HOUSE_BALANCE,
    1 << 9: UserFlags.EARLY_SUPPORTER,
    1 << 10: UserFlags.TEAM_USER,
    1 << 14: UserFlags.BUGHUNTER_2,
    1 << 16: UserFlags.VERIFIED_BOT,
    1 << 17: UserFlags.VERIFIED_BOT_DEV,
}

_BOOLEAN_FIELDS = (
    ("bot", UserFlags.BOT),
    ("system", UserFlags.SYSTEM),
    ("mfa_enabled", UserFlags.MFA_ENABLED),
    ("verified", UserFlags.VERIFIED),
)


@dataclass
class User:
    """A user, who may or may not be a member of a guild."""

    id: int = 0
    username: str = ""
    discriminator: int = 0
    avatar: IconHash = field(default_factory=IconHash)
    flags: int = 0
    refcount: int = 1

    def fill_from_json(self, data: Mapping[str, Any]) -> User:
        """Fill this user from a decoded JSON object and return self."""
        self.id = snowflake_not_null(data, "id")
        self.username = string_not_null(data, "username")
        avatar = string_not_null(data, "avatar")
        if len(avatar) > 2 and avatar.startswith(_ANIMATED_PREFIX):
            avatar = avatar[len(_ANIMATED_PREFIX):]
            self.flags |= UserFlags.ANIMATED_ICON
        self.avatar = IconHash(avatar)
        self.discriminator = snowflake_not_null(data, "discriminator") & 0xFFFF
        for key, flag in _BOOLEAN_FIELDS:
            if bool_not_null(data, key):
                self.flags |= flag
        # premium_type is read as a boolean, so any non-zero value means classic
        if bool_not_null(data, "premium_type"):
            self.flags |= UserFlags.NITRO_CLASSIC
        public_flags = int32_not_null(data, "flags")
        for bit, flag in _PUBLIC_FLAGS.items():
            if public_flags & bit:
                self.flags |= flag
        self.flags = int(self.flags)
        return self

    def get_avatar_url(self) -> str:
        """Return the CDN URL of this user's avatar."""
        animated = self.has_animated_icon()
        prefix = _ANIMATED_PREFIX if animated else ""
        extension = "gif" if animated else "png"
        return f"{_CDN_AVATARS}/{self.id}/{prefix}{self.avatar.to_string()}.{extension}"

    def _has(self, flag: UserFlags) -> bool:
        return bool(self.flags & flag)

    def is_bot(self) -> bool:
        """True if the user is a bot."""
        return self._has(UserFlags.BOT)

    def is_system(self) -> bool:
        """True if the user is a system user."""
        return self._has(UserFlags.SYSTEM)

    def is_mfa_enabled(self) -> bool:
        """True if multi-factor authentication is enabled."""
        return self._has(UserFlags.MFA_ENABLED)

    def is_verified(self) -> bool:
        """True if the account is verified."""
        return self._has(UserFlags.VERIFIED)

    def has_nitro_full(self) -> bool:
        """True if the user has full nitro."""
        return self._has(UserFlags.NITRO_FULL)

    def has_nitro_classic(self) -> bool:
        """True if the user has nitro classic."""
        return self._has(UserFlags.NITRO_CLASSIC)

    def is_discord_employee(self) -> bool:
        """True if the user is staff."""
        return self._has(UserFlags.DISCORD_EMPLOYEE)

    def is_partnered_owner(self) -> bool:
        """True if the user owns a partnered server."""
        return self._has(UserFlags.PARTNERED_OWNER)

    def has_hypesquad_events(self) -> bool:
        """True if the user is in hypesquad events."""
        return self._has(UserFlags.HYPESQUAD_EVENTS)

    def is_bughunter_1(self) -> bool:
        """True if the user has the level 1 bug hunter badge."""
        return self._has(UserFlags.BUGHUNTER_1)

    def is_house_bravery(self) -> bool:
        """True if the user is in house bravery."""
        return self._has(UserFlags.HOUSE_BRAVERY)

    def is_house_brilliance(self) -> bool:
        """True if the user is in house brilliance."""
        return self._has(UserFlags.HOUSE_BRILLIANCE)

    def is_house_balance(self) -> bool:
        """True if the user is in house balance."""
        return self._has(UserFlags.HOUSE_BALANCE)

    def is_early_supporter(self) -> bool:
        """True if the user is an early supporter."""
        return self._has(UserFlags.EARLY_SUPPORTER)

    def is_team_user(self) -> bool:
        """True if the user is a team user."""
        return self._has(UserFlags.TEAM_USER)

    def is_bughunter_2(self) -> bool:
        """True if the user has the level 2 bug hunter badge."""
        return self._has(UserFlags.BUGHUNTER_2)

    def is_verified_bot(self) -> bool:
        """True if the user is a verified bot."""
        return self._has(UserFlags.VERIFIED_BOT)

    def is_verified_bot_dev(self) -> bool:
        """True if the user is an early verified bot developer."""
        return self._has(UserFlags.VERIFIED_BOT_DEV)

    def has_animated_icon(self) -> bool:
        """True if the avatar is animated."""
        return self._has(UserFlags.ANIMATED_ICON)
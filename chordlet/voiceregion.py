"""Voice regions."""

from __future__ import annotations

import enum
import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from chordlet.jsonfields import bool_not_null, string_not_null


class VoiceRegionFlags(enum.IntFlag):
    """Bits stored in VoiceRegion.flags."""

    OPTIMAL = 1 << 0
    DEPRECATED = 1 << 1
    CUSTOM = 1 << 2
    VIP = 1 << 3


_FIELDS = (
    ("optimal", VoiceRegionFlags.OPTIMAL),
    ("deprecated", VoiceRegionFlags.DEPRECATED),
    ("custom", VoiceRegionFlags.CUSTOM),
    ("vip", VoiceRegionFlags.VIP),
)


def _dump(obj: Any) -> str:
    return json.dumps(obj, separators=(",", ":"), sort_keys=True, ensure_ascii=False)


@dataclass
class VoiceRegion:
    """A voice server region."""

    id: str = ""
    name: str = ""
    flags: int = 0

    def fill_from_json(self, data: Mapping[str, Any]) -> VoiceRegion:
        """Fill from a decoded JSON object and return self; the name is the id."""
        self.id = string_not_null(data, "id")
        self.name = string_not_null(data, "id")
        for key, flag in _FIELDS:
            if bool_not_null(data, key):
                self.flags |= int(flag)
        return self

    def build_json(self) -> str:
        """Return this region as compact JSON with sorted keys."""
        return _dump(
            {
                "id": self.id,
                "name": self.name,
                "optimal": self.is_optimal(),
                "deprecated": self.is_deprecated(),
                "custom": self.is_custom(),
                "vip": self.is_vip(),
            }
        )

    def is_optimal(self) -> bool:
        """True if the region is closest to the client."""
        return bool(self.flags & VoiceRegionFlags.OPTIMAL)

    def is_deprecated(self) -> bool:
        """True if the region is deprecated."""
        return bool(self.flags & VoiceRegionFlags.DEPRECATED)

    def is_custom(self) -> bool:
        """True if the region is a custom one."""
        return bool(self.flags & VoiceRegionFlags.CUSTOM)

    def is_vip(self) -> bool:
        """True if the region is for VIP servers."""
        return bool(self.flags & VoiceRegionFlags.VIP)
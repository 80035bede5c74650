"""Webhooks."""

from __future__ import annotations

import enum
import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from chordlet.jsonfields import (
    base64_encode,
    int8_not_null,
    snowflake_not_null,
    string_not_null,
)

MAX_IMAGE_SIZE = 256 * 1024
INCOMING_WEBHOOK = 1


class ImageType(enum.Enum):
    """Image formats accepted for webhook avatars."""

    GIF = "image/gif"
    JPG = "image/jpeg"
    PNG = "image/png"


def _dump(obj: Any) -> str:
    return json.dumps(obj, separators=(",", ":"), sort_keys=True, ensure_ascii=False)


@dataclass
class Webhook:
    """A webhook bound to a channel."""

    id: int = 0
    type: int = INCOMING_WEBHOOK
    guild_id: int = 0
    channel_id: int = 0
    user_id: int = 0
    name: str = ""
    avatar: str = ""
    token: str = ""
    application_id: int = 0
    image_data: str | None = None

    def fill_from_json(self, data: Mapping[str, Any]) -> Webhook:
        """Fill from a decoded JSON object and return self."""
        self.id = snowflake_not_null(data, "id")
        self.type = int8_not_null(data, "type")
        self.channel_id = snowflake_not_null(data, "channel_id")
        self.guild_id = snowflake_not_null(data, "guild_id")
        if "user" in data:
            self.user_id = snowflake_not_null(data["user"], "id")
        self.name = string_not_null(data, "name")
        self.avatar = string_not_null(data, "name")
        self.token = string_not_null(data, "token")
        self.application_id = snowflake_not_null(data, "application_id")
        return self

    def build_json(self, with_id: bool = False) -> str:
        """Return this webhook as compact JSON, leaving out unset ids."""
        body: dict[str, Any] = {"name": self.name, "type": self.type}
        if with_id:
            body["id"] = str(self.id)
        if self.channel_id:
            body["channel_id"] = self.channel_id
        if self.guild_id:
            body["guild_id"] = self.guild_id
        if self.image_data is not None:
            body["avatar"] = self.image_data
        if self.application_id:
            body["application_id"] = self.application_id
        return _dump(body)

    def load_image(self, image_blob: bytes, image_type: ImageType) -> Webhook:
        """Set the avatar image as a data URI; raise ValueError if it is too large."""
        if len(image_blob) > MAX_IMAGE_SIZE:
            raise ValueError("Webhook icon file exceeds discord limit of 256 kilobytes")
        self.image_data = f"data:{image_type.value};base64,{base64_encode(image_blob)}"
        return self
"""Messages, their embeds, reactions, attachments and button components."""

from __future__ import annotations

import enum
import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, TypeVar

from chordlet.jsonfields import (
    bool_not_null,
    int8_not_null,
    int32_not_null,
    snowflake_not_null,
    string_not_null,
    timestamp_not_null,
)
from chordlet.stringops import from_string
from chordlet.user import User

_E = TypeVar("_E", bound=enum.IntEnum)
_EMBED_MEDIA = ("image", "video", "thumbnail")


class ComponentType(enum.IntEnum):
    """Kinds of message component."""

    ACTION_ROW = 1
    BUTTON = 2


class ComponentStyle(enum.IntEnum):
    """Display styles of a button."""

    PRIMARY = 1
    SECONDARY = 2
    SUCCESS = 3
    DANGER = 4
    LINK = 5


def _dump(obj: Any) -> str:
    return json.dumps(obj, separators=(",", ":"), sort_keys=True, ensure_ascii=False)


def _as_enum(cls: type[_E], value: int) -> _E | int:
    try:
        return cls(value)
    except ValueError:
        return value


def _text(data: Mapping[str, Any] | None, key: str) -> str:
    """Read a field as text, accepting numbers as well as strings."""
    value = None if data is None else data.get(key)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return string_not_null(data, key)


@dataclass
class Component:
    """An action row holding buttons, or a single button."""

    type: int = ComponentType.ACTION_ROW
    label: str = ""
    style: int = ComponentStyle.PRIMARY
    custom_id: str = ""
    disabled: bool = False
    components: list[Component] = field(default_factory=list)

    def fill_from_json(self, data: Mapping[str, Any]) -> Component:
        """Fill from a decoded JSON object and return self."""
        self.type = _as_enum(ComponentType, int8_not_null(data, "type"))
        if self.type == ComponentType.ACTION_ROW:
            self.components.extend(
                Component().fill_from_json(sub) for sub in data.get("components") or ()
            )
        elif self.type == ComponentType.BUTTON:
            self.label = string_not_null(data, "label")
            self.style = _as_enum(ComponentStyle, int8_not_null(data, "style"))
            self.custom_id = string_not_null(data, "custom_id")
            self.disabled = bool_not_null(data, "disabled")
        return self

    def add_component(self, component: Component) -> Component:
        """Add a child component, making this an action row."""
        self.set_type(ComponentType.ACTION_ROW)
        self.components.append(component)
        return self

    def set_type(self, component_type: int) -> Component:
        """Set the component type."""
        self.type = component_type
        return self

    def set_label(self, label: str) -> Component:
        """Set the button label, making this a button."""
        self.set_type(ComponentType.BUTTON)
        self.label = label
        return self

    def set_style(self, style: int) -> Component:
        """Set the button style, making this a button."""
        self.set_type(ComponentType.BUTTON)
        self.style = style
        return self

    def set_id(self, custom_id: str) -> Component:
        """Set the custom id sent back when the button is clicked."""
        self.custom_id = custom_id
        return self

    def set_disabled(self, disabled: bool) -> Component:
        """Enable or disable the button, making this a button."""
        self.set_type(ComponentType.BUTTON)
        self.disabled = disabled
        return self

    def build_json(self) -> str:
        """Return this component as JSON; children of a row are nested JSON strings."""
        if self.type == ComponentType.ACTION_ROW:
            nested = [child.build_json() for child in self.components]
            body: dict[str, Any] = {"type": 1, "components": nested or None}
        else:
            body = {
                "type": 2,
                "label": self.label,
                "style": int(self.style),
                "custom_id": self.custom_id,
                "disabled": self.disabled,
            }
        return _dump(body)


@dataclass
class EmbedFooter:
    """Footer of an embed."""

    text: str = ""
    icon_url: str = ""
    proxy_url: str = ""


@dataclass
class EmbedImage:
    """An image, video or thumbnail of an embed."""

    url: str = ""
    proxy_url: str = ""
    height: str = ""
    width: str = ""


@dataclass
class EmbedProvider:
    """Provider of an embed."""

    name: str = ""
    url: str = ""


@dataclass
class EmbedAuthor:
    """Author of an embed."""

    name: str = ""
    url: str = ""
    icon_url: str = ""
    proxy_icon_url: str = ""


@dataclass
class EmbedField:
    """A name and value pair shown in an embed."""

    name: str = ""
    value: str = ""
    is_inline: bool = False


@dataclass
class Embed:
    """Rich content attached to a message."""

    title: str = ""
    type: str = ""
    description: str = ""
    url: str = ""
    timestamp: int = 0
    color: int = 0
    footer: EmbedFooter | None = None
    image: EmbedImage | None = None
    video: EmbedImage | None = None
    thumbnail: EmbedImage | None = None
    provider: EmbedProvider | None = None
    author: EmbedAuthor | None = None
    fields: list[EmbedField] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Embed:
        """Build an embed from a decoded JSON object."""
        embed = cls(
            title=string_not_null(data, "title"),
            type=string_not_null(data, "type"),
            description=string_not_null(data, "description"),
            url=string_not_null(data, "url"),
            timestamp=timestamp_not_null(data, "timestamp"),
            color=int32_not_null(data, "color"),
        )
        if "footer" in data:
            footer = data["footer"]
            embed.footer = EmbedFooter(
                text=string_not_null(footer, "text"),
                icon_url=string_not_null(footer, "icon_url"),
                proxy_url=string_not_null(footer, "proxy_url"),
            )
        for kind in _EMBED_MEDIA:
            if kind in data:
                media = data[kind]
                setattr(
                    embed,
                    kind,
                    EmbedImage(
                        url=string_not_null(media, "url"),
                        proxy_url=string_not_null(media, "proxy_url"),
                        height=_text(media, "height"),
                        width=_text(media, "width"),
                    ),
                )
        if "provider" in data:
            provider = data["provider"]
            embed.provider = EmbedProvider(
                name=string_not_null(provider, "name"),
                url=string_not_null(provider, "url"),
            )
        if "author" in data:
            author = data["author"]
            embed.author = EmbedAuthor(
                name=string_not_null(author, "name"),
                url=string_not_null(author, "url"),
                icon_url=string_not_null(author, "icon_url"),
                proxy_icon_url=string_not_null(author, "proxy_icon_url"),
            )
        embed.fields.extend(
            EmbedField(
                name=string_not_null(item, "name"),
                value=string_not_null(item, "value"),
                is_inline=bool_not_null(item, "inline"),
            )
            for item in data.get("fields") or ()
        )
        return embed

    def add_field(self, name: str, value: str, is_inline: bool = False) -> Embed:
        """Append a field."""
        self.fields.append(EmbedField(name, value, is_inline))
        return self

    def set_author(self, name: str, url: str = "", icon_url: str = "") -> Embed:
        """Set the author block."""
        self.author = EmbedAuthor(name=name, url=url, icon_url=icon_url)
        return self

    def set_provider(self, name: str, url: str = "") -> Embed:
        """Set the provider block."""
        self.provider = EmbedProvider(name=name, url=url)
        return self

    def set_image(self, url: str) -> Embed:
        """Set the image URL."""
        self.image = EmbedImage(url=url)
        return self

    def set_video(self, url: str) -> Embed:
        """Set the video URL."""
        self.video = EmbedImage(url=url)
        return self

    def set_thumbnail(self, url: str) -> Embed:
        """Set the thumbnail URL."""
        self.thumbnail = EmbedImage(url=url)
        return self

    def set_title(self, text: str) -> Embed:
        """Set the title."""
        self.title = text
        return self

    def set_description(self, text: str) -> Embed:
        """Set the description."""
        self.description = text
        return self

    def set_color(self, color: int) -> Embed:
        """Set the colour as a 24 bit RGB value."""
        self.color = color
        return self

    def set_url(self, url: str) -> Embed:
        """Set the URL the title links to."""
        self.url = url
        return self

    def _to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"color": self.color}
        if self.description:
            body["description"] = self.description
        if self.title:
            body["title"] = self.title
        if self.url:
            body["url"] = self.url
        if self.footer is not None:
            body["footer"] = {"text": self.footer.text, "icon_url": self.footer.icon_url}
        if self.image is not None:
            body["image"] = {"url": self.image.url}
        if self.thumbnail is not None:
            body["thumbnail"] = {"url": self.thumbnail.url}
        if self.author is not None:
            body["author"] = {
                "name": self.author.name,
                "url": self.author.url,
                "icon_url": self.author.icon_url,
            }
        if self.fields:
            body["fields"] = [
                {"name": f.name, "value": f.value, "inline": f.is_inline}
                for f in self.fields
            ]
        return body


@dataclass
class Reaction:
    """A reaction count for one emoji on a message."""

    count: int = 0
    me: bool = False
    emoji_id: int = 0
    emoji_name: str = ""

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Reaction:
        """Build a reaction; count, me and emoji are required."""
        emoji = data["emoji"]
        return cls(
            count=int(data["count"]),
            me=bool(data["me"]),
            emoji_id=snowflake_not_null(emoji, "id"),
            emoji_name=string_not_null(emoji, "name"),
        )


@dataclass
class Attachment:
    """A file attached to a message."""

    id: int = 0
    size: int = 0
    filename: str = ""
    url: str = ""
    proxy_url: str = ""
    width: int = 0
    height: int = 0
    content_type: str = ""

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Attachment:
        """Build an attachment; size, filename, url and proxy_url are required."""
        return cls(
            id=snowflake_not_null(data, "id"),
            size=int(data["size"]),
            filename=str(data["filename"]),
            url=str(data["url"]),
            proxy_url=str(data["proxy_url"]),
            width=int32_not_null(data, "width"),
            height=int32_not_null(data, "height"),
            content_type=string_not_null(data, "content_type"),
        )


@dataclass
class Message:
    """A message in a channel."""

    channel_id: int = 0
    content: str = ""
    type: int = 0
    id: int = 0
    guild_id: int = 0
    author: User | None = None
    sent: int = 0
    edited: int = 0
    flags: int = 0
    tts: bool = False
    mention_everyone: bool = False
    pinned: bool = False
    webhook_id: int = 0
    nonce: str = ""
    mentions: list[int] = field(default_factory=list)
    mention_roles: list[int] = field(default_factory=list)
    mention_channels: list[int] = field(default_factory=list)
    embeds: list[Embed] = field(default_factory=list)
    reactions: list[Reaction] = field(default_factory=list)
    attachments: list[Attachment] = field(default_factory=list)
    components: list[Component] = field(default_factory=list)

    def fill_from_json(self, data: Mapping[str, Any]) -> Message:
        """Fill from a decoded JSON object and return self; lists are appended."""
        self.id = snowflake_not_null(data, "id")
        self.channel_id = snowflake_not_null(data, "channel_id")
        self.guild_id = snowflake_not_null(data, "guild_id")
        self.flags = int8_not_null(data, "flags")
        self.type = int8_not_null(data, "type")
        self.author = None
        if "author" in data:
            self.author = User().fill_from_json(data["author"])
        self.mentions.extend(
            snowflake_not_null(m, "id") for m in data.get("mentions") or ()
        )
        self.mention_roles.extend(
            from_string(r, 10) for r in data.get("mention_roles") or ()
        )
        self.mention_channels.extend(
            snowflake_not_null(c, "id") for c in data.get("mention_channels") or ()
        )
        self.embeds.extend(Embed.from_json(e) for e in data.get("embeds") or ())
        self.content = string_not_null(data, "content")
        self.sent = timestamp_not_null(data, "timestamp")
        self.edited = timestamp_not_null(data, "edited_timestamp")
        self.tts = bool_not_null(data, "tts")
        self.mention_everyone = bool_not_null(data, "mention_everyone")
        self.reactions.extend(Reaction.from_json(r) for r in data.get("reactions") or ())
        if isinstance(data.get("nonce"), str):
            self.nonce = string_not_null(data, "nonce")
        else:
            self.nonce = str(snowflake_not_null(data, "nonce"))
        self.pinned = bool_not_null(data, "pinned")
        self.webhook_id = snowflake_not_null(data, "webhook_id")
        self.attachments.extend(
            Attachment.from_json(a) for a in data.get("attachments") or ()
        )
        return self

    def add_component(self, component: Component) -> Message:
        """Append a top level component (an action row)."""
        self.components.append(component)
        return self

    def add_embed(self, embed: Embed) -> Message:
        """Append an embed."""
        self.embeds.append(embed)
        return self

    def build_json(self, with_id: bool = False) -> str:
        """Return this message as JSON; only the first embed is sent."""
        body: dict[str, Any] = {
            "content": self.content,
            "channel_id": self.channel_id,
            "tts": self.tts,
            "nonce": self.nonce,
            "flags": self.flags,
            "type": int(self.type),
        }
        if with_id:
            body["id"] = str(self.id)
        if self.components:
            body["components"] = [
                {
                    "type": 1,
                    "components": [
                        {
                            "type": 2,
                            "label": sub.label,
                            "style": int(sub.style),
                            "custom_id": sub.custom_id,
                            "disabled": sub.disabled,
                        }
                        for sub in row.components
                    ]
                    or None,
                }
                for row in self.components
            ]
        if self.embeds:
            body["embed"] = self.embeds[0]._to_dict()
        return _dump(body)
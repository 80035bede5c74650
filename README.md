# chordlet

Building blocks for writing Discord bots in plain Python, with no third-party
dependencies.

## What is inside

- **Object models** for things the Discord API sends and receives:
  - `chordlet.user.User` with its `UserFlags`, avatar URL and badge checks
    (`is_bot()`, `is_verified()`, `has_animated_icon()` and the rest).
  - `chordlet.role.Role` with `RoleFlags` (`is_hoisted()`,
    `is_mentionable()`, `is_managed()`, `is_premium_subscriber()`).
  - `chordlet.message.Message`, with `Embed` (and its `EmbedFooter`,
    `EmbedImage`, `EmbedProvider`, `EmbedAuthor`, `EmbedField` parts),
    `Component` (action rows and buttons, `ComponentType`,
    `ComponentStyle`), `Reaction` and `Attachment`.
  - `chordlet.presence.Presence` and `Activity`, tracking a main status and
    separate desktop, web and mobile statuses as `PresenceStatus` values.
  - `chordlet.voicestate.VoiceState`, `chordlet.voiceregion.VoiceRegion`,
    `chordlet.webhook.Webhook` and `chordlet.prune.Prune`.

  Each model is filled from a decoded JSON object with `fill_from_json`
  (returning the object itself), and most can be turned back into a compact
  JSON string with `build_json`.
- **Lenient field readers** in `chordlet.jsonfields`: `snowflake_not_null`,
  `string_not_null`, `int64_not_null`, `int32_not_null`, `int16_not_null`,
  `int8_not_null`, `bool_not_null` and `timestamp_not_null` return a zero
  value when a key is missing or null; `base64_encode` encodes bytes.
- **String helpers** in `chordlet.stringops`: ASCII `lowercase` and
  `uppercase`, `ltrim`, `rtrim`, `trim`, locale-aware `comma`, and
  `from_string` for leading integers in base 8, 10 or 16.
- **Utilities** in `chordlet.utility`: `LogLevel` and `loglevel_name`,
  `Uptime`, `IconHash`, `human_bytes`, `debug_dump`, `current_date_time`,
  and `exec_command`, which runs a shell command on a background thread and
  hands its combined output to a callback.

## A taste

```python
from chordlet.message import Embed
from chordlet.user import User
from chordlet.utility import Uptime, human_bytes

user = User()
user.fill_from_json({"id": "1234", "username": "someone", "bot": True})
assert user.is_bot()

embed = Embed().set_title("Status").set_description("All systems go")
embed.add_field("Uptime", Uptime.from_seconds(90061).to_string(), True)
# the field value is "1 day, 01:01:01"

human_bytes(2048)   # "2.00K"
```

A button on a message is built by nesting components: an action row holds
buttons, and the message holds the rows.

```python
from chordlet.message import Component, ComponentStyle, Message

button = (
    Component()
    .set_label("Click me!")
    .set_style(ComponentStyle.DANGER)
    .set_id("myid")
)
message = Message(channel_id=1234, content="this text has buttons")
message.add_component(Component().add_component(button))
payload = message.build_json(False)
```

A webhook avatar is loaded as a data URI; images over 256 KiB raise
`ValueError`:

```python
from chordlet.webhook import ImageType, Webhook

hook = Webhook(name="alerts").load_image(png_bytes, ImageType.PNG)
payload = hook.build_json(False)
```

## What this package does not do

chordlet only models and (de)serialises API objects. It does not connect to
the Discord gateway, does not send or rate-limit HTTP requests, and has no
slash-command or interaction types; pair it with your own networking code to
run a bot.
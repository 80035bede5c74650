"""Discord bot building blocks: API object models, JSON field readers and string utilities."""

__version__ = "0.1.0"

__all__ = [
    "jsonfields",
    "message",
    "presence",
    "prune",
    "role",
    "stringops",
    "user",
    "utility",
    "voiceregion",
    "voicestate",
    "webhook",
]
"""Rich console handler that prints projected paths compactly.

Where: platform/logging/handlers.py
What: Render ``source_path``/``target_path`` log extras relative to their roots.
Why: Engine trees are deep; absolute paths drown the useful suffix.
"""

from __future__ import annotations

import logging
from pathlib import PurePath
from typing import Final

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.text import Text

_MAX_PATH_LENGTH: Final[int] = 72
_ELLIPSIS: Final[str] = "…"


def _separator(path: str) -> str:
    return "\\" if "\\" in path and "/" not in path else "/"


def shorten_path(path: object, base: object | None = None) -> str:
    """Return ``path`` relative to ``base`` when nested, else a truncated form."""

    text = str(path)
    if base is not None:
        base_text = str(base).rstrip("/\\")
        sep = _separator(text)
        if base_text and text.startswith(base_text + sep):
            return text[len(base_text) + 1 :]

    if len(text) <= _MAX_PATH_LENGTH:
        return text

    sep = _separator(text)
    parts = PurePath(text).parts if sep == "/" else text.split(sep)
    kept: list[str] = []
    length = 1
    for part in reversed(parts):
        if length + len(part) + 1 > _MAX_PATH_LENGTH and kept:
            break
        kept.insert(0, part)
        length += len(part) + 1
    return _ELLIPSIS + sep + sep.join(kept)


class PathRichHandler(RichHandler):
    """RichHandler that appends ``src → dest`` details carried on the record."""

    def __init__(self, *args: object, **kwargs: object) -> None:
        kwargs.setdefault("show_path", False)
        kwargs.setdefault("markup", False)
        super().__init__(*args, **kwargs)  # pyright: ignore[reportArgumentType]

    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        rendered = super().render_message(record, message)
        text = rendered if isinstance(rendered, Text) else Text(str(message))

        source = getattr(record, "source_path", None)
        target = getattr(record, "target_path", None)
        if source is None and target is None:
            return text

        details: list[str] = []
        if source is not None:
            details.append(shorten_path(source, getattr(record, "source_base_path", None)))
        if target is not None:
            details.append(shorten_path(target, getattr(record, "target_base_path", None)))

        if text.plain:
            _ = text.append(" ")
        _ = text.append(" → ".join(details), style="white")
        return text


__all__ = ["PathRichHandler", "shorten_path"]

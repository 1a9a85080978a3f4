"""Tests for the ``PathRichHandler`` path formatting utilities."""

from __future__ import annotations

import logging
from io import StringIO
from typing import Any

from rich.console import Console
from rich.text import Text

from brandfork.platform.logging import PathRichHandler
from brandfork.platform.logging.handlers import shorten_path


def _make_handler() -> PathRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return PathRichHandler(console=console)


def _build_record(**extras: Any) -> logging.LogRecord:
    record = logging.LogRecord(
        name="brandfork",
        level=logging.DEBUG,
        pathname="test",
        lineno=0,
        msg="",
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_render_message_relativizes_paths_to_base_directories() -> None:
    """Overlay source and engine target render relative to their roots."""

    handler = _make_handler()
    record = _build_record(
        processing_event="overlay.entry.link",
        source_path="/work/fork/src/browser/base/content/zen.js",
        source_base_path="/work/fork/src",
        target_path="/work/fork/engine/browser/base/content/zen.js",
        target_base_path="/work/fork/engine",
    )

    rendered = handler.render_message(record, "Linked overlay file")

    assert isinstance(rendered, Text)
    assert rendered.plain == (
        "Linked overlay file browser/base/content/zen.js → browser/base/content/zen.js"
    )


def test_render_message_without_paths_is_unchanged() -> None:
    handler = _make_handler()

    rendered = handler.render_message(_build_record(), "plain message")

    assert isinstance(rendered, Text)
    assert rendered.plain == "plain message"


def test_shorten_path_truncates_long_absolute_paths() -> None:
    long_path = "/home/dev/forks/acme/engine/" + "/".join(f"segment{i:02d}" for i in range(12)) + "/file.css"

    shortened = shorten_path(long_path)

    assert shortened.startswith("…/")
    assert shortened.endswith("segment11/file.css")
    assert len(shortened) <= 80


def test_shorten_path_ignores_base_that_is_only_a_prefix() -> None:
    assert shorten_path("/work/fork/src-extra/a.js", "/work/fork/src") == "/work/fork/src-extra/a.js"

"""Tests for the ``RcargoRichHandler`` rendering."""

from __future__ import annotations

import logging
from io import StringIO
from typing import Any

from rich.console import Console
from rich.text import Text

from rcargo.platform.logging import RcargoRichHandler


def _make_handler() -> RcargoRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return RcargoRichHandler(console=console)


def _build_record(level: int = logging.INFO, **extras: Any) -> logging.LogRecord:
    record = logging.LogRecord(
        name="rcargo",
        level=level,
        pathname="test",
        lineno=0,
        msg="",
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_event_records_render_icon_and_compact_path() -> None:
    handler = _make_handler()
    record = _build_record(
        event="link.created",
        path="/home/dev/projects/rust/workspace/crates/demo/target",
    )

    rendered = handler.render_message(record, "Target symlink created")

    assert isinstance(rendered, Text)
    plain = rendered.plain
    assert plain.startswith("🔗 Target symlink created")
    assert plain.endswith("/…/workspace/crates/demo/target")


def test_short_paths_are_not_truncated() -> None:
    handler = _make_handler()
    record = _build_record(event="link.skipped", path="/srv/demo/target")

    rendered = handler.render_message(record, "skipped")

    assert isinstance(rendered, Text)
    assert rendered.plain.endswith("@ /srv/demo/target")


def test_warnings_without_event_get_prefix() -> None:
    handler = _make_handler()
    record = _build_record(level=logging.WARNING)

    rendered = handler.render_message(record, "Failed to get cargo version")

    assert isinstance(rendered, Text)
    assert rendered.plain == "Warning: Failed to get cargo version"


def test_errors_get_error_prefix() -> None:
    handler = _make_handler()
    record = _build_record(level=logging.ERROR)

    rendered = handler.render_message(record, "boom")

    assert isinstance(rendered, Text)
    assert rendered.plain == "Error: boom"

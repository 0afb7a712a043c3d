"""Rich console handler for rcargo diagnostics.

Where: platform/logging/handlers.py
What: Render event-tagged log records with icons and compact, styled paths.
Why: Make link and redirect notices stand out from cargo's own output.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class RcargoRichHandler(RichHandler):
    """Rich handler that decorates ``event`` records and level-prefixes the rest."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "link.created": ("🔗", "green"),
        "link.updated": ("🔁", "green"),
        "link.unchanged": ("✅", "green"),
        "link.skipped": ("↪️", "yellow"),
        "link.failed": ("⚠️", "yellow"),
        "cargo.version.failed": ("⚠️", "yellow"),
    }
    _LEVEL_PREFIXES: ClassVar[dict[int, tuple[str, str]]] = {
        logging.WARNING: ("Warning: ", "yellow"),
        logging.ERROR: ("Error: ", "red"),
        logging.CRITICAL: ("Error: ", "bold red"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def _format_path(self, raw_path: str) -> Text:
        """Render ``raw_path`` keeping only its trailing segments."""

        pure_path = self._to_pure_path(raw_path)
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        parts = [part for part in pure_path.parts if part != pure_path.anchor]

        display = pure_path.anchor
        if len(parts) > self._PATH_SEGMENT_LIMIT:
            parts = parts[-self._PATH_SEGMENT_LIMIT :]
            display = pure_path.anchor + "…" + separator
        display += separator.join(parts)

        text = Text()
        for char in display or ".":
            color = "magenta" if char in {separator, "…"} else "white"
            _ = text.append(char, style=Style(color=color))
        return text

    def _render_event(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render records carrying an ``event`` extra."""

        event = getattr(record, "event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        _ = text.append(message, style=Style(color=color))

        path = getattr(record, "path", None)
        if path:
            _ = text.append(" @ ")
            _ = text.append_text(self._format_path(str(path)))
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with event styling or a level prefix."""

        event_text = self._render_event(record, message)
        if event_text is not None:
            return event_text

        prefix = self._LEVEL_PREFIXES.get(record.levelno)
        if prefix is None:
            return super().render_message(record, message)

        label, color = prefix
        text = Text()
        _ = text.append(label, style=Style(color=color, bold=True))
        _ = text.append(message)
        return text


__all__ = ["RcargoRichHandler"]

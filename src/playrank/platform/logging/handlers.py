"""Rich console handler for structured ingestion events.

Where: platform/logging/handlers.py
What: Render ``ingestion.*`` log records with icons, colours and compact paths.
Why: Keep per-file progress readable when many workers log concurrently.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class IngestionRichHandler(RichHandler):
    """Rich handler that renders ingestion events and keeps paths short."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "ingestion.directory.start": ("🚀", "cyan"),
        "ingestion.directory.complete": ("✅", "green"),
        "ingestion.directory.error": ("❌", "red"),
        "ingestion.directory.no_files": ("ℹ️", "yellow"),
        "ingestion.file.success": ("🎧", "blue"),
        "ingestion.file.error": ("⛔", "red"),
        "ingestion.accumulator.poisoned": ("☠️", "red"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 3

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = True
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str, base: str | None = None) -> Text:
        """Format a path relative to ``base`` with the leading segments elided.

        Args:
            path: Absolute or relative path string to format.
            base: Optional base path used to relativize ``path`` when possible.

        Returns:
            Text: Styled path with magenta separators.
        """
        pure_path = self._to_pure_path(path)
        base_path = self._to_pure_path(base) if base else None

        display_path: PurePath = pure_path
        if base_path is not None and self._is_relative_to(pure_path, base_path):
            relative_path = pure_path.relative_to(base_path)
            if str(relative_path) not in {"", "."}:
                display_path = relative_path

        separator = "\\" if isinstance(display_path, PureWindowsPath) else "/"
        anchor = display_path.anchor
        body_parts = [part for part in display_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]
            display_string = "…" + separator + separator.join(body_parts)
        elif anchor:
            display_string = anchor.rstrip("\\/") + separator + separator.join(body_parts)
        else:
            display_string = separator.join(body_parts) or "."

        text = Text()
        for char in display_string:
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _is_relative_to(path: PurePath, other: PurePath) -> bool:
        try:
            _ = path.relative_to(other)
            return True
        except ValueError:
            return False

    def _render_directory_body(self, event: str, record: logging.LogRecord) -> Text:
        body = Text()
        if event == "ingestion.directory.start":
            _ = body.append("Ingestion start")
            details: list[str] = []
            total_files = getattr(record, "total_files", None)
            concurrency = getattr(record, "concurrency", None)
            if isinstance(total_files, int):
                details.append(f"files={total_files}")
            if isinstance(concurrency, int):
                details.append(f"jobs={concurrency}")
            if details:
                _ = body.append(" [" + ", ".join(details) + "]")
        elif event == "ingestion.directory.complete":
            _ = body.append("Ingestion complete")
            metrics: list[str] = []
            for name in ("succeeded", "failed", "accumulated", "retained"):
                value = getattr(record, name, None)
                if isinstance(value, int):
                    metrics.append(f"{name}={value}")
            duration = getattr(record, "duration_seconds", None)
            if isinstance(duration, (int, float)):
                metrics.append(f"duration={duration:.2f}s")
            if metrics:
                _ = body.append(" [" + ", ".join(metrics) + "]")
        elif event == "ingestion.directory.no_files":
            _ = body.append("No eligible files")
        else:
            _ = body.append("Ingestion error")
            error = getattr(record, "error_message", None)
            if error:
                _ = body.append(f" ({error})")

        directory = getattr(record, "directory", None)
        if directory:
            _ = body.append(" @ ")
            _ = body.append_text(self._format_path(str(directory)))
        return body

    def _render_file_body(self, event: str, record: logging.LogRecord) -> Text:
        body = Text()
        sequence = getattr(record, "sequence", None)
        total_files = getattr(record, "total_files", None)
        if isinstance(sequence, int) and isinstance(total_files, int) and total_files > 0:
            _ = body.append(f"[{sequence + 1}/{total_files}] ")

        prefix = {
            "ingestion.file.success": "Parsed ",
            "ingestion.file.error": "Failed ",
            "ingestion.accumulator.poisoned": "Accumulator unavailable for ",
        }.get(event, "")
        _ = body.append(prefix)

        source_path = getattr(record, "source_path", None)
        if source_path:
            _ = body.append_text(
                self._format_path(
                    str(source_path),
                    base=getattr(record, "source_base_path", None),
                )
            )

        if event == "ingestion.file.success":
            record_count = getattr(record, "record_count", None)
            if isinstance(record_count, int):
                _ = body.append(f" ({record_count} records)")
        else:
            error_message = getattr(record, "error_message", None)
            if error_message:
                _ = body.append(f" ({error_message})")
        return body

    def _render_ingestion_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured ingestion events with dedicated styling."""

        event = getattr(record, "ingestion_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        if event.startswith("ingestion.directory"):
            body = self._render_directory_body(event, record)
        else:
            body = self._render_file_body(event, record)
        body.style = Style(color=color)
        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        ingestion_text = self._render_ingestion_message(record)
        if ingestion_text is not None:
            return ingestion_text
        return super().render_message(record, message)


__all__ = ["IngestionRichHandler"]

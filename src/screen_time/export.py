"""CSV export and plain-text listing of the usage log."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from .errors import EmptyLogError, ExportError
from .formatting import format_duration, format_timestamp
from .usage_log import UsageLog

logger = logging.getLogger(__name__)

CSV_HEADER = "Start Time, End Time, Duration"


def to_csv(log: UsageLog) -> str:
    """Render the log as CSV text, one line per entry after the header."""
    if log.is_empty():
        raise EmptyLogError("No usage data to export.")
    lines = [CSV_HEADER]
    for entry in log.entries():
        lines.append(
            f"{format_timestamp(entry.start)}, {format_timestamp(entry.end)}, "
            f"{format_duration(entry.duration)}"
        )
    return "\n".join(lines) + "\n"


def write_csv(log: UsageLog, path: Path) -> Path:
    """Write the CSV export to ``path`` in a single replace step."""
    content = to_csv(log)
    target = Path(path)
    temp_path: str | None = None
    try:
        temp_fd, temp_path = tempfile.mkstemp(
            suffix=".tmp", prefix="usage_", dir=target.parent
        )
        with os.fdopen(temp_fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(content)
        os.replace(temp_path, target)
    except OSError as exc:
        if temp_path is not None and os.path.exists(temp_path):
            os.unlink(temp_path)
        raise ExportError() from exc
    logger.debug("Wrote %d entries to %s", len(log), target)
    return target


def render_log(log: UsageLog) -> str:
    """Return the human-readable listing shown by the View command."""
    if log.is_empty():
        raise EmptyLogError("No usage data to view.")
    lines = ["Usage Log:"]
    for entry in log.entries():
        lines.append(
            f"Start: {format_timestamp(entry.start)}, "
            f"End: {format_timestamp(entry.end)}, "
            f"Duration: {format_duration(entry.duration)}"
        )
    return "\n".join(lines)

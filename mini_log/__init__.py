"""mini-log: a lightweight in-memory log collector.

Append logs, warnings, errors and markers to a ``Collector``, then call
``flush()`` once: logs go to stdout, warnings and then errors go to stderr,
and the process exits with status 101 if any error was recorded.
"""

from mini_log.collector import (
    ABORT_EXIT_CODE,
    Collector,
    add_error,
    add_log,
    add_marker,
    add_warning,
    flush,
    parse_logger,
)
from mini_log.models import (
    DEFAULT_MARKER_ID,
    DEFAULT_MARKER_MESSAGE,
    Entry,
    EntryKind,
)

__all__ = [
    "ABORT_EXIT_CODE",
    "Collector",
    "DEFAULT_MARKER_ID",
    "DEFAULT_MARKER_MESSAGE",
    "Entry",
    "EntryKind",
    "add_error",
    "add_log",
    "add_marker",
    "add_warning",
    "flush",
    "parse_logger",
]

"""Entry model: frozen dataclass tagged with one of four kinds."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Marker fields used when the caller leaves them out
DEFAULT_MARKER_MESSAGE = ""
DEFAULT_MARKER_ID = 0

# Sample payloads for demos and tests
TEST_LOG = "Testing Log"
TEST_LOG_ID = 1
TEST_WARN = "Testing Warning"
TEST_WARN_ID = 2
TEST_ERROR = "Testing Error"
TEST_ERROR_ID = 3


class EntryKind(Enum):
    LOG = "log"
    WARNING = "warning"
    ERROR = "error"
    MARKER = "marker"

    @property
    def tag(self) -> str:
        """Upper-case label used in printed output, e.g. ``WARNING``."""
        return self.name


@dataclass(frozen=True)
class Entry:
    message: str
    id: int
    kind: EntryKind


def make_marker(message: str | None = None, id: int | None = None) -> Entry:
    """Build a marker entry, filling absent fields with the marker defaults."""
    return Entry(
        message=message if message is not None else DEFAULT_MARKER_MESSAGE,
        id=id if id is not None else DEFAULT_MARKER_ID,
        kind=EntryKind.MARKER,
    )

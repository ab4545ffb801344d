"""In-memory collector: append entries, then flush logs, warnings and errors in order.

The collector holds no lock. Callers sharing one across threads guard it with
their own ``threading.Lock`` and pass ``clone()`` snapshots between threads.
"""

from __future__ import annotations

import logging
import os
import sys
from collections import Counter
from typing import Iterator, NoReturn

from mini_log.models import Entry, EntryKind, make_marker

logger = logging.getLogger(__name__)

# Exit status of an aborted flush
ABORT_EXIT_CODE = 101

LOG_FORMAT = "[LOG]: Info: {message}; Info ID: {id}"
WARNING_FORMAT = "[WARNING]: Warning: {message}; Warning ID: {id}"
ERROR_FORMAT = "[ERROR]: Error: {message}; Error ID: {id}"
FINAL_ERROR_FORMAT = "[ERROR]: Final Error: Error: {message}; Error ID: {id}"


class Collector:
    def __init__(self):
        self._entries: list[Entry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __copy__(self) -> Collector:
        return self.clone()

    def __repr__(self) -> str:
        return f"Collector(entries={len(self._entries)})"

    @property
    def entries(self) -> tuple[Entry, ...]:
        """Point-in-time snapshot of the recorded entries, in insertion order."""
        return tuple(self._entries)

    def counts(self) -> dict[EntryKind, int]:
        """Return the number of entries per kind (every kind present, zero if unused)."""
        tally = Counter(entry.kind for entry in self._entries)
        return {kind: tally.get(kind, 0) for kind in EntryKind}

    def clone(self) -> Collector:
        """Return an independent collector holding the same entries."""
        copy = Collector()
        copy._entries = list(self._entries)
        return copy

    def add_log(self, message: str, id: int):
        self._entries.append(Entry(message=message, id=id, kind=EntryKind.LOG))

    def add_warning(self, message: str, id: int):
        self._entries.append(Entry(message=message, id=id, kind=EntryKind.WARNING))

    def add_error(self, message: str, id: int):
        """Record an unrecoverable error. ``flush()`` aborts the process once it has printed it."""
        self._entries.append(Entry(message=message, id=id, kind=EntryKind.ERROR))

    def add_marker(self, message: str | None = None, id: int | None = None):
        """Record a positional marker. Markers are never printed."""
        self._entries.append(make_marker(message, id))

    def flush(self):
        """Print every log to stdout, then every warning and every error to stderr.

        Each phase is a separate pass over the entries in insertion order.
        If any error was recorded, the last one is reported as the final
        error and the process exits with ``ABORT_EXIT_CODE``. The entries
        are left in place, so a second flush reports them again.
        """
        logger.debug("Flushing %d entries", len(self._entries))

        for entry in self._of_kind(EntryKind.LOG):
            print(LOG_FORMAT.format(message=entry.message, id=entry.id), file=sys.stdout)

        for entry in self._of_kind(EntryKind.WARNING):
            print(WARNING_FORMAT.format(message=entry.message, id=entry.id), file=sys.stderr)

        last_error = None
        for entry in self._of_kind(EntryKind.ERROR):
            print(ERROR_FORMAT.format(message=entry.message, id=entry.id), file=sys.stderr)
            last_error = entry

        if last_error is not None:
            _abort(last_error)

    parse_logger = flush

    def _of_kind(self, kind: EntryKind) -> Iterator[Entry]:
        return (entry for entry in self._entries if entry.kind is kind)


def _abort(entry: Entry) -> NoReturn:
    """Report the final error and terminate the process without unwinding."""
    print(FINAL_ERROR_FORMAT.format(message=entry.message, id=entry.id), file=sys.stderr)
    sys.stdout.flush()
    sys.stderr.flush()
    os._exit(ABORT_EXIT_CODE)


# Explicit-receiver call shape: the collector is passed last.

def add_log(message: str, id: int, collector: Collector):
    collector.add_log(message, id)


def add_warning(message: str, id: int, collector: Collector):
    collector.add_warning(message, id)


def add_error(message: str, id: int, collector: Collector):
    collector.add_error(message, id)


def add_marker(message: str | None, id: int | None, collector: Collector):
    collector.add_marker(message, id)


def flush(collector: Collector):
    collector.flush()


parse_logger = flush

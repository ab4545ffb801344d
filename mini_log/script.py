"""Session scripts: load a YAML list of entries and replay it into a Collector."""

from __future__ import annotations

import logging

import yaml

from mini_log.collector import Collector
from mini_log.models import EntryKind

logger = logging.getLogger(__name__)


class ScriptError(Exception):
    """Raised when a session script cannot be read or contains an invalid entry."""


def load_script(path: str) -> list[dict]:
    """Read a session script and return its raw entry items.

    The file holds either a top-level list of items or a mapping with an
    ``entries`` list. An empty file is an empty session.

    Raises:
        ScriptError: If the file is missing or unreadable, is not UTF-8 or
            valid YAML, or does not hold a list of entries.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise ScriptError(f"Script file not found: {path}") from None
    except OSError as exc:
        raise ScriptError(f"Cannot read script {path}: {exc.strerror or exc}") from exc
    except UnicodeDecodeError as exc:
        raise ScriptError(f"Script {path} is not valid UTF-8: {exc.reason}") from exc
    except yaml.YAMLError as exc:
        raise ScriptError(f"Invalid YAML in {path}: {exc}") from exc

    if data is None:
        data = []
    if isinstance(data, dict):
        if "entries" not in data:
            raise ScriptError(f"Missing 'entries' list in {path}")
        data = data["entries"]
    if not isinstance(data, list):
        raise ScriptError(
            f"Expected a list of entries in {path}, got {type(data).__name__}"
        )

    logger.debug("Loaded %d items from %s", len(data), path)
    return data


def _check_item(index: int, item) -> tuple[EntryKind, str | None, int | None]:
    if not isinstance(item, dict):
        raise ScriptError(f"Entry {index}: expected a mapping, got {type(item).__name__}")

    raw_kind = item.get("kind")
    try:
        kind = EntryKind(str(raw_kind).lower())
    except ValueError:
        valid = ", ".join(k.value for k in EntryKind)
        raise ScriptError(f"Entry {index}: 'kind' must be one of {valid}, got '{raw_kind}'") from None

    message = item.get("message")
    id = item.get("id")

    if kind is not EntryKind.MARKER:
        for field in ("message", "id"):
            if item.get(field) is None:
                raise ScriptError(f"Entry {index}: missing required field '{field}'")

    if message is not None and not isinstance(message, str):
        raise ScriptError(
            f"Entry {index}: 'message' must be a string, got {type(message).__name__}"
        )
    # bool is an int subclass; reject it explicitly
    if id is not None and (isinstance(id, bool) or not isinstance(id, int)):
        raise ScriptError(f"Entry {index}: 'id' must be an integer, got {type(id).__name__}")

    return kind, message, id


def build_collector(items: list, collector: Collector | None = None) -> Collector:
    """Append every item to ``collector`` (a new one when omitted) in script order.

    All items are validated before the first append, so a bad script leaves
    the collector untouched.
    """
    checked = [_check_item(i, item) for i, item in enumerate(items)]

    if collector is None:
        collector = Collector()

    for kind, message, id in checked:
        if kind is EntryKind.LOG:
            collector.add_log(message, id)
        elif kind is EntryKind.WARNING:
            collector.add_warning(message, id)
        elif kind is EntryKind.ERROR:
            collector.add_error(message, id)
        else:
            collector.add_marker(message, id)

    logger.debug("Replayed %d entries", len(checked))
    return collector

"""Shared pytest fixtures for the mini-log test suite."""

from __future__ import annotations

import os

import pytest

from mini_log.collector import Collector


@pytest.fixture()
def collector() -> Collector:
    """Return an empty collector."""
    return Collector()


@pytest.fixture()
def exit_calls(monkeypatch) -> list[int]:
    """Replace os._exit with a recorder that raises SystemExit.

    The returned list collects every exit status requested.
    """
    calls: list[int] = []

    def fake_exit(code: int):
        calls.append(code)
        raise SystemExit(code)

    monkeypatch.setattr(os, "_exit", fake_exit)
    return calls

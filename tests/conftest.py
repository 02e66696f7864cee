"""Global pytest fixtures and hooks for civiltime."""

from __future__ import annotations

from pathlib import Path

import pytest

from civiltime.domain.calendar import date
from civiltime.domain.instant import Instant
from civiltime.domain.time_of_day import time

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()

# Top-level test folder -> mark applied to everything collected inside it
FOLDER_MARKS = {
    "unit": pytest.mark.unit,
    "functional": pytest.mark.functional,
    "e2e": pytest.mark.e2e,
}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark each item after its top-level folder unless already marked."""
    for item in items:
        try:
            folder = item.path.resolve().relative_to(TESTS_ROOT).parts[0]
        except ValueError:
            continue
        if (mark := FOLDER_MARKS.get(folder)) is None:
            continue
        if item.get_closest_marker(mark.name) is None:
            item.add_marker(mark)


@pytest.fixture
def reference_instant() -> Instant:
    """1983-09-23T12:00:21.023Z, a Friday, 0-based day 265 of its year."""
    return Instant(date(1983, 9, 23), time(12, 0, 21, 23_000_000), 0)


@pytest.fixture(autouse=True)
def _no_default_offset(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's CIVILTIME_DEFAULT_OFFSET out of every test."""
    monkeypatch.delenv("CIVILTIME_DEFAULT_OFFSET", raising=False)

"""Shared pytest fixtures and test helpers for clubctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from clubctl.domain.factory import MembershipFactory
from clubctl.domain.pricing import DefaultPriceStrategy
from clubctl.services.club import Club
from clubctl.services.membership import ClubService
from clubctl.services.observers import Observer


class RecordingObserver(Observer):
    """Observer that records every message it receives."""

    def __init__(self, tag: str = "", log: list[tuple[str, str]] | None = None) -> None:
        self.tag = tag
        self.messages: list[str] = []
        self._log = log

    def update(self, message: str) -> None:
        self.messages.append(message)
        if self._log is not None:
            self._log.append((self.tag, message))


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def club() -> Club:
    return Club()


@pytest.fixture
def factory() -> MembershipFactory:
    return MembershipFactory()


@pytest.fixture
def service(club: Club, factory: MembershipFactory) -> ClubService:
    return ClubService(club, factory, DefaultPriceStrategy())


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory with no clubctl env overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on CLI test classes.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CLUBCTL_CONFIG", raising=False)
    monkeypatch.delenv("CLUBCTL_PRICING__STRATEGY", raising=False)
    monkeypatch.delenv("CLUBCTL_PRICING__DISCOUNT_PERCENT", raising=False)


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Generator[None]:
    """Undo handlers installed by ``configure_logging`` during CLI tests."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)

"""Observers — parties that receive broadcast notifications from the club."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from clubctl.domain.people import Client


class Observer(ABC):
    """Receives text notifications."""

    @abstractmethod
    def update(self, message: str) -> None:
        """Handle a broadcast *message*."""


class ClientObserver(Observer):
    """Writes notifications addressed to one client to stdout.

    Holds a non-owning reference to the client for display only.
    *echo* defaults to :func:`click.echo` and may be replaced in tests.
    """

    def __init__(self, client: Client, *, echo: Callable[[str], None] = click.echo) -> None:
        self._client = client
        self._echo = echo

    @property
    def client(self) -> Client:
        return self._client

    def update(self, message: str) -> None:
        self._echo(f"Notification for {self._client.get_name()}: {message}")

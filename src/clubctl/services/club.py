"""Club — the registry of clients and observers.

Constructed explicitly and passed by reference; there is no process-wide
instance. Both sequences are append-only and preserve insertion order.

INVARIANT: every ``add_client`` broadcasts ``NEW_CLIENT_MESSAGE`` to all
registered observers, in registration order, regardless of which client
was added.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from clubctl.domain.people import Client
    from clubctl.services.observers import Observer

logger = logging.getLogger(__name__)

NEW_CLIENT_MESSAGE = "New client added"


class Club:
    """Holds all clients and observers and mediates notification broadcast.

    Appends and the observer snapshot taken for a broadcast are serialized
    with a lock so the registry is safe to share across threads.
    """

    def __init__(self, name: str = "Fitness Club") -> None:
        self.name = name
        self._clients: list[Client] = []
        self._observers: list[Observer] = []
        self._lock = threading.Lock()

    @property
    def clients(self) -> tuple[Client, ...]:
        with self._lock:
            return tuple(self._clients)

    @property
    def observers(self) -> tuple[Observer, ...]:
        with self._lock:
            return tuple(self._observers)

    def register_observer(self, observer: Observer) -> None:
        """Append *observer*. Duplicates are kept; there is no removal."""
        with self._lock:
            self._observers.append(observer)
        logger.debug("Registered observer %s", type(observer).__name__)

    def add_client(self, client: Client) -> int:
        """Append *client* and notify every observer.

        Returns the number of observers notified.
        """
        with self._lock:
            self._clients.append(client)
            observers = tuple(self._observers)
        logger.debug("Added client %s; notifying %d observer(s)", client.get_name(), len(observers))
        self._notify_observers(observers, NEW_CLIENT_MESSAGE)
        return len(observers)

    def find_client(self, name: str) -> Client | None:
        """Return the first client registered under *name*, or None."""
        for client in self.clients:
            if client.get_name() == name:
                return client
        return None

    @staticmethod
    def _notify_observers(observers: tuple[Observer, ...], message: str) -> None:
        for observer in observers:
            observer.update(message)

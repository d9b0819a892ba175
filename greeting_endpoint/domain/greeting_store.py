"""
In-memory greeting collection.
"""

import logging
import threading
from typing import Iterable

from greeting_endpoint.domain.greeting import Greeting

logger = logging.getLogger(__name__)


class GreetingStore:
    """
    Insertion ordered set of greetings, deduplicated by name.

    Every read and insert holds the same lock. Greetings are copied on the way in and on the way out, so the stored
    records can only change through ``add``.
    """

    def __init__(self, greetings: Iterable[Greeting] = ()) -> None:
        self._lock = threading.Lock()
        self._greetings: dict[str | None, Greeting] = {}
        for greeting in greetings:
            self.add(greeting)

    def add(self, greeting: Greeting) -> bool:
        """
        Store a greeting unless one with the same name is already present.

        :param greeting: greeting to store
        :type greeting: Greeting

        :return: True if the greeting was added, False if its name was already taken
        :rtype: bool
        """
        with self._lock:
            if greeting.name in self._greetings:
                logger.debug('Greeting %r already stored, ignoring', greeting.name)
                return False
            self._greetings[greeting.name] = greeting.model_copy()
            return True

    def snapshot(self) -> list[Greeting]:
        """Copies of all stored greetings, in insertion order."""
        with self._lock:
            return [greeting.model_copy() for greeting in self._greetings.values()]

    def __len__(self) -> int:
        with self._lock:
            return len(self._greetings)

    def __contains__(self, greeting: object) -> bool:
        if not isinstance(greeting, Greeting):
            return False
        with self._lock:
            return greeting.name in self._greetings

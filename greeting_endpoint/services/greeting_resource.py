"""
The greeting resource: lists the stored greetings and greets submitted ones.
"""

import logging
from typing import Iterable, Protocol

from greeting_endpoint import CONFIG
from greeting_endpoint.domain.greeting import Greeting
from greeting_endpoint.domain.greeting_store import GreetingStore

logger = logging.getLogger(__name__)


class GreetingTransformer(Protocol):
    def greeting(self, name: str | None) -> str:
        ...


class GreetingResource:
    """
    Owns the greeting collection and delegates name transformation to ``service``.

    The collection is seeded once, at construction, and is never changed by ``hello``.
    """

    def __init__(self, service: GreetingTransformer, seed_names: Iterable[str] | None = None) -> None:
        self.service = service
        if seed_names is None:
            seed_names = CONFIG.main.seed_names
        self._greetings = GreetingStore()
        for name in seed_names:
            self.add(Greeting(name=name))
        logger.info('Greeting resource ready with %d greetings', len(self._greetings))

    def add(self, greeting: Greeting) -> bool:
        """Store a greeting unless its name is already present; seeding goes through here."""
        return self._greetings.add(greeting)

    def list(self) -> list[Greeting]:
        return self._greetings.snapshot()

    def hello(self, greeting: Greeting) -> Greeting:
        """
        Replace the greeting's name with the service's transformation of it.

        :param greeting: greeting received from the caller, modified in place
        :type greeting: Greeting

        :return: the same greeting instance
        :rtype: Greeting
        """
        greeting.name = self.service.greeting(greeting.name)
        return greeting

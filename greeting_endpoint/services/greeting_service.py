"""
Greeting transformation service.
"""

import logging

from greeting_endpoint import CONFIG

logger = logging.getLogger(__name__)


class GreetingService:
    """Turns a name into a greeting by prefixing it, e.g. ``World`` -> ``Hello World``."""

    def __init__(self, prefix: str | None = None) -> None:
        self.prefix = CONFIG.main.greeting_prefix if prefix is None else prefix

    def greeting(self, name: str | None) -> str:
        """
        Get personalized greeting

        :param name: name to greet, passed through unchecked
        :type name: str | None

        :return: personalized greeting
        :rtype: str
        """
        logger.debug('Personalizing greeting for %s...', name)

        return f'{self.prefix}{name}'

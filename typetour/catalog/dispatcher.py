#!/usr/bin/env python3
"""
Demonstration interface and the dispatcher that runs them by topic name.
"""

from abc import ABC, abstractmethod
from typing import Dict, Mapping, Tuple

from ..errors import UnknownTopic
from ..logging import get_logger

log = get_logger(__name__)


class Demonstration(ABC):
    """A runnable example attached to a topic"""

    @abstractmethod
    def run(self) -> None:
        """Produce the demonstration's output. Takes no input, returns nothing."""
        pass


class ExampleDispatcher:
    """Looks up the demonstration for a topic and runs it synchronously"""

    def __init__(self, demonstrations: Mapping[str, Demonstration]):
        self._demonstrations: Dict[str, Demonstration] = dict(demonstrations)

    def has(self, topic_id: str) -> bool:
        return topic_id in self._demonstrations

    def topics(self) -> Tuple[str, ...]:
        """Topic identifiers that have a demonstration"""
        return tuple(self._demonstrations)

    def invoke(self, topic_id: str) -> None:
        """
        Run the demonstration for topic_id.

        Raises:
            UnknownTopic: nothing is registered under topic_id
        """
        demonstration = self._demonstrations.get(topic_id)
        if demonstration is None:
            raise UnknownTopic(topic_id)

        log.debug("demonstration_started", topic=topic_id)
        demonstration.run()

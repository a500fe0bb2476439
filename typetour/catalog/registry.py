#!/usr/bin/env python3
"""
Static catalog of categories and topics.

The registry only knows names and order. The Catalog pairs it with an
ExampleDispatcher and refuses to exist unless every topic can be run.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Tuple, Union

from ..errors import CatalogError, UnknownCategory
from .dispatcher import ExampleDispatcher


@dataclass(frozen=True)
class Topic:
    """A single lesson; position is 1-based within its category"""
    id: str
    category: str
    position: int


@dataclass(frozen=True)
class Category:
    """An ordered group of topic identifiers"""
    key: str
    title: str
    topics: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Normalize to a tuple
        object.__setattr__(self, 'topics', tuple(self.topics))


class TopicRegistry:
    """Read-only lookup over categories in declared order"""

    def __init__(self, categories: Iterable[Category]):
        self._categories: Tuple[Category, ...] = tuple(categories)
        self._by_key: Dict[str, Category] = {}
        self._topics: Dict[str, Topic] = {}

        if not self._categories:
            raise CatalogError("Catalog has no categories")

        for category in self._categories:
            if category.key in self._by_key:
                raise CatalogError(f"Duplicate category: {category.key}")
            if not category.topics:
                raise CatalogError(f"Category '{category.key}' has no topics")
            self._by_key[category.key] = category

            for position, topic_id in enumerate(category.topics, 1):
                if topic_id in self._topics:
                    raise CatalogError(
                        f"Topic '{topic_id}' is listed in both "
                        f"'{self._topics[topic_id].category}' and '{category.key}'"
                    )
                self._topics[topic_id] = Topic(topic_id, category.key, position)

    def categories(self) -> Tuple[Category, ...]:
        return self._categories

    def category(self, key: str) -> Category:
        """Get a category by key"""
        try:
            return self._by_key[key]
        except KeyError:
            raise UnknownCategory(key) from None

    def category_at(self, number: int) -> Category:
        """Get a category by its 1-based menu number"""
        if 1 <= number <= len(self._categories):
            return self._categories[number - 1]
        raise UnknownCategory(str(number))

    def topics(self, category: Union[str, Category]) -> Tuple[str, ...]:
        """Topic identifiers of a category, in order"""
        key = category.key if isinstance(category, Category) else category
        return self.category(key).topics

    def topic(self, topic_id: str) -> Topic:
        return self._topics[topic_id]

    def all_topics_in_declared_order(self) -> Tuple[str, ...]:
        """Every topic, category by category. This is the tutorial order."""
        return tuple(
            topic_id
            for category in self._categories
            for topic_id in category.topics
        )

    def __len__(self) -> int:
        return len(self._topics)

    def __contains__(self, topic_id: object) -> bool:
        return topic_id in self._topics


@dataclass(frozen=True)
class Catalog:
    """Registry plus the demonstrations behind it, checked once at startup"""
    registry: TopicRegistry
    dispatcher: ExampleDispatcher

    def __post_init__(self):
        missing = [
            topic_id
            for topic_id in self.registry.all_topics_in_declared_order()
            if not self.dispatcher.has(topic_id)
        ]
        if missing:
            raise CatalogError(f"No demonstration registered for: {', '.join(missing)}")

"""Topic catalog: categories, topics and the demonstrations behind them."""

from .dispatcher import Demonstration, ExampleDispatcher
from .registry import Catalog, Category, Topic, TopicRegistry

__all__ = [
    "Catalog",
    "Category",
    "Demonstration",
    "ExampleDispatcher",
    "Topic",
    "TopicRegistry",
]

#!/usr/bin/env python3
"""
Lesson content and the default catalog.

Categories are declared in tutorial order: interfaces first, then enums.
"""

from typing import Dict, Tuple, Type

from ..catalog import Catalog, Category, ExampleDispatcher, TopicRegistry
from ..ui import Renderer
from .base import Lesson
from . import enums, interfaces

# (key, title, lesson classes) in declared order
CATEGORIES: Tuple[Tuple[str, str, Tuple[Type[Lesson], ...]], ...] = (
    ('interfaces', 'Interfaces', interfaces.LESSONS),
    ('enums', 'Enums', enums.LESSONS),
)


def build_registry() -> TopicRegistry:
    """Categories and topic names only, no demonstrations"""
    return TopicRegistry(
        Category(key, title, tuple(lesson.topic for lesson in lessons))
        for key, title, lessons in CATEGORIES
    )


def build_catalog(renderer: Renderer) -> Catalog:
    """The full catalog with every lesson wired to the given renderer"""
    demonstrations: Dict[str, Lesson] = {
        lesson.topic: lesson(renderer)
        for _, _, lessons in CATEGORIES
        for lesson in lessons
    }
    return Catalog(build_registry(), ExampleDispatcher(demonstrations))


__all__ = ['CATEGORIES', 'Lesson', 'build_catalog', 'build_registry']

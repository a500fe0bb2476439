#!/usr/bin/env python3
"""
Shared fixtures: a scripted input reader, a recording console and a small
catalog (interfaces -> A, B; enums -> C).
"""

import io
import logging
from typing import Iterable, List, Union

import pytest
from rich.console import Console

from typetour.catalog import Catalog, Category, Demonstration, ExampleDispatcher, TopicRegistry
from typetour.navigation import NavigationController
from typetour.ui import InputReader, Renderer


class ScriptedReader(InputReader):
    """Feeds tokens from a list; raises EOFError when they run out.

    An exception instance in the script is raised instead of returned.
    Acknowledgements are counted and never consume tokens; the ones whose
    1-based number is in interrupted_acknowledgements raise KeyboardInterrupt.
    """

    def __init__(
        self,
        tokens: Iterable[Union[str, BaseException]] = (),
        interrupted_acknowledgements: Iterable[int] = (),
    ):
        self.tokens: List[Union[str, BaseException]] = list(tokens)
        self.prompts: List[str] = []
        self.acknowledgements = 0
        self.interrupted_acknowledgements = set(interrupted_acknowledgements)

    def read(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.tokens:
            raise EOFError
        token = self.tokens.pop(0)
        if isinstance(token, BaseException):
            raise token
        return token.strip()

    def acknowledge(self) -> None:
        self.acknowledgements += 1
        if self.acknowledgements in self.interrupted_acknowledgements:
            raise KeyboardInterrupt


class RecordingDemonstration(Demonstration):
    """Appends its topic to a shared list when run"""

    def __init__(self, topic: str, calls: List[str]):
        self.topic = topic
        self.calls = calls

    def run(self) -> None:
        self.calls.append(self.topic)


def make_catalog(layout, calls: List[str]) -> Catalog:
    """Build a catalog from [(key, [topics]), ...] with recording demonstrations"""
    categories = [Category(key, key.title(), topics) for key, topics in layout]
    demonstrations = {
        topic: RecordingDemonstration(topic, calls)
        for _, topics in layout
        for topic in topics
    }
    return Catalog(TopicRegistry(categories), ExampleDispatcher(demonstrations))


@pytest.fixture(autouse=True)
def typetour_home(tmp_path, monkeypatch):
    """Keep config and logs out of the real home directory"""
    home = tmp_path / 'typetour-home'
    monkeypatch.setenv('TYPETOUR_HOME', str(home))
    yield home

    logger = logging.getLogger('typetour')
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()


@pytest.fixture
def calls():
    return []


@pytest.fixture
def small_catalog(calls):
    return make_catalog([('interfaces', ['A', 'B']), ('enums', ['C'])], calls)


@pytest.fixture
def registry(small_catalog):
    return small_catalog.registry


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=120, color_system=None, force_terminal=False)


@pytest.fixture
def renderer(console):
    return Renderer(console, clear_screen=False)


@pytest.fixture
def make_controller(small_catalog, renderer):
    """Factory: controller over the small catalog, reading the given tokens"""
    def factory(tokens=(), show_welcome=False, catalog=None, interrupted_acknowledgements=()):
        reader = ScriptedReader(tokens, interrupted_acknowledgements)
        controller = NavigationController(
            catalog or small_catalog,
            renderer,
            reader,
            show_welcome=show_welcome,
        )
        return controller, reader
    return factory


def output_of(console: Console) -> str:
    return console.file.getvalue()

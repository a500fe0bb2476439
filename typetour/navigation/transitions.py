#!/usr/bin/env python3
"""
Pure transition function for the navigation state machine.

transition(state, token, registry) never performs I/O. It returns the next
state together with the effects the controller has to carry out, in order.

Tutorial mode is lenient on purpose: anything other than the main-menu token
moves on to the next topic, including empty input. Browse mode validates every
token and reports anything it does not recognise.
"""

import re
from typing import Tuple

from ..catalog import TopicRegistry
from ..errors import InvalidToken, NavigationError, UnknownCategory
from .state import (
    BACK_TOKENS,
    BROWSE_TOKEN,
    HELP_TOKEN,
    MAIN_MENU_TOKENS,
    QUIT_TOKENS,
    TUTORIAL_TOKEN,
    AwaitAcknowledgement,
    BrowseCategoryMenu,
    BrowseTopicMenu,
    Effect,
    Exited,
    InvokeTopic,
    NavigationState,
    Quit,
    ReportError,
    Root,
    ShowCompletion,
    ShowHelp,
    ShowTopic,
    Transition,
    TutorialAt,
)

_INTEGER = re.compile(r'[+-]?[0-9]+')


def parse_index(token: str, upper: int) -> int:
    """
    Parse a 1-based menu number and check it is within [1, upper].

    Raises:
        InvalidToken: not a decimal integer, or out of range
    """
    if not _INTEGER.fullmatch(token):
        raise InvalidToken(token, 'selection')
    number = int(token)
    if not 1 <= number <= upper:
        raise InvalidToken(token, 'selection')
    return number


def _report(state: NavigationState, error: NavigationError) -> Transition:
    return Transition(state, (ReportError(error), AwaitAcknowledgement()))


def enter_tutorial(index: int, registry: TopicRegistry) -> Transition:
    """Effects of arriving at tutorial topic `index`; the last one completes the walk"""
    topics = registry.all_topics_in_declared_order()
    total = len(topics)
    topic = topics[index]

    effects: Tuple[Effect, ...] = (
        ShowTopic(topic, position=index + 1, total=total),
        InvokeTopic(topic),
    )
    if index < total - 1:
        return Transition(TutorialAt(index), effects)

    return Transition(Root(), effects + (ShowCompletion(), AwaitAcknowledgement()))


def _from_root(token: str, registry: TopicRegistry) -> Transition:
    if token == TUTORIAL_TOKEN:
        return enter_tutorial(0, registry)
    if token == BROWSE_TOKEN:
        return Transition(BrowseCategoryMenu())
    if token == HELP_TOKEN:
        return Transition(Root(), (ShowHelp(), AwaitAcknowledgement()))
    if token in QUIT_TOKENS:
        return Transition(Exited(), (Quit(),))
    return _report(Root(), InvalidToken(token, 'choice'))


def _from_tutorial(state: TutorialAt, token: str, registry: TopicRegistry) -> Transition:
    total = len(registry)
    # The last topic hands back to the main menu on entry, so no state waits there
    if not 0 <= state.index < total - 1:
        return Transition(Root())
    if token in MAIN_MENU_TOKENS:
        return Transition(Root())
    return enter_tutorial(state.index + 1, registry)


def _from_category_menu(token: str, registry: TopicRegistry) -> Transition:
    if token in BACK_TOKENS:
        return Transition(Root())

    menu_numbers = [str(number) for number in range(1, len(registry.categories()) + 1)]
    try:
        if token not in menu_numbers:
            raise UnknownCategory(token)
        category = registry.category_at(int(token))
    except UnknownCategory as e:
        return _report(BrowseCategoryMenu(), e)
    return Transition(BrowseTopicMenu(category.key))


def _from_topic_menu(state: BrowseTopicMenu, token: str, registry: TopicRegistry) -> Transition:
    if token in BACK_TOKENS:
        return Transition(BrowseCategoryMenu())

    try:
        topics = registry.topics(state.category)
    except UnknownCategory as e:
        return _report(BrowseCategoryMenu(), e)

    try:
        number = parse_index(token, len(topics))
    except InvalidToken as e:
        return _report(state, e)

    topic = topics[number - 1]
    return Transition(state, (ShowTopic(topic), InvokeTopic(topic), AwaitAcknowledgement()))


def transition(state: NavigationState, token: str, registry: TopicRegistry) -> Transition:
    """Compute the next state and the effects of feeding `token` to `state`"""
    if isinstance(state, Root):
        return _from_root(token, registry)
    if isinstance(state, TutorialAt):
        return _from_tutorial(state, token, registry)
    if isinstance(state, BrowseCategoryMenu):
        return _from_category_menu(token, registry)
    if isinstance(state, BrowseTopicMenu):
        return _from_topic_menu(state, token, registry)
    # Exited, or anything unrecognised: no-op
    return Transition(state)

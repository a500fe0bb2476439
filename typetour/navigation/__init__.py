#!/usr/bin/env python3
"""
Menu navigation for the explorer.

Two ways through the catalog:
- Tutorial: every topic in declared order; anything but 'm' moves on
- Browse: pick a category, then a topic by number; every token is validated
"""

from .state import (
    Root,
    TutorialAt,
    BrowseCategoryMenu,
    BrowseTopicMenu,
    Exited,
    NavigationState,
    Transition,
    ShowTopic,
    InvokeTopic,
    ShowHelp,
    ShowCompletion,
    ReportError,
    AwaitAcknowledgement,
    Quit,
)
from .transitions import transition, parse_index
from .controller import NavigationController, START_MODES

__all__ = [
    'Root',
    'TutorialAt',
    'BrowseCategoryMenu',
    'BrowseTopicMenu',
    'Exited',
    'NavigationState',
    'Transition',
    'ShowTopic',
    'InvokeTopic',
    'ShowHelp',
    'ShowCompletion',
    'ReportError',
    'AwaitAcknowledgement',
    'Quit',
    'transition',
    'parse_index',
    'NavigationController',
    'START_MODES',
]

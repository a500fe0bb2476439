#!/usr/bin/env python3
"""
Navigation states and the effects a transition asks the controller to perform.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from ..errors import NavigationError


# Tokens recognised by the menus
TUTORIAL_TOKEN = '1'
BROWSE_TOKEN = '2'
HELP_TOKEN = '3'
QUIT_TOKENS = ('q', 'Q')
BACK_TOKENS = ('b', 'B')
MAIN_MENU_TOKENS = ('m', 'M')


# =========================================================================
# States
# =========================================================================

@dataclass(frozen=True)
class Root:
    """Main menu"""


@dataclass(frozen=True)
class TutorialAt:
    """Guided walk, showing topic `index` of the declared order"""
    index: int


@dataclass(frozen=True)
class BrowseCategoryMenu:
    """Browse mode, choosing a category"""


@dataclass(frozen=True)
class BrowseTopicMenu:
    """Browse mode, choosing a topic within `category` (a category key)"""
    category: str


@dataclass(frozen=True)
class Exited:
    """Session over"""


NavigationState = Union[Root, TutorialAt, BrowseCategoryMenu, BrowseTopicMenu, Exited]


# =========================================================================
# Effects
# =========================================================================

@dataclass(frozen=True)
class ShowTopic:
    """Title screen for a topic; position/total are set in tutorial mode"""
    topic: str
    position: Optional[int] = None
    total: Optional[int] = None


@dataclass(frozen=True)
class InvokeTopic:
    """Run the topic's demonstration"""
    topic: str


@dataclass(frozen=True)
class ShowHelp:
    pass


@dataclass(frozen=True)
class ShowCompletion:
    """All tutorial topics have been shown"""


@dataclass(frozen=True)
class ReportError:
    """Tell the user their input was not understood"""
    error: NavigationError


@dataclass(frozen=True)
class AwaitAcknowledgement:
    """Block until the user presses Enter"""


@dataclass(frozen=True)
class Quit:
    pass


Effect = Union[ShowTopic, InvokeTopic, ShowHelp, ShowCompletion, ReportError, AwaitAcknowledgement, Quit]


@dataclass(frozen=True)
class Transition:
    """Result of feeding one token to a state"""
    state: NavigationState
    effects: Tuple[Effect, ...] = field(default_factory=tuple)

    @property
    def error(self) -> Optional[NavigationError]:
        """The reported error, if the token was rejected"""
        for effect in self.effects:
            if isinstance(effect, ReportError):
                return effect.error
        return None


def describe(state: NavigationState) -> str:
    """Short label for logs, e.g. 'TutorialAt(3)'"""
    if isinstance(state, TutorialAt):
        return f"TutorialAt({state.index})"
    if isinstance(state, BrowseTopicMenu):
        return f"BrowseTopicMenu({state.category})"
    return type(state).__name__

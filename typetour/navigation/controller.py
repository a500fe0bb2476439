#!/usr/bin/env python3
"""
NavigationController - drives the menus.

Each step: show the screen for the current state, read a token, compute the
transition, adopt the new state, carry out its effects. Everything is
synchronous; a step waits as long as it takes for the user to answer.
"""

from typing import Callable

from ..catalog import Catalog
from ..errors import UnknownTopic
from ..logging import get_logger
from ..ui import InputReader, Renderer
from ..ui import messages
from .state import (
    BROWSE_TOKEN,
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
    describe,
)
from .transitions import transition

log = get_logger(__name__)

START_MODES = ('menu', 'tutorial', 'browse')


class NavigationController:
    """Owns the navigation state and executes transitions against the UI"""

    def __init__(
        self,
        catalog: Catalog,
        renderer: Renderer,
        reader: InputReader,
        show_welcome: bool = True,
    ):
        self.catalog = catalog
        self.registry = catalog.registry
        self.dispatcher = catalog.dispatcher
        self.renderer = renderer
        self.reader = reader
        self.show_welcome = show_welcome
        self.state: NavigationState = Root()

    def is_running(self) -> bool:
        return not isinstance(self.state, Exited)

    def present(self) -> str:
        """Draw the screen for the current state and return the prompt to show"""
        state = self.state
        if isinstance(state, TutorialAt):
            self.renderer.tutorial_options()
            return messages.TUTORIAL_PROMPT
        if isinstance(state, BrowseCategoryMenu):
            self.renderer.category_menu(self.registry.categories())
            return messages.CATEGORY_PROMPT
        if isinstance(state, BrowseTopicMenu):
            self.renderer.topic_menu(self.registry.category(state.category))
            return messages.TOPIC_PROMPT

        self.renderer.main_menu()
        return messages.MAIN_PROMPT

    def step(self, token: str) -> Transition:
        """Feed one token to the state machine and perform the resulting effects"""
        result = transition(self.state, token, self.registry)

        if result.error is not None:
            log.warning(
                "invalid_input",
                state=describe(self.state),
                token=token,
                error=type(result.error).__name__,
            )

        log.info("transition", source=describe(self.state), token=token, target=describe(result.state))
        # Committed before the effects run
        self.state = result.state

        for effect in result.effects:
            self._perform(effect)
        return result

    def start(self, mode: str = 'menu') -> None:
        """Jump straight into tutorial or browse mode, as if chosen from the main menu"""
        if mode == 'tutorial':
            self.step(TUTORIAL_TOKEN)
        elif mode == 'browse':
            self.step(BROWSE_TOKEN)

    def run(self, mode: str = 'menu') -> int:
        """
        Run the session until the user quits or input runs out.

        Returns:
            Process exit code (always 0)
        """
        log.info("session_started", mode=mode, topics=len(self.registry))

        try:
            if self.show_welcome:
                self.renderer.welcome()
                self._interruptible(self.reader.acknowledge)

            self._interruptible(self.start, mode)

            while self.is_running():
                self._interruptible(self._prompt_once)

        except EOFError:
            # Closed input ends the session the same way 'q' does
            self.renderer.plain()
            self.renderer.goodbye()
            self.state = Exited()

        log.info("session_ended")
        return 0

    def _prompt_once(self) -> None:
        prompt = self.present()
        token = self.reader.read(prompt)
        self.step(token)

    def _interruptible(self, action: Callable[..., None], *args) -> None:
        """Ctrl-C during action shows a hint; the session carries on from the current state"""
        try:
            action(*args)
        except KeyboardInterrupt:
            log.info("interrupted", state=describe(self.state))
            self.renderer.notice(messages.INTERRUPT_HINT)

    # =====================================================================
    # Effects
    # =====================================================================

    def _perform(self, effect: Effect) -> None:
        if isinstance(effect, ShowTopic):
            self.renderer.topic_title(effect.topic, effect.position, effect.total)
        elif isinstance(effect, InvokeTopic):
            self._invoke(effect.topic)
        elif isinstance(effect, ShowHelp):
            self.renderer.help()
        elif isinstance(effect, ShowCompletion):
            self.renderer.completion()
        elif isinstance(effect, ReportError):
            self.renderer.error(effect.error.message)
        elif isinstance(effect, AwaitAcknowledgement):
            self.reader.acknowledge()
        elif isinstance(effect, Quit):
            self.renderer.goodbye()

    def _invoke(self, topic: str) -> None:
        try:
            self.dispatcher.invoke(topic)
        except UnknownTopic as e:
            log.warning("topic_missing", topic=topic)
            self.renderer.notice(e.message)
            return

        log.info("topic_invoked", topic=topic)

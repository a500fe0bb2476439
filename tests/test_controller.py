#!/usr/bin/env python3
"""
Tests for NavigationController: effects reach the renderer and reader,
and run() handles quitting, closed input and interrupts.
"""

from unittest.mock import patch

import pytest

from typetour.errors import UnknownTopic
from typetour.navigation import BrowseCategoryMenu, BrowseTopicMenu, Exited, Root, TutorialAt
from typetour.ui import messages

from conftest import output_of


class TestStep:
    """Driving the controller one token at a time"""

    def test_tutorial_walk(self, make_controller, calls, console):
        """Three topics: enter plus two advances runs A, B, C and completes"""
        controller, reader = make_controller()

        controller.step('1')
        assert controller.state == TutorialAt(0)
        controller.step('x')
        controller.step('x')

        assert calls == ['A', 'B', 'C']
        assert controller.state == Root()
        assert reader.acknowledgements == 1
        output = output_of(console)
        assert 'Tutorial (1/3): A' in output
        assert 'Tutorial (3/3): C' in output
        assert "You've completed all the tutorials" in output

    def test_browse_and_select(self, make_controller, calls, console):
        """Browsing enums and picking the first topic runs only that topic"""
        controller, reader = make_controller()

        controller.step('2')
        controller.step('2')
        assert controller.state == BrowseTopicMenu('enums')

        controller.step('1')
        assert calls == ['C']
        assert controller.state == BrowseTopicMenu('enums')
        assert reader.acknowledgements == 1

    def test_invalid_selection_stays(self, make_controller, calls, console):
        """An out-of-range number reports an error and keeps the menu"""
        controller, reader = make_controller()
        controller.step('2')
        controller.step('2')

        controller.step('9')
        assert controller.state == BrowseTopicMenu('enums')
        assert calls == []
        assert 'Invalid selection. Please try again.' in output_of(console)
        assert reader.acknowledgements == 1

        controller.step('b')
        assert controller.state == BrowseCategoryMenu()

    def test_invalid_category(self, make_controller, console):
        """Unlisted categories are reported"""
        controller, _ = make_controller()
        controller.step('2')
        controller.step('7')
        assert controller.state == BrowseCategoryMenu()
        assert 'Invalid category. Please try again.' in output_of(console)

    def test_help(self, make_controller, console):
        """'3' shows the help screen and waits"""
        controller, reader = make_controller()
        controller.step('3')
        assert controller.state == Root()
        assert reader.acknowledgements == 1
        assert messages.HELP_TIP in output_of(console)

    def test_missing_demonstration(self, make_controller, small_catalog, console, calls):
        """A topic with no demonstration shows a placeholder and navigation continues"""
        controller, _ = make_controller()
        controller.step('2')
        controller.step('1')

        with patch.object(small_catalog.dispatcher, 'invoke', side_effect=UnknownTopic('A')):
            controller.step('1')

        assert controller.state == BrowseTopicMenu('interfaces')
        assert 'Example for A is not implemented yet.' in output_of(console)
        assert calls == []

        controller.step('2')
        assert calls == ['B']


    def test_state_committed_before_effects(self, make_controller):
        """An interrupted acknowledgement still leaves the controller in the new state"""
        controller, _ = make_controller(interrupted_acknowledgements=[1])
        controller.step('1')
        controller.step('x')

        with pytest.raises(KeyboardInterrupt):
            controller.step('x')
        assert controller.state == Root()


class TestPresent:
    """Screens and prompts per state"""

    def test_prompts(self, make_controller, console):
        controller, _ = make_controller()

        assert controller.present() == messages.MAIN_PROMPT
        controller.step('2')
        assert controller.present() == messages.CATEGORY_PROMPT
        assert 'b. Back to Main Menu' in output_of(console)
        controller.step('1')
        assert controller.present() == messages.TOPIC_PROMPT
        assert 'Interfaces Examples' in output_of(console)
        controller.step('b')
        controller.step('b')
        controller.step('1')
        assert controller.present() == messages.TUTORIAL_PROMPT
        assert 'n - Next example' in output_of(console)


class TestRun:
    """The blocking session loop"""

    def test_quit(self, make_controller, console):
        """'q' at the root exits with status 0 and says goodbye"""
        controller, reader = make_controller(['q'])
        assert controller.run() == 0
        assert controller.state == Exited()
        assert messages.GOODBYE in output_of(console)
        assert reader.prompts == [messages.MAIN_PROMPT]

    def test_closed_input_is_quit(self, make_controller, console):
        """Running out of input ends the session cleanly"""
        controller, reader = make_controller(['2'])
        assert controller.run() == 0
        assert controller.state == Exited()
        assert messages.GOODBYE in output_of(console)
        assert reader.prompts == [messages.MAIN_PROMPT, messages.CATEGORY_PROMPT]

    def test_welcome(self, make_controller, console):
        """The welcome screen waits for Enter before the main menu"""
        controller, reader = make_controller(['q'], show_welcome=True)
        controller.run()
        assert messages.APP_TITLE in output_of(console)
        assert reader.acknowledgements == 1

    def test_start_in_tutorial(self, make_controller, calls):
        """--mode tutorial runs the first topic before the first prompt"""
        controller, reader = make_controller(['m', 'q'])
        assert controller.run('tutorial') == 0
        assert calls == ['A']
        assert reader.prompts == [messages.TUTORIAL_PROMPT, messages.MAIN_PROMPT]

    def test_start_in_browse(self, make_controller):
        """--mode browse opens at the category menu"""
        controller, reader = make_controller(['b', 'q'])
        controller.run('browse')
        assert reader.prompts == [messages.CATEGORY_PROMPT, messages.MAIN_PROMPT]

    def test_interrupt_reprompts(self, make_controller, console):
        """Ctrl-C shows a hint and asks again in the same state"""
        controller, reader = make_controller(['2', KeyboardInterrupt(), 'b', 'q'])
        assert controller.run() == 0
        assert "Use 'q' from the main menu to quit." in output_of(console)
        assert reader.prompts == [
            messages.MAIN_PROMPT,
            messages.CATEGORY_PROMPT,
            messages.CATEGORY_PROMPT,
            messages.MAIN_PROMPT,
        ]
        assert controller.state == Exited()

    def test_interrupt_at_welcome(self, make_controller, console):
        """Ctrl-C at the welcome acknowledgement continues to the main menu"""
        controller, reader = make_controller(['q'], show_welcome=True, interrupted_acknowledgements=[1])
        assert controller.run() == 0
        assert "Use 'q' from the main menu to quit." in output_of(console)
        assert reader.prompts == [messages.MAIN_PROMPT]
        assert controller.state == Exited()

    def test_interrupt_during_first_tutorial_topic(self, make_controller, small_catalog, console):
        """Ctrl-C while --mode tutorial runs its first topic leaves the tutorial options up"""
        controller, reader = make_controller(['m', 'q'])
        with patch.object(small_catalog.dispatcher, 'invoke', side_effect=KeyboardInterrupt):
            assert controller.run('tutorial') == 0
        assert "Use 'q' from the main menu to quit." in output_of(console)
        assert reader.prompts == [messages.TUTORIAL_PROMPT, messages.MAIN_PROMPT]

    def test_interrupt_at_completion_does_not_replay(self, make_controller, calls, console):
        """Ctrl-C at the completion prompt lands on the main menu without rerunning the last topic"""
        controller, reader = make_controller(['1', 'n', 'n', 'x'], interrupted_acknowledgements=[1])
        assert controller.run() == 0
        assert calls == ['A', 'B', 'C']
        assert reader.prompts == [
            messages.MAIN_PROMPT,
            messages.TUTORIAL_PROMPT,
            messages.TUTORIAL_PROMPT,
            messages.MAIN_PROMPT,
            messages.MAIN_PROMPT,
        ]
        assert 'Invalid choice. Please try again.' in output_of(console)

    def test_full_session(self, make_controller, calls):
        """Tutorial through to the end, then browse one topic, then quit"""
        controller, reader = make_controller(['1', 'n', 'n', '2', '1', '2', 'b', 'b', 'q'])
        assert controller.run() == 0
        assert calls == ['A', 'B', 'C', 'B']
        assert reader.acknowledgements == 2

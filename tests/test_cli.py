#!/usr/bin/env python3
"""
Tests for the typetour command line.
"""

import io
import json

from typetour.cli import main, match_topic
from typetour.config import load_config
from typetour.demos import build_registry


class TestMatchTopic:
    def test_case_insensitive(self):
        registry = build_registry()
        assert match_topic(registry, '  auto enums ') == 'Auto Enums'
        assert match_topic(registry, 'generics') is None


class TestOneShotCommands:
    """Commands that print and exit"""

    def test_list(self, capsys):
        assert main(['--list']) == 0
        output = capsys.readouterr().out
        assert 'Abstract Base Classes' in output
        assert 'Behavior Enums' in output

    def test_topic(self, capsys):
        """--topic runs one lesson without any prompting"""
        assert main(['--topic', 'auto enums']) == 0
        output = capsys.readouterr().out
        assert 'Auto Enums' in output
        assert 'Weekday(3) = Weekday.WEDNESDAY' in output

    def test_unknown_topic(self, capsys):
        assert main(['--topic', 'Generics']) == 1
        assert 'Unknown topic: Generics' in capsys.readouterr().out

    def test_topic_is_logged(self, typetour_home):
        """One-shot runs still write the event log"""
        main(['--topic', 'String Enums'])
        log_path = typetour_home / 'logs' / 'events.log'
        events = [json.loads(line) for line in log_path.read_text().splitlines()]
        invoked = [event for event in events if event['event'] == 'topic_invoked']
        assert invoked[0]['topic'] == 'String Enums'
        assert invoked[0]['level'] == 'info'

    def test_show_config(self, capsys):
        assert main(['--show-config']) == 0
        output = capsys.readouterr().out
        assert 'Config file:' in output
        assert 'clear_screen' in output


class TestSet:
    """--set persists preferences"""

    def test_saves_value(self):
        assert main(['--set', 'clear_screen', 'no']) == 0
        assert load_config() == {'clear_screen': False}

    def test_unknown_key(self, capsys):
        assert main(['--set', 'bogus', '1']) == 1
        assert 'Unknown setting: bogus' in capsys.readouterr().out

    def test_bad_value(self):
        assert main(['--set', 'log_level', 'loud']) == 1
        assert load_config() == {}


class TestInteractive:
    """Interactive sessions over piped input"""

    def test_quit_from_menu(self, capsys, monkeypatch):
        monkeypatch.setattr('sys.stdin', io.StringIO('q\n'))
        assert main(['--no-welcome', '--no-clear']) == 0
        output = capsys.readouterr().out
        assert 'Main Menu' in output
        assert 'Happy coding!' in output

    def test_browse_then_eof(self, capsys, monkeypatch):
        """Closing input mid-session still exits cleanly"""
        monkeypatch.setattr('sys.stdin', io.StringIO('1\n2\n\n'))
        assert main(['--no-welcome', '--no-clear', '--mode', 'browse']) == 0
        output = capsys.readouterr().out
        assert 'Interfaces Examples' in output
        assert 'ABSTRACT BASE CLASSES' not in output
        assert 'DUCK TYPING' in output
        assert 'Happy coding!' in output

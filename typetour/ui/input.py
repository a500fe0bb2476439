#!/usr/bin/env python3
"""
Line-based input sources. Every read blocks until a line arrives and returns
it trimmed. EOFError and KeyboardInterrupt are left to the caller.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory, InMemoryHistory
from rich.console import Console

from . import messages


class InputReader(ABC):
    """Blocking source of trimmed text tokens"""

    @abstractmethod
    def read(self, prompt: str) -> str:
        """Show prompt, wait for a line, return it stripped"""
        pass

    def acknowledge(self) -> None:
        """Pause until the user presses Enter"""
        self.read(messages.ACKNOWLEDGE_PROMPT)


class PromptReader(InputReader):
    """Interactive terminal input via prompt_toolkit"""

    def __init__(self, history_path: Optional[Path] = None):
        if history_path:
            history_path.parent.mkdir(parents=True, exist_ok=True)
            history = FileHistory(str(history_path))
        else:
            history = InMemoryHistory()
        self.session = PromptSession(history=history)

    def read(self, prompt: str) -> str:
        return self.session.prompt(prompt).strip()


class ConsoleReader(InputReader):
    """Plain line input through rich, for piped stdin"""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def read(self, prompt: str) -> str:
        # Console.input raises EOFError when stdin is exhausted
        return self.console.input(prompt, markup=False).strip()

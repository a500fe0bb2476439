"""Terminal front-end: rendering and line input."""

from .input import ConsoleReader, InputReader, PromptReader
from .renderer import Renderer

__all__ = ["ConsoleReader", "InputReader", "PromptReader", "Renderer"]

#!/usr/bin/env python3
"""
Terminal rendering with rich.
The renderer holds no navigation state; it only draws what it is asked to.
"""

from typing import Iterable, Optional, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from ..catalog import Category, TopicRegistry
from . import messages


class Renderer:
    """Draws screens, menus and lesson sections on a rich Console"""

    def __init__(self, console: Optional[Console] = None, clear_screen: bool = True):
        self.console = console or Console()
        self.clear_screen = clear_screen

    # =====================================================================
    # Building blocks
    # =====================================================================

    def clear(self) -> None:
        if self.clear_screen:
            self.console.clear()

    def title(self, text: str, color: str) -> None:
        """Coloured banner, the top of every screen"""
        self.console.print(Panel(
            Text(text, style=f"bold {color}"),
            border_style=color,
            expand=False,
        ))

    def plain(self, text: str = '') -> None:
        """Print text as-is (no markup, no highlighting)"""
        self.console.print(text, markup=False, highlight=False)

    def _section(self, heading: str, color: str, body: str) -> None:
        self.console.print(Text(f"--- {heading} ---", style=f"bold {color}"))
        self.plain(body.strip('\n'))
        self.plain()

    # =====================================================================
    # Screens
    # =====================================================================

    def welcome(self) -> None:
        self.clear()
        self.title(messages.APP_TITLE, "cyan")
        self.plain(messages.WELCOME)

    def main_menu(self) -> None:
        self.clear()
        self.title("Main Menu", "green")
        for key, label in messages.MAIN_MENU:
            self.plain(f"{key}. {label}")

    def help(self) -> None:
        self.clear()
        self.title("Help", "magenta")
        for heading, lines in messages.HELP_SECTIONS:
            self.console.print(Text(heading, style="bold"))
            for line in lines:
                self.plain(line)
            self.plain()
        self.console.print(Text(messages.HELP_TIP, style="italic"))

    def category_menu(self, categories: Sequence[Category]) -> None:
        self.clear()
        self.title("Browse Examples", "blue")
        self.plain("Categories:")
        for number, category in enumerate(categories, 1):
            self.plain(f"{number}. {category.title}")
        self.plain("b. Back to Main Menu")

    def topic_menu(self, category: Category) -> None:
        self.clear()
        self.title(f"{category.title} Examples", "blue")
        for number, topic in enumerate(category.topics, 1):
            self.plain(f"{number}. {topic}")
        self.plain("b. Back to Categories")

    def topic_title(self, topic: str, position: Optional[int] = None, total: Optional[int] = None) -> None:
        self.clear()
        if position is not None and total is not None:
            self.title(f"Tutorial ({position}/{total}): {topic}", "yellow")
        else:
            self.title(topic, "yellow")

    def tutorial_options(self) -> None:
        self.plain("\nOptions:")
        for key, label in messages.TUTORIAL_OPTIONS:
            self.plain(f"{key} - {label}")

    def completion(self) -> None:
        self.console.print(Text(messages.COMPLETION, style="bold green"))

    def error(self, message: str) -> None:
        self.console.print(Text(message, style="red"))

    def notice(self, message: str) -> None:
        self.console.print(Text(message, style="dim"))

    def goodbye(self) -> None:
        self.console.print(Text(messages.GOODBYE, style="bold cyan"))

    # =====================================================================
    # Lesson sections
    # =====================================================================

    def explanation(self, text: str) -> None:
        self._section("EXPLANATION", "blue", text)

    def code(self, source: str) -> None:
        self.console.print(Text("--- CODE EXAMPLE ---", style="bold green"))
        self.console.print(Syntax(source.strip('\n'), "python", theme="monokai", background_color="default"))
        self.plain()

    def output(self, lines: Iterable[str]) -> None:
        self._section("OUTPUT", "yellow", '\n'.join(lines))

    def takeaways(self, text: str) -> None:
        self._section("KEY TAKEAWAYS", "magenta", text)

    # =====================================================================
    # Non-interactive views
    # =====================================================================

    def catalog_table(self, registry: TopicRegistry) -> None:
        """All topics, as listed by --list"""
        table = Table(title="Topics", show_lines=False)
        table.add_column("Category", style="blue")
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Topic")
        table.add_column("Tutorial step", justify="right", style="dim")

        step = 0
        for category in registry.categories():
            for number, topic in enumerate(category.topics, 1):
                step += 1
                table.add_row(category.title if number == 1 else "", str(number), topic, str(step))
        self.console.print(table)

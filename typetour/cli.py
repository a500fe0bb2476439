#!/usr/bin/env python3
"""
typetour - Interface & Enum Explorer CLI

Usage:
    typetour                        # Main menu
    typetour --mode tutorial        # Straight into the guided tutorial
    typetour --list                 # List all topics
    typetour --topic "Auto Enums"   # Run a single example
"""

import sys
import argparse
from typing import List, Optional

from rich.console import Console

from . import __version__
from .config import (
    DEFAULTS,
    get_config_path,
    get_config_dir,
    get_log_path,
    get_settings,
    parse_config_value,
    set_config_value,
)
from .catalog import TopicRegistry
from .demos import build_catalog
from .errors import CatalogError
from .logging import configure_logging, get_logger
from .navigation import NavigationController, START_MODES
from .ui import ConsoleReader, InputReader, PromptReader, Renderer

log = get_logger(__name__)


def match_topic(registry: TopicRegistry, name: str) -> Optional[str]:
    """Find a topic identifier, ignoring case and surrounding whitespace"""
    wanted = name.strip().lower()
    for topic_id in registry.all_topics_in_declared_order():
        if topic_id.lower() == wanted:
            return topic_id
    return None


def build_reader(console: Console, settings: dict) -> InputReader:
    """prompt_toolkit for a terminal, plain line input for pipes"""
    if not sys.stdin.isatty():
        return ConsoleReader(console)
    history_path = get_config_dir() / 'history' if settings['prompt_history'] else None
    return PromptReader(history_path)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point"""

    parser = argparse.ArgumentParser(
        prog='typetour',
        description='typetour - Learn Python interfaces and enums by example',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  typetour                              # Start at the main menu
  typetour --mode tutorial              # Guided journey through every topic
  typetour --mode browse                # Pick topics yourself
  typetour --list                       # List categories and topics
  typetour --topic "String Enums"       # Run one example and exit
  typetour --set clear_screen false     # Persist a preference
  typetour --show-config                # Show effective settings
        """
    )

    parser.add_argument('--mode', default='menu', choices=START_MODES,
                        help='Where to start (default: menu)')
    parser.add_argument('--list', action='store_true',
                        help='List all topics and exit')
    parser.add_argument('--topic', metavar='NAME',
                        help='Run a single example and exit')
    parser.add_argument('--no-clear', action='store_true',
                        help="Don't clear the screen between screens")
    parser.add_argument('--no-welcome', action='store_true',
                        help='Skip the welcome screen')
    parser.add_argument('--log-level', type=str.upper,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Event log level (default from config: INFO)')
    parser.add_argument('--show-config', action='store_true',
                        help='Show the effective configuration and exit')
    parser.add_argument('--set', nargs=2, metavar=('KEY', 'VALUE'),
                        help=f"Save a setting ({', '.join(DEFAULTS)})")
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    args = parser.parse_args(argv)
    console = Console()

    # Persist a setting
    if args.set:
        key, raw = args.set
        try:
            value = parse_config_value(key, raw)
        except KeyError:
            console.print(f"[red]Unknown setting: {key}[/red]")
            console.print(f"[dim]Available: {', '.join(DEFAULTS)}[/dim]")
            return 1
        except ValueError as e:
            console.print(str(e), style="red", markup=False)
            return 1
        set_config_value(key, value)
        console.print(f"Saved {key} = {value!r} to {get_config_path()}", markup=False)
        return 0

    settings = get_settings({
        'clear_screen': False if args.no_clear else None,
        'show_welcome': False if args.no_welcome else None,
        'log_level': args.log_level,
    })

    if args.show_config:
        console.print(f"Config file: {get_config_path()}", markup=False)
        for key, value in settings.items():
            console.print(f"  {key:15} {value!r}", markup=False, highlight=False)
        console.print(f"  {'(log path)':15} {get_log_path(settings)}", markup=False, highlight=False)
        return 0

    configure_logging(settings['log_level'], get_log_path(settings))

    renderer = Renderer(console, clear_screen=settings['clear_screen'])
    try:
        catalog = build_catalog(renderer)
    except CatalogError as e:
        log.error("catalog_invalid", error=str(e))
        console.print(f"Catalog error: {e}", style="red", markup=False)
        return 1

    # Non-interactive views never clear the screen
    if args.list or args.topic:
        renderer.clear_screen = False

    if args.list:
        renderer.catalog_table(catalog.registry)
        return 0

    if args.topic:
        topic = match_topic(catalog.registry, args.topic)
        if topic is None:
            console.print(f"Unknown topic: {args.topic}", style="red", markup=False)
            console.print("[dim]Use --list to see available topics[/dim]")
            return 1
        renderer.topic_title(topic)
        catalog.dispatcher.invoke(topic)
        log.info("topic_invoked", topic=topic, interactive=False)
        return 0

    controller = NavigationController(
        catalog,
        renderer,
        build_reader(console, settings),
        show_welcome=settings['show_welcome'],
    )
    return controller.run(args.mode)


if __name__ == "__main__":
    sys.exit(main())

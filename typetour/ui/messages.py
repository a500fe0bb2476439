#!/usr/bin/env python3
"""
Fixed screen texts.
"""

APP_TITLE = "Welcome to the Python Interface & Enum Explorer"

WELCOME = """\
This interactive tool will help you learn about interfaces and enums in Python.
You'll see examples ranging from basic concepts to advanced usage patterns.

Each example includes:
- Explanation of the concept
- Sample code
- Output of the code execution
- Key takeaways

Let's begin exploring Python's protocols, abstract classes and enum patterns!"""

MAIN_MENU = [
    ('1', 'Start Tutorial (guided journey)'),
    ('2', 'Browse Examples (pick specific topics)'),
    ('3', 'Help'),
    ('q', 'Quit'),
]

MAIN_PROMPT = "\nEnter your choice (or 'q' to quit): "
CATEGORY_PROMPT = "\nSelect a category (or 'b' to go back): "
TOPIC_PROMPT = "\nSelect an example (or 'b' to go back): "
TUTORIAL_PROMPT = "\nYour choice: "
ACKNOWLEDGE_PROMPT = "\nPress Enter to continue..."

TUTORIAL_OPTIONS = [
    ('n', 'Next example'),
    ('m', 'Return to main menu'),
]

COMPLETION = "\nCongratulations! You've completed all the tutorials."

GOODBYE = "Thank you for learning Python interfaces and enums. Happy coding!"

INTERRUPT_HINT = "\nUse 'q' from the main menu to quit."

HELP_SECTIONS = [
    ("How to use this tool:", [
        "1. Tutorial Mode: Guides you through all examples in a logical order.",
        "2. Browse Examples: Pick specific topics you're interested in.",
    ]),
    ("About Python Interfaces:", [
        "- Interfaces describe behavior, not structure.",
        "- Abstract base classes enforce a contract when a subclass is created.",
        "- Protocols match any class with the right methods (structural typing).",
        "- Interfaces can be composed from smaller interfaces.",
        "- object (and typing.Any) can stand for a value of any type.",
    ]),
    ("About Python Enums:", [
        "- Plain module constants work, but carry no type safety.",
        "- enum.Enum gives named, unique, iterable members.",
        "- auto() numbers members for you.",
        "- str-mixin enums and IntEnum members behave like str and int.",
        "- Enum members can carry data and methods.",
    ]),
]

HELP_TIP = "Tip: Running the examples and reviewing the code is the best way to learn!"

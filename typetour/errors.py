#!/usr/bin/env python3
"""
Exception types for the explorer.

CatalogError is a startup problem with how the catalog was put together.
The NavigationError family is recoverable: the controller reports the
message and prompts again in the same state.
"""


class ExplorerError(Exception):
    """Base class for all explorer errors"""


class CatalogError(ExplorerError):
    """The catalog is inconsistent (missing demonstration, empty category, ...)"""


class NavigationError(ExplorerError):
    """A user token could not be resolved in the current state"""

    def __str__(self) -> str:
        return self.message

    @property
    def message(self) -> str:
        return "Invalid input. Please try again."


class UnknownCategory(NavigationError, KeyError):
    """No category matches the requested key or menu number"""

    def __init__(self, category: str):
        super().__init__(category)
        self.category = category

    @property
    def message(self) -> str:
        return "Invalid category. Please try again."


class UnknownTopic(NavigationError, KeyError):
    """No demonstration is registered for the topic"""

    def __init__(self, topic: str):
        super().__init__(topic)
        self.topic = topic

    @property
    def message(self) -> str:
        return f"Example for {self.topic} is not implemented yet."


class InvalidToken(NavigationError, ValueError):
    """A token was not one of the choices offered (or not a number in range)"""

    def __init__(self, token: str, reason: str = 'choice'):
        super().__init__(token)
        self.token = token
        self.reason = reason

    @property
    def message(self) -> str:
        return f"Invalid {self.reason}. Please try again."

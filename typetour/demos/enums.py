#!/usr/bin/env python3
"""
Enum lessons: plain constants, enum.Enum with auto(), string enums and
enums that carry behavior.
"""

import json
from enum import Enum, IntEnum, auto
from typing import List

from .base import Lesson


# =========================================================================
# Basic Constants
# =========================================================================

class Role:
    """User roles, lowest to highest"""
    GUEST = 0
    USER = 1
    MODERATOR = 2
    ADMIN = 3


FEATURES = ("view_content", "create_content", "moderate_content", "system_settings")


def check_access(role: int, feature: str) -> bool:
    minimum = {
        "view_content": Role.GUEST,
        "create_content": Role.USER,
        "moderate_content": Role.MODERATOR,
        "system_settings": Role.ADMIN,
    }.get(feature, Role.ADMIN + 1)
    return role >= minimum


class BasicConstants(Lesson):
    topic = "Basic Constants"
    explanation = """
        BASIC CONSTANTS
        ===============

        The simplest enum-like construct is a group of UPPER_CASE constants,
        here gathered on a plain class. It's quick and works everywhere, but Python
        can't tell a role from any other int: check_access(42, ...) is
        accepted, and so is a typo'd feature name.

        Key points:
        - Group related constants together and document their meaning
        - Ordering comparisons work because the values are plain ints
        - Nothing stops callers from passing values outside the set
    """
    takeaways = """
        - Constants are fine for small scripts and quick prototypes
        - There is no type safety, no iteration and no name lookup
        - Reach for enum.Enum once values travel across module boundaries
    """
    samples = (Role, check_access)

    def execute(self) -> List[str]:
        lines = []
        for role_name, role in (("GUEST", Role.GUEST), ("USER", Role.USER), ("ADMIN", Role.ADMIN)):
            allowed = [feature for feature in FEATURES if check_access(role, feature)]
            lines.append(f"{role_name:<6} can: {', '.join(allowed)}")
        lines.append(f"check_access(42, 'system_settings') = {check_access(42, 'system_settings')}  (no validation!)")
        return lines


# =========================================================================
# Auto Enums
# =========================================================================

class Weekday(Enum):
    MONDAY = auto()
    TUESDAY = auto()
    WEDNESDAY = auto()
    THURSDAY = auto()
    FRIDAY = auto()
    SATURDAY = auto()
    SUNDAY = auto()

    def is_weekend(self) -> bool:
        return self in (Weekday.SATURDAY, Weekday.SUNDAY)


class Priority(IntEnum):
    LOW = auto()
    MEDIUM = auto()
    HIGH = auto()


class AutoEnums(Lesson):
    topic = "Auto Enums"
    explanation = """
        ENUMS WITH auto()
        =================

        enum.Enum creates a distinct type whose members are named singletons.
        auto() assigns values for you (1, 2, 3, ... by default), so the values
        stop mattering and only the names carry meaning.

        Key points:
        - Members have .name and .value and can be iterated in definition order
        - Weekday(3) and Weekday['SATURDAY'] look members up by value and by name
        - Plain Enum members don't compare with ints; IntEnum members do
    """
    takeaways = """
        - Let auto() number members unless the values are part of a protocol
        - Iteration and lookup by name/value come for free
        - Use IntEnum only when members really must behave like integers
    """
    samples = (Weekday, Priority)

    def execute(self) -> List[str]:
        return [
            "Members: " + ', '.join(f"{day.name}={day.value}" for day in Weekday),
            f"Weekday(3) = {Weekday(3)}",
            f"Weekday['SATURDAY'].is_weekend() = {Weekday['SATURDAY'].is_weekend()}",
            f"Weekday.MONDAY == 1 -> {Weekday.MONDAY == 1}",
            f"Priority.HIGH > Priority.LOW -> {Priority.HIGH > Priority.LOW}",
            f"Priority.MEDIUM == 2 -> {Priority.MEDIUM == 2}",
            f"sorted by priority: {[p.name for p in sorted([Priority.HIGH, Priority.LOW, Priority.MEDIUM])]}",
        ]


# =========================================================================
# String Enums
# =========================================================================

class OrderStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    def __str__(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return self.value.capitalize()


def parse_status(raw: str) -> OrderStatus:
    try:
        return OrderStatus(raw.strip().lower())
    except ValueError:
        raise ValueError(f"Unknown order status: {raw!r}") from None


class StringEnums(Lesson):
    topic = "String Enums"
    explanation = """
        STRING ENUMS
        ============

        Mixing str into an Enum makes every member a real string as well as an
        enum member. That makes them easy to store, compare against raw input
        and serialize to JSON, while keeping the closed set of allowed values.

        Key points:
        - class OrderStatus(str, Enum) members compare equal to their values
        - Overriding __str__ controls how members print
        - OrderStatus("paid") parses untrusted strings and rejects unknown ones
    """
    takeaways = """
        - String values are readable in logs, databases and APIs
        - Parse input at the boundary and work with members inside
        - json.dumps() writes str-based members as plain strings
    """
    samples = (OrderStatus, parse_status)

    def execute(self) -> List[str]:
        lines = [
            f"str(OrderStatus.SHIPPED) = {str(OrderStatus.SHIPPED)}",
            f"OrderStatus.PAID == 'paid' -> {OrderStatus.PAID == 'paid'}",
            f"parse_status(' Delivered ') = {parse_status(' Delivered ').name}",
            f"labels: {[status.label for status in OrderStatus]}",
            f"json.dumps: {json.dumps({'id': 7, 'status': OrderStatus.PENDING})}",
        ]
        try:
            parse_status("lost")
        except ValueError as e:
            lines.append(f"parse_status('lost') -> ValueError: {e}")
        return lines


# =========================================================================
# Behavior Enums
# =========================================================================

class TrafficLight(Enum):
    RED = ("Stop", 30)
    GREEN = ("Go", 25)
    YELLOW = ("Slow down", 5)

    def __init__(self, instruction: str, seconds: int):
        self.instruction = instruction
        self.seconds = seconds

    def next(self) -> "TrafficLight":
        order = list(TrafficLight)
        return order[(order.index(self) + 1) % len(order)]

    def can_go(self) -> bool:
        return self is TrafficLight.GREEN


def cycle(start: TrafficLight, steps: int) -> List[TrafficLight]:
    lights = [start]
    for _ in range(steps):
        lights.append(lights[-1].next())
    return lights


class BehaviorEnums(Lesson):
    topic = "Behavior Enums"
    explanation = """
        ENUMS WITH BEHAVIOR
        ===================

        Enum members are full objects. A member's value can be a tuple that
        __init__ unpacks into attributes, and the enum class can define
        methods, so the data and rules for each state live in one place.

        Key points:
        - Tuple values are passed to __init__ as separate arguments
        - Methods are called on members: TrafficLight.RED.next()
        - Keeps state-machine logic out of scattered if/elif chains
    """
    takeaways = """
        - Attach per-member data instead of keeping parallel lookup tables
        - Put behavior that depends on the member on the enum itself
        - Enums make small state machines explicit and exhaustive
    """
    samples = (TrafficLight, cycle)

    def execute(self) -> List[str]:
        lines = [
            f"{light.name:<6} {light.instruction:<10} {light.seconds:>3}s  can_go={light.can_go()}"
            for light in TrafficLight
        ]
        lines.append("cycle: " + ' -> '.join(light.name for light in cycle(TrafficLight.RED, 4)))
        lines.append(f"one full cycle takes {sum(light.seconds for light in TrafficLight)}s")
        return lines


LESSONS = (
    BasicConstants,
    AutoEnums,
    StringEnums,
    BehaviorEnums,
)

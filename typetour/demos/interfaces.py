#!/usr/bin/env python3
"""
Interface lessons: abstract base classes, protocols, the universal type,
runtime type checks and composition.
"""

import math
from abc import ABC, abstractmethod
from typing import Any, List, Protocol, runtime_checkable

from .base import Lesson


# =========================================================================
# Abstract Base Classes
# =========================================================================

class Shape(ABC):
    """Anything with an area and a perimeter"""

    @abstractmethod
    def area(self) -> float:
        ...

    @abstractmethod
    def perimeter(self) -> float:
        ...

    def describe(self) -> str:
        return f"{type(self).__name__}: area={self.area():.2f}, perimeter={self.perimeter():.2f}"


class Rectangle(Shape):
    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height

    def __repr__(self) -> str:
        return f"Rectangle({self.width}, {self.height})"

    def area(self) -> float:
        return self.width * self.height

    def perimeter(self) -> float:
        return 2 * (self.width + self.height)


class Circle(Shape):
    def __init__(self, radius: float):
        self.radius = radius

    def area(self) -> float:
        return math.pi * self.radius ** 2

    def perimeter(self) -> float:
        return 2 * math.pi * self.radius


class AbstractBaseClasses(Lesson):
    topic = "Abstract Base Classes"
    explanation = """
        ABSTRACT BASE CLASSES
        =====================

        An abstract base class (ABC) declares the methods every implementation
        must provide. Methods marked with @abstractmethod have no usable body;
        a subclass that does not override all of them cannot be instantiated.

        Key points:
        - Inherit from abc.ABC and decorate required methods with @abstractmethod
        - The contract is checked when an object is created, not when it is used
        - ABCs can also provide shared, concrete helper methods
    """
    takeaways = """
        - Use an ABC when implementations should explicitly opt in to a contract
        - Missing methods fail fast, at construction time
        - Concrete methods on the ABC are shared by every implementation
    """
    samples = (Shape, Rectangle, Circle)

    def execute(self) -> List[str]:
        lines = [shape.describe() for shape in (Rectangle(3, 4), Circle(1))]
        try:
            Shape()
        except TypeError:
            lines.append("Shape() -> TypeError: abstract methods area, perimeter")
        return lines


# =========================================================================
# Duck Typing & Protocols
# =========================================================================

@runtime_checkable
class Speaker(Protocol):
    def speak(self) -> str:
        ...


class Dog:
    def speak(self) -> str:
        return "Woof!"


class Robot:
    def speak(self) -> str:
        return "Beep boop."


class Rock:
    pass


def introduce(speaker: Speaker) -> str:
    return f"{type(speaker).__name__} says {speaker.speak()}"


class DuckTyping(Lesson):
    topic = "Duck Typing & Protocols"
    explanation = """
        DUCK TYPING & PROTOCOLS
        =======================

        "If it walks like a duck and quacks like a duck, it's a duck."
        Python doesn't require a class to declare which interfaces it implements.
        Any object with the right methods can be used.

        typing.Protocol writes that expectation down so type checkers can verify
        it (structural typing). With @runtime_checkable, isinstance() can check
        for the methods at runtime too.

        Key points:
        - No inheritance needed: Dog and Robot never mention Speaker
        - Type checkers compare method signatures, not class hierarchies
        - Runtime checks only confirm that the methods exist
    """
    takeaways = """
        - Protocols describe what an object can do, not what it is
        - Implementations stay decoupled from the interface definition
        - Keep protocols small; one or two methods is common
    """
    samples = (Speaker, Dog, Robot, Rock, introduce)

    def execute(self) -> List[str]:
        lines = [introduce(speaker) for speaker in (Dog(), Robot())]
        for candidate in (Dog(), Robot(), Rock()):
            lines.append(f"isinstance({type(candidate).__name__}(), Speaker) = {isinstance(candidate, Speaker)}")
        return lines


# =========================================================================
# Universal Type
# =========================================================================

def describe_value(value: Any) -> str:
    return f"{value!r:<22} is a {type(value).__name__}"


def first_non_empty(values: List[object]) -> object:
    for value in values:
        if value:
            return value
    return None


class UniversalType(Lesson):
    topic = "Universal Type"
    explanation = """
        THE UNIVERSAL TYPE
        ==================

        Every Python value is an object, so `object` accepts anything.
        typing.Any also accepts anything but switches off type checking for
        that value, while `object` only allows operations every object
        supports.

        Key points:
        - Use object when you accept anything and only pass it along
        - Use Any when you genuinely can't describe the type
        - Both lose information: prefer a precise type when one exists
    """
    takeaways = """
        - Any and object both hold values of every type
        - object is the safer choice; Any silences the type checker
        - Recover the concrete type with isinstance() before using it
    """
    samples = (describe_value, first_non_empty)

    def execute(self) -> List[str]:
        values = [42, "hello", 3.14, [1, 2, 3], {"key": "value"}, None, Circle]
        lines = [describe_value(value) for value in values]
        lines.append(f"first_non_empty(['', 0, 'go']) = {first_non_empty(['', 0, 'go'])!r}")
        return lines


# =========================================================================
# Type Checks
# =========================================================================

def summarize(value: object) -> str:
    if isinstance(value, bool):
        return f"bool: {'yes' if value else 'no'}"
    if isinstance(value, int):
        return f"int: {value} doubled is {value * 2}"
    if isinstance(value, str):
        return f"str: {value.upper()!r} has {len(value)} characters"
    if isinstance(value, (list, tuple)):
        return f"sequence of {len(value)} items"
    if isinstance(value, Shape):
        return f"shape with area {value.area():.2f}"
    return f"unhandled type {type(value).__name__}"


class TypeChecks(Lesson):
    topic = "Type Checks"
    explanation = """
        RUNTIME TYPE CHECKS
        ===================

        When a value arrives as object or Any, isinstance() recovers its concrete
        type. It respects inheritance, and it accepts a tuple of types to test
        several at once. Type checkers narrow the type inside each branch.

        Key points:
        - isinstance(x, T) is True for T and every subclass of T
        - bool is a subclass of int, so test bool first
        - Checking against an ABC matches every implementation
    """
    takeaways = """
        - Order matters: put the most specific checks first
        - Prefer isinstance() over comparing type(x) == T
        - Fall through to a clear default for anything unexpected
    """
    samples = (summarize,)

    def execute(self) -> List[str]:
        values = [True, 21, "python", [1, 2], Rectangle(2, 5), 1.5]
        return [f"{value!r:<16} -> {summarize(value)}" for value in values]


# =========================================================================
# Interface Composition
# =========================================================================

class Reader(Protocol):
    def read(self) -> str:
        ...


class Writer(Protocol):
    def write(self, data: str) -> int:
        ...


class ReadWriter(Reader, Writer, Protocol):
    pass


class Buffer:
    def __init__(self):
        self._chunks: List[str] = []

    def write(self, data: str) -> int:
        self._chunks.append(data)
        return len(data)

    def read(self) -> str:
        data = ''.join(self._chunks)
        self._chunks.clear()
        return data


def copy(source: Reader, target: Writer) -> int:
    return target.write(source.read())


def echo(stream: ReadWriter, message: str) -> str:
    stream.write(message)
    return stream.read()


class InterfaceComposition(Lesson):
    topic = "Interface Composition"
    explanation = """
        INTERFACE COMPOSITION
        =====================

        Small interfaces combine into bigger ones. A protocol that inherits from
        other protocols requires all of their methods. Functions should ask for
        the smallest interface they need: copy() only reads from the source
        and only writes to the target.

        Key points:
        - Compose protocols by listing them as bases (plus Protocol itself)
        - One class can satisfy many small interfaces at once
        - Narrow parameters make functions easier to reuse and test
    """
    takeaways = """
        - Build large interfaces out of small ones
        - Accept the narrowest interface a function actually uses
        - Buffer satisfies Reader, Writer and ReadWriter without declaring any
    """
    samples = (Reader, Writer, ReadWriter, Buffer, copy, echo)

    def execute(self) -> List[str]:
        source, target = Buffer(), Buffer()
        source.write("hello, ")
        source.write("interfaces")
        copied = copy(source, target)
        return [
            f"copy() moved {copied} characters",
            f"target now holds {target.read()!r}",
            f"echo() returned {echo(Buffer(), 'ping')!r}",
        ]


LESSONS = (
    AbstractBaseClasses,
    DuckTyping,
    UniversalType,
    TypeChecks,
    InterfaceComposition,
)

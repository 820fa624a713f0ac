#!/usr/bin/env python
import enum
from typing import List, Optional


class OptionKind(enum.IntEnum):
    """What an option expects after its identifier."""

    FLAG = 0
    REQUIRED_VALUE = 1
    OPTIONAL_VALUE = 2


class EventType(enum.IntEnum):
    FLAG = 0
    VALUE = 1
    OPTIONAL_VALUE = 2
    FREE = 3
    MISSING_VALUE = 4
    UNKNOWN = 5


FAILURE_EVENTS = frozenset({EventType.MISSING_VALUE, EventType.UNKNOWN})


class LitOptsError(Exception):
    """
    Base class of all pyLitOpts exceptions.
    """


class OptionTableError(LitOptsError):
    """
    An option table could not be built.

    `errors` lists every individual problem found, `str()` joins them.
    """

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = errors if errors is not None else [message]

    def __str__(self):
        return "; ".join(self.errors)


class DuplicateOptionError(OptionTableError):
    """
    Two descriptors share a short or a long identifier.
    """


class OptionSyntaxError(LitOptsError):
    """
    An option string like ``-c, --color[=WHEN]`` is malformed.
    """

    def __init__(self, message: str, text: str, position: int):
        super().__init__(message)
        self.message = message
        self.text = text
        self.position = position

    def __str__(self):
        return f"{self.message} at position {self.position} in {self.text!r}"


class RecordingError(LitOptsError):
    """
    Raised by `Recording.unwrap()` if the recording pass stopped at an unknown option or a missing value.
    """

    def __init__(self, event):
        super().__init__(event)
        self.event = event

    def get_event(self):
        return self.event

    def __str__(self):
        event = self.event
        if event.type == EventType.UNKNOWN:
            return f"unknown option {event.char!r}"
        return f"option {event.spelling!r} requires an argument"

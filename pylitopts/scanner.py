#!/usr/bin/env python
"""
Scan argument vectors against an `OptionTable`.

The scanner is a forward-only iterator yielding one `ParseEvent` per step.
Short options may be bundled (``-sl``), values may be attached (``-cred``, ``--color=red``)
or given as the following token (``-c red``, ``--color red``), and a bare ``--`` ends
option processing.
"""

import logging
import os
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Union

from pylitopts.table import OptionDescriptor, OptionTable
from pylitopts.types import FAILURE_EVENTS, EventType, OptionKind


DASH = ord("-")

Argument = Union[bytes, bytearray, str]


@dataclass(frozen=True)
class ParseEvent:
    """Outcome of a single scan step.

    `name` is the canonical name of the matched option (its short identifier if it has one),
    `real` is the identifier as typed by the user, so error messages can use the same spelling.
    Both are empty for `FREE` and `UNKNOWN` events.
    """

    type: EventType
    name: str = ""
    real: str = ""
    option: Optional[OptionDescriptor] = None
    value: Optional[bytes] = None
    char: Optional[str] = None
    via_long: bool = False

    @property
    def token(self) -> Optional[bytes]:
        """The free argument of a `FREE` event."""
        return self.value if self.type == EventType.FREE else None

    @property
    def spelling(self) -> str:
        if not self.real:
            return ""
        return f"--{self.real}" if self.via_long else f"-{self.real}"

    @property
    def is_failure(self) -> bool:
        return self.type in FAILURE_EVENTS

    def get_value(self) -> bytes:
        if self.type != EventType.VALUE:
            raise ValueError(f"{self.type.name} event carries no mandatory value")
        return self.value

    def get_value_optional(self) -> Optional[bytes]:
        if self.type != EventType.OPTIONAL_VALUE:
            raise ValueError(f"{self.type.name} event carries no optional value")
        return self.value

    def __str__(self):
        if self.type == EventType.FREE:
            return f"FREE({self.value!r})"
        if self.type == EventType.UNKNOWN:
            return f"UNKNOWN({self.char!r})"
        if self.type in (EventType.VALUE, EventType.OPTIONAL_VALUE):
            return f"{self.type.name}({self.spelling}, {self.value!r})"
        return f"{self.type.name}({self.spelling})"


def as_bytes(argument: Argument) -> bytes:
    """Arguments given as `str` are encoded the way the OS handed them to Python."""
    if isinstance(argument, str):
        return os.fsencode(argument)
    return bytes(argument)


class Scanner:
    """Iterator over the `ParseEvent`s of an argument vector.

    Parameters
    ----------
    table: OptionTable
    arguments: sequence of bytes (or str)
        Arguments without the program name.
    posix: bool
        Stop option processing at the first free argument.
    """

    def __init__(self, table: OptionTable, arguments: Sequence[Argument], posix: bool = False):
        self.logger = logging.getLogger("PyLitOpts")
        self._table = table
        self._args: List[bytes] = [as_bytes(a) for a in arguments]
        self._posix = bool(posix)
        self.position = 0
        self.sub_position: Optional[int] = None
        self.free_only = False

    @property
    def posix(self) -> bool:
        return self._posix

    def __iter__(self) -> Iterator[ParseEvent]:
        return self

    def __next__(self) -> ParseEvent:
        event = self._step()
        if event is None:
            raise StopIteration
        self.logger.debug("scanned %s", event)
        return event

    def _step(self) -> Optional[ParseEvent]:
        args = self._args
        while True:
            if self.sub_position is not None and self.sub_position >= len(args[self.position]):
                self._next_token()
            if self.position >= len(args):
                return None
            if self.sub_position is not None:
                return self._cluster_step()
            arg = args[self.position]
            if self.free_only or len(arg) < 2 or arg[0] != DASH:
                return self._free(arg)
            if arg[1] == DASH:
                if len(arg) == 2:
                    # Terminator, everything after it is free.
                    self.position += 1
                    self.free_only = True
                    continue
                return self._long_option(arg)
            if self._table.has_short(chr(arg[1])):
                self.sub_position = 1
                continue
            return self._free(arg)

    def _next_token(self) -> None:
        self.position += 1
        self.sub_position = None

    def _take_following(self) -> Optional[bytes]:
        """Consume the next whole token as a value, if there is one."""
        if self.position < len(self._args):
            value = self._args[self.position]
            self.position += 1
            return value
        return None

    def _free(self, arg: bytes) -> ParseEvent:
        self.position += 1
        if self._posix:
            self.free_only = True
        return ParseEvent(EventType.FREE, value=arg)

    def _option_event(
        self, type_: EventType, option: OptionDescriptor, real: str, via_long: bool, value: Optional[bytes] = None
    ) -> ParseEvent:
        return ParseEvent(type_, name=option.name, real=real, option=option, value=value, via_long=via_long)

    def _cluster_step(self) -> ParseEvent:
        sub = self.sub_position
        arg = self._args[self.position]
        ch = chr(arg[sub])
        option = self._table.find_short(ch)
        if option is None:
            self._next_token()
            return ParseEvent(EventType.UNKNOWN, char=ch)
        if option.kind == OptionKind.FLAG:
            self.sub_position = sub + 1
            return self._option_event(EventType.FLAG, option, ch, False)
        self._next_token()
        rest = arg[sub + 1 :]
        if option.kind == OptionKind.OPTIONAL_VALUE:
            return self._option_event(EventType.OPTIONAL_VALUE, option, ch, False, rest or None)
        if not rest:
            rest = self._take_following()
            if rest is None:
                return self._option_event(EventType.MISSING_VALUE, option, ch, False)
        return self._option_event(EventType.VALUE, option, ch, False, rest)

    def _long_option(self, arg: bytes) -> ParseEvent:
        eq = arg.find(b"=")
        if eq >= 0:
            candidate, attached = arg[2:eq], arg[eq + 1 :]
        else:
            candidate, attached = arg[2:], None
        option = self._table.find_long(os.fsdecode(candidate))
        if option is None:
            # Unknown long options are not an error, they are passed on as free arguments.
            return self._free(arg)
        self.position += 1
        real = option.long
        if option.kind == OptionKind.FLAG:
            return self._option_event(EventType.FLAG, option, real, True)
        if option.kind == OptionKind.OPTIONAL_VALUE:
            return self._option_event(EventType.OPTIONAL_VALUE, option, real, True, attached)
        if attached is None:
            attached = self._take_following()
            if attached is None:
                return self._option_event(EventType.MISSING_VALUE, option, real, True)
        return self._option_event(EventType.VALUE, option, real, True, attached)


def scan(table: OptionTable, arguments: Sequence[Argument], posix: bool = False) -> Scanner:
    """Lazily scan `arguments` (program name excluded) against `table`."""
    return Scanner(table, arguments, posix)

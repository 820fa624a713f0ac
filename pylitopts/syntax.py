#!/usr/bin/env python
"""
Parse human readable option strings into option descriptors.

Accepted shapes::

    -x                  -x <PARAM>          -x[PARAM]
    --name              --name=PARAM        --name[=PARAM]
    -x, --name          -x, --name=PARAM    -x, --name[=PARAM]

Leading blanks are ignored, so ``"    --version"`` lines up with ``"-s, --short"``
in a table literal.
"""

import enum
import string
from typing import Iterable, Optional, Tuple, Union

from pylitopts.table import OptionDescriptor, OptionTable, build_table
from pylitopts.types import OptionKind, OptionSyntaxError, OptionTableError


BLANKS = frozenset(" \t")
LETTERS = frozenset(string.ascii_letters)
LONG_CHARS = LETTERS | {"-"}
PARAM_CHARS = LETTERS | {"_"}

OptionEntry = Union[str, Tuple[str, str]]


class State(enum.IntEnum):
    START = 0
    DASH = 1
    SHORT = 2
    SHORT_OPT_OPT = 3
    POST_SHORT = 4
    SHORT_OPT = 5
    DASH_DASH = 6
    LONG_OPT = 7
    LONG_OPT_OPT = 8
    END = 9


def _char_at(text: str, index: int) -> Optional[str]:
    """Character at `index` or `None` at end of text."""
    if index >= len(text):
        return None
    ch = text[index]
    if not ch.isascii():
        raise OptionSyntaxError("expected ASCII", text, index)
    return ch


def parse_option(text: str, help_text: str = "") -> OptionDescriptor:
    """Parse a single option string like ``-c, --color[=WHEN]``.

    Raises
    ------
    OptionSyntaxError
        with the position of the first offending character.
    """

    def error(index: int, expected: str):
        raise OptionSyntaxError(f"expected {expected}", text, index)

    state = State.START
    short = None
    long_start = long_end = None
    param_start = param_end = None
    kind = OptionKind.FLAG
    idx = 0
    while True:
        ch = _char_at(text, idx)
        if state == State.START:
            if ch in BLANKS:
                pass
            elif ch == "-":
                state = State.DASH
            else:
                error(idx, "`-`")
        elif state == State.DASH:
            if ch == "-":
                idx += 1
                if _char_at(text, idx) not in LETTERS:
                    error(idx, "`[A-Za-z]`")
                long_start = idx
                state = State.DASH_DASH
            elif ch in LETTERS:
                if short is not None:
                    error(idx, "`-`")
                short = ch
                state = State.SHORT
            else:
                error(idx, "`[A-Za-z-]`")
        elif state == State.SHORT:
            if ch in BLANKS:
                state = State.POST_SHORT
            elif ch == "[":
                kind = OptionKind.OPTIONAL_VALUE
                param_start = idx + 1
                state = State.SHORT_OPT_OPT
            elif ch == ",":
                state = State.START
            elif ch is None:
                break
            else:
                error(idx, r"`[ \t\[,]`")
        elif state == State.SHORT_OPT_OPT:
            if ch in PARAM_CHARS:
                pass
            elif ch == "]":
                param_end = idx
                state = State.END
            else:
                error(idx, r"`[A-Za-z_\]]`")
        elif state == State.POST_SHORT:
            if ch in BLANKS:
                pass
            elif ch == "<":
                kind = OptionKind.REQUIRED_VALUE
                param_start = idx + 1
                state = State.SHORT_OPT
            elif ch == ",":
                state = State.START
            elif ch is None:
                break
            else:
                error(idx, r"`[ \t<,]`")
        elif state == State.SHORT_OPT:
            if ch in PARAM_CHARS:
                pass
            elif ch == ">":
                param_end = idx
                state = State.END
            else:
                error(idx, "`[A-Za-z_>]`")
        elif state == State.DASH_DASH:
            if ch in LONG_CHARS:
                pass
            elif ch in BLANKS:
                long_end = idx
                state = State.END
            elif ch == "=":
                if _char_at(text, idx + 1) not in PARAM_CHARS:
                    error(idx + 1, "`[A-Za-z_]`")
                long_end = idx
                kind = OptionKind.REQUIRED_VALUE
                param_start = idx + 1
                state = State.LONG_OPT
            elif ch == "[":
                if _char_at(text, idx + 1) != "=":
                    error(idx + 1, "`=`")
                long_end = idx
                kind = OptionKind.OPTIONAL_VALUE
                idx += 1
                param_start = idx + 1
                state = State.LONG_OPT_OPT
            elif ch is None:
                long_end = idx
                break
            else:
                error(idx, r"`[A-Za-z- \t=\[]`")
        elif state == State.LONG_OPT:
            if ch in PARAM_CHARS:
                pass
            elif ch in BLANKS:
                param_end = idx
                state = State.END
            elif ch is None:
                param_end = idx
                break
            else:
                error(idx, r"`[A-Za-z_ \t]`")
        elif state == State.LONG_OPT_OPT:
            if ch in PARAM_CHARS:
                pass
            elif ch == "]":
                param_end = idx
                state = State.END
            else:
                error(idx, r"`[A-Za-z_\]]`")
        else:  # State.END
            if ch in BLANKS:
                pass
            elif ch is None:
                break
            else:
                error(idx, "end of option")
        idx += 1

    long = text[long_start:long_end] if long_start is not None else None
    parameter_name = text[param_start:param_end] if param_start is not None else ""
    return OptionDescriptor(short=short, long=long, parameter_name=parameter_name, help_text=help_text, kind=kind)


def table_from_strings(entries: Iterable[OptionEntry]) -> OptionTable:
    """Build an `OptionTable` from option strings.

    Every entry is either an option string or a ``(option string, help text)`` pair.
    All entries are checked before failing, the raised `OptionTableError` lists every problem.

    Example
    -------

    OPTS = table_from_strings(
        [
            ("-c, --color[=WHEN]", "set color mode"),
            ("-s, --short", "activate short mode"),
            "    --version",
        ]
    )
    """
    descriptors = []
    errors = []
    shorts = set()
    longs = set()
    for entry in entries:
        if isinstance(entry, str):
            text, help_text = entry, ""
        else:
            text, help_text = entry
        try:
            option = parse_option(text, help_text)
        except OptionSyntaxError as e:
            errors.append(str(e))
            continue
        if option.short is not None and option.short in shorts:
            errors.append(f"duplicate flag `-{option.short}`")
        elif option.long is not None and option.long in longs:
            errors.append(f"duplicate flag `--{option.long}`")
        else:
            if option.short is not None:
                shorts.add(option.short)
            if option.long is not None:
                longs.add(option.long)
            descriptors.append(option)
    if errors:
        raise OptionTableError(errors[0], errors)
    return build_table(descriptors)

#!/usr/bin/env python
"""Shared parts of the ``litopts-echo`` and ``litopts-record`` example programs."""

import enum
import sys
from typing import Iterable, Optional

from rich.console import Console
from rich.text import Text

from pylitopts.scanner import ParseEvent
from pylitopts.utils import decode_bytes


COLOR_STYLE = "bold yellow"


class ColorMode(enum.IntEnum):
    # Never write colored text.
    NEVER = 0
    # Always write colored text.
    ALWAYS = 1
    # Write colored text if the output is a terminal.
    AUTO = 2

    @classmethod
    def from_name(cls, name: str) -> Optional["ColorMode"]:
        return COLOR_NAMES.get(name)


COLOR_NAMES = {
    "never": ColorMode.NEVER,
    "always": ColorMode.ALWAYS,
    "auto": ColorMode.AUTO,
}


def color_from_event(event: ParseEvent) -> Optional[ColorMode]:
    """`--color` without argument means always, unknown arguments give `None`."""
    value = event.get_value_optional()
    if value is None:
        return ColorMode.ALWAYS
    return ColorMode.from_name(decode_bytes(value))


def bad_color(event: ParseEvent) -> None:
    err_console = Console(stderr=True, highlight=False, soft_wrap=True)
    # event.real contains the string the option was activated with.
    err_console.print(
        f"Argument `{event.real}` takes no argument or one of the arguments `never`, `always`, or `auto`.",
        markup=False,
    )
    sys.exit(1)


def write_free(free: Iterable[bytes], short_mode: bool, color_mode: ColorMode) -> None:
    colorize = color_mode == ColorMode.ALWAYS or (color_mode == ColorMode.AUTO and sys.stdout.isatty())
    out = Console(force_terminal=colorize, color_system="standard" if colorize else None, highlight=False, soft_wrap=True)
    prefix = "o: " if short_mode else "output: "
    for value in free:
        line = Text(prefix)
        line.append(decode_bytes(value), style=COLOR_STYLE if colorize else None)
        out.print(line)

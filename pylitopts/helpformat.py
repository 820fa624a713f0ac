#!/usr/bin/env python
"""GNU style option help.

::

  -c, --color[=WHEN]   set color mode
  -s, --short          activate short mode
      --version        print the version
"""

from typing import List

from pylitopts.table import OptionDescriptor, OptionTable
from pylitopts.types import OptionKind


LINE_WIDTH = 80
MAX_COLUMN = 29  # Help text never starts right of this column.
LONG_ONLY_INDENT = 4  # Width of "-x, ".


def format_descriptor(option: OptionDescriptor) -> str:
    """Left column of the help line for `option`, including the two leading blanks."""
    param = option.parameter_name or "ARG"
    result = ["  "]
    if option.short is not None:
        result.append(f"-{option.short}")
        if option.long is not None:
            result.append(", ")
        elif option.kind == OptionKind.REQUIRED_VALUE:
            result.append(f" <{param}>")
        elif option.kind == OptionKind.OPTIONAL_VALUE:
            result.append(f"[{param}]")
    if option.long is not None:
        result.append(f"--{option.long}")
        if option.kind == OptionKind.REQUIRED_VALUE:
            result.append(f"={param}")
        elif option.kind == OptionKind.OPTIONAL_VALUE:
            result.append(f"[={param}]")
    return "".join(result)


def _wrap(lines: List[str], line: str, column: int, indent: int, words: List[str], line_width: int, fresh: bool) -> None:
    """Greedily append `words` to `line`, continuation lines are indented by `indent` blanks.

    A word too long for an empty continuation line is placed on a line of its own.
    """
    has_words = False
    for word in words:
        sep = 1 if has_words else 0
        if not fresh and column + sep + len(word) > line_width:
            lines.append(line.rstrip())
            line = " " * indent
            column = indent
            has_words = False
            sep = 0
        line += " " * sep + word
        column += sep + len(word)
        has_words = True
        fresh = False
    if not fresh:
        lines.append(line.rstrip())


def render_help(table: OptionTable, line_width: int = LINE_WIDTH, max_column: int = MAX_COLUMN) -> str:
    """Render the help text for all options of `table`, one block per option, each ending in a newline."""
    texts = [format_descriptor(o) for o in table]
    has_both = table.has_both_forms()

    def lead(option):
        return LONG_ONLY_INDENT if has_both and option.short is None else 0

    max_len = max((len(text) + lead(o) for o, text in zip(table, texts)), default=0)
    offset = min(max_len + 3, max_column)
    lines: List[str] = []
    for option, text in zip(table, texts):
        head = " " * lead(option) + text
        if offset - len(head) > 1:
            line, column, fresh = head + " " * (offset - len(head)), offset, False
        else:
            # Descriptor too wide, help starts on the next line.
            lines.append(head)
            line, column, fresh = " " * (offset + 2), offset + 2, True
        _wrap(lines, line, column, offset + 2, option.help_text.split(), line_width, fresh)
    return "".join(f"{line}\n" for line in lines)

#!/usr/bin/env python

"""Echo free arguments, collecting all options before acting on them."""

import sys

from rich.console import Console

from pylitopts import __version__
from pylitopts.config import create_application
from pylitopts.helpformat import render_help
from pylitopts.recorder import record
from pylitopts.scripts.echo import ColorMode, bad_color, color_from_event, write_free
from pylitopts.syntax import table_from_strings
from pylitopts.types import EventType
from pylitopts.utils import argv_as_bytes


OPTS = table_from_strings(
    [
        ("-c, --color[=WHEN]", "set color mode"),
        ("-s, --short", "activate short mode"),
        ("-l, --long", "activate long mode"),
        ("    --help", "print this help"),
        ("    --version", "print the version"),
    ]
)


def main(argv=None):
    app = create_application()
    color_mode = ColorMode.from_name(app.general.colors)
    short_mode = True

    rec = record(OPTS, argv_as_bytes(argv), posix=app.scanning.posix)
    if not rec.ok:
        err_console = Console(stderr=True, highlight=False, soft_wrap=True)
        failure = rec.failure
        if failure.type == EventType.UNKNOWN:
            err_console.print(f"Unknown option {failure.char}", markup=False)
        else:
            err_console.print(f"Option {failure.spelling} requires an argument", markup=False)
        sys.exit(1)

    for event in rec.results:
        if event.name == "s":
            short_mode = True
        elif event.name == "l":
            short_mode = False
        elif event.name == "c":
            color_mode = color_from_event(event)
            if color_mode is None:
                bad_color(event)
        elif event.name == "help":
            print("USAGE:")
            print(render_help(OPTS, app.help_format.line_width, app.help_format.max_column), end="")
            return
        elif event.name == "version":
            print(__version__)
            return

    write_free(rec.free, short_mode, color_mode)


if __name__ == "__main__":
    main()

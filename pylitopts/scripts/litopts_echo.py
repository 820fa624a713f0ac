#!/usr/bin/env python

"""Echo free arguments, consuming options as a stream of events."""

from pylitopts import __version__
from pylitopts.config import create_application
from pylitopts.scanner import scan
from pylitopts.scripts.echo import ColorMode, bad_color, color_from_event, write_free
from pylitopts.syntax import table_from_strings
from pylitopts.types import EventType
from pylitopts.utils import argv_as_bytes


OPTS = table_from_strings(
    [
        "-c, --color[=WHEN]",
        "-s, --short",
        "-l, --long",
        "    --version",
    ]
)


def main(argv=None):
    app = create_application()
    color_mode = ColorMode.from_name(app.general.colors)
    short_mode = True
    free = []

    for event in scan(OPTS, argv_as_bytes(argv), posix=app.scanning.posix):
        if event.type == EventType.FREE:
            free.append(event.token)
        elif event.type == EventType.UNKNOWN:
            app.log.debug(f"ignoring unknown option {event.char!r}")
        elif event.name == "s":
            # Re-enable a previously disabled short mode.
            short_mode = True
        elif event.name == "l":
            short_mode = False
        elif event.name == "c":
            color_mode = color_from_event(event)
            if color_mode is None:
                bad_color(event)
        elif event.name == "version":
            print(__version__)
            return

    write_free(free, short_mode, color_mode)


if __name__ == "__main__":
    main()

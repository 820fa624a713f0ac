#!/usr/bin/env python
"""Literal option tables and a small, exact command line scanner."""

from .helpformat import format_descriptor, render_help  # noqa: F401
from .recorder import Recording, record  # noqa: F401
from .scanner import ParseEvent, Scanner, scan  # noqa: F401
from .syntax import parse_option, table_from_strings  # noqa: F401
from .table import OptionDescriptor, OptionTable, build_table  # noqa: F401
from .types import (  # noqa: F401
    DuplicateOptionError,
    EventType,
    LitOptsError,
    OptionKind,
    OptionSyntaxError,
    OptionTableError,
    RecordingError,
)


# setup.py reads the version from this line.
__version__ = "0.3.1"

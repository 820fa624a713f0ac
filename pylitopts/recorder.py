#!/usr/bin/env python
"""Eagerly collect the events of a scan."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from pylitopts.scanner import Argument, ParseEvent, scan
from pylitopts.table import OptionTable
from pylitopts.types import EventType, RecordingError


logger = logging.getLogger("PyLitOpts")


@dataclass
class Recording:
    """Result of `record()`.

    On success `free` and `results` hold the free arguments and the recognized options,
    each in scan order (their relative interleaving is not kept).
    On failure both are empty and `failure` is the terminating `UNKNOWN` / `MISSING_VALUE` event.
    """

    free: List[bytes] = field(default_factory=list)
    results: List[ParseEvent] = field(default_factory=list)
    failure: Optional[ParseEvent] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    def unwrap(self) -> "Recording":
        if self.failure is not None:
            raise RecordingError(self.failure)
        return self

    def names(self) -> List[str]:
        """Canonical names of the recognized options."""
        return [r.name for r in self.results]


def record(table: OptionTable, arguments: Sequence[Argument], posix: bool = False) -> Recording:
    """Scan `arguments` to completion, stopping at the first unknown option or missing value."""
    free = []
    results = []
    for event in scan(table, arguments, posix):
        if event.is_failure:
            logger.debug("recording aborted by %s", event)
            return Recording(failure=event)
        if event.type == EventType.FREE:
            free.append(event.value)
        else:
            results.append(event)
    return Recording(free=free, results=results)

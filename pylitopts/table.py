#!/usr/bin/env python
"""Option descriptors and the immutable option table."""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple

from pylitopts.types import DuplicateOptionError, OptionKind, OptionTableError


@dataclass(frozen=True)
class OptionDescriptor:
    """One recognized option.

    Parameters
    ----------
    short: str
        Single character identifier (``c`` for ``-c``).
    long: str
        Long identifier without the dashes (``color`` for ``--color``).
    parameter_name: str
        Placeholder shown in help output for value taking options.
    help_text: str
        Free-form description, only used for help output.
    kind: OptionKind
    """

    short: Optional[str] = None
    long: Optional[str] = None
    parameter_name: str = ""
    help_text: str = ""
    kind: OptionKind = OptionKind.FLAG

    @property
    def short_str(self) -> str:
        return self.short or ""

    @property
    def name(self) -> str:
        """Canonical name: the short identifier if there is one, else the long one."""
        return self.short if self.short is not None else self.long

    @property
    def takes_value(self) -> bool:
        return self.kind != OptionKind.FLAG


class OptionTable:
    """Ordered, read-only collection of `OptionDescriptor`s.

    Tables are small, so lookups are linear scans.
    Use `build_table()` to create one, it rejects duplicate identifiers.
    """

    __slots__ = ("_options",)

    def __init__(self, options: Tuple[OptionDescriptor, ...]):
        self._options = options

    def __iter__(self) -> Iterator[OptionDescriptor]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def __getitem__(self, index) -> OptionDescriptor:
        return self._options[index]

    def __repr__(self):
        return f"OptionTable({list(self._options)!r})"

    def find_short(self, short: str) -> Optional[OptionDescriptor]:
        for option in self._options:
            if option.short is not None and option.short == short:
                return option
        return None

    def find_long(self, long: str) -> Optional[OptionDescriptor]:
        for option in self._options:
            if option.long is not None and option.long == long:
                return option
        return None

    def has_short(self, short: str) -> bool:
        return self.find_short(short) is not None

    def has_both_forms(self) -> bool:
        """True if any option can be given by its short and by its long identifier."""
        return any(o.short is not None and o.long is not None for o in self._options)


def check_descriptor(option: OptionDescriptor) -> None:
    if option.short is None and option.long is None:
        raise OptionTableError(f"option {option!r} has neither a short nor a long identifier")
    if option.short is not None and len(option.short) != 1:
        raise OptionTableError(f"short identifier {option.short!r} must be a single character")
    if option.short is not None and not option.short.isascii():
        raise OptionTableError(f"short identifier {option.short!r} must be ASCII")
    if option.long is not None and not option.long:
        raise OptionTableError("long identifier must not be empty")
    if not isinstance(option.kind, OptionKind):
        raise OptionTableError(f"invalid option kind {option.kind!r}")


def build_table(descriptors: Iterable[OptionDescriptor]) -> OptionTable:
    """Create an `OptionTable` from `descriptors`, preserving their order.

    Raises
    ------
    DuplicateOptionError
        if two descriptors share a short or a long identifier.
    OptionTableError
        if a descriptor is structurally invalid.
    """
    options = []
    shorts = set()
    longs = set()
    for option in descriptors:
        check_descriptor(option)
        if option.short is not None:
            if option.short in shorts:
                raise DuplicateOptionError(f"duplicate flag `-{option.short}`")
            shorts.add(option.short)
        if option.long is not None:
            if option.long in longs:
                raise DuplicateOptionError(f"duplicate flag `--{option.long}`")
            longs.add(option.long)
        options.append(option)
    return OptionTable(tuple(options))

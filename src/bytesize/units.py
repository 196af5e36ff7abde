"""Unit ladder shared by formatting and parsing."""

from typing import NamedTuple, Optional


class Unit(NamedTuple):
    """A step of the unit ladder: byte threshold and display suffix."""

    size: int
    name: str


# Ascending, each step 1024 times the previous one
UNITS = (
    Unit(1, "B"),
    Unit(1 << 10, "KB"),
    Unit(1 << 20, "MB"),
    Unit(1 << 30, "GB"),
    Unit(1 << 40, "TB"),
    Unit(1 << 50, "PB"),
)

_BY_SIZE = {u.size: u for u in UNITS}
_BY_NAME = {u.name: u for u in UNITS}


def unit_for_size(size: int) -> Optional[Unit]:
    """Return the unit whose threshold is exactly ``size``, if any."""
    return _BY_SIZE.get(size)


def unit_for_name(name: str) -> Optional[Unit]:
    """Look up a unit by suffix, ignoring case."""
    return _BY_NAME.get(name.upper())


def best_unit(count: int) -> Unit:
    """Pick the largest unit not exceeding the magnitude of ``count``.

    Anything below 1 KB, zero and negatives included, lands on bytes.
    """
    magnitude = abs(count)
    for unit in reversed(UNITS):
        if magnitude >= unit.size:
            return unit
    return UNITS[0]

"""Parsing of size strings such as "10KB" or "1.5gb"."""

import math
from typing import Optional

from loguru import logger

from .size import ByteSize
from .units import unit_for_name


class ByteSizeError(ValueError):
    """Base class for size strings that cannot be parsed."""


class EmptyInputError(ByteSizeError):
    """Raised when the size string is empty."""

    def __init__(self):
        super().__init__("empty size string")


class InvalidUnitError(ByteSizeError):
    """Raised when the unit suffix is not one of B, KB, MB, GB, TB, PB."""

    def __init__(self, unit: str):
        self.unit = unit
        super().__init__(f"invalid size unit: {unit}")


class MalformedNumberError(ByteSizeError):
    """Raised when the part before the unit is not a number."""

    def __init__(self, value: str, error: Optional[Exception] = None):
        self.value = value
        self.error = error
        message = f"malformed size value: {value!r}"
        if error is not None:
            message = f"{message}: {error}"
        super().__init__(message)


def split_unit(s: str) -> tuple[str, str]:
    """Split ``s`` into its numeric prefix and unit suffix.

    A letter before the last character makes a two-letter suffix (KB, mb,
    XB, ...); otherwise the suffix is the last character alone.
    """
    if len(s) > 2 and s[-2].isalpha():
        return s[:-2], s[-2:]
    return s[:-1], s[-1:]


def _parse_number(value_str: str) -> float:
    # float() is more lenient than a plain decimal literal
    if not value_str.isascii() or value_str != value_str.strip() or "_" in value_str:
        raise MalformedNumberError(value_str)
    try:
        value = float(value_str)
    except ValueError as e:
        raise MalformedNumberError(value_str, e) from e
    if not math.isfinite(value):
        raise MalformedNumberError(value_str)
    return value


def parse(s: str) -> ByteSize:
    """Parse a size string into a ByteSize.

    Accepts a decimal number followed by B, KB, MB, GB, TB or PB, the unit
    matched case-insensitively. Fractional bytes are truncated.

    Args:
        s: Size string such as "10KB" or "1.5MB"

    Returns:
        The size in bytes, e.g. parse("10KB") == 10240

    Raises:
        EmptyInputError: If ``s`` is empty
        InvalidUnitError: If the suffix is not a known unit
        MalformedNumberError: If the numeric part cannot be parsed
    """
    if not isinstance(s, str):
        raise TypeError(f"size must be a string, not {type(s).__name__}")
    if not s:
        logger.debug("Refusing to parse empty size string")
        raise EmptyInputError()

    value_str, unit_name = split_unit(s)

    unit = unit_for_name(unit_name)
    if unit is None:
        logger.debug(f"Unknown unit {unit_name!r} in size {s!r}")
        raise InvalidUnitError(unit_name)

    try:
        value = _parse_number(value_str)
    except MalformedNumberError:
        logger.debug(f"Bad numeric part {value_str!r} in size {s!r}")
        raise

    return ByteSize(value * unit.size)

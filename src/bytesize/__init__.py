"""bytesize - byte counts with unit conversion, formatting and parsing.

Sizes use the binary ladder B, KB, MB, GB, TB, PB (each 1024 times the
previous one).
"""

from loguru import logger

__version__ = "0.1.0"
__author__ = "bytesize contributors"

from .units import UNITS, Unit
from .size import (
    BYTE,
    KB,
    MB,
    GB,
    TB,
    PB,
    DEFAULT_MAX_DECIMALS,
    ByteSize,
    calc,
    decimal_places,
    format_string,
)
from .parse import (
    ByteSizeError,
    EmptyInputError,
    InvalidUnitError,
    MalformedNumberError,
    parse,
)

# Library logging stays silent until the application opts in
logger.disable("bytesize")

__all__ = [
    "UNITS",
    "Unit",
    "BYTE",
    "KB",
    "MB",
    "GB",
    "TB",
    "PB",
    "DEFAULT_MAX_DECIMALS",
    "ByteSize",
    "calc",
    "decimal_places",
    "format_string",
    "ByteSizeError",
    "EmptyInputError",
    "InvalidUnitError",
    "MalformedNumberError",
    "parse",
]

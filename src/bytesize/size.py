"""ByteSize value type and human-readable formatting."""

import math
from typing import Optional

from .units import UNITS, best_unit, unit_for_size


# Decimal places shown by str() and ByteSize.format()
DEFAULT_MAX_DECIMALS = 2

# How close to a whole number a scaled value must be to stop counting decimals
DECIMAL_EPSILON = 1e-10


def _wrap(result):
    if isinstance(result, int) and not isinstance(result, bool):
        return ByteSize(result)
    return result


def _trunc_div(count: int, size: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(int(count)) // int(size)
    return -quotient if count < 0 else quotient


class ByteSize(int):
    """An immutable count of bytes.

    Behaves like an ``int`` for comparison and hashing; integer arithmetic
    between sizes (and plain ints) keeps the ``ByteSize`` type, so
    ``5 * MB`` is still a ``ByteSize``. True division yields a ``float``.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"ByteSize({int(self)})"

    def __str__(self) -> str:
        unit = best_unit(self)
        return format_string(float(self) / unit.size, unit.name, DEFAULT_MAX_DECIMALS)

    def format(self, unit: Optional[int]) -> str:
        """Format the size in ``unit``.

        ``unit`` must be one of the ladder thresholds (``KB``, ``MB``, ...).
        Zero, ``None`` or any other value falls back to ``str(self)``.
        """
        target = unit_for_size(unit) if unit else None
        if target is None:
            return str(self)
        return format_string(float(self) / target.size, target.name, DEFAULT_MAX_DECIMALS)

    @classmethod
    def parse(cls, s: str) -> "ByteSize":
        """Shortcut for :func:`bytesize.parse.parse`."""
        from .parse import parse

        return parse(s)

    # Floating point conversions

    def byte_float(self) -> float:
        return float(self)

    def kb_float(self) -> float:
        return float(self) / KB

    def mb_float(self) -> float:
        return float(self) / MB

    def gb_float(self) -> float:
        return float(self) / GB

    def tb_float(self) -> float:
        return float(self) / TB

    def pb_float(self) -> float:
        return float(self) / PB

    # Truncated conversions

    def byte_int(self) -> int:
        return int(self)

    def kb_int(self) -> int:
        return _trunc_div(self, KB)

    def mb_int(self) -> int:
        return _trunc_div(self, MB)

    def gb_int(self) -> int:
        return _trunc_div(self, GB)

    def tb_int(self) -> int:
        return _trunc_div(self, TB)

    def pb_int(self) -> int:
        return _trunc_div(self, PB)

    # Arithmetic keeps the type

    def __add__(self, other):
        return _wrap(int.__add__(self, other))

    def __radd__(self, other):
        return _wrap(int.__radd__(self, other))

    def __sub__(self, other):
        return _wrap(int.__sub__(self, other))

    def __rsub__(self, other):
        return _wrap(int.__rsub__(self, other))

    def __mul__(self, other):
        return _wrap(int.__mul__(self, other))

    def __rmul__(self, other):
        return _wrap(int.__rmul__(self, other))

    def __floordiv__(self, other):
        return _wrap(int.__floordiv__(self, other))

    def __rfloordiv__(self, other):
        return _wrap(int.__rfloordiv__(self, other))

    def __mod__(self, other):
        return _wrap(int.__mod__(self, other))

    def __rmod__(self, other):
        return _wrap(int.__rmod__(self, other))

    def __neg__(self):
        return ByteSize(-int(self))

    def __pos__(self):
        return self

    def __abs__(self):
        return ByteSize(abs(int(self)))


BYTE, KB, MB, GB, TB, PB = (ByteSize(u.size) for u in UNITS)


def calc(data) -> ByteSize:
    """Return the length of a bytes-like buffer as a ByteSize.

    Raises:
        TypeError: If ``data`` does not support the buffer protocol
    """
    with memoryview(data) as view:
        return ByteSize(view.nbytes)


def decimal_places(value: float) -> int:
    """Count the decimal places needed to write ``value``.

    decimal_places(1.23) == 2, decimal_places(10.100) == 1.
    Non-finite values have none.
    """
    if not math.isfinite(value):
        return 0
    count = 0
    while abs(value - math.floor(value)) > DECIMAL_EPSILON:
        value *= 10
        count += 1
    return count


def _round_half_away(x: float) -> float:
    t = float(math.trunc(x))
    if abs(x - t) >= 0.5:
        t += math.copysign(1.0, x)
    return math.copysign(t, x)


def format_string(value: float, unit: str, max_decimals: Optional[int] = None) -> str:
    """Render ``value`` followed by ``unit``, dropping needless decimals.

    Args:
        value: Quantity already scaled to ``unit``
        unit: Suffix appended without a space
        max_decimals: Upper bound on decimal places; None or a negative
            number keeps every significant decimal

    Examples:
        format_string(1.00, "MB") -> "1MB"
        format_string(1.011, "MB", 2) -> "1.01MB"
        format_string(1.001, "MB", 2) -> "1.00MB"
    """
    decimals = decimal_places(value)
    if max_decimals is not None and 0 <= max_decimals < decimals:
        decimals = max_decimals

    if math.isfinite(value):
        multiplier = 10.0 ** decimals
        value = _round_half_away(value * multiplier) / multiplier

    return f"{value:.{decimals}f}{unit}"

"""Checked integer wrapper for fixed-width amount arithmetic.

Ledger amounts and reserves are unsigned 64-bit values. Pricing multiplies
pairs of them, so every intermediate is carried in a 128-bit width and only
narrowed back to 64 bits at the end:
- Division by zero raises DivisionByZero
- Subtraction underflow raises Underflow
- Products and sums beyond 128 bits raise ArithmeticOverflow
- Narrowing a value that does not fit 64 bits raises ArithmeticOverflow

Usage pattern:
    from liquidity_router.safe_int import S

    def quote(a: int, b: int, c: int) -> int:
        sa, sb, sc = S.from_u64(a), S.from_u64(b), S.from_u64(c)
        return ((sa * sb) // sc).to_u64()
"""

from __future__ import annotations

from liquidity_router.constants import U64_MAX, U128_MAX
from liquidity_router.errors import ArithmeticOverflow


class SafeIntError(ArithmeticError):
    """Base class for SafeInt arithmetic errors other than overflow."""

    pass


class DivisionByZero(SafeIntError):
    """Division by zero."""

    pass


class Underflow(SafeIntError):
    """Subtraction would produce negative result."""

    pass


class SafeInt:
    """Unsigned integer with width-checked arithmetic.

    Attributes:
        value: The underlying integer value (read-only)
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | SafeInt) -> None:
        if isinstance(value, SafeInt):
            self._value = value._value
        elif isinstance(value, int) and not isinstance(value, bool):
            self._value = _check_wide(value)
        else:
            raise TypeError(f"SafeInt requires int, got {type(value).__name__}")

    @classmethod
    def from_u64(cls, value: int) -> SafeInt:
        """Wrap a value that must fit an unsigned 64-bit integer.

        Raises:
            ArithmeticOverflow: If value is negative or exceeds 2^64-1
        """
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"SafeInt requires int, got {type(value).__name__}")
        if value < 0 or value > U64_MAX:
            raise ArithmeticOverflow(f"Value does not fit u64: {value}")
        return cls(value)

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    def __repr__(self) -> str:
        return f"SafeInt({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def __hash__(self) -> int:
        return hash(self._value)

    # --- Arithmetic operations ---

    def __add__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value + _extract_value(other))

    def __radd__(self, other: int) -> SafeInt:
        return SafeInt(other + self._value)

    def __sub__(self, other: SafeInt | int) -> SafeInt:
        """Subtract other from self.

        Raises:
            Underflow: If result would be negative
        """
        other_val = _extract_value(other)
        result = self._value - other_val
        if result < 0:
            raise Underflow(f"Underflow: {self._value} - {other_val} = {result}")
        return SafeInt(result)

    def __rsub__(self, other: int) -> SafeInt:
        result = other - self._value
        if result < 0:
            raise Underflow(f"Underflow: {other} - {self._value} = {result}")
        return SafeInt(result)

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value * _extract_value(other))

    def __rmul__(self, other: int) -> SafeInt:
        return SafeInt(other * self._value)

    def __floordiv__(self, other: SafeInt | int) -> SafeInt:
        """Integer division, truncating toward zero.

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Division by zero: {self._value} // 0")
        return SafeInt(self._value // other_val)

    # --- Comparison operations ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeInt):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __lt__(self, other: SafeInt | int) -> bool:
        return self._value < _extract_value(other)

    def __le__(self, other: SafeInt | int) -> bool:
        return self._value <= _extract_value(other)

    def __gt__(self, other: SafeInt | int) -> bool:
        return self._value > _extract_value(other)

    def __ge__(self, other: SafeInt | int) -> bool:
        return self._value >= _extract_value(other)

    # --- Conversion ---

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    # --- Named operations ---

    def ceiling_div(self, other: SafeInt | int) -> SafeInt:
        """Ceiling division (rounds up).

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Ceiling division by zero: {self._value}")
        return SafeInt(-(-self._value // other_val))

    def to_u64(self) -> int:
        """Narrow to a 64-bit value.

        Raises:
            ArithmeticOverflow: If value exceeds 2^64-1
        """
        if self._value > U64_MAX:
            raise ArithmeticOverflow(f"Value exceeds u64 max: {self._value}")
        return self._value


def _check_wide(value: int) -> int:
    if value < 0:
        raise Underflow(f"Negative value in unsigned arithmetic: {value}")
    if value > U128_MAX:
        raise ArithmeticOverflow(f"Value exceeds u128 max: {value}")
    return value


def _extract_value(x: SafeInt | int) -> int:
    """Extract integer value from SafeInt or int."""
    if isinstance(x, SafeInt):
        return x._value
    return x


# Convenience alias for concise code
S = SafeInt

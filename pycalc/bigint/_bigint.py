from __future__ import annotations

import operator
import re
from collections.abc import Sequence
from numbers import Integral
from typing import Callable, Union

from . import _digits
from ._opts import get_bigint_options
from .exception import (FormatError, DivisionByZeroError,
                        InvalidExponentError, InvalidArgumentError)

# Written by the pycalc developers, October 2026.

_DECIMAL_RE = re.compile(r'([+-]?)([0-9]+)')

BigIntLike = Union['BigInt', int, str]


# ======================================================================

class BigInt:
    """
    ``BigInt`` represents an arbitrary-precision signed integer, stored
    as a sign and a sequence of digits in a configurable base.

    ``BigInt`` objects are immutable.  Every arithmetic operation
    returns a new object and the `sign`, `base` and `digits` attributes
    are read-only.  Operations may be written either with the named
    methods (``a.add(b)``) or the usual operators (``a + b``).  The
    named methods also accept native integers and decimal strings,
    which are converted on entry.  Operators accept native integers.

    When two values with different bases are combined, the value with
    the smaller base is first converted to the larger base.  The result
    is always in the larger base.

    .. note:: Division (``/``) and modulo (``%``) truncate towards zero,
       as is usual for a calculator, i.e. the remainder takes the sign
       of the dividend.  This is *not* the same as Python's floor
       division, which is why ``//`` is not provided.

    Parameters
    ----------
    value : int, str or BigInt, default = 0
        Initial value.  Strings must be decimal and match
        ``[+-]?[0-9]+`` exactly, with no surrounding whitespace.
    base : int, optional
        Base for the stored digits.  If omitted the `default_base`
        option is used (normally 10), or for a ``BigInt`` argument its
        existing base is kept.

    Raises
    ------
    FormatError
        If `value` is a malformed string.
    InvalidArgumentError
        If `base` < 2.
    TypeError
        If `value` is not an integer, string or ``BigInt``.

    Examples
    --------
    >>> a, b = BigInt(123), BigInt('456')
    >>> a + b
    BigInt('579')
    >>> a - b
    BigInt('-333')
    >>> b / 2, b % a
    (BigInt('228'), BigInt('87'))
    >>> print(a ** 3)
    1860867
    >>> print(BigInt(10).factorial().grouped())
    3 628 800
    >>> BigInt(255).rebase(16)
    BigInt.from_digits((15, 15), sign=1, base=16)
    """
    __slots__ = ('_sign', '_digits', '_base')

    def __init__(self, value: BigIntLike = 0, base: int = None):
        if isinstance(value, BigInt):
            if base is None or base == value.base:
                self._set(value._digits, value._sign, value._base)
            else:
                other = value.rebase(base)
                self._set(other._digits, other._sign, other._base)
            return

        if base is None:
            base = get_bigint_options().default_base
        _check_base(base)

        if isinstance(value, str):
            match = _DECIMAL_RE.fullmatch(value)
            if not match:
                raise FormatError(f"Invalid integer string: '{value}'")

            sign = -1 if match.group(1) == '-' else 1
            digits = [ord(c) - ord('0') for c in reversed(match.group(2))]
            digits = _digits.rebase(_digits.strip(digits), 10, base)

        elif isinstance(value, Integral) and not isinstance(value, bool):
            value = int(value)
            sign = -1 if value < 0 else 1
            digits = _digits.from_int(abs(value), base)

        else:
            raise TypeError(f"Cannot make BigInt from "
                            f"'{type(value).__name__}'.")

        self._set(digits, sign, base)

    def _set(self, digits: Sequence[int], sign: int, base: int):
        digits = tuple(digits)
        if _digits.is_zero(digits):
            sign = 1  # No negative zero.
        object.__setattr__(self, '_digits', digits)
        object.__setattr__(self, '_sign', sign)
        object.__setattr__(self, '_base', base)

    def __setattr__(self, name, value):
        raise AttributeError("BigInt objects are immutable.")

    def __delattr__(self, name):
        raise AttributeError("BigInt objects are immutable.")

    def __reduce__(self):
        # Rebuild via from_digits so copy and pickle avoid __setattr__.
        return BigInt.from_digits, (self._digits, self._sign, self._base)

    @classmethod
    def from_digits(cls, digits: Sequence[int], sign: int = 1,
                    base: int = 10) -> BigInt:
        """
        Construct a ``BigInt`` directly from its components.

        Parameters
        ----------
        digits : Sequence[int]
            Digits in the range ``[0, base)``, *least significant
            first*.  Leading zeros are removed.
        sign : int, default = +1
            Either +1 or -1.  Ignored for a zero value.
        base : int, default = 10
            Base of `digits`.

        Raises
        ------
        InvalidArgumentError
            If `base` < 2, `sign` is not ±1, or any digit is out of
            range.
        """
        _check_base(base)
        if sign not in (1, -1):
            raise InvalidArgumentError(f"Sign must be +1 or -1, got "
                                       f"{sign}.")
        digits = [operator.index(d) for d in digits]
        if any(d < 0 or d >= base for d in digits):
            raise InvalidArgumentError(f"Digits must be in range [0, "
                                       f"{base}), got {digits}.")

        obj = cls.__new__(cls)
        obj._set(_digits.strip(digits), sign, base)
        return obj

    # -- Properties ----------------------------------------------------

    @property
    def base(self) -> int:
        return self._base

    @property
    def digits(self) -> tuple[int, ...]:
        """Digits of the magnitude, least significant first."""
        return self._digits

    @property
    def sign(self) -> int:
        """+1 or -1.  Zero is always positive."""
        return self._sign

    # -- Arithmetic ----------------------------------------------------

    def absolute(self) -> BigInt:
        """Returns the magnitude ``|self|``."""
        return self._make(self._digits, 1, self._base)

    def add(self, other: BigIntLike) -> BigInt:
        """Returns ``self + other``."""
        a, b = _align(self, other)
        return _signed_sum(a, b, b._sign)

    def subtract(self, other: BigIntLike) -> BigInt:
        """Returns ``self - other``."""
        a, b = _align(self, other)
        return _signed_sum(a, b, -b._sign)

    def multiply(self, other: BigIntLike) -> BigInt:
        """Returns ``self * other``."""
        a, b = _align(self, other)
        return self._make(_digits.multiply(a._digits, b._digits, a._base),
                          a._sign * b._sign, a._base)

    def divmod_trunc(self, other: BigIntLike) -> tuple[BigInt, BigInt]:
        """
        Returns the quotient and remainder of truncating division, i.e.
        the quotient is rounded towards zero and the remainder takes
        the sign of ``self``.  These always satisfy
        ``self == q * other + r``.

        Raises
        ------
        DivisionByZeroError
            If `other` is zero.
        """
        a, b = _align(self, other)
        if _digits.is_zero(b._digits):
            raise DivisionByZeroError("BigInt division by zero.")

        q, r = _digits.divmod_mag(a._digits, b._digits, a._base)
        return (self._make(q, a._sign * b._sign, a._base),
                self._make(r, a._sign, a._base))

    def divide(self, other: BigIntLike) -> BigInt:
        """Returns ``self / other``, truncated towards zero."""
        return self.divmod_trunc(other)[0]

    def modulo(self, other: BigIntLike) -> BigInt:
        """Returns ``self % other``, with the sign of ``self``."""
        return self.divmod_trunc(other)[1]

    def negate(self) -> BigInt:
        """Returns ``-self``."""
        return self._make(self._digits, -self._sign, self._base)

    def power(self, exponent: BigIntLike) -> BigInt:
        """
        Returns ``self ** exponent`` using binary exponentiation
        (repeated squaring).

        Raises
        ------
        InvalidExponentError
            If `exponent` is negative, or both values are zero (``0 **
            0`` is treated as undefined).
        """
        exp = _coerce(exponent, self._base)
        if exp._sign < 0:
            raise InvalidExponentError(f"Negative exponent: {exp}")
        if exp.is_zero():
            if self.is_zero():
                raise InvalidExponentError("0 ** 0 is undefined.")
            return self._make([1], 1, self._base)

        result, square = [1], list(self._digits)
        bits = list(exp._digits)
        while True:
            bits, bit = _digits.divide_small(bits, exp._base, 2)
            if bit:
                result = _digits.multiply(result, square, self._base)
            if _digits.is_zero(bits):
                break
            square = _digits.multiply(square, square, self._base)

        neg = self._sign < 0 and exp.is_odd()
        return self._make(result, -1 if neg else 1, self._base)

    def factorial(self) -> BigInt:
        """
        Returns ``self!``, with ``0! == 1``.

        Raises
        ------
        InvalidArgumentError
            If ``self`` is negative.
        """
        if self._sign < 0:
            raise InvalidArgumentError(f"Factorial requires a "
                                       f"non-negative value, got {self}.")
        result = [1]
        for k in range(2, self.to_int() + 1):
            result = _digits.multiply_small(result, k, self._base)
        return self._make(result, 1, self._base)

    # -- Comparison ----------------------------------------------------

    def compare(self, other: BigIntLike) -> int:
        """
        Returns -1, 0 or +1 as ``self`` is less than, equal to or
        greater than `other`.  Values in different bases are compared
        after conversion to a common base.
        """
        a, b = _align(self, other)
        if a._sign != b._sign:
            return -1 if a._sign < b._sign else 1
        return a._sign * _digits.compare(a._digits, b._digits)

    def equals(self, other: BigIntLike) -> bool:
        return self.compare(other) == 0

    def less_than(self, other: BigIntLike) -> bool:
        return self.compare(other) < 0

    def less_or_equal(self, other: BigIntLike) -> bool:
        return self.compare(other) <= 0

    def greater_than(self, other: BigIntLike) -> bool:
        return self.compare(other) > 0

    # -- Conversion ----------------------------------------------------

    def copy(self) -> BigInt:
        """Returns a new ``BigInt`` equal to ``self``."""
        return self._make(self._digits, self._sign, self._base)

    def is_odd(self) -> bool:
        # The parity of an odd base depends on the digit sum.
        if self._base % 2 == 0:
            return self._digits[0] % 2 == 1
        return sum(self._digits) % 2 == 1

    def is_zero(self) -> bool:
        return _digits.is_zero(self._digits)

    def rebase(self, base: int) -> BigInt:
        """
        Returns an equal value with digits in the new `base`.  The sign
        is preserved.  Conversion to the same base returns a copy.

        Raises
        ------
        InvalidArgumentError
            If `base` < 2.
        """
        _check_base(base)
        return self._make(_digits.rebase(self._digits, self._base, base),
                          self._sign, base)

    def to_int(self) -> int:
        """Returns the value as a native Python ``int``."""
        return self._sign * _digits.to_int(self._digits, self._base)

    def grouped(self, n: int = None, sep: str = None) -> str:
        """
        More readable string representation where digits are split
        into groups counted from the least significant end.

        Parameters
        ----------
        n : int, optional
            Number of digits in each group.  Default is the
            `group_size` option (normally 3).
        sep : str, optional
            Separator between groups.  Default is the `group_separator`
            option (normally ``' '``).

        Examples
        --------
        >>> BigInt(-1234567).grouped()
        '-1 234 567'
        >>> BigInt(1234567).grouped(2, '_')
        '1_23_45_67'
        """
        opts = get_bigint_options()
        n = opts.group_size if n is None else n
        sep = opts.group_separator if sep is None else sep
        if n < 1:
            raise InvalidArgumentError(f"Group size must be >= 1, got {n}.")

        groups = [self._digits[i:i + n]
                  for i in range(0, len(self._digits), n)]
        body = sep.join(self._join_digits(g) for g in reversed(groups))
        return ('-' if self._sign < 0 else '') + body

    # -- Internal Methods ----------------------------------------------

    @classmethod
    def _make(cls, digits: Sequence[int], sign: int, base: int) -> BigInt:
        # Trusted constructor, digits already canonical.
        obj = cls.__new__(cls)
        obj._set(digits, sign, base)
        return obj

    def _join_digits(self, digits: Sequence[int]) -> str:
        # Digits in 'digits' are least significant first.
        if self._base <= 10:
            return ''.join(str(d) for d in reversed(digits))
        delim = get_bigint_options().digit_delimiter
        return delim.join(str(d) for d in reversed(digits))

    # -- Unary Operators -----------------------------------------------

    def __abs__(self) -> BigInt:
        return self.absolute()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __float__(self) -> float:
        return float(self.to_int())

    def __int__(self) -> int:
        return self.to_int()

    def __len__(self) -> int:
        """Returns the number of digits."""
        return len(self._digits)

    def __neg__(self) -> BigInt:
        return self.negate()

    def __pos__(self) -> BigInt:
        return self

    # -- Binary Operators ----------------------------------------------

    def __add__(self, rhs):
        return _binary_op(self, rhs, BigInt.add)

    def __radd__(self, lhs):
        return _binary_op(self, lhs, BigInt.add, reflect=True)

    def __sub__(self, rhs):
        return _binary_op(self, rhs, BigInt.subtract)

    def __rsub__(self, lhs):
        return _binary_op(self, lhs, BigInt.subtract, reflect=True)

    def __mul__(self, rhs):
        return _binary_op(self, rhs, BigInt.multiply)

    def __rmul__(self, lhs):
        return _binary_op(self, lhs, BigInt.multiply, reflect=True)

    def __truediv__(self, rhs):
        return _binary_op(self, rhs, BigInt.divide)

    def __rtruediv__(self, lhs):
        return _binary_op(self, lhs, BigInt.divide, reflect=True)

    def __mod__(self, rhs):
        return _binary_op(self, rhs, BigInt.modulo)

    def __rmod__(self, lhs):
        return _binary_op(self, lhs, BigInt.modulo, reflect=True)

    def __divmod__(self, rhs):
        return _binary_op(self, rhs, BigInt.divmod_trunc)

    def __rdivmod__(self, lhs):
        return _binary_op(self, lhs, BigInt.divmod_trunc, reflect=True)

    def __pow__(self, rhs, mod=None):
        if mod is not None:
            return NotImplemented
        return _binary_op(self, rhs, BigInt.power)

    def __rpow__(self, lhs):
        return _binary_op(self, lhs, BigInt.power, reflect=True)

    # -- Comparison Operators ------------------------------------------

    def __eq__(self, rhs) -> bool:
        return _binary_op(self, rhs, BigInt.equals)

    def __ne__(self, rhs) -> bool:
        res = _binary_op(self, rhs, BigInt.equals)
        return res if res is NotImplemented else not res

    def __lt__(self, rhs) -> bool:
        return _binary_op(self, rhs, BigInt.less_than)

    def __le__(self, rhs) -> bool:
        return _binary_op(self, rhs, BigInt.less_or_equal)

    def __gt__(self, rhs) -> bool:
        return _binary_op(self, rhs, BigInt.greater_than)

    def __ge__(self, rhs) -> bool:
        res = _binary_op(self, rhs, BigInt.less_than)
        return res if res is NotImplemented else not res

    def __hash__(self) -> int:
        # Must agree with int for equal values, whatever the base.
        return hash(self.to_int())

    # -- String Magic Methods ------------------------------------------

    def __repr__(self) -> str:
        if self._base == 10:
            return f"BigInt('{self}')"
        return (f"BigInt.from_digits({self._digits}, sign={self._sign}, "
                f"base={self._base})")

    def __str__(self) -> str:
        return ('-' if self._sign < 0 else '') + self._join_digits(
            self._digits)


# ======================================================================

def _check_base(base):
    if not isinstance(base, Integral) or isinstance(base, bool) or base < 2:
        raise InvalidArgumentError(f"Base must be an integer >= 2, got "
                                   f"{base!r}.")


def _coerce(value: BigIntLike, base: int) -> BigInt:
    # Normalise a single operand at the API boundary.
    if isinstance(value, BigInt):
        return value
    if isinstance(value, (str, Integral)) and not isinstance(value, bool):
        return BigInt(value, base=base)
    raise TypeError(f"Unsupported operand type for BigInt: "
                    f"'{type(value).__name__}'")


def _align(a: BigInt, b: BigIntLike) -> tuple[BigInt, BigInt]:
    """
    Return both operands as ``BigInt`` objects with a common base.  The
    operand with the smaller base is converted to the larger base.
    """
    b = _coerce(b, a._base)
    if a._base < b._base:
        a = a.rebase(b._base)
    elif b._base < a._base:
        b = b.rebase(a._base)
    return a, b


def _signed_sum(a: BigInt, b: BigInt, b_sign: int) -> BigInt:
    # a + (b_sign * |b|) on aligned operands.
    base = a._base
    if a._sign == b_sign:
        return BigInt._make(_digits.add(a._digits, b._digits, base),
                            a._sign, base)

    # Different signs: subtract the smaller magnitude from the larger,
    # the result takes the sign of the larger.
    cmp = _digits.compare(a._digits, b._digits)
    if cmp >= 0:
        return BigInt._make(_digits.subtract(a._digits, b._digits, base),
                            a._sign, base)
    return BigInt._make(_digits.subtract(b._digits, a._digits, base),
                        b_sign, base)


def _binary_op(obj: BigInt, other, method: Callable, reflect: bool = False):
    # Operator dispatch.  Only BigInt and integer operands are accepted
    # here (strings are for the named methods); anything else gives
    # NotImplemented so that Python can try the other operand.
    if isinstance(other, bool) or not isinstance(other, (BigInt, Integral)):
        return NotImplemented
    other = _coerce(other, obj._base)

    if reflect:
        return method(other, obj)
    return method(obj, other)


# Written by the pycalc developers, October 2026.

# ======================================================================

class BigIntError(ArithmeticError):
    """
    Base class for all errors raised by `BigInt` construction and
    arithmetic.  Each subclass also derives from the closest builtin
    exception so that ordinary handlers (``except ValueError:``, etc)
    continue to work.
    """
    pass


class FormatError(BigIntError, ValueError):
    """Raised when a string does not hold a valid decimal integer."""
    pass


class DivisionByZeroError(BigIntError, ZeroDivisionError):
    """Raised by `BigInt` division or modulo with a zero divisor."""
    pass


class InvalidExponentError(BigIntError, ValueError):
    """Raised for a negative exponent, or for ``0 ** 0``."""
    pass


class InvalidArgumentError(BigIntError, ValueError):
    """
    Raised for arguments outside the domain of an operation, e.g. a
    negative factorial, an illegal base or out-of-range digits.
    """
    pass

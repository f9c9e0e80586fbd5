"""
Magnitude algorithms operating on plain digit lists.  All digit lists
are stored least significant digit first, and all results are returned
in canonical form, i.e. with no leading (most significant) zeros except
for the single digit zero ``[0]``.  Signs are handled by the caller.
"""
from __future__ import annotations

from collections.abc import Sequence

# Written by the pycalc developers, October 2026.

# Number of leading digits used when estimating a quotient digit.
_EST_DIGITS = 3


# ======================================================================

def strip(digits: list[int]) -> list[int]:
    """
    Remove leading zeros in place and return `digits`.  An empty list
    becomes ``[0]``.
    """
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
    if not digits:
        digits.append(0)
    return digits


def is_zero(digits: Sequence[int]) -> bool:
    return len(digits) == 1 and digits[0] == 0


def from_int(n: int, base: int) -> list[int]:
    """Digits of non-negative integer `n` by repeated division."""
    digits = []
    while True:
        n, d = divmod(n, base)
        digits.append(d)
        if n == 0:
            return digits


def to_int(digits: Sequence[int], base: int) -> int:
    """Horner evaluation of `digits` as a native integer."""
    n = 0
    for d in reversed(digits):
        n = n * base + d
    return n


def compare(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Compare magnitudes, returning -1, 0 or +1.  Longer sequences are
    larger, otherwise digits are compared from the most significant.
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1

    for da, db in zip(reversed(a), reversed(b)):
        if da != db:
            return -1 if da < db else 1
    return 0


# ----------------------------------------------------------------------

def add(a: Sequence[int], b: Sequence[int], base: int) -> list[int]:
    """Digit-wise sum of two magnitudes with carry."""
    res, carry = [], 0
    for i in range(max(len(a), len(b))):
        s = carry
        s += a[i] if i < len(a) else 0
        s += b[i] if i < len(b) else 0
        carry, d = divmod(s, base)
        res.append(d)
    if carry:
        res.append(carry)
    return strip(res)


def subtract(a: Sequence[int], b: Sequence[int], base: int) -> list[int]:
    """
    Difference of two magnitudes, requiring ``|a| >= |b|`` (checked by
    the caller).
    """
    res, borrow = [], 0
    for i in range(len(a)):
        d = a[i] - borrow - (b[i] if i < len(b) else 0)
        if d < 0:
            d += base
            borrow = 1
        else:
            borrow = 0
        res.append(d)

    if borrow:
        raise ValueError("Subtraction requires |a| >= |b|.")
    return strip(res)


def multiply(a: Sequence[int], b: Sequence[int], base: int) -> list[int]:
    """
    Schoolbook product.  The digit products are first accumulated
    (convolution) and carries are then propagated in a single pass.
    """
    acc = [0] * (len(a) + len(b))
    for i, da in enumerate(a):
        if da == 0:
            continue
        for j, db in enumerate(b):
            acc[i + j] += da * db

    carry = 0
    for i in range(len(acc)):
        carry, acc[i] = divmod(acc[i] + carry, base)
    while carry:
        carry, d = divmod(carry, base)
        acc.append(d)
    return strip(acc)


def multiply_small(a: Sequence[int], k: int, base: int) -> list[int]:
    """Product of magnitude `a` and a native integer ``k >= 0``."""
    res, carry = [], 0
    for d in a:
        carry, d = divmod(d * k + carry, base)
        res.append(d)
    while carry:
        carry, d = divmod(carry, base)
        res.append(d)
    return strip(res)


def divide_small(a: Sequence[int], old_base: int,
                 divisor: int) -> tuple[list[int], int]:
    """
    Divide magnitude `a` (in `old_base`) by a native integer `divisor`.

    The quotient keeps `old_base`.  This is the inner step of base
    conversion, where `divisor` is the new base and may be either
    smaller or larger than `old_base`.

    Returns
    -------
    quotient, remainder : list[int], int
    """
    quotient = [0] * len(a)
    rest = 0
    for i in range(len(a) - 1, -1, -1):
        rest = rest * old_base + a[i]
        quotient[i], rest = divmod(rest, divisor)
    return strip(quotient), rest


def _leading(digits: Sequence[int], low: int, base: int) -> int:
    # Value of digits[low:], i.e. digits scaled down by base ** low.
    x = 0
    for d in reversed(digits[low:]):
        x = x * base + d
    return x


def divmod_mag(a: Sequence[int], b: Sequence[int],
               base: int) -> tuple[list[int], list[int]]:
    """
    Long division of magnitudes giving ``(quotient, remainder)``.

    Quotient digits are produced from the most significant position.
    At each position the next digit of `a` is brought down into the
    running remainder and the quotient digit is estimated from an
    integer ratio of the leading digits of the remainder and divisor.
    The estimate is then corrected (normally by at most one) until
    ``0 <= remainder - q * b < b``.

    `b` must be non-zero (checked by the caller).
    """
    if compare(a, b) < 0:
        return [0], list(a)

    low = max(len(b) - _EST_DIGITS, 0)
    b_lead = _leading(b, low, base)
    quotient = [0] * len(a)
    rest = [0]

    for i in range(len(a) - 1, -1, -1):
        # Bring down the next digit: rest = rest * base + a[i].
        rest = strip([a[i]] + rest) if not is_zero(rest) else [a[i]]
        if compare(rest, b) < 0:
            continue

        q = _leading(rest, low, base) // b_lead
        q = min(max(q, 1), base - 1)
        prod = multiply_small(b, q, base)

        # Correct the estimate.
        while compare(prod, rest) > 0:
            q -= 1
            prod = subtract(prod, b, base)
        rest = subtract(rest, prod, base)
        while compare(rest, b) >= 0:
            q += 1
            rest = subtract(rest, b, base)

        quotient[i] = q

    return strip(quotient), rest


def rebase(a: Sequence[int], old_base: int, new_base: int) -> list[int]:
    """
    Convert magnitude `a` from `old_base` to `new_base` by repeatedly
    dividing by `new_base`.  The remainders form the new digits, least
    significant first.
    """
    if old_base == new_base:
        return list(a)

    res = []
    quotient = list(a)
    while True:
        quotient, rest = divide_small(quotient, old_base, new_base)
        res.append(rest)
        if is_zero(quotient):
            return strip(res)

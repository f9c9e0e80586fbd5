from __future__ import annotations

from dataclasses import dataclass, replace

# Written by the pycalc developers, October 2026.

# ======================================================================


@dataclass(frozen=True, kw_only=True)
class BigIntOptions:
    """
    Dataclass that holds option flags for constructing and displaying
    `BigInt` values.  See `get_bigint_options` and `set_bigint_options`
    for full details.
    """
    default_base: int
    group_size: int
    group_separator: str
    digit_delimiter: str

    def __post_init__(self):
        """Check certain values"""
        if self.default_base < 2:
            raise ValueError("Require 'default_base' >= 2.")
        if self.group_size < 1:
            raise ValueError("Require 'group_size' >= 1.")
        if not self.digit_delimiter:
            raise ValueError("'digit_delimiter' cannot be blank.")


# Create single instance and set defaults.
_bigint_options = BigIntOptions(
    default_base=10,
    group_size=3,
    group_separator=' ',
    digit_delimiter='|'
)


# ----------------------------------------------------------------------

def get_bigint_options() -> BigIntOptions:
    """
    Returns
    -------
    bigint_options : BigIntOptions
        Returns a copy of the current options.  For a full description
        of each option, see `set_bigint_options`.
    """
    return replace(_bigint_options)


# noinspection PyIncorrectDocstring
def set_bigint_options(**kwargs):
    """
    Set the current `BigInt` options.

    Parameters
    ----------
    default_base : int, default = 10
        Base used for the digits of new values when no base is given.

    group_size : int, default = 3
        Number of digits in each group produced by `BigInt.grouped()`.

    group_separator : str, default = ' '
        String placed between groups by `BigInt.grouped()`.

    digit_delimiter : str, default = '|'
        String placed between individual digits when the base is larger
        than 10, since the digits are no longer single characters.

    Raises
    ------
    ValueError
        If any of the values are illegal.  The existing options are
        retained in this case.

    Examples
    --------
    >>> from pycalc.bigint import BigInt, set_bigint_options
    >>> set_bigint_options(group_size=2, group_separator=',')
    >>> BigInt(1234567).grouped()
    '1,23,45,67'
    >>> set_bigint_options(group_size=3, group_separator=' ')
    """
    global _bigint_options
    _bigint_options = replace(_bigint_options, **kwargs)

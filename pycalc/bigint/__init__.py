"""
===========================================
Arbitrary Integers (:mod:`pycalc.bigint`)
===========================================

.. currentmodule:: pycalc.bigint

Arbitrary-precision signed integers stored as digit sequences in any
base >= 2, with arithmetic, comparison, factorial and base conversion.

.. autosummary::
    :toctree:

    BigInt
    get_bigint_options
    set_bigint_options

Exceptions
----------

.. autosummary::
    :toctree:

    BigIntError
    DivisionByZeroError
    FormatError
    InvalidArgumentError
    InvalidExponentError

"""

from ._bigint import BigInt
from ._opts import BigIntOptions, get_bigint_options, set_bigint_options
from .exception import (BigIntError, DivisionByZeroError, FormatError,
                        InvalidArgumentError, InvalidExponentError)

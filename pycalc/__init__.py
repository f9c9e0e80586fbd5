"""
.. This module acts as the top-level API documentation.

.. module: pycalc

Numeric core of an interactive calculator.

.. autosummary::
    :toctree: generated/

    bigint
    numeric

"""

__version__ = "0.1.0"

import sys

# Written by the pycalc developers, October 2026.

# ======================================================================

assert sys.version_info >= (3, 10)

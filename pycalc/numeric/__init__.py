"""
=================================
Numeric (:mod:`pycalc.numeric`)
=================================

.. currentmodule:: pycalc.numeric

Numerical methods for scalar functions and ordinary differential
equations.  All functions take a tolerance `tol`; if omitted, the
current `tol` solver option is used (default = 1e-3).  See
`set_solver_options`.

Functions
---------

.. autosummary::
    :toctree:

    derivative
    integrate
    newton
    rk4_step
    solve
    solve_ode

Options
-------

.. autosummary::
    :toctree:

    get_solver_options
    set_solver_options

Exceptions
----------

.. autosummary::
    :toctree:

    SolverError
    InvalidBracketError
    IterationLimitError
    NonConvergenceError

"""

from ._opts import SolverOptions, get_solver_options, set_solver_options
from .calculus import derivative, integrate
from .exception import (SolverError, InvalidBracketError,
                        IterationLimitError, NonConvergenceError)
from .ode import ODEResult, rk4_step, solve_ode
from .roots import newton, solve

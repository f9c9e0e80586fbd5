"""
Root finding for scalar functions :math:`f(x) = 0`.
"""
import warnings
from collections.abc import Callable

import numpy as np

from ._opts import _resolve
from .exception import (InvalidBracketError, IterationLimitError,
                        NonConvergenceError)

# Written by the pycalc developers, October 2026.


# ======================================================================

def solve(func: Callable[[float], float], a: float, b: float, *,
          tol: float = None, max_its: int = None,
          verbose: bool = False) -> float:
    r"""
    Approximate solution of :math:`f(x) = 0` on the interval :math:`x
    \in [a, b]` using secant steps anchored at `a`.  For this to work
    :math:`f(x)` must change sign across the interval, i.e. ``func(a)``
    and ``func(b)`` must be of opposite sign.

    Each iteration replaces `b` with the `x`-intercept of the line
    through :math:`(a, f(a))` and :math:`(b, f(b))`.

    Examples
    --------
    >>> import math
    >>> x = solve(math.sin, 0.5 * math.pi, 1.5 * math.pi)
    >>> round(x, 6)
    3.141593

    Parameters
    ----------
    func : Callable[[float], float]
        Function which we are searching for a root.
    a, b : float
        Each end of the search interval.  `a` remains fixed.
    tol : float, optional
        End search when :math:`|f(b)| < tol`.  Default is the `tol`
        solver option.
    max_its : int, optional
        Safety limit on the number of iterations.  Default is the
        `max_its` solver option.
    verbose : bool, default = False
        If True, print progress statements.

    Returns
    -------
    b : float
        Best estimate of the root, i.e. :math:`f(b) \approx 0`.

    Raises
    ------
    InvalidBracketError
        If ``func(a)`` and ``func(b)`` have the same sign, or either is
        not finite.
    NonConvergenceError
        If `max_its` is reached, the secant line becomes horizontal or
        `func` returns a non-finite value.
        Includes attributes `a`, `b`, `fa`, `fb`, `its`.
    """
    tol, max_its = _resolve('tol', tol), _resolve('max_its', max_its)

    fa, fb = func(a), func(b)
    if not (np.isfinite(fa) and np.isfinite(fb)):
        raise InvalidBracketError("solve() requires finite f(a) and f(b).",
                                  a=a, b=b, fa=fa, fb=fb)

    if fa == 0 or fb == 0:
        warnings.warn("One of the start points is already a root.")
        return a if fa == 0 else b

    if np.sign(fa) == np.sign(fb):
        raise InvalidBracketError("solve() requires f(a) and f(b) with "
                                  "opposite sign.", a=a, b=b, fa=fa, fb=fb)

    if verbose:
        print(f"Secant Root:")

    its = 0
    while abs(fb) >= tol:
        if its >= max_its:
            raise NonConvergenceError(f"solve() failed to converge:",
                                      details="Reached max_its.",
                                      a=a, b=b, fa=fa, fb=fb, its=its)
        if fb == fa:
            raise NonConvergenceError(f"solve() failed to converge:",
                                      details="Secant line is horizontal.",
                                      a=a, b=b, fa=fa, fb=fb, its=its)

        b = b - (b - a) * fb / (fb - fa)
        fb = func(b)
        its += 1
        if not np.isfinite(fb):
            raise NonConvergenceError(f"solve() failed to converge:",
                                      details="Non-finite function value.",
                                      a=a, b=b, fa=fa, fb=fb, its=its)

        if verbose:
            print(f"... Iteration {its}: x = {b}, f = {fb}")

    return b


# ----------------------------------------------------------------------

def newton(func: Callable[[float], float], x0: float, *,
           tol: float = None, h: float = 0.1, shrink: float = 0.618,
           max_its: int = 50, verbose: bool = False) -> float:
    r"""
    Find a root of :math:`f(x) = 0` near `x0` using Newton's method,
    where the derivative is estimated by a forward difference
    :math:`(f(x + h) - f(x)) / h`.  The difference step `h` is reduced
    by the factor `shrink` each iteration, so that the method starts
    out like a secant method and gradually approaches a true Newton
    iteration.

    Examples
    --------
    >>> import math
    >>> x = newton(math.sin, 0.7 * math.pi)
    >>> abs(x - math.pi) < 1e-3
    True

    Parameters
    ----------
    func : Callable[[float], float]
        Function which we are searching for a root.
    x0 : float
        Starting point.
    tol : float, optional
        Stop when function values at successive points differ by less
        than `tol`.  Default is the `tol` solver option.
    h : float, default = 0.1
        Initial difference step.
    shrink : float, default = 0.618
        Multiplier applied to `h` after each iteration.
    max_its : int, default = 50
        Iteration limit.
    verbose : bool, default = False
        If True, print progress statements.

    Returns
    -------
    x : float
        Estimate of the root.

    Raises
    ------
    IterationLimitError
        If `max_its` is reached before convergence.  Includes
        attributes `x`, `fx`, `its`.
    NonConvergenceError
        If the estimated slope is zero.
    """
    tol = _resolve('tol', tol)
    if verbose:
        print(f"Newton Root (Finite Difference):")

    x_next = x0
    f_next = func(x_next)
    for its in range(1, max_its + 1):
        x, fx = x_next, f_next
        df = func(x + h) - fx
        if df == 0:
            raise NonConvergenceError("newton() failed to converge:",
                                      details="Slope estimate was zero.",
                                      x=x, fx=fx, its=its)

        x_next = x - fx * h / df
        f_next = func(x_next)
        h *= shrink

        if verbose:
            print(f"... Iteration {its}: x = {x_next}, f = {f_next}")

        if abs(f_next - fx) < tol:
            return x_next

    raise IterationLimitError(f"newton() exceeded {max_its} iterations:",
                              x=x_next, fx=f_next, its=max_its)

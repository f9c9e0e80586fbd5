"""
Numerical differentiation and integration of scalar functions, refined
until successive estimates agree to within a tolerance.
"""
from collections.abc import Callable

from ._opts import _resolve
from .exception import NonConvergenceError

# Written by the pycalc developers, October 2026.


# ======================================================================

def derivative(func: Callable[[float], float], x: float, *,
               tol: float = None, dx: float = 0.02, max_its: int = None,
               verbose: bool = False) -> float:
    r"""
    Estimate :math:`f'(x)` using the central difference
    :math:`(f(x + \Delta x) - f(x - \Delta x)) / 2 \Delta x`.  The step
    :math:`\Delta x` is halved each round until the estimate changes by
    less than `tol`.

    Examples
    --------
    >>> import math
    >>> round(derivative(math.sin, 0.0), 3)
    1.0

    Parameters
    ----------
    func : Callable[[float], float]
        Function to differentiate.
    x : float
        Point at which the derivative is required.
    tol : float, optional
        Stop when successive estimates differ by less than `tol`.
        Default is the `tol` solver option.
    dx : float, default = 0.02
        Initial difference step.
    max_its : int, optional
        Safety limit on the number of halvings.  Default is the
        `max_its` solver option.
    verbose : bool, default = False
        If True, print progress statements.

    Returns
    -------
    float
        Latest estimate of :math:`f'(x)`.

    Raises
    ------
    NonConvergenceError
        If `max_its` halvings are made without convergence, or `dx`
        becomes too small to change `x`.
    """
    tol, max_its = _resolve('tol', tol), _resolve('max_its', max_its)

    def central(step):
        return (func(x + step) - func(x - step)) / (2 * step)

    if verbose:
        print(f"Central Difference Derivative:")

    der = central(dx)
    for its in range(1, max_its + 1):
        dx *= 0.5
        if x + dx == x:
            raise NonConvergenceError("derivative() failed to converge:",
                                      details="Step size underflow.", x=x,
                                      dx=dx, der=der, its=its)

        der, last = central(dx), der

        if verbose:
            print(f"... Iteration {its}: dx = {dx}, f'(x) = {der}")

        if abs(der - last) < tol:
            return der

    raise NonConvergenceError("derivative() failed to converge:",
                              details="Reached max_its.", x=x, dx=dx,
                              der=der, its=max_its)


# ----------------------------------------------------------------------

def integrate(func: Callable[[float], float], a: float, b: float, *,
              tol: float = None, n: int = 10, max_its: int = None,
              verbose: bool = False) -> float:
    r"""
    Approximate :math:`\int_a^b f(x) dx` using the composite trapezoidal
    rule.

    The first estimate uses `n` equal intervals.  Each refinement
    halves the interval width, which only requires `f` to be evaluated
    at the new midpoints; the sum of previous function values is
    retained.  Refinement stops when successive estimates differ by
    less than `tol`.

    Examples
    --------
    >>> import math
    >>> round(integrate(math.sin, 0.0, math.pi), 3)
    2.0

    Parameters
    ----------
    func : Callable[[float], float]
        Function to integrate.
    a, b : float
        Limits of integration.  If ``b < a`` the result changes sign.
    tol : float, optional
        Stop when successive estimates differ by less than `tol`.
        Default is the `tol` solver option.
    n : int, default = 10
        Number of intervals in the initial estimate.
    max_its : int, optional
        Safety limit on the number of refinements.  Default is the
        `max_refinements` solver option.
    verbose : bool, default = False
        If True, print progress statements.

    Returns
    -------
    float
        Final estimate of the integral.

    Raises
    ------
    ValueError
        If `n` < 1.
    NonConvergenceError
        If `max_its` refinements are made without convergence.
    """
    tol = _resolve('tol', tol)
    max_its = _resolve('max_refinements', max_its)
    if n < 1:
        raise ValueError(f"Require n >= 1, got {n}.")
    if a == b:
        return 0.0

    h = (b - a) / n
    f_ends = 0.5 * (func(a) + func(b))
    f_sum = sum(func(a + i * h) for i in range(1, n))  # Interior points.
    area = (f_ends + f_sum) * h

    if verbose:
        print(f"Trapezoidal Integration:")
        print(f"... Intervals {n}: I = {area}")

    for its in range(1, max_its + 1):
        # Add midpoints of all current intervals.
        f_sum += sum(func(a + (i + 0.5) * h) for i in range(n))
        n, h = 2 * n, 0.5 * h
        area, last = (f_ends + f_sum) * h, area

        if verbose:
            print(f"... Intervals {n}: I = {area}")

        if abs(area - last) < tol:
            return area

    raise NonConvergenceError("integrate() failed to converge:",
                              details="Reached max_its.", a=a, b=b,
                              intervals=n, area=area, its=max_its)

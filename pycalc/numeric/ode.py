"""
Solution of ordinary differential equations :math:`y' = f(t, y)` using
the classical fourth-order Runge-Kutta method, with optional automatic
step size control.
"""
from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from typing import Any, NamedTuple, TypeVar, Union

import numpy as np

from ._opts import _resolve
from .exception import NonConvergenceError

# Written by the pycalc developers, October 2026.

# Local error band for adaptive steps, as multiples of the tolerance.
_ERR_MAX, _ERR_MIN = 15.0, 0.1

# Number of initial steps to the end point when no step is given.
_PARTS = 10

# Steps finishing this close to the end point (relative to the step
# size) are stretched to finish exactly on it.
_SNAP = 1e-9

_Y = TypeVar('_Y')
StopCondition = Callable[[float, Any, Any], bool]


# ======================================================================

class ODEResult(NamedTuple):
    """
    Result of `solve_ode`.  May be unpacked as ``samples, y = result``.
    """
    samples: list[tuple[float, Any]]
    """Accepted ``(t, y)`` points in order, starting with the initial
    point."""
    y: Any
    """Value of `y` at the final point."""

    @property
    def t(self) -> float:
        """Independent variable at the final point."""
        return self.samples[-1][0]


# ----------------------------------------------------------------------

def rk4_step(func: Callable[[float, _Y], _Y], t: float, y: _Y,
             h: float) -> _Y:
    """
    Advance the solution of :math:`y' = f(t, y)` by one classical
    fourth-order Runge-Kutta step of size `h`.

    `y` may be a scalar or any vector-like type supporting addition
    and multiplication by a scalar (e.g. a NumPy array), provided `func`
    returns the same type.

    Examples
    --------
    >>> y = rk4_step(lambda t, y: y, 0.0, 1.0, 0.1)  # y' = y.
    >>> round(y, 8)
    1.10517083
    """
    h2 = 0.5 * h
    k1 = func(t, y)
    k2 = func(t + h2, y + h2 * k1)
    k3 = func(t + h2, y + h2 * k2)
    k4 = func(t + h, y + h * k3)
    return y + h * (k1 + 2 * (k2 + k3) + k4) / 6


# ----------------------------------------------------------------------

def solve_ode(func: Callable[[float, Any], Any],
              initial: tuple[float, Any],
              stop: Union[float, StopCondition],
              step: float = None, *,
              tol: float = None,
              norm: Callable[[Any], float] = None,
              max_steps: int = None,
              verbose: bool = False) -> ODEResult:
    r"""
    Numerical solution of the initial value problem :math:`y' = f(t,
    y)`, :math:`y(t_0) = y_0` by the fourth-order Runge-Kutta method.

    If `step` is given every step has this size (the last step may be
    shortened to finish exactly at a numeric `stop`).  Otherwise the
    step size is adapted to the tolerance: each trial step is computed
    once at full size (:math:`y_1`) and again as two half steps
    (:math:`y_2`), giving the local error estimate :math:`\epsilon =
    \|y_2 - y_1\|`.  Then:

        - :math:`\epsilon > 15 \cdot tol`: The step is rejected and
          retried at half the size.
        - :math:`\epsilon < 0.1 \cdot tol`: The step is accepted and
          the next step size is doubled.
        - Otherwise the step is accepted.

    Accepted steps always use the more accurate :math:`y_2`.

    Higher order equations are solved by writing them as a system of
    first order equations with a vector `y` (see examples).

    Examples
    --------
    Solve :math:`y' = t y` with :math:`y(0) = 1` up to :math:`t = 3`:

    >>> samples, y_3 = solve_ode(lambda t, y: t * y, (0, 1), 3)
    >>> abs(y_3 - 90.0171) < 0.1
    True

    Solve :math:`y'' - 2y' + 2y = 1` as the system :math:`x_1 = y,
    x_2 = y'` with a fixed step.  Lists are converted to NumPy arrays:

    >>> def fn(t, x):
    ...     return [x[1], 1 + 2 * x[1] - 2 * x[0]]
    >>> _, x_2 = solve_ode(fn, (0, [3, 2]), 2, 0.2)
    >>> abs(x_2[0] + 10.547) < 0.01
    True

    Parameters
    ----------
    func : Callable[[float, y], y]
        Derivative function :math:`f(t, y)`.  For vector problems this
        may return a list or array.
    initial : (float, y)
        Initial point :math:`(t_0, y_0)`.  A sequence :math:`y_0` is
        converted to a NumPy array.
    stop : float or Callable[[float, y, y], bool]
        Either the final value of `t`, or a function ``stop(t, current,
        previous)`` called after each accepted step which returns
        `True` to finish.  `current` and `previous` are the `y` values
        at the newest and preceding points.
    step : float, optional
        Fixed step size.  If omitted the step size is automatic,
        starting at :math:`(t_{stop} - t_0) / 10` for a numeric `stop`
        or `tol` otherwise.
    tol : float, optional
        Local error tolerance for automatic steps.  Default is the
        `tol` solver option.
    norm : Callable[[y], float], optional
        Magnitude used for the local error estimate.  Default is
        ``numpy.linalg.norm`` which handles both scalars and arrays.
    max_steps : int, optional
        Safety limit on step attempts (accepted or rejected).  Default
        is the `max_ode_steps` solver option.
    verbose : bool, default = False
        If True, print each accepted step.

    Returns
    -------
    ODEResult
        ``(samples, y)`` where `samples` is the list of accepted ``(t,
        y)`` points and `y` is the final value.

    Raises
    ------
    ValueError
        If `step` <= 0, or a numeric `stop` is less than :math:`t_0`.
    NonConvergenceError
        If `max_steps` is reached, or the automatic step size becomes
        too small to advance `t`.  Includes attributes `t`, `y`, `h`,
        `steps`.
    """
    tol = _resolve('tol', tol)
    max_steps = _resolve('max_ode_steps', max_steps)
    if norm is None:
        norm = np.linalg.norm
    if step is not None and not step > 0:
        raise ValueError(f"Require step > 0, got {step}.")

    t0, y0 = initial
    if isinstance(y0, (Sequence, np.ndarray)):
        y0 = 1.0 * np.asarray(y0)  # Also works for complex.
        fn = _array_func(func)
    else:
        fn = func

    if callable(stop):
        t_end, finished = math.inf, stop
        h = step if step is not None else tol
    else:
        if stop < t0:
            raise ValueError(f"Stop point {stop} is before start {t0}.")
        t_end = stop

        def finished(t_, *_):
            return t_ >= t_end

        h = step if step is not None else (t_end - t0) / _PARTS

    samples = [(t0, y0)]
    if t0 == t_end:
        return ODEResult(samples, y0)

    if verbose:
        print(f"Runge-Kutta ODE Solution ("
              f"{'fixed' if step is not None else 'automatic'} step):")

    t, y = t0, y0
    for attempt in range(1, max_steps + 1):
        # Don't step past a numeric end point.
        if t + h >= t_end - _SNAP * h:
            h, t_next = t_end - t, t_end
        else:
            t_next = t + h

        if step is not None:
            y_next = rk4_step(fn, t, y, h)

        else:
            h2 = 0.5 * h
            y1 = rk4_step(fn, t, y, h)
            y2 = rk4_step(fn, t + h2, rk4_step(fn, t, y, h2), h2)
            err = norm(y2 - y1)

            if err > _ERR_MAX * tol:
                # Reject, retry with smaller step.
                if t + h2 == t:
                    raise NonConvergenceError(
                        "solve_ode() failed to converge:",
                        details="Step size underflow.", t=t, y=y, h=h2,
                        steps=attempt)
                h = h2
                continue

            y_next = y2
            if err < _ERR_MIN * tol:
                h *= 2

        samples.append((t_next, y_next))
        y_prev, (t, y) = y, samples[-1]

        if verbose:
            print(f"... Step {len(samples) - 1}: t = {t}, y = {y}")

        if finished(t, y, y_prev):
            return ODEResult(samples, y)

    raise NonConvergenceError("solve_ode() failed to converge:",
                              details="Reached max_steps.", t=t, y=y, h=h,
                              steps=max_steps)


# ----------------------------------------------------------------------

def _array_func(func: Callable) -> Callable[[float, np.ndarray],
                                            np.ndarray]:
    # Wrap a vector derivative function so that it returns an array.
    def wrapped(t, y):
        return np.asarray(func(t, y))

    return wrapped

from __future__ import annotations

from dataclasses import dataclass, replace

# Written by the pycalc developers, October 2026.

# ======================================================================


@dataclass(frozen=True, kw_only=True)
class SolverOptions:
    """
    Dataclass that holds the default tolerance and safety limits used
    by the numeric solvers.  See `get_solver_options` and
    `set_solver_options` for full details.
    """
    tol: float
    max_its: int
    max_refinements: int
    max_ode_steps: int

    def __post_init__(self):
        """Check certain values"""
        if not self.tol > 0:
            raise ValueError("Require 'tol' > 0.")
        for name in ('max_its', 'max_refinements', 'max_ode_steps'):
            if getattr(self, name) < 1:
                raise ValueError(f"Require '{name}' >= 1.")


# Create single instance and set defaults.
_solver_options = SolverOptions(
    tol=1e-3,
    max_its=10_000,
    max_refinements=30,
    max_ode_steps=100_000
)


# ----------------------------------------------------------------------

def get_solver_options() -> SolverOptions:
    """
    Returns
    -------
    solver_options : SolverOptions
        Returns a copy of the current options.  For a full description
        of each option, see `set_solver_options`.
    """
    return replace(_solver_options)


# noinspection PyIncorrectDocstring
def set_solver_options(**kwargs):
    """
    Set the current solver options.  These are used by any solver call
    that does not explicitly supply the corresponding argument.

    Parameters
    ----------
    tol : float, default = 1e-3
        Convergence tolerance (`TOL`).  Its exact meaning depends on
        the solver, e.g. ``|f(x)| < tol`` for `solve`, the change
        between successive estimates for `derivative` and `integrate`,
        or the local error band for adaptive `solve_ode`.

    max_its : int, default = 10,000
        Safety cap on iterations for `solve` and `derivative`, which
        have no natural limit.  Reaching it raises
        `NonConvergenceError`.

    max_refinements : int, default = 30
        Safety cap on interval halvings in `integrate`.  Each halving
        doubles the number of function evaluations so this is kept
        much lower than `max_its`.

    max_ode_steps : int, default = 100,000
        Safety cap on step attempts (accepted or rejected) in
        `solve_ode`.

    Raises
    ------
    ValueError
        If any of the values are illegal.  The existing options are
        retained in this case.
    """
    global _solver_options
    _solver_options = replace(_solver_options, **kwargs)


def _resolve(name: str, value):
    """Return `value`, or the current option `name` if `value` is None."""
    if value is None:
        return getattr(_solver_options, name)
    if not value > 0:
        raise ValueError(f"Require '{name}' > 0, got {value}.")
    return value

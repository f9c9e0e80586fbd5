
# Written by the pycalc developers, October 2026.


# ======================================================================

class SolverError(RuntimeError):
    """
    Base class for failures of the root finders, `derivative`,
    `integrate` and `solve_ode`.  The state of the method when it
    stopped is attached as attributes, e.g. ``its``, ``x`` or ``t``, and
    listed one per line by ``str(e)``.
    """

    def __init__(self, *args, flag: int = None, details: str = None,
                 **kwargs):
        """
        Parameters
        ----------
        args :
            Message, passed to `RuntimeError`.
        flag : int, optional
            Failure code, set by each subclass:
                - 1: Iteration limit reached.
                - 2: No convergence (step underflow, stagnation, etc).
                - 3: Invalid starting bracket.
        details : str, optional
            Short reason for the failure, e.g. ``"Reached max_its."``.
        kwargs :
            Stored as attributes of the same name.
        """
        super().__init__(*args)
        self.flag, self.details = flag, details
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __str__(self):
        lines = [super().__str__()]
        lines += [f"{k} -> {v}" for k, v in vars(self).items()
                  if v is not None]
        return '\n'.join(lines)


# ----------------------------------------------------------------------

class IterationLimitError(SolverError):
    """Fixed iteration limit reached without meeting the tolerance."""

    def __init__(self, *args, **kwargs):
        kwargs.setdefault('flag', 1)
        super().__init__(*args, **kwargs)


class NonConvergenceError(SolverError):
    """
    The solver cannot make further progress, e.g. a safety cap on
    iterations / steps was hit or the step size underflowed.
    """

    def __init__(self, *args, **kwargs):
        kwargs.setdefault('flag', 2)
        super().__init__(*args, **kwargs)


class InvalidBracketError(SolverError, ValueError):
    """Function values at the ends of the interval do not change sign."""

    def __init__(self, *args, **kwargs):
        kwargs.setdefault('flag', 3)
        super().__init__(*args, **kwargs)

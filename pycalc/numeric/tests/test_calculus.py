import math
from unittest import TestCase

import numpy as np
import pytest
from pytest import approx
from scipy.integrate import quad


# ======================================================================

class TestDerivative(TestCase):
    def test_derivative(self):
        from pycalc.numeric import derivative

        self.assertAlmostEqual(derivative(math.sin, 0.0), 1.0, delta=1e-3)
        self.assertAlmostEqual(derivative(math.exp, 1.0, tol=1e-8),
                               math.e, places=6)
        self.assertAlmostEqual(derivative(lambda x: x ** 3, -2.0, tol=1e-6),
                               12.0, places=5)

    def test_non_convergence(self):
        from pycalc.numeric import derivative, NonConvergenceError

        with self.assertRaises(NonConvergenceError) as cm:
            derivative(math.exp, 1.0, tol=1e-15, max_its=1)
        self.assertEqual(cm.exception.x, 1.0)

    def test_step_underflow(self):
        from pycalc.numeric import derivative, NonConvergenceError

        # Jump at x = 0 never settles as dx shrinks.
        with self.assertRaises(NonConvergenceError) as cm:
            derivative(lambda x: 1.0 if x > 0 else 0.0, 0.0)
        self.assertEqual(cm.exception.details, "Step size underflow.")
        self.assertLess(cm.exception.its, 10_000)

        with self.assertRaises(NonConvergenceError):
            derivative(lambda x: 1.0 if x > 5.0 else 0.0, 5.0)


# ----------------------------------------------------------------------

class TestIntegrate(TestCase):
    def test_integrate(self):
        from pycalc.numeric import integrate

        self.assertAlmostEqual(integrate(math.sin, 0.0, math.pi), 2.0,
                               delta=1e-3)
        self.assertAlmostEqual(integrate(lambda x: x ** 2, 0.0, 3.0,
                                         tol=1e-6), 9.0, places=5)

    def test_limits(self):
        from pycalc.numeric import integrate

        self.assertEqual(integrate(math.sin, 1.0, 1.0), 0.0)
        self.assertAlmostEqual(integrate(math.sin, math.pi, 0.0), -2.0,
                               delta=1e-3)

    def test_linear_exact(self):
        from pycalc.numeric import integrate

        # Trapezoids are exact for straight lines so the first
        # refinement agrees immediately.
        self.assertAlmostEqual(integrate(lambda x: 2 * x + 1, 0.0, 4.0,
                                         n=1), 20.0, places=12)

    def test_errors(self):
        from pycalc.numeric import integrate, NonConvergenceError

        with self.assertRaises(ValueError):
            integrate(math.sin, 0.0, 1.0, n=0)

        with self.assertRaises(NonConvergenceError) as cm:
            integrate(math.sin, 0.0, math.pi, tol=1e-12, max_its=2)
        self.assertEqual(cm.exception.intervals, 40)


# ======================================================================

@pytest.mark.parametrize('func, a, b', [
    (lambda x: math.exp(-x ** 2), 0.0, 2.0),
    (lambda x: 1.0 / (1.0 + x ** 2), -1.0, 3.0),
    (lambda x: x * math.cos(x), 0.0, 2 * math.pi),
    (np.sqrt, 1.0, 4.0),
])
def test_integrate_against_quad(func, a, b):
    from pycalc.numeric import integrate

    expected, _ = quad(func, a, b)
    assert integrate(func, a, b, tol=1e-7) == approx(expected, abs=1e-6)


def test_options_tolerance():
    from pycalc.numeric import (integrate, get_solver_options,
                                set_solver_options)

    saved = get_solver_options()
    try:
        set_solver_options(tol=1e-8)
        assert integrate(math.sin, 0.0, math.pi) == approx(2.0, abs=1e-7)
    finally:
        set_solver_options(**vars(saved))

    assert get_solver_options().tol == 1e-3

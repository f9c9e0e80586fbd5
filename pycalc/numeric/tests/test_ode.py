import math
from unittest import TestCase

import numpy as np
import pytest
from numpy.testing import assert_allclose
from pytest import approx
from scipy.integrate import solve_ivp


# ======================================================================

def _linear_2nd_order(t, x):
    # y'' - 2y' + 2y = 1, with x = [y, y'].
    return [x[1], 1 + 2 * x[1] - 2 * x[0]]


# ----------------------------------------------------------------------

class TestRK4Step(TestCase):
    def test_rk4_step(self):
        from pycalc.numeric import rk4_step

        # Exact for polynomials up to 4th order in t.
        self.assertAlmostEqual(rk4_step(lambda t, y: 1.0, 0.0, 2.0, 0.5),
                               2.5, places=14)
        self.assertAlmostEqual(rk4_step(lambda t, y: 4 * t ** 3, 1.0, 1.0,
                                        1.0), 16.0, places=12)

        # y' = y.
        self.assertAlmostEqual(rk4_step(lambda t, y: y, 0.0, 1.0, 0.1),
                               math.exp(0.1), places=6)

    def test_rk4_step_array(self):
        from pycalc.numeric import rk4_step

        y = rk4_step(lambda t, y: -y, 0.0, np.array([1.0, 2.0]), 0.01)
        assert_allclose(y, np.exp(-0.01) * np.array([1.0, 2.0]), rtol=1e-9)


# ----------------------------------------------------------------------

class TestSolveODE(TestCase):
    def test_scalar_adaptive(self):
        from pycalc.numeric import solve_ode

        samples, y_n = solve_ode(lambda t, y: t * y, (0, 1), 3)
        self.assertAlmostEqual(y_n, 90.01, delta=0.1)

        self.assertEqual(samples[0], (0, 1))
        self.assertEqual(samples[-1][0], 3)
        self.assertEqual(samples[-1][1], y_n)

        ts = [t for t, _ in samples]
        self.assertTrue(all(t2 > t1 for t1, t2 in zip(ts, ts[1:])))

    def test_vector_fixed_step(self):
        from pycalc.numeric import solve_ode

        result = solve_ode(_linear_2nd_order, (0, [3, 2]), 2, 0.2)
        self.assertAlmostEqual(result.y[0], -10.54, delta=0.02)
        self.assertIsInstance(result.y, np.ndarray)
        self.assertEqual(len(result.samples), 11)
        self.assertEqual(result.t, 2)

        # Exact solution: y = 1/2 + e^t (5/2 cos t - 1/2 sin t).
        exact = 0.5 + math.exp(2) * (2.5 * math.cos(2) - 0.5 * math.sin(2))
        self.assertAlmostEqual(result.y[0], exact, delta=1e-2)

    def test_vector_adaptive(self):
        from pycalc.numeric import solve_ode

        _, x_n = solve_ode(_linear_2nd_order, (0, [3, 2]), 2, tol=1e-6)
        exact = 0.5 + math.exp(2) * (2.5 * math.cos(2) - 0.5 * math.sin(2))
        self.assertAlmostEqual(x_n[0], exact, delta=1e-3)

    def test_fixed_step_clamped(self):
        from pycalc.numeric import solve_ode

        samples, _ = solve_ode(lambda t, y: 1.0, (0.0, 0.0), 1.0, 0.3)
        ts = [t for t, _ in samples]
        self.assertEqual(ts[-1], 1.0)
        assert_allclose(ts, [0.0, 0.3, 0.6, 0.9, 1.0])
        self.assertAlmostEqual(samples[-1][1], 1.0, places=12)

    def test_stop_condition(self):
        from pycalc.numeric import solve_ode

        calls = []

        def stop(t, current, previous):
            calls.append((t, current, previous))
            return current < 0.1

        samples, y_n = solve_ode(lambda t, y: -y, (0, 1), stop)
        self.assertLess(y_n, 0.1)
        self.assertGreaterEqual(samples[-2][1], 0.1)
        self.assertAlmostEqual(y_n, math.exp(-samples[-1][0]), delta=1e-3)

        # Called once per accepted step with the preceding value.
        self.assertEqual(len(calls), len(samples) - 1)
        self.assertEqual(calls[0][2], 1)
        self.assertEqual(calls[-1][2], samples[-2][1])

    def test_start_equals_stop(self):
        from pycalc.numeric import solve_ode

        samples, y = solve_ode(lambda t, y: y, (1.0, 5.0), 1.0)
        self.assertEqual(samples, [(1.0, 5.0)])
        self.assertEqual(y, 5.0)

    def test_errors(self):
        from pycalc.numeric import solve_ode, NonConvergenceError

        with self.assertRaises(ValueError):
            solve_ode(lambda t, y: y, (1.0, 1.0), 0.0)
        with self.assertRaises(ValueError):
            solve_ode(lambda t, y: y, (0.0, 1.0), 1.0, step=-0.1)

        with self.assertRaises(NonConvergenceError) as cm:
            solve_ode(lambda t, y: t * y, (0, 1), 3, max_steps=3)
        self.assertEqual(cm.exception.steps, 3)

        # Stop condition that is never met.
        with self.assertRaises(NonConvergenceError):
            solve_ode(lambda t, y: 0.0, (0, 1), lambda t, c, p: False,
                      0.1, max_steps=20)


# ======================================================================

@pytest.mark.parametrize('t_end', [1.0, 5.0])
def test_against_solve_ivp(t_end):
    from pycalc.numeric import solve_ode

    def fn(t, y):
        return -2.0 * y + math.sin(t)

    _, y_n = solve_ode(fn, (0.0, 1.0), t_end, tol=1e-7)
    ref = solve_ivp(fn, (0.0, t_end), [1.0], rtol=1e-10, atol=1e-12)
    assert y_n == approx(ref.y[0, -1], abs=1e-5)


def test_custom_norm():
    from pycalc.numeric import solve_ode

    def max_norm(v):
        return float(np.max(np.abs(v)))

    _, x_n = solve_ode(_linear_2nd_order, (0.0, np.array([3.0, 2.0])), 2.0,
                       tol=1e-5, norm=max_norm)
    exact = 0.5 + math.exp(2) * (2.5 * math.cos(2) - 0.5 * math.sin(2))
    assert x_n[0] == approx(exact, abs=5e-3)


def test_verbose(capsys):
    from pycalc.numeric import solve_ode

    solve_ode(lambda t, y: 1.0, (0.0, 0.0), 1.0, 0.5, verbose=True)
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Runge-Kutta ODE Solution (fixed step):"
    assert out[1] == "... Step 1: t = 0.5, y = 0.5"
    assert len(out) == 3

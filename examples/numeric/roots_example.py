#!usr/bin/env python3

# Examples of root finding, differentiation and integration.
# Written by the pycalc developers, October 2026.

import math

from pycalc.numeric import (derivative, integrate, newton, solve,
                            set_solver_options, InvalidBracketError)

# Use a tighter tolerance than the default of 1e-3.
set_solver_options(tol=1e-8)

x = solve(math.sin, 0.5 * math.pi, 1.5 * math.pi, verbose=True)
print(f"Secant root of sin(x):  {x:.10f}\n")

x = newton(lambda x_: x_ ** 3 - 2 * x_ - 5, 2.0, verbose=True)
print(f"Newton root of x^3 - 2x - 5:  {x:.10f}\n")

print(f"d/dx exp(x) at x = 1:  {derivative(math.exp, 1.0):.8f}")
print(f"Integral of sin(x) from 0 to pi:  "
      f"{integrate(math.sin, 0, math.pi):.8f}")

try:
    solve(math.cos, -1.0, 1.0)
except InvalidBracketError as e:
    print(f"\nError: {e}")

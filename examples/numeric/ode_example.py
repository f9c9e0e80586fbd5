#!usr/bin/env python3

# Example of adaptive and fixed step ODE solutions.
# Written by the pycalc developers, October 2026.

import matplotlib.pyplot as plt
import numpy as np

from pycalc.numeric import solve_ode

# ----------------------------------------------------------------------
# y' = t.y with y(0) = 1, exact solution y = exp(t^2 / 2).  Steps are
# adapted automatically so they shrink as the solution steepens.

samples, y_end = solve_ode(lambda t, y: t * y, (0.0, 1.0), 3.0,
                           verbose=True)
t_auto, y_auto = np.array(samples).T
print(f"\ny(3) = {y_end:.4f} (exact {np.exp(4.5):.4f}) using "
      f"{len(samples) - 1} steps.")

# ----------------------------------------------------------------------
# y'' - 2y' + 2y = 1 written as a system x = [y, y'], fixed step.

def second_order(t, x):
    return [x[1], 1 + 2 * x[1] - 2 * x[0]]


vec_samples, x_end = solve_ode(second_order, (0.0, [3.0, 2.0]), 2.0,
                               step=0.2)
t_vec = np.array([t for t, _ in vec_samples])
y_vec = np.array([x[0] for _, x in vec_samples])
print(f"y(2) = {x_end[0]:.4f}")

# ----------------------------------------------------------------------
# Stop when the solution of y' = -y drops below 0.1.

_, y_stop = solve_ode(lambda t, y: -y, (0.0, 1.0),
                      lambda t, current, previous: current < 0.1)
print(f"Stopped at y = {y_stop:.4f}")

# ----------------------------------------------------------------------

fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(10, 4))
t_fine = np.linspace(0, 3, 200)
ax1.plot(t_fine, np.exp(0.5 * t_fine ** 2), 'k-', label='Exact')
ax1.plot(t_auto, y_auto, 'o', label='Adaptive RK4')
ax1.set_xlabel('t')
ax1.set_ylabel('y')
ax1.legend()

ax2.plot(t_vec, y_vec, 's-', label='Fixed step RK4')
ax2.set_xlabel('t')
ax2.legend()
plt.show()

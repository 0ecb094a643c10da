"""Semi-implicit (symplectic) Euler integrator."""

import numpy as np

from stellar_sim.physics.body import Body
from stellar_sim.physics.integrators.base import Integrator


class SemiImplicitEulerIntegrator(Integrator):
    """Semi-implicit Euler - first-order, symplectic.

    1. v_new = v + (F/m)*dt
    2. x_new = x + v_new*dt

    Position must use the updated velocity. Swapping the two lines gives
    explicit Euler, which drifts in energy.
    """

    @property
    def name(self) -> str:
        return "semi_implicit_euler"

    @property
    def order(self) -> int:
        return 1

    def integrate(self, body: Body, force: np.ndarray, dt: float) -> None:
        acceleration = self.acceleration(body, force)
        body.velocity = body.velocity + acceleration * dt
        body.position = body.position + body.velocity * dt

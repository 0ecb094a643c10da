"""Explicit Euler integrator (baseline for comparisons)."""

import numpy as np

from stellar_sim.physics.body import Body
from stellar_sim.physics.integrators.base import Integrator


class EulerIntegrator(Integrator):
    """Explicit Euler - position advances with the velocity from before the step.

    Not symplectic: orbits slowly gain energy and spiral outwards. Kept to show
    the difference against SemiImplicitEulerIntegrator.
    """

    @property
    def name(self) -> str:
        return "euler"

    @property
    def order(self) -> int:
        return 1

    def integrate(self, body: Body, force: np.ndarray, dt: float) -> None:
        """Euler step: r_new = r + v*dt, v_new = v + a*dt."""
        acceleration = self.acceleration(body, force)
        old_velocity = body.velocity
        body.velocity = old_velocity + acceleration * dt
        body.position = body.position + old_velocity * dt

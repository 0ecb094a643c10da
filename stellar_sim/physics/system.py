"""Star/planet body system: force accumulation and per-tick update."""

from typing import Iterable, List, Optional, Tuple

import numpy as np

from stellar_sim.physics import constants
from stellar_sim.physics.body import Body
from stellar_sim.physics.diagnostics import center_of_mass
from stellar_sim.physics.force import net_force
from stellar_sim.physics.integrators.base import Integrator
from stellar_sim.physics.integrators.semi_implicit_euler import SemiImplicitEulerIntegrator


class BodySystem:
    """Two populations of bodies with asymmetric gravity.

    - anchors (stars) attract each other and every satellite
    - satellites (planets) attract each other but do not pull on anchors

    Bodies are only ever appended. The anchor list is never empty.
    """

    def __init__(
        self,
        anchors: Iterable[Body],
        satellites: Iterable[Body] = (),
        G: float = constants.G,
    ):
        """Initialize body system.

        Args:
            anchors: Initial stars (at least one)
            satellites: Initial planets
            G: Gravitational constant
        """
        self.anchors: List[Body] = list(anchors)
        self.satellites: List[Body] = list(satellites)
        self.G = G
        if not self.anchors:
            raise ValueError("BodySystem needs at least one anchor")

    @property
    def n_anchors(self) -> int:
        return len(self.anchors)

    @property
    def n_satellites(self) -> int:
        return len(self.satellites)

    @property
    def n_bodies(self) -> int:
        return self.n_anchors + self.n_satellites

    def add_anchor(self, body: Body) -> Body:
        """Append a star."""
        self.anchors.append(body)
        return body

    def add_satellite(self, body: Body) -> Body:
        """Append a planet."""
        self.satellites.append(body)
        return body

    def compute_forces(self) -> Tuple[np.ndarray, np.ndarray]:
        """Compute net forces on all bodies from the current positions.

        Nothing is written here, so every sum sees the same state.

        Returns:
            Tuple of (satellite_forces, anchor_forces), shapes (S, 2) and (A, 2)
        """
        satellite_forces = np.zeros((self.n_satellites, 2))
        for i in range(self.n_satellites):
            satellite_forces[i] = net_force(i, self.satellites, self.G, sources=self.anchors)

        anchor_forces = np.zeros((self.n_anchors, 2))
        for i in range(self.n_anchors):
            anchor_forces[i] = net_force(i, self.anchors, self.G)

        return satellite_forces, anchor_forces

    def step(self, dt: float, integrator: Optional[Integrator] = None):
        """Advance every body by one tick.

        All forces are evaluated before any body moves.

        Args:
            dt: Time step
            integrator: Integrator to use (default: semi-implicit Euler)
        """
        integrator = integrator or SemiImplicitEulerIntegrator()
        satellite_forces, anchor_forces = self.compute_forces()

        for satellite, force in zip(self.satellites, satellite_forces):
            integrator.integrate(satellite, force, dt)
        for anchor, force in zip(self.anchors, anchor_forces):
            integrator.integrate(anchor, force, dt)

    def center_of_mass(self) -> np.ndarray:
        """Mass-weighted centroid of the anchors."""
        return center_of_mass(self.anchors)

    def get_state(self):
        """Get current state as arrays.

        Returns:
            Dict with 'anchors' and 'satellites', each a tuple of
            (positions (n, 2), velocities (n, 2), masses (n,))
        """
        return {
            "anchors": _stack(self.anchors),
            "satellites": _stack(self.satellites),
        }


def _stack(bodies: List[Body]):
    if not bodies:
        return np.zeros((0, 2)), np.zeros((0, 2)), np.zeros(0)
    positions = np.array([b.position for b in bodies])
    velocities = np.array([b.velocity for b in bodies])
    masses = np.array([b.mass for b in bodies])
    return positions, velocities, masses

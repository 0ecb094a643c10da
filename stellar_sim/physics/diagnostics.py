"""Read-only diagnostics: center of mass, momentum, energy."""

from typing import Sequence, Tuple

import numpy as np

from stellar_sim.physics import constants
from stellar_sim.physics.body import Body


def center_of_mass(bodies: Sequence[Body]) -> np.ndarray:
    """Mass-weighted average position.

    Args:
        bodies: Non-empty sequence of bodies

    Returns:
        Centroid, shape (2,)
    """
    if len(bodies) == 0:
        raise ValueError("Center of mass is undefined for an empty body set")
    weighted = np.zeros(2)
    total_mass = 0.0
    for body in bodies:
        weighted += body.position * body.mass
        total_mass += body.mass
    return weighted / total_mass


class Diagnostics:
    """Energy and momentum for a set of mutually interacting bodies.

    Energies only make sense for a closed set. With the star/planet
    asymmetry the full system is not closed, so callers usually pass the
    anchors alone.
    """

    def __init__(self, G: float = constants.G):
        self.G = G

    def compute_center_of_mass(self, bodies: Sequence[Body]) -> np.ndarray:
        return center_of_mass(bodies)

    def compute_momentum(self, bodies: Sequence[Body]) -> np.ndarray:
        """Total linear momentum sum(m_i * v_i)."""
        momentum = np.zeros(2)
        for body in bodies:
            momentum += body.mass * body.velocity
        return momentum

    def compute_kinetic_energy(self, bodies: Sequence[Body]) -> float:
        """K = 0.5 * sum(m_i * |v_i|^2)"""
        return float(sum(0.5 * b.mass * np.dot(b.velocity, b.velocity) for b in bodies))

    def compute_potential_energy(self, bodies: Sequence[Body]) -> float:
        """U = -G * sum_{i<j} m_i * m_j / r_ij

        Coincident pairs contribute nothing, matching the zero force they get.
        """
        U = 0.0
        n = len(bodies)
        for i in range(n):
            for j in range(i + 1, n):
                r = np.linalg.norm(bodies[j].position - bodies[i].position)
                if r == 0:
                    continue
                U -= self.G * bodies[i].mass * bodies[j].mass / r
        return float(U)

    def compute_energies(self, bodies: Sequence[Body]) -> Tuple[float, float, float]:
        """Compute kinetic, potential, and total energy.

        Returns:
            Tuple of (K, U, E)
        """
        K = self.compute_kinetic_energy(bodies)
        U = self.compute_potential_energy(bodies)
        return K, U, K + U

"""Pairwise Newtonian gravity.

Direct summation only: every force on a body is built from calls to
pairwise_force, one per interacting partner.
"""

import numpy as np

from stellar_sim.physics import constants
from stellar_sim.physics.body import Body


def pairwise_force(a: Body, b: Body, G: float = constants.G) -> np.ndarray:
    """Gravitational force exerted by b on a.

    F = G * m_a * m_b / r^2, directed from a towards b.

    Coincident bodies (r == 0) get an exact zero vector instead of inf/NaN so
    one bad pair cannot poison the rest of the run.

    Args:
        a: Body the force acts on
        b: Body exerting the force
        G: Gravitational constant

    Returns:
        Force vector, shape (2,)
    """
    direction = b.position - a.position
    distance = np.sqrt(direction[0] * direction[0] + direction[1] * direction[1])
    if distance == 0:
        return np.zeros(2)
    force_magnitude = (G * a.mass * b.mass) / (distance * distance)
    return (direction / distance) * force_magnitude


def net_force(target: int, bodies, G: float = constants.G, sources=()) -> np.ndarray:
    """Sum of forces on bodies[target] from `sources` and from every other body in `bodies`.

    Sources are summed first (in order), then bodies[j] for j != target.
    Self-pairs are excluded by index, so two identical bodies still attract.
    """
    body = bodies[target]
    total = np.zeros(2)
    for source in sources:
        total += pairwise_force(body, source, G)
    for j, other in enumerate(bodies):
        if j != target:
            total += pairwise_force(body, other, G)
    return total

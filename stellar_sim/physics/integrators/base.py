"""Abstract base class for numerical integrators."""

from abc import ABC, abstractmethod

import numpy as np

from stellar_sim.physics.body import Body


class Integrator(ABC):
    """Abstract interface for numerical integrators."""

    @abstractmethod
    def integrate(self, body: Body, force: np.ndarray, dt: float) -> None:
        """Advance one body by one time step, in place.

        Args:
            body: Body to update (position and velocity are replaced)
            force: Net force acting on the body, shape (2,)
            dt: Time step
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this integrator."""
        pass

    @property
    @abstractmethod
    def order(self) -> int:
        """Return the order of accuracy."""
        pass

    @staticmethod
    def acceleration(body: Body, force: np.ndarray) -> np.ndarray:
        """a = F / m, refusing non-positive masses."""
        if body.mass <= 0:
            raise ValueError(f"Cannot integrate body with non-positive mass {body.mass}")
        return force / body.mass

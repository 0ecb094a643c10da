"""Base class for preset scenes."""

from abc import ABC, abstractmethod
from typing import List, Tuple

from stellar_sim.physics import constants
from stellar_sim.physics.body import Body
from stellar_sim.physics.system import BodySystem


class Preset(ABC):
    """Abstract base class for preset scenes."""

    def __init__(self, G: float = constants.G):
        """Initialize preset.

        Args:
            G: Gravitational constant the initial velocities are tuned for
        """
        self.G = G

    @abstractmethod
    def generate(self) -> Tuple[List[Body], List[Body]]:
        """Generate initial bodies.

        Returns:
            Tuple of (anchors, satellites)
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this preset."""
        pass

    def build_system(self) -> BodySystem:
        """Generate the bodies and wrap them in a BodySystem using this preset's G."""
        anchors, satellites = self.generate()
        return BodySystem(anchors, satellites, G=self.G)

"""Base renderer interface."""

from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np

from stellar_sim.physics.body import Body


class Renderer(ABC):
    """Abstract base class for renderers."""

    @abstractmethod
    def render(self, anchors: Sequence[Body], satellites: Sequence[Body], center: np.ndarray):
        """Render current frame.

        Args:
            anchors: Stars to draw
            satellites: Planets to draw
            center: World point the view should be centered on
        """
        pass

    @abstractmethod
    def is_open(self) -> bool:
        """Return False once the user has closed the window."""
        pass

    @abstractmethod
    def clear(self):
        """Clear the renderer."""
        pass

    @abstractmethod
    def close(self):
        """Close the renderer."""
        pass

"""Body data model shared by physics, presets and rendering."""

from dataclasses import dataclass, field
from typing import Any

import numpy as np


def _as_vector(value, label: str) -> np.ndarray:
    """Copy value into a fresh float64 vector of shape (2,)."""
    vec = np.array(value, dtype=np.float64)
    if vec.shape != (2,):
        raise ValueError(f"{label} must be a 2D vector, got shape {vec.shape}")
    if not np.all(np.isfinite(vec)):
        raise ValueError(f"{label} must be finite, got {vec}")
    return vec


@dataclass
class Body:
    """A point mass in the simulation.

    Fields:
    - position: world coordinates, shape (2,)
    - velocity: world units per unit time, shape (2,)
    - mass: strictly positive
    - radius: drawn size in world units (rendering only)
    - color: matplotlib color spec (rendering only)
    """
    position: Any
    velocity: Any = field(default_factory=lambda: np.zeros(2))
    mass: float = 1.0
    radius: float = 5.0
    color: Any = "white"

    def __post_init__(self):
        self.position = _as_vector(self.position, "position")
        self.velocity = _as_vector(self.velocity, "velocity")
        self.mass = float(self.mass)
        if not np.isfinite(self.mass) or self.mass <= 0:
            raise ValueError(f"Body mass must be positive and finite, got {self.mass}")

    def copy(self) -> "Body":
        """Return an independent copy (arrays are not shared)."""
        return Body(
            position=self.position.copy(),
            velocity=self.velocity.copy(),
            mass=self.mass,
            radius=self.radius,
            color=self.color,
        )

"""Binary star preset: two stars in mutual orbit, three planets around the first."""

import numpy as np
from typing import List, Sequence, Tuple

from stellar_sim.physics import constants
from stellar_sim.physics.body import Body
from stellar_sim.presets.base import Preset

PLANET_OFFSETS = (100.0, 150.0, 200.0)
PLANET_SPEEDS = (0.5, 0.4, 0.3)
PLANET_COLORS = ("green", "yellow", "cyan")


class BinaryStarSystem(Preset):
    """Alpha Centauri-like pair of stars with planets.

    Star velocities split the relative circular speed
    v = sqrt(G * (m1 + m2) / separation) by mass ratio, so the pair's total
    momentum is zero and its center of mass stays put.
    """

    def __init__(
        self,
        G: float = constants.G,
        center: Sequence[float] = (400.0, 300.0),
        separation: float = 200.0,
        mass1: float = 1.1e11,
        mass2: float = 0.9e11,
        planet_mass: float = 1e9,
        planet_offsets: Sequence[float] = PLANET_OFFSETS,
        planet_speeds: Sequence[float] = PLANET_SPEEDS,
    ):
        """Initialize binary star preset.

        Args:
            G: Gravitational constant
            center: Midpoint between the two stars
            separation: Distance between the stars
            mass1: Mass of the first (left) star
            mass2: Mass of the second (right) star
            planet_mass: Mass of each planet
            planet_offsets: Planet x offsets from the first star
            planet_speeds: Planet initial y speeds
        """
        super().__init__(G)
        if len(planet_offsets) != len(planet_speeds):
            raise ValueError("planet_offsets and planet_speeds must have the same length")
        self.center = np.array(center, dtype=np.float64)
        self.separation = separation
        self.mass1 = mass1
        self.mass2 = mass2
        self.planet_mass = planet_mass
        self.planet_offsets = tuple(planet_offsets)
        self.planet_speeds = tuple(planet_speeds)

    @property
    def name(self) -> str:
        return "binary"

    def generate(self) -> Tuple[List[Body], List[Body]]:
        """Generate the two stars and their planets."""
        total_mass = self.mass1 + self.mass2
        v_rel = np.sqrt(self.G * total_mass / self.separation)
        cx, cy = self.center
        star1_x = cx - self.separation / 2

        anchors = [
            Body(
                position=(star1_x, cy),
                velocity=(0.0, -v_rel * (self.mass2 / total_mass)),
                mass=self.mass1,
                radius=constants.ANCHOR_RADIUS,
                color="red",
            ),
            Body(
                position=(cx + self.separation / 2, cy),
                velocity=(0.0, v_rel * (self.mass1 / total_mass)),
                mass=self.mass2,
                radius=constants.ANCHOR_RADIUS,
                color="blue",
            ),
        ]

        satellites = []
        for i, (offset, speed) in enumerate(zip(self.planet_offsets, self.planet_speeds)):
            satellites.append(Body(
                position=(star1_x + offset, cy),
                velocity=(0.0, speed),
                mass=self.planet_mass,
                radius=constants.SATELLITE_RADIUS,
                color=PLANET_COLORS[i % len(PLANET_COLORS)],
            ))

        return anchors, satellites

"""Physics engine for the star/planet simulation."""

from stellar_sim.physics.body import Body
from stellar_sim.physics.force import pairwise_force
from stellar_sim.physics.system import BodySystem
from stellar_sim.physics.spawn import SpawnPolicy
from stellar_sim.physics.diagnostics import Diagnostics, center_of_mass
from stellar_sim.physics.simulator import Simulator

__all__ = [
    "Body",
    "pairwise_force",
    "BodySystem",
    "SpawnPolicy",
    "Diagnostics",
    "center_of_mass",
    "Simulator",
]

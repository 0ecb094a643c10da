"""
Stellar Simulator - a real-time gravitational N-body sandbox.

Features:
- Stars (anchors) and planets (satellites) with asymmetric interaction rules
- Semi-implicit (symplectic) Euler integration with a fixed time step
- Click-to-spawn bodies in an interactive matplotlib window
- View that follows the stars' center of mass
- CLI with JSON/YAML configuration
"""

__version__ = "0.1.0"

from stellar_sim.physics.body import Body
from stellar_sim.physics.system import BodySystem
from stellar_sim.physics.simulator import Simulator

__all__ = [
    "Body",
    "BodySystem",
    "Simulator",
]

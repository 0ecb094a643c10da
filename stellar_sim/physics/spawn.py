"""Runtime insertion of new stars and planets."""

from stellar_sim.physics import constants
from stellar_sim.physics.body import Body
from stellar_sim.physics.system import BodySystem


class SpawnPolicy:
    """Appends new bodies at rest to a BodySystem.

    Any finite position is accepted and there is no population limit.
    """

    def __init__(
        self,
        system: BodySystem,
        anchor_mass: float = constants.NEW_ANCHOR_MASS,
        satellite_mass: float = constants.NEW_SATELLITE_MASS,
        anchor_color=constants.NEW_ANCHOR_COLOR,
        satellite_color=constants.NEW_SATELLITE_COLOR,
        anchor_radius: float = constants.ANCHOR_RADIUS,
        satellite_radius: float = constants.SATELLITE_RADIUS,
    ):
        """Initialize spawn policy.

        Args:
            system: System that receives the new bodies
            anchor_mass: Mass of every spawned star
            satellite_mass: Mass of every spawned planet
            anchor_color: Color of spawned stars
            satellite_color: Color of spawned planets
            anchor_radius: Drawn radius of spawned stars
            satellite_radius: Drawn radius of spawned planets
        """
        if anchor_mass <= 0 or satellite_mass <= 0:
            raise ValueError(
                f"Spawn masses must be positive, got anchor={anchor_mass}, satellite={satellite_mass}"
            )
        self.system = system
        self.anchor_mass = anchor_mass
        self.satellite_mass = satellite_mass
        self.anchor_color = anchor_color
        self.satellite_color = satellite_color
        self.anchor_radius = anchor_radius
        self.satellite_radius = satellite_radius

    def spawn_anchor(self, position) -> Body:
        """Add a star at rest at `position`."""
        body = Body(
            position=position,
            mass=self.anchor_mass,
            radius=self.anchor_radius,
            color=self.anchor_color,
        )
        return self.system.add_anchor(body)

    def spawn_satellite(self, position) -> Body:
        """Add a planet at rest at `position`."""
        body = Body(
            position=position,
            mass=self.satellite_mass,
            radius=self.satellite_radius,
            color=self.satellite_color,
        )
        return self.system.add_satellite(body)

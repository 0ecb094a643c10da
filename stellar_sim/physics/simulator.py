"""Main simulator controller."""

from collections import deque
from typing import Callable, Optional

from stellar_sim.physics import constants
from stellar_sim.physics.body import _as_vector
from stellar_sim.physics.integrators.base import Integrator
from stellar_sim.physics.integrators.semi_implicit_euler import SemiImplicitEulerIntegrator
from stellar_sim.physics.spawn import SpawnPolicy
from stellar_sim.physics.system import BodySystem

SPAWN_KINDS = ("anchor", "satellite")


class Simulator:
    """Main simulation controller.

    One call to step() is one tick:
    1. apply spawn requests queued since the last tick
    2. compute all forces, then integrate every body
    3. recompute the anchors' center of mass for the view
    """

    def __init__(
        self,
        system: BodySystem,
        integrator: Optional[Integrator] = None,
        dt: float = constants.TIME_STEP,
        spawn_policy: Optional[SpawnPolicy] = None,
    ):
        """Initialize simulator.

        Args:
            system: Body system to advance
            integrator: Integrator to use (default: semi-implicit Euler)
            dt: Time step
            spawn_policy: Policy for runtime insertions (default: SpawnPolicy(system))
        """
        self.system = system
        self.integrator = integrator or SemiImplicitEulerIntegrator()
        self.set_timestep(dt)
        self.spawn_policy = spawn_policy or SpawnPolicy(system)

        self.time = 0.0
        self.paused = False
        self.step_count = 0
        self.center_of_mass = system.center_of_mass()
        self._pending_spawns = deque()

        # Callbacks
        self.on_step_callback: Optional[Callable] = None
        self.debug: bool = False
        self.debug_interval: int = 100

    def request_spawn(self, kind: str, position):
        """Queue a new body for the start of the next tick.

        Args:
            kind: 'anchor' or 'satellite'
            position: World coordinates (x, y)

        Raises:
            ValueError: on an unknown kind or a position that is not a finite 2D point
        """
        if kind not in SPAWN_KINDS:
            raise ValueError(f"Unknown spawn kind: {kind}. Available: {list(SPAWN_KINDS)}")
        self._pending_spawns.append((kind, _as_vector(position, "position")))

    @property
    def pending_spawns(self) -> int:
        return len(self._pending_spawns)

    def _apply_spawns(self):
        while self._pending_spawns:
            kind, position = self._pending_spawns.popleft()
            if kind == "anchor":
                self.spawn_policy.spawn_anchor(position)
            else:
                self.spawn_policy.spawn_satellite(position)

    def step(self):
        """Perform one simulation tick."""
        if self.paused:
            return

        self._apply_spawns()
        self.system.step(self.dt, self.integrator)
        self.center_of_mass = self.system.center_of_mass()

        self.time += self.dt
        self.step_count += 1

        if self.debug and (self.step_count % self.debug_interval == 0):
            self._log_state()

        if self.on_step_callback:
            self.on_step_callback(self)

    def _log_state(self):
        cx, cy = self.center_of_mass
        print(
            f"[Diag] step={self.step_count} time={self.time:.2f} com=({cx:.3f}, {cy:.3f}) "
            f"anchors={self.system.n_anchors} satellites={self.system.n_satellites}"
        )

    def run_steps(self, k: int):
        """Run k ticks, stopping early if paused."""
        for _ in range(k):
            if self.paused:
                return
            self.step()

    def run(self, n_steps: int):
        """Run simulation for specified number of steps.

        Args:
            n_steps: Number of steps to run
        """
        for _ in range(n_steps):
            self.step()

    def pause(self):
        """Pause simulation."""
        self.paused = True

    def resume(self):
        """Resume simulation."""
        self.paused = False

    def set_timestep(self, dt: float):
        """Set time step.

        Args:
            dt: New time step (must be positive)
        """
        if dt <= 0:
            raise ValueError(f"Time step must be positive, got {dt}")
        self.dt = dt

    def set_integrator(self, integrator: Integrator):
        """Set integrator.

        Args:
            integrator: New integrator
        """
        self.integrator = integrator

    def get_state(self):
        """Get current simulation state.

        Returns:
            Tuple of (state dict from BodySystem.get_state, time, step_count)
        """
        return self.system.get_state(), self.time, self.step_count

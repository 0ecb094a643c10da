"""Example with real-time rendering and click-to-spawn."""

from stellar_sim import Simulator
from stellar_sim.presets import BinaryStarSystem
from stellar_sim.render import Renderer2D


def main():
    """Open the interactive window on the binary star scene."""
    sim = Simulator(BinaryStarSystem().build_system())
    renderer = Renderer2D(on_spawn=sim.request_spawn)

    print("Left click adds a planet, right click adds a star.")
    print("Close the matplotlib window to stop.")

    try:
        while renderer.is_open():
            sim.step()
            renderer.render(sim.system.anchors, sim.system.satellites, sim.center_of_mass)
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
    finally:
        renderer.close()
        print("Simulation complete!")


if __name__ == "__main__":
    main()

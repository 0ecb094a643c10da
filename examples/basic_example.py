"""Basic example of using the stellar simulator."""

from stellar_sim import Simulator
from stellar_sim.physics.diagnostics import Diagnostics
from stellar_sim.presets import BinaryStarSystem


def main():
    """Run the binary star scene headless and drop in a few extra bodies."""
    system = BinaryStarSystem().build_system()
    sim = Simulator(system, dt=0.5)
    diagnostics = Diagnostics(G=system.G)

    print("Running simulation...")
    print(f"Initial star energy: {diagnostics.compute_energies(system.anchors)[2]:.6g}")

    # Same effect as clicking in the window
    sim.request_spawn("satellite", (420.0, 380.0))
    sim.request_spawn("anchor", (600.0, 100.0))

    for step in range(2000):
        sim.step()
        if step % 500 == 0:
            cx, cy = sim.center_of_mass
            print(f"Step {step}: Time={sim.time:.1f}, COM=({cx:.2f}, {cy:.2f}), "
                  f"stars={system.n_anchors}, planets={system.n_satellites}")

    print(f"Final star energy: {diagnostics.compute_energies(system.anchors)[2]:.6g}")
    print("Simulation complete!")


if __name__ == "__main__":
    main()

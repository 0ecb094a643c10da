"""CLI main entry point."""

import argparse
import sys

from stellar_sim.physics.diagnostics import Diagnostics
from stellar_sim.physics.integrators import INTEGRATORS, get_integrator
from stellar_sim.physics.simulator import Simulator
from stellar_sim.physics.spawn import SpawnPolicy
from stellar_sim.presets import PRESETS, get_preset
from stellar_sim.render.renderer_2d import Renderer2D
from stellar_sim.utils.config import Config, load_config, save_config

# CLI flag -> Config field
OVERRIDES = {
    'preset': 'preset',
    'steps': 'steps',
    'dt': 'dt',
    'G': 'G',
    'integrator': 'integrator',
    'fps': 'fps',
    'report_every': 'report_every',
    'anchor_mass': 'new_anchor_mass',
    'satellite_mass': 'new_satellite_mass',
}


def build_config(args) -> Config:
    """Merge the optional config file with command-line overrides."""
    config = load_config(args.config) if args.config else Config()
    for flag, field_name in OVERRIDES.items():
        value = getattr(args, flag)
        if value is not None:
            setattr(config, field_name, value)
    if args.render:
        config.render = True
    return config.validate()


def build_simulator(config: Config) -> Simulator:
    """Create the preset system and its simulator from a validated config."""
    system = get_preset(config.preset, G=config.G).build_system()
    spawn_policy = SpawnPolicy(
        system,
        anchor_mass=config.new_anchor_mass,
        satellite_mass=config.new_satellite_mass,
    )
    return Simulator(system, get_integrator(config.integrator), dt=config.dt, spawn_policy=spawn_policy)


def _print_row(sim: Simulator, diagnostics: Diagnostics):
    cx, cy = sim.center_of_mass
    _, _, E = diagnostics.compute_energies(sim.system.anchors)
    print(
        f"{sim.step_count:<8} {sim.time:<10.2f} {cx:<12.4f} {cy:<12.4f} "
        f"{sim.system.n_anchors:<8} {sim.system.n_satellites:<8} {E:<14.6g}"
    )


def run_headless(sim: Simulator, config: Config):
    """Run config.steps ticks and print a report table."""
    diagnostics = Diagnostics(G=sim.system.G)

    print(f"{'Step':<8} {'Time':<10} {'COM x':<12} {'COM y':<12} {'Stars':<8} {'Planets':<8} {'E (stars)':<14}")
    print("-" * 78)
    _print_row(sim, diagnostics)

    for _ in range(config.steps):
        sim.step()
        if sim.step_count % config.report_every == 0:
            _print_row(sim, diagnostics)


def run_interactive(sim: Simulator, config: Config):
    """Open the window and tick once per frame until it is closed."""
    renderer = Renderer2D(
        view_size=tuple(config.view_size),
        fps=config.fps,
        on_spawn=sim.request_spawn,
    )
    print("Left click: add planet | Right click: add star | Close window to quit")
    try:
        renderer.render(sim.system.anchors, sim.system.satellites, sim.center_of_mass)
        while renderer.is_open():
            if config.steps and sim.step_count >= config.steps:
                break
            sim.step()
            renderer.render(sim.system.anchors, sim.system.satellites, sim.center_of_mass)
    finally:
        renderer.close()


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Stellar Simulator - stars, planets and gravity")

    parser.add_argument('--config', type=str, default=None,
                       help='JSON or YAML config file (flags override it)')
    parser.add_argument('--preset', type=str, default=None,
                       choices=list(PRESETS.keys()),
                       help='Initial scene')
    parser.add_argument('--steps', type=int, default=None,
                       help='Number of ticks (0 with --render: until the window closes)')
    parser.add_argument('--dt', type=float, default=None,
                       help='Time step per tick')
    parser.add_argument('--G', type=float, default=None,
                       help='Gravitational constant (scaled units)')
    parser.add_argument('--integrator', type=str, default=None,
                       choices=list(INTEGRATORS.keys()),
                       help='Numerical integrator')
    parser.add_argument('--anchor-mass', type=float, default=None,
                       help='Mass of stars added with right click')
    parser.add_argument('--satellite-mass', type=float, default=None,
                       help='Mass of planets added with left click')
    parser.add_argument('--render', action='store_true',
                       help='Open the interactive window')
    parser.add_argument('--fps', type=float, default=None,
                       help='Frame rate limit for the window')
    parser.add_argument('--report-every', type=int, default=None,
                       help='Print a report row every N ticks (headless)')
    parser.add_argument('--save-config', type=str, default=None,
                       help='Write the effective config to this file and exit')

    args = parser.parse_args(argv)

    try:
        config = build_config(args)
        if args.save_config:
            save_config(config, args.save_config)
    except (ValueError, OSError) as e:
        print(f"Invalid configuration: {e}")
        sys.exit(1)

    if args.save_config:
        print(f"Config saved to {args.save_config}")
        return

    sim = build_simulator(config)
    print(f"Preset: {config.preset}, Integrator: {sim.integrator.name}, dt: {sim.dt}, G: {sim.system.G:.4g}")

    if config.render:
        run_interactive(sim, config)
    else:
        run_headless(sim, config)

    print("Simulation complete!")


if __name__ == '__main__':
    main()

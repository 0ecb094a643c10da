"""Configuration management."""

import json
import warnings
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import List

import yaml

from stellar_sim.physics import constants


@dataclass
class Config:
    """Simulation configuration."""
    # Physics
    G: float = constants.G
    dt: float = constants.TIME_STEP
    integrator: str = "semi_implicit_euler"

    # Scene and spawning
    preset: str = "binary"
    new_anchor_mass: float = constants.NEW_ANCHOR_MASS
    new_satellite_mass: float = constants.NEW_SATELLITE_MASS

    # Run length (0 = until the window is closed)
    steps: int = 0

    # Rendering
    render: bool = False
    fps: float = constants.FRAMERATE_LIMIT
    view_size: List[float] = None

    # Reporting
    report_every: int = 100

    def __post_init__(self):
        if self.view_size is None:
            self.view_size = [float(constants.WINDOW_WIDTH), float(constants.WINDOW_HEIGHT)]
        # YAML 1.1 reads "1e11" as a string
        for name in ('G', 'dt', 'new_anchor_mass', 'new_satellite_mass', 'fps'):
            setattr(self, name, float(getattr(self, name)))
        self.steps = int(self.steps)
        self.report_every = int(self.report_every)
        self.view_size = [float(v) for v in self.view_size]

    def validate(self) -> "Config":
        """Check parameter ranges.

        Returns:
            self, for chaining

        Raises:
            ValueError: on the first out-of-range parameter
        """
        if self.dt <= 0:
            raise ValueError(f"dt must be positive, got {self.dt}")
        if self.G < 0:
            raise ValueError(f"G must be non-negative, got {self.G}")
        if self.new_anchor_mass <= 0 or self.new_satellite_mass <= 0:
            raise ValueError("Spawn masses must be positive")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if self.steps < 0:
            raise ValueError(f"steps must be >= 0, got {self.steps}")
        if self.report_every <= 0:
            raise ValueError(f"report_every must be positive, got {self.report_every}")
        if len(self.view_size) != 2 or min(self.view_size) <= 0:
            raise ValueError(f"view_size must be two positive numbers, got {self.view_size}")

        if self.integrator == "euler":
            warnings.warn(
                "Explicit Euler is not symplectic; orbits will drift outwards. "
                "Use 'semi_implicit_euler' for long runs.",
                UserWarning,
                stacklevel=2,
            )
        if self.dt > constants.TIME_STEP:
            warnings.warn(
                f"dt={self.dt} is larger than the default tick {constants.TIME_STEP}; "
                "close encounters may be unstable.",
                UserWarning,
                stacklevel=2,
            )
        return self


def _is_yaml(path: Path) -> bool:
    return path.suffix in ('.yaml', '.yml')


def load_config(config_path: str) -> Config:
    """Load configuration from file.

    Args:
        config_path: Path to config file (.json or .yaml)

    Returns:
        Config object

    Raises:
        ValueError: on an unsupported suffix, unparsable content or unknown keys
    """
    config_path = Path(config_path)
    if not _is_yaml(config_path) and config_path.suffix != '.json':
        raise ValueError(f"Unsupported config format: {config_path.suffix}. Use .json or .yaml")

    with open(config_path, 'r') as f:
        if _is_yaml(config_path):
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Malformed YAML in {config_path}: {e}") from e
        else:
            data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must hold a mapping, got {type(data).__name__}")
    known = {f.name for f in fields(Config)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")
    try:
        return Config(**data)
    except TypeError as e:
        raise ValueError(f"Invalid config value in {config_path}: {e}") from e


def save_config(config: Config, output_path: str):
    """Save configuration to file.

    Args:
        config: Config object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    if not _is_yaml(output_path) and output_path.suffix != '.json':
        raise ValueError(f"Unsupported config format: {output_path.suffix}. Use .json or .yaml")
    data = asdict(config)

    with open(output_path, 'w') as f:
        if _is_yaml(output_path):
            yaml.safe_dump(data, f, default_flow_style=False)
        else:
            json.dump(data, f, indent=2)

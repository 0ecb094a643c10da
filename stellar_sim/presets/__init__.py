"""Preset scenes for the simulation."""

from stellar_sim.presets.base import Preset
from stellar_sim.presets.binary_star import BinaryStarSystem

PRESETS = {
    "binary": BinaryStarSystem,
}


def get_preset(name: str, **kwargs) -> Preset:
    """Get preset by name."""
    preset_class = PRESETS.get(name.lower())
    if preset_class is None:
        raise ValueError(f"Unknown preset: {name}. Available: {list(PRESETS.keys())}")
    return preset_class(**kwargs)


__all__ = ["Preset", "BinaryStarSystem", "PRESETS", "get_preset"]

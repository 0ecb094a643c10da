"""Tests for the Body data model."""

import numpy as np
import pytest
from stellar_sim.physics.body import Body


def test_body_defaults():
    """Test default velocity and conversion to float arrays."""
    body = Body(position=[1, 2], mass=3)

    assert body.position.dtype == np.float64
    assert np.array_equal(body.position, [1.0, 2.0])
    assert np.array_equal(body.velocity, [0.0, 0.0])
    assert body.mass == 3.0


@pytest.mark.parametrize("mass", [0.0, -1.0, float("nan"), float("inf")])
def test_body_rejects_bad_mass(mass):
    """Test that zero, negative and non-finite masses are rejected."""
    with pytest.raises(ValueError):
        Body(position=(0.0, 0.0), mass=mass)


@pytest.mark.parametrize("position", [(0.0,), (0.0, 0.0, 0.0), (float("nan"), 0.0), (0.0, float("inf"))])
def test_body_rejects_bad_position(position):
    """Test that positions must be finite 2D vectors."""
    with pytest.raises(ValueError):
        Body(position=position, mass=1.0)


def test_body_does_not_alias_input():
    """Test that the body owns its own arrays."""
    position = np.array([1.0, 2.0])
    body = Body(position=position, mass=1.0)
    position[0] = 99.0

    assert body.position[0] == 1.0


def test_body_copy_is_independent():
    """Test that copies do not share state."""
    body = Body(position=(1.0, 2.0), velocity=(3.0, 4.0), mass=5.0, radius=7.0, color="red")
    clone = body.copy()
    clone.position[0] = -1.0
    clone.velocity[1] = -1.0

    assert body.position[0] == 1.0
    assert body.velocity[1] == 4.0
    assert clone.mass == 5.0
    assert clone.radius == 7.0
    assert clone.color == "red"

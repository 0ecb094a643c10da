"""Tests for physics engine."""

import numpy as np
import pytest
from stellar_sim.physics.body import Body
from stellar_sim.physics.force import pairwise_force
from stellar_sim.physics.integrators.semi_implicit_euler import SemiImplicitEulerIntegrator
from stellar_sim.physics.system import BodySystem


def test_pairwise_force_value():
    """Test force magnitude and direction for a 3-4-5 triangle."""
    a = Body(position=(0.0, 0.0), mass=2.0)
    b = Body(position=(3.0, 4.0), mass=5.0)

    force = pairwise_force(a, b, G=1.0)

    # |F| = 1 * 2 * 5 / 25 = 0.4 along (0.6, 0.8)
    assert np.allclose(force, [0.24, 0.32])


@pytest.mark.parametrize("seed", range(5))
def test_pairwise_force_symmetry(seed):
    """Test Newton's third law on the pairwise term."""
    rng = np.random.default_rng(seed)
    a = Body(position=rng.uniform(-100, 100, 2), mass=rng.uniform(0.1, 10))
    b = Body(position=rng.uniform(-100, 100, 2), mass=rng.uniform(0.1, 10))

    f_ab = pairwise_force(a, b, G=1.0)
    f_ba = pairwise_force(b, a, G=1.0)

    assert np.allclose(f_ab, -f_ba, rtol=1e-12, atol=0.0)
    assert np.isclose(np.linalg.norm(f_ab), np.linalg.norm(f_ba), rtol=1e-12)
    # Attractive: force on a points towards b
    assert np.dot(f_ab, b.position - a.position) > 0


def test_coincident_bodies_zero_force():
    """Test that coincident bodies give an exact zero vector."""
    a = Body(position=(5.0, -2.0), mass=1e11)
    a_copy = a.copy()

    force = pairwise_force(a, a_copy)

    assert np.array_equal(force, np.zeros(2))
    assert np.all(np.isfinite(force))


def test_pairwise_force_does_not_mutate():
    """Test that force evaluation leaves both bodies untouched."""
    a = Body(position=(0.0, 0.0), velocity=(1.0, 1.0), mass=1.0)
    b = Body(position=(1.0, 0.0), velocity=(0.0, -1.0), mass=3.0)
    a_before, b_before = a.copy(), b.copy()

    pairwise_force(a, b, G=1.0)

    for body, before in ((a, a_before), (b, b_before)):
        assert np.array_equal(body.position, before.position)
        assert np.array_equal(body.velocity, before.velocity)
        assert body.mass == before.mass


def test_two_body_single_step():
    """Test the unit-mass pair at distance 2 after one step with dt=1."""
    a = Body(position=(0.0, 0.0), mass=1.0)
    b = Body(position=(2.0, 0.0), mass=1.0)

    assert np.allclose(pairwise_force(a, b, G=1.0), [0.25, 0.0])
    assert np.allclose(pairwise_force(b, a, G=1.0), [-0.25, 0.0])

    system = BodySystem([a, b], G=1.0)
    system.step(1.0)

    # Velocity 0.25 towards the other body, displacement = new velocity * dt
    assert np.allclose(a.velocity, [0.25, 0.0])
    assert np.allclose(b.velocity, [-0.25, 0.0])
    assert np.allclose(a.position, [0.25, 0.0])
    assert np.allclose(b.position, [1.75, 0.0])


def _reference_step(anchors, satellites, G, dt):
    """Snapshot every body, compute all forces from the snapshot, then integrate."""
    snap_anchors = [b.copy() for b in anchors]
    snap_satellites = [b.copy() for b in satellites]

    satellite_forces = []
    for i, s in enumerate(snap_satellites):
        total = np.zeros(2)
        for a in snap_anchors:
            total += pairwise_force(s, a, G)
        for j, other in enumerate(snap_satellites):
            if j != i:
                total += pairwise_force(s, other, G)
        satellite_forces.append(total)

    anchor_forces = []
    for i, a in enumerate(snap_anchors):
        total = np.zeros(2)
        for j, other in enumerate(snap_anchors):
            if j != i:
                total += pairwise_force(a, other, G)
        anchor_forces.append(total)

    integrator = SemiImplicitEulerIntegrator()
    for body, force in zip(snap_satellites + snap_anchors, satellite_forces + anchor_forces):
        integrator.integrate(body, force, dt)
    return snap_anchors, snap_satellites


def _three_body_scene():
    anchors = [
        Body(position=(0.0, 0.0), velocity=(0.0, -0.2), mass=50.0),
        Body(position=(10.0, 0.0), velocity=(0.0, 0.3), mass=30.0),
    ]
    satellites = [
        Body(position=(3.0, 4.0), velocity=(0.5, 0.0), mass=1.0),
        Body(position=(-4.0, 2.0), velocity=(0.0, 0.7), mass=2.0),
        Body(position=(6.0, -5.0), velocity=(-0.3, 0.1), mass=0.5),
    ]
    return anchors, satellites


def test_within_tick_consistency():
    """Test that the system matches a snapshot-then-integrate reference over several ticks."""
    anchors, satellites = _three_body_scene()
    system = BodySystem([b.copy() for b in anchors], [b.copy() for b in satellites], G=1.0)
    ref_anchors, ref_satellites = anchors, satellites

    for _ in range(20):
        system.step(0.05)
        ref_anchors, ref_satellites = _reference_step(ref_anchors, ref_satellites, 1.0, 0.05)

        for body, ref in zip(system.anchors + system.satellites, ref_anchors + ref_satellites):
            assert np.allclose(body.position, ref.position, rtol=1e-12, atol=1e-12)
            assert np.allclose(body.velocity, ref.velocity, rtol=1e-12, atol=1e-12)


def test_three_anchor_forces_use_tick_start_positions():
    """Test that forces for a tick are computed before anyone moves."""
    anchors = [
        Body(position=(0.0, 0.0), velocity=(1.0, 0.0), mass=1.0),
        Body(position=(1.0, 0.0), velocity=(0.0, 1.0), mass=1.0),
        Body(position=(0.0, 1.0), velocity=(-1.0, 0.0), mass=1.0),
    ]
    start = [b.copy() for b in anchors]
    system = BodySystem(anchors, G=1.0)

    satellite_forces, anchor_forces = system.compute_forces()
    assert satellite_forces.shape == (0, 2)

    # Forces from the untouched starting layout, pair by pair
    expected = np.array([
        sum(pairwise_force(start[i], start[j], 1.0) for j in range(3) if j != i)
        for i in range(3)
    ])
    assert np.allclose(anchor_forces, expected, rtol=1e-12, atol=0.0)

    system.step(0.1)
    for body, before, force in zip(system.anchors, start, anchor_forces):
        v_new = before.velocity + force / before.mass * 0.1
        assert np.allclose(body.velocity, v_new)
        assert np.allclose(body.position, before.position + v_new * 0.1)


def test_anchors_ignore_satellites():
    """Test that satellites are pulled by anchors but do not pull back."""
    anchor = Body(position=(0.0, 0.0), mass=1.0)
    heavy_satellite = Body(position=(1.0, 0.0), mass=1000.0)
    system = BodySystem([anchor], [heavy_satellite], G=1.0)

    system.step(0.1)

    assert np.array_equal(anchor.position, [0.0, 0.0])
    assert np.array_equal(anchor.velocity, [0.0, 0.0])
    assert heavy_satellite.velocity[0] < 0


def test_identical_satellites_both_updated():
    """Test that identical satellites are distinct bodies and stay finite."""
    anchor = Body(position=(0.0, 0.0), mass=100.0)
    twin1 = Body(position=(5.0, 0.0), velocity=(0.0, 1.0), mass=1.0)
    twin2 = twin1.copy()
    system = BodySystem([anchor], [twin1, twin2], G=1.0)

    system.step(0.1)

    assert system.n_satellites == 2
    assert np.array_equal(twin1.position, twin2.position)
    assert np.all(np.isfinite(twin1.position))
    assert twin1.position[0] < 5.0


def test_system_requires_anchor():
    """Test that an empty anchor list is rejected."""
    with pytest.raises(ValueError):
        BodySystem([], [Body(position=(0.0, 0.0), mass=1.0)])


def test_get_state_shapes():
    """Test array view of the system."""
    anchors, satellites = _three_body_scene()
    system = BodySystem(anchors, satellites, G=1.0)

    state = system.get_state()
    positions, velocities, masses = state["satellites"]

    assert positions.shape == (3, 2)
    assert velocities.shape == (3, 2)
    assert np.allclose(masses, [1.0, 2.0, 0.5])
    assert state["anchors"][0].shape == (2, 2)
    assert system.n_bodies == 5

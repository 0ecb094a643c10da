"""Numerical integrators for the body system."""

from stellar_sim.physics.integrators.base import Integrator
from stellar_sim.physics.integrators.euler import EulerIntegrator
from stellar_sim.physics.integrators.semi_implicit_euler import SemiImplicitEulerIntegrator

INTEGRATORS = {
    "semi_implicit_euler": SemiImplicitEulerIntegrator,
    "euler": EulerIntegrator,
}


def get_integrator(name: str) -> Integrator:
    """Get a fresh integrator instance by name."""
    integrator_class = INTEGRATORS.get(name.lower())
    if integrator_class is None:
        raise ValueError(f"Unknown integrator: {name}. Available: {list(INTEGRATORS.keys())}")
    return integrator_class()


__all__ = [
    "Integrator",
    "EulerIntegrator",
    "SemiImplicitEulerIntegrator",
    "INTEGRATORS",
    "get_integrator",
]

"""Rendering for the interactive 2D window."""

from stellar_sim.render.base import Renderer
from stellar_sim.render.renderer_2d import Renderer2D

__all__ = ["Renderer", "Renderer2D"]

"""Identicon engine — hash sampling, symmetric layout, grid building and rendering."""

from hashavatar.engine.config import IdenticonConfig
from hashavatar.engine.grid import build_grid
from hashavatar.engine.renderer import RenderedImage, render
from hashavatar.engine.sampler import sample_bool
from hashavatar.engine.symmetry import symmetry_groups

__all__ = [
    "IdenticonConfig",
    "build_grid",
    "RenderedImage",
    "render",
    "sample_bool",
    "symmetry_groups",
]

"""Pixel grid construction from a hash string.

Two layouts map hash samples onto cells:

- symmetric: each row consumes one sample per mirror group (see
  ``symmetry_groups``) and writes it to every column of the group.
- asymmetric: samples fill the grid column by column from a SHA-256 digest
  of the identity hash.

A layout is a sequence of ``(sample_index, row, col)`` assignments; the grid
builder just evaluates samples for it.
"""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Iterator

import numpy as np
from numpy.typing import NDArray

from hashavatar.engine.config import IdenticonConfig
from hashavatar.engine.sampler import sample_bool
from hashavatar.engine.symmetry import symmetry_groups

logger = logging.getLogger(__name__)

PixelGrid = NDArray[np.bool_]
Assignment = tuple[int, int, int]


# ── Layouts ──


def symmetric_layout(grid_size: int) -> Iterator[Assignment]:
    """Mirrored assignments, row by row.

    The row advances once every ``len(groups)`` samples. Samples that would
    land on a row past the bottom of the grid are not produced.
    """
    groups = symmetry_groups(grid_size)
    per_row = len(groups)
    for i in range(grid_size**2):
        row = i // per_row
        if row >= grid_size:
            break
        for col in groups[i % per_row]:
            yield i, row, col


def asymmetric_layout(grid_size: int) -> Iterator[Assignment]:
    """Column-major assignments: sample ``i`` goes to row ``i % n``, column ``i // n``."""
    for i in range(grid_size**2):
        yield i, i % grid_size, i // grid_size


# ── Builders ──


def secondary_hash(raw_hash: str) -> str:
    """SHA-256 hex digest of the identity hash, used by the asymmetric layout."""
    return hashlib.sha256(raw_hash.encode("utf-8")).hexdigest()


def fill_grid(
    hash_str: str,
    grid_size: int,
    layout: Iterator[Assignment],
    strict: bool = False,
) -> PixelGrid:
    grid = np.zeros((grid_size, grid_size), dtype=bool)
    needed = 0
    for index, row, col in layout:
        grid[row, col] = sample_bool(hash_str, index, strict=strict)
        needed = max(needed, index + 1)

    if needed > len(hash_str):
        logger.warning(
            "Hash of length %d is shorter than the %d samples needed; trailing cells are off",
            len(hash_str),
            needed,
        )
    return grid


def build_symmetric_grid(raw_hash: str, grid_size: int, strict: bool = False) -> PixelGrid:
    return fill_grid(raw_hash, grid_size, symmetric_layout(grid_size), strict)


def build_asymmetric_grid(raw_hash: str, grid_size: int, strict: bool = False) -> PixelGrid:
    return fill_grid(secondary_hash(raw_hash), grid_size, asymmetric_layout(grid_size), strict)


def build_grid(raw_hash: str, config: IdenticonConfig) -> PixelGrid:
    """Build the grid for ``config``, picking the layout from ``config.symmetric``."""
    if config.symmetric:
        return build_symmetric_grid(raw_hash, config.grid_size, config.strict_sampling)
    return build_asymmetric_grid(raw_hash, config.grid_size, config.strict_sampling)

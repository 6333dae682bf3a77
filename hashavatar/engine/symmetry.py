"""Mirror column groups for a left-right symmetric grid."""

from __future__ import annotations


def symmetry_groups(grid_size: int) -> list[list[int]]:
    """Column groups that share one value per row.

    Each group pairs column ``x`` with its mirror ``grid_size - 1 - x``; the
    centre column of an odd grid stands alone.

        >>> symmetry_groups(5)
        [[0, 4], [1, 3], [2]]
    """
    last = grid_size - 1
    groups: list[list[int]] = []
    for x in range(last // 2 + 1):
        mirror = last - x
        groups.append([x] if x == mirror else [x, mirror])
    return groups

"""Sphere and box overlap tests."""

from __future__ import annotations

from typing import Sequence

# Objects further ahead than this along Z are never tested for box overlap.
BOX_CHECK_DISTANCE = 10.0


def sphere_to_sphere(
    target_a: Sequence[float],
    radius_a: float,
    target_b: Sequence[float],
    radius_b: float,
) -> bool:
    """Return True when two spheres intersect (touching does not count)."""
    dx = target_a[0] - target_b[0]
    dy = target_a[1] - target_b[1]
    dz = target_a[2] - target_b[2]
    sq_length = dx * dx + dy * dy + dz * dz
    r = radius_a + radius_b
    return sq_length < r * r


def box_to_box(
    target_a: Sequence[float],
    radius_a: Sequence[float],
    target_b: Sequence[float],
    radius_b: Sequence[float],
) -> bool:
    """Axis-aligned overlap on the X/Z plane.

    ``radius`` gives the half extents along X and Z. The test only runs when
    ``target_b`` is less than ``BOX_CHECK_DISTANCE`` ahead of ``target_a``
    along Z; otherwise the boxes are reported apart.
    """
    distance = target_b[2] - target_a[2]
    if distance >= BOX_CHECK_DISTANCE:
        return False

    a_min_x, a_max_x = target_a[0] - radius_a[0], target_a[0] + radius_a[0]
    a_min_z, a_max_z = target_a[2] - radius_a[1], target_a[2] + radius_a[1]
    b_min_x, b_max_x = target_b[0] - radius_b[0], target_b[0] + radius_b[0]
    b_min_z, b_max_z = target_b[2] - radius_b[1], target_b[2] + radius_b[1]

    return (
        a_max_x >= b_min_x
        and a_min_x <= b_max_x
        and a_max_z >= b_min_z
        and a_min_z <= b_max_z
    )
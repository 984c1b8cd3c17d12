"""Footprint predicates for scene graph nodes.

All predicates work on axis-aligned boxes given as center + extent and
projected onto the horizontal (X, Z) plane. The vertical axis is ignored.
Rotation is never consulted.
"""

from dataclasses import dataclass
from typing import Sequence

import numpy as np


OVERLAP_THRESHOLD = 0.75

# Indices of the horizontal axes in a (x, y, z) vector
_PLANE_AXES = [0, 2]


@dataclass(frozen=True)
class Footprint:
    """Axis-aligned rectangle on the XZ plane."""
    min_x: float
    max_x: float
    min_z: float
    max_z: float

    @classmethod
    def from_box(cls, center: Sequence[float], extent: Sequence[float]) -> "Footprint":
        """Project a center/extent box onto the XZ plane."""
        c = np.asarray(center, dtype=float)[_PLANE_AXES]
        half = np.asarray(extent, dtype=float)[_PLANE_AXES] / 2.0
        lo = c - half
        hi = c + half
        return cls(
            min_x=float(lo[0]), max_x=float(hi[0]),
            min_z=float(lo[1]), max_z=float(hi[1]),
        )

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def depth(self) -> float:
        return self.max_z - self.min_z

    @property
    def area(self) -> float:
        return self.width * self.depth


def _footprint(box) -> Footprint:
    if isinstance(box, Footprint):
        return box
    return Footprint.from_box(box.center, box.extent)


def contains_on_plane(outer, inner) -> bool:
    """True if inner's footprint lies entirely within outer's footprint.

    Boundary-inclusive on both axes, so a box always contains itself.
    """
    o = _footprint(outer)
    i = _footprint(inner)
    return (i.min_x >= o.min_x and i.max_x <= o.max_x and
            i.min_z >= o.min_z and i.max_z <= o.max_z)


def overlap_ratio(a, b) -> float:
    """Fraction of b's footprint area covered by a's footprint.

    The denominator is always the second argument. A degenerate b
    (zero footprint area) yields 0.0.
    """
    fa = _footprint(a)
    fb = _footprint(b)
    if fb.area <= 0.0:
        return 0.0

    overlap_x = max(0.0, min(fa.max_x, fb.max_x) - max(fa.min_x, fb.min_x))
    overlap_z = max(0.0, min(fa.max_z, fb.max_z) - max(fa.min_z, fb.min_z))
    return (overlap_x * overlap_z) / fb.area


def overlap_fraction(a, b, threshold: float = OVERLAP_THRESHOLD) -> bool:
    """True if a overlaps at least `threshold` of b's footprint area."""
    return overlap_ratio(a, b) >= threshold

"""Vector primitives shared by the measurement functions."""

from kinect_measurements.geometry.vector import (
    Vector2,
    Vector3,
    dot,
    length,
    normalize,
    vector2_zero,
    vector3_zero,
)

__all__ = [
    "Vector2",
    "Vector3",
    "vector2_zero",
    "vector3_zero",
    "length",
    "normalize",
    "dot",
]

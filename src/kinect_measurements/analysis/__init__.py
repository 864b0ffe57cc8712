"""Pure measurement logic: distances, angles, and height estimation.

This module contains NO I/O operations.
All functions operate on a single skeleton snapshot and return results.
"""

from kinect_measurements.analysis.height import (
    DEFAULT_TIE_BREAK,
    LEFT_LEG_CHAIN,
    RIGHT_LEG_CHAIN,
    UPPER_BODY_CHAIN,
    HeightEstimate,
    LegSide,
    chain_length,
    count_tracked_joints,
    estimate_height,
    measure_height,
    select_leg,
)
from kinect_measurements.analysis.measurements import (
    angle_at_joint,
    angle_between_vectors,
    distance_between_joints,
    distance_between_positions,
    distance_from_origin_squared,
    joint_angle,
    joint_distance_squared,
    skeleton_distance_squared,
)
from kinect_measurements.core.config import HEAD_DIVERGENCE

__all__ = [
    # Distances
    "distance_from_origin_squared",
    "skeleton_distance_squared",
    "joint_distance_squared",
    "distance_between_positions",
    "distance_between_joints",
    # Angles
    "angle_between_vectors",
    "angle_at_joint",
    "joint_angle",
    # Height
    "HEAD_DIVERGENCE",
    "DEFAULT_TIE_BREAK",
    "UPPER_BODY_CHAIN",
    "LEFT_LEG_CHAIN",
    "RIGHT_LEG_CHAIN",
    "LegSide",
    "HeightEstimate",
    "chain_length",
    "count_tracked_joints",
    "select_leg",
    "measure_height",
    "estimate_height",
]

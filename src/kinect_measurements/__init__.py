"""Geometric measurements on tracked skeleton snapshots."""

from kinect_measurements.analysis import (
    angle_at_joint,
    angle_between_vectors,
    distance_between_joints,
    distance_between_positions,
    distance_from_origin_squared,
    estimate_height,
    joint_angle,
    joint_distance_squared,
    measure_height,
    skeleton_distance_squared,
)
from kinect_measurements.core import Joint, JointType, Position, Skeleton, TrackingState
from kinect_measurements.geometry import Vector2, Vector3

__version__ = "0.1.0"

__all__ = [
    "Vector2",
    "Vector3",
    "JointType",
    "TrackingState",
    "Position",
    "Joint",
    "Skeleton",
    "distance_from_origin_squared",
    "skeleton_distance_squared",
    "joint_distance_squared",
    "distance_between_positions",
    "distance_between_joints",
    "angle_between_vectors",
    "angle_at_joint",
    "joint_angle",
    "measure_height",
    "estimate_height",
]

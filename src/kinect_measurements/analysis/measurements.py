"""Distance and angle measurements on a skeleton snapshot.

Two distance conventions coexist and are kept apart by name:

- ``*_distance_squared`` / ``distance_from_origin_squared``: squared distance
  from the sensor origin (no square root taken).
- ``distance_between_*``: true Euclidean distance between two points.

This module is pure logic with NO I/O.
"""

from __future__ import annotations

import math

import numpy as np

from kinect_measurements.core.config import AngleSettings, get_settings
from kinect_measurements.core.logging import get_logger
from kinect_measurements.core.types import Joint, JointType, Position, Skeleton
from kinect_measurements.geometry.vector import Vector3

logger = get_logger(__name__)


def distance_from_origin_squared(position: Position) -> float:
    """Squared distance of a position from the sensor.

    Args:
        position: Point in sensor space

    Returns:
        x² + y² + z², in squared position units
    """
    return position.x * position.x + position.y * position.y + position.z * position.z


def skeleton_distance_squared(skeleton: Skeleton) -> float:
    """Squared distance of the skeleton root from the sensor."""
    return distance_from_origin_squared(skeleton.position)


def joint_distance_squared(skeleton: Skeleton, joint_type: JointType) -> float:
    """Squared distance of a single joint from the sensor."""
    return distance_from_origin_squared(skeleton.joint(joint_type).position)


def distance_between_positions(first: Position, second: Position) -> float:
    """Euclidean distance between two positions."""
    return math.sqrt(
        (first.x - second.x) ** 2 + (first.y - second.y) ** 2 + (first.z - second.z) ** 2
    )


def distance_between_joints(
    skeleton: Skeleton, first: JointType, second: JointType
) -> float:
    """Euclidean distance between two joints of a skeleton.

    Raises:
        MissingJointError: If either joint is absent
    """
    return distance_between_positions(
        skeleton.joint(first).position, skeleton.joint(second).position
    )


def angle_between_vectors(
    first: Vector3,
    second: Vector3,
    settings: AngleSettings | None = None,
) -> float:
    """Angle between two vectors in degrees.

    Neither input is modified. The cosine is clamped to [-1, 1] so that
    rounding error on (anti)parallel vectors cannot push ``acos`` out of
    its domain.

    Args:
        first: First vector
        second: Second vector
        settings: Rounding settings (defaults to global settings)

    Returns:
        Angle in [0, 180], rounded to ``settings.decimals`` places;
        nan if either vector has zero length
    """
    settings = settings or get_settings().angle

    if first.length == 0.0 or second.length == 0.0:
        logger.debug("Angle requested for a zero-length vector: %s, %s", first, second)

    cosine = float(np.clip(Vector3.dot(first.normalized(), second.normalized()), -1.0, 1.0))
    return round(math.degrees(math.acos(cosine)), settings.decimals)


def angle_at_joint(
    center: Joint,
    first: Joint,
    second: Joint,
    settings: AngleSettings | None = None,
) -> float:
    """Interior angle at ``center`` between the segments to two other joints.

    For example the elbow angle is ``angle_at_joint(elbow, shoulder, wrist)``.

    Returns:
        Angle in degrees, in [0, 180]
    """
    origin = center.position.to_vector()
    return angle_between_vectors(
        first.position.to_vector() - origin,
        second.position.to_vector() - origin,
        settings,
    )


def joint_angle(
    skeleton: Skeleton,
    center: JointType,
    first: JointType,
    second: JointType,
    settings: AngleSettings | None = None,
) -> float:
    """Interior angle at a joint of a skeleton, by joint type.

    Raises:
        MissingJointError: If any of the joints is absent
    """
    return angle_at_joint(
        skeleton.joint(center), skeleton.joint(first), skeleton.joint(second), settings
    )

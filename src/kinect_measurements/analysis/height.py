"""Body height estimation from a partial skeletal chain.

Height is the length of the head-to-hip chain plus the length of one leg
plus a fixed allowance for the top of the head, which the sensor does not
report. The leg is whichever has more fully tracked joints; on a tie the
configured tie-break leg is used (right by default).

This module is pure logic with NO I/O.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

import numpy as np

from kinect_measurements.core.config import HeightSettings, get_settings
from kinect_measurements.core.logging import get_logger
from kinect_measurements.core.types import Joint, JointType, Skeleton

logger = get_logger(__name__)

UPPER_BODY_CHAIN = (
    JointType.HEAD,
    JointType.SHOULDER_CENTER,
    JointType.SPINE,
    JointType.HIP_CENTER,
)
LEFT_LEG_CHAIN = (
    JointType.HIP_LEFT,
    JointType.KNEE_LEFT,
    JointType.ANKLE_LEFT,
    JointType.FOOT_LEFT,
)
RIGHT_LEG_CHAIN = (
    JointType.HIP_RIGHT,
    JointType.KNEE_RIGHT,
    JointType.ANKLE_RIGHT,
    JointType.FOOT_RIGHT,
)


class LegSide(Enum):
    """Which leg chain a height estimate was taken from."""

    LEFT = "left"
    RIGHT = "right"

    @property
    def chain(self) -> tuple[JointType, ...]:
        """Joint types of this leg, hip first."""
        return LEFT_LEG_CHAIN if self is LegSide.LEFT else RIGHT_LEG_CHAIN


DEFAULT_TIE_BREAK = LegSide.RIGHT


@dataclass(frozen=True)
class HeightEstimate:
    """Breakdown of a height estimate.

    Attributes:
        upper_body: Head to hip-center chain length
        leg: Length of the selected leg chain
        head_divergence: Constant added for the top of the head
        leg_side: Which leg was used
        left_tracked: Tracked joints in the left leg
        right_tracked: Tracked joints in the right leg
    """

    upper_body: float
    leg: float
    head_divergence: float
    leg_side: LegSide
    left_tracked: int
    right_tracked: int

    @property
    def total(self) -> float:
        """Estimated height, in position units."""
        return self.upper_body + self.leg + self.head_divergence


def chain_length(joints: Sequence[Joint]) -> float:
    """Sum of segment lengths between consecutive joints.

    Args:
        joints: Ordered joints along a body chain

    Returns:
        Total length; 0.0 for fewer than two joints
    """
    if len(joints) < 2:
        return 0.0

    points = np.array(
        [(j.position.x, j.position.y, j.position.z) for j in joints], dtype=np.float64
    )
    return float(np.linalg.norm(np.diff(points, axis=0), axis=1).sum())


def count_tracked_joints(joints: Sequence[Joint]) -> int:
    """Number of joints whose state is TRACKED (inferred joints excluded)."""
    return sum(1 for joint in joints if joint.is_tracked)


def select_leg(skeleton: Skeleton, tie_break: LegSide = DEFAULT_TIE_BREAK) -> LegSide:
    """Pick the leg with strictly more tracked joints.

    Args:
        skeleton: Skeleton snapshot
        tie_break: Leg to use when both have the same count

    Returns:
        Selected leg side
    """
    left, right = _tracked_leg_joints(skeleton)
    return _pick_leg(left, right, tie_break)


def _tracked_leg_joints(skeleton: Skeleton) -> tuple[int, int]:
    return (
        count_tracked_joints(skeleton.joints_for(LEFT_LEG_CHAIN)),
        count_tracked_joints(skeleton.joints_for(RIGHT_LEG_CHAIN)),
    )


def _pick_leg(left_tracked: int, right_tracked: int, tie_break: LegSide) -> LegSide:
    if left_tracked > right_tracked:
        return LegSide.LEFT
    if right_tracked > left_tracked:
        return LegSide.RIGHT
    return tie_break


def measure_height(skeleton: Skeleton, settings: HeightSettings | None = None) -> HeightEstimate:
    """Estimate height and return the intermediate lengths.

    Tracking state only influences which leg is used; the estimate is
    always computed, even when no leg joint is tracked.

    Args:
        skeleton: Skeleton snapshot containing the upper body and both legs
        settings: Height settings (defaults to global settings)

    Returns:
        HeightEstimate breakdown

    Raises:
        MissingJointError: If a chain joint is absent from the snapshot
    """
    settings = settings or get_settings().height

    left_tracked, right_tracked = _tracked_leg_joints(skeleton)
    leg_side = _pick_leg(left_tracked, right_tracked, LegSide(settings.tie_break))
    if left_tracked == 0 and right_tracked == 0:
        logger.debug("No leg joints tracked, using %s leg", leg_side.value)

    estimate = HeightEstimate(
        upper_body=chain_length(skeleton.joints_for(UPPER_BODY_CHAIN)),
        leg=chain_length(skeleton.joints_for(leg_side.chain)),
        head_divergence=settings.head_divergence,
        leg_side=leg_side,
        left_tracked=left_tracked,
        right_tracked=right_tracked,
    )
    logger.debug(
        "Height %.3f (upper body %.3f, %s leg %.3f, tracked L/R %d/%d)",
        estimate.total,
        estimate.upper_body,
        leg_side.value,
        estimate.leg,
        left_tracked,
        right_tracked,
    )
    return estimate


def estimate_height(skeleton: Skeleton, settings: HeightSettings | None = None) -> float:
    """Estimated body height, in the sensor's position units (meters)."""
    return measure_height(skeleton, settings).total

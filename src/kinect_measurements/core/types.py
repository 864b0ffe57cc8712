"""Core data types: the skeleton snapshot supplied by the tracking layer."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from kinect_measurements.core.exceptions import MissingJointError, SnapshotFormatError
from kinect_measurements.geometry.vector import Vector3


class JointType(Enum):
    """Skeleton joint identifiers, in sensor order."""

    HIP_CENTER = 0
    SPINE = 1
    SHOULDER_CENTER = 2
    HEAD = 3
    SHOULDER_LEFT = 4
    ELBOW_LEFT = 5
    WRIST_LEFT = 6
    HAND_LEFT = 7
    SHOULDER_RIGHT = 8
    ELBOW_RIGHT = 9
    WRIST_RIGHT = 10
    HAND_RIGHT = 11
    HIP_LEFT = 12
    KNEE_LEFT = 13
    ANKLE_LEFT = 14
    FOOT_LEFT = 15
    HIP_RIGHT = 16
    KNEE_RIGHT = 17
    ANKLE_RIGHT = 18
    FOOT_RIGHT = 19


class TrackingState(Enum):
    """Confidence the sensor reports for a joint position."""

    NOT_TRACKED = 0
    INFERRED = 1
    TRACKED = 2


@dataclass(frozen=True, slots=True)
class Position:
    """A point in sensor space, in meters."""

    x: float
    y: float
    z: float

    def to_vector(self) -> Vector3:
        """Convert to a Vector3."""
        return Vector3(self.x, self.y, self.z)


@dataclass(frozen=True, slots=True)
class Joint:
    """A single tracked joint.

    Attributes:
        joint_type: Which joint this is
        position: Position in sensor space
        tracking_state: Sensor confidence for the position
    """

    joint_type: JointType
    position: Position
    tracking_state: TrackingState = TrackingState.TRACKED

    @property
    def is_tracked(self) -> bool:
        """True only for fully tracked joints; inferred joints do not count."""
        return self.tracking_state is TrackingState.TRACKED


@dataclass(slots=True)
class Skeleton:
    """One tracked body in one frame.

    Attributes:
        joints: Mapping of joint type to Joint
        position: Root position of the skeleton
        tracking_id: Sensor-assigned body identifier
    """

    joints: dict[JointType, Joint] = field(default_factory=dict)
    position: Position = field(default_factory=lambda: Position(0.0, 0.0, 0.0))
    tracking_id: int = 0

    def joint(self, joint_type: JointType) -> Joint:
        """Get a joint, raising MissingJointError if it is absent."""
        try:
            return self.joints[joint_type]
        except KeyError:
            raise MissingJointError(f"Skeleton has no {joint_type.name} joint") from None

    def get_joint(self, joint_type: JointType) -> Joint | None:
        """Get a joint or None if it is absent."""
        return self.joints.get(joint_type)

    def joints_for(self, joint_types: Iterable[JointType]) -> list[Joint]:
        """Get several joints in the requested order."""
        return [self.joint(joint_type) for joint_type in joint_types]

    @classmethod
    def from_joints(
        cls,
        joints: Iterable[Joint],
        position: Position | None = None,
        tracking_id: int = 0,
    ) -> Skeleton:
        """Build a skeleton from a flat collection of joints."""
        return cls(
            joints={joint.joint_type: joint for joint in joints},
            position=position or Position(0.0, 0.0, 0.0),
            tracking_id=tracking_id,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Skeleton:
        """Build a skeleton from plain data.

        Expected shape::

            {
                "position": [x, y, z],
                "tracking_id": 1,
                "joints": {
                    "HEAD": {"position": [x, y, z], "tracking_state": "TRACKED"},
                    ...
                },
            }

        Joint and state names are matched case-insensitively. ``position``,
        ``tracking_id`` and ``tracking_state`` are optional.

        Raises:
            SnapshotFormatError: If the data does not have that shape
        """
        if not isinstance(data, Mapping):
            raise SnapshotFormatError("Snapshot must be a mapping")

        raw_joints = data.get("joints", {})
        if not isinstance(raw_joints, Mapping):
            raise SnapshotFormatError("'joints' must be a mapping of joint name to joint data")

        joints: dict[JointType, Joint] = {}
        for name, raw_joint in raw_joints.items():
            joint_type = _parse_enum(JointType, name, "joint")
            if not isinstance(raw_joint, Mapping):
                raise SnapshotFormatError(f"Joint {name!r} must be a mapping")
            joints[joint_type] = Joint(
                joint_type=joint_type,
                position=_parse_position(raw_joint.get("position"), f"joint {name!r}"),
                tracking_state=_parse_enum(
                    TrackingState, raw_joint.get("tracking_state", "TRACKED"), "tracking state"
                ),
            )

        root = data.get("position")
        try:
            tracking_id = int(data.get("tracking_id", 0))
        except (TypeError, ValueError):
            raise SnapshotFormatError("'tracking_id' must be an integer") from None

        return cls(
            joints=joints,
            position=Position(0.0, 0.0, 0.0) if root is None else _parse_position(root, "skeleton"),
            tracking_id=tracking_id,
        )


def _parse_position(raw: Any, owner: str) -> Position:
    if not isinstance(raw, (list, tuple)) or len(raw) != 3:
        raise SnapshotFormatError(f"Position of {owner} must be a sequence of three numbers")
    try:
        x, y, z = (float(value) for value in raw)
    except (TypeError, ValueError):
        raise SnapshotFormatError(f"Position of {owner} must be numeric") from None
    return Position(x, y, z)


def _parse_enum(enum_cls: Any, raw: Any, what: str) -> Any:
    if not isinstance(raw, str):
        raise SnapshotFormatError(f"Unknown {what}: {raw!r}")
    try:
        return enum_cls[raw.strip().upper()]
    except KeyError:
        raise SnapshotFormatError(f"Unknown {what}: {raw!r}") from None

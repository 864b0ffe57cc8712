"""Pytest fixtures for Kinect Measurements tests."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from kinect_measurements.core.config import AngleSettings, HeightSettings, get_settings
from kinect_measurements.core.types import (
    Joint,
    JointType,
    Position,
    Skeleton,
    TrackingState,
)

# Upright body facing the sensor 2m away. Upper body chain is 0.7m and each
# leg chain is 0.9m, so the estimated height is 1.7m. The left elbow is bent
# 90 degrees towards the sensor; the right arm hangs straight.
STANDING_POSITIONS: dict[JointType, tuple[float, float, float]] = {
    JointType.HEAD: (0.0, 0.7, 2.0),
    JointType.SHOULDER_CENTER: (0.0, 0.5, 2.0),
    JointType.SPINE: (0.0, 0.1, 2.0),
    JointType.HIP_CENTER: (0.0, 0.0, 2.0),
    JointType.SHOULDER_LEFT: (-0.2, 0.5, 2.0),
    JointType.ELBOW_LEFT: (-0.2, 0.2, 2.0),
    JointType.WRIST_LEFT: (-0.2, 0.2, 1.7),
    JointType.HAND_LEFT: (-0.2, 0.2, 1.6),
    JointType.SHOULDER_RIGHT: (0.2, 0.5, 2.0),
    JointType.ELBOW_RIGHT: (0.2, 0.2, 2.0),
    JointType.WRIST_RIGHT: (0.2, -0.1, 2.0),
    JointType.HAND_RIGHT: (0.2, -0.2, 2.0),
    JointType.HIP_LEFT: (-0.1, -0.05, 2.0),
    JointType.KNEE_LEFT: (-0.1, -0.45, 2.0),
    JointType.ANKLE_LEFT: (-0.1, -0.85, 2.0),
    JointType.FOOT_LEFT: (-0.1, -0.95, 2.0),
    JointType.HIP_RIGHT: (0.1, -0.05, 2.0),
    JointType.KNEE_RIGHT: (0.1, -0.45, 2.0),
    JointType.ANKLE_RIGHT: (0.1, -0.85, 2.0),
    JointType.FOOT_RIGHT: (0.1, -0.95, 2.0),
}

SkeletonFactory = Callable[..., Skeleton]

SETTINGS_ENV_PREFIXES = ("HEIGHT_", "ANGLE_", "LOG_")


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Run each test with default settings, ignoring the caller's environment and .env."""
    for name in list(os.environ):
        if name.startswith(SETTINGS_ENV_PREFIXES):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def _build_skeleton(
    positions: dict[JointType, tuple[float, float, float]] | None = None,
    states: dict[JointType, TrackingState] | None = None,
) -> Skeleton:
    """Create a standing skeleton with some joints moved or re-stated."""
    merged = {**STANDING_POSITIONS, **(positions or {})}
    states = states or {}
    joints = [
        Joint(
            joint_type=joint_type,
            position=Position(*xyz),
            tracking_state=states.get(joint_type, TrackingState.TRACKED),
        )
        for joint_type, xyz in merged.items()
    ]
    return Skeleton.from_joints(joints, position=Position(0.0, 0.0, 2.0), tracking_id=1)


@pytest.fixture
def skeleton_factory() -> SkeletonFactory:
    """Factory for standing skeletons with per-test overrides."""
    return _build_skeleton


@pytest.fixture
def standing_skeleton() -> Skeleton:
    """A fully tracked standing skeleton."""
    return _build_skeleton()


@pytest.fixture
def height_settings() -> HeightSettings:
    """Default height settings."""
    return HeightSettings()


@pytest.fixture
def angle_settings() -> AngleSettings:
    """Default angle settings."""
    return AngleSettings()

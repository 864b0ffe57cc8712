"""Core infrastructure: config, types, exceptions, and logging."""

from kinect_measurements.core.config import (
    AngleSettings,
    HeightSettings,
    LoggingSettings,
    Settings,
    get_settings,
)
from kinect_measurements.core.exceptions import (
    KinectMeasurementsError,
    MissingJointError,
    SnapshotFormatError,
)
from kinect_measurements.core.logging import get_logger, setup_logging
from kinect_measurements.core.types import (
    Joint,
    JointType,
    Position,
    Skeleton,
    TrackingState,
)

__all__ = [
    # Config
    "Settings",
    "HeightSettings",
    "AngleSettings",
    "LoggingSettings",
    "get_settings",
    # Types
    "JointType",
    "TrackingState",
    "Position",
    "Joint",
    "Skeleton",
    # Exceptions
    "KinectMeasurementsError",
    "MissingJointError",
    "SnapshotFormatError",
    # Logging
    "setup_logging",
    "get_logger",
]

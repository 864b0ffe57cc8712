"""Custom exceptions for Kinect Measurements."""


class KinectMeasurementsError(Exception):
    """Base exception for all Kinect Measurements errors."""

    pass


class MissingJointError(KinectMeasurementsError):
    """A requested joint is not present in the skeleton snapshot."""

    def __init__(self, message: str = "Joint missing from skeleton") -> None:
        self.message = message
        super().__init__(self.message)


class SnapshotFormatError(KinectMeasurementsError):
    """Skeleton snapshot data could not be parsed."""

    def __init__(self, message: str = "Invalid skeleton snapshot") -> None:
        self.message = message
        super().__init__(self.message)

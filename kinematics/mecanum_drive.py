"""Mecanum drive kinematics.

Inverse kinematics is a fixed 4x3 matrix M mapping [vx, vy, omega] to the
four wheel speeds. Forward kinematics uses its pseudo-inverse, which gives
the least-squares chassis velocity for inconsistent wheel speeds.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from kinematics.chassis_speeds import ChassisSpeeds, Translation2d


@dataclass(frozen=True)
class MecanumDriveWheelSpeeds:
    """Wheel surface speeds of a four-wheel mecanum base.

    Attributes:
        front_left_mps: Front-left wheel speed
        front_right_mps: Front-right wheel speed
        rear_left_mps: Rear-left wheel speed
        rear_right_mps: Rear-right wheel speed
    """

    front_left_mps: float = 0.0
    front_right_mps: float = 0.0
    rear_left_mps: float = 0.0
    rear_right_mps: float = 0.0

    def as_vector(self) -> np.ndarray:
        return np.array([
            self.front_left_mps,
            self.front_right_mps,
            self.rear_left_mps,
            self.rear_right_mps,
        ])


def _inverse_kinematics_matrix(
    front_left: Translation2d,
    front_right: Translation2d,
    rear_left: Translation2d,
    rear_right: Translation2d,
) -> np.ndarray:
    return np.array([
        [1.0, -1.0, -(front_left.x_m + front_left.y_m)],
        [1.0, 1.0, front_right.x_m - front_right.y_m],
        [1.0, 1.0, rear_left.x_m - rear_left.y_m],
        [1.0, -1.0, -(rear_right.x_m + rear_right.y_m)],
    ]) / np.sqrt(2)


class MecanumDriveKinematics:
    """Converts between mecanum wheel speeds and chassis speeds.

    Wheel positions are given relative to the robot center. The inverse
    kinematics matrix is cached and only rebuilt when a different center of
    rotation is requested.
    """

    def __init__(
        self,
        front_left: Translation2d,
        front_right: Translation2d,
        rear_left: Translation2d,
        rear_right: Translation2d,
    ) -> None:
        self._wheel_positions = (front_left, front_right, rear_left, rear_right)
        self._inverse_kinematics = _inverse_kinematics_matrix(
            *self._wheel_positions
        )
        self._forward_kinematics = np.linalg.pinv(self._inverse_kinematics)
        self._previous_center_of_rotation = Translation2d()

    def to_wheel_speeds(
        self,
        chassis_speeds: ChassisSpeeds,
        center_of_rotation: Optional[Translation2d] = None,
    ) -> MecanumDriveWheelSpeeds:
        """Inverse kinematics about an optional center of rotation.

        Args:
            chassis_speeds: Desired robot-relative velocity
            center_of_rotation: Rotation point relative to the robot
                center, defaults to the center itself

        Returns:
            Wheel speeds achieving chassis_speeds
        """
        if center_of_rotation is None:
            center_of_rotation = Translation2d()

        if center_of_rotation != self._previous_center_of_rotation:
            relative_positions = [
                position.minus(center_of_rotation)
                for position in self._wheel_positions
            ]
            self._inverse_kinematics = _inverse_kinematics_matrix(
                *relative_positions
            )
            self._previous_center_of_rotation = center_of_rotation

        wheel_vector = self._inverse_kinematics @ chassis_speeds.as_vector()
        return MecanumDriveWheelSpeeds(*wheel_vector.tolist())

    def to_chassis_speeds(
        self,
        wheel_speeds: MecanumDriveWheelSpeeds
    ) -> ChassisSpeeds:
        """Forward kinematics about the robot center."""
        chassis_vector = self._forward_kinematics @ wheel_speeds.as_vector()
        return ChassisSpeeds(*chassis_vector.tolist())

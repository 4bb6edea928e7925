"""Planar chassis velocity and position value types."""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Translation2d:
    """Position in the robot frame.

    Attributes:
        x_m: Forward coordinate
        y_m: Left coordinate
    """

    x_m: float = 0.0
    y_m: float = 0.0

    def minus(self, other: 'Translation2d') -> 'Translation2d':
        return Translation2d(self.x_m - other.x_m, self.y_m - other.y_m)


@dataclass(frozen=True)
class ChassisSpeeds:
    """Robot-relative chassis velocity.

    Attributes:
        vx_mps: Forward velocity
        vy_mps: Leftward velocity
        omega_radps: Counter-clockwise angular velocity
    """

    vx_mps: float = 0.0
    vy_mps: float = 0.0
    omega_radps: float = 0.0

    @classmethod
    def from_field_relative_speeds(
        cls,
        vx_mps: float,
        vy_mps: float,
        omega_radps: float,
        robot_angle_rad: float,
    ) -> 'ChassisSpeeds':
        """Convert field-relative velocities into the robot frame.

        Args:
            vx_mps: Velocity toward the opposing field wall
            vy_mps: Velocity toward the left field wall
            omega_radps: Counter-clockwise angular velocity
            robot_angle_rad: Robot heading relative to the field

        Returns:
            Robot-relative ChassisSpeeds
        """
        cos_angle = np.cos(robot_angle_rad)
        sin_angle = np.sin(robot_angle_rad)
        return cls(
            vx_mps=vx_mps * cos_angle + vy_mps * sin_angle,
            vy_mps=-vx_mps * sin_angle + vy_mps * cos_angle,
            omega_radps=omega_radps,
        )

    def as_vector(self) -> np.ndarray:
        """Return [vx, vy, omega] as a (3,) array."""
        return np.array([self.vx_mps, self.vy_mps, self.omega_radps])


@dataclass(frozen=True)
class SwerveModuleState:
    """Speed and steering angle of one swerve module.

    Attributes:
        speed_mps: Wheel speed
        angle_rad: Module steering angle
    """

    speed_mps: float = 0.0
    angle_rad: float = 0.0

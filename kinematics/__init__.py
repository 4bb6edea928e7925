"""Drivetrain kinematics for wheeled robots.

Public API:
    - ChassisSpeeds: Robot-relative velocity dataclass
    - Translation2d: Planar position dataclass
    - SwerveModuleState: Swerve module speed and angle
    - DifferentialDriveKinematics, DifferentialDriveWheelSpeeds
    - MecanumDriveKinematics, MecanumDriveWheelSpeeds
"""

from kinematics.chassis_speeds import (
    ChassisSpeeds,
    SwerveModuleState,
    Translation2d,
)
from kinematics.differential_drive import (
    DifferentialDriveKinematics,
    DifferentialDriveWheelSpeeds,
)
from kinematics.mecanum_drive import (
    MecanumDriveKinematics,
    MecanumDriveWheelSpeeds,
)

__all__ = [
    'ChassisSpeeds',
    'SwerveModuleState',
    'Translation2d',
    'DifferentialDriveKinematics',
    'DifferentialDriveWheelSpeeds',
    'MecanumDriveKinematics',
    'MecanumDriveWheelSpeeds',
]

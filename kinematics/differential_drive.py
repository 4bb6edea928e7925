"""Differential drive kinematics.

    v     = (v_left + v_right) / 2
    omega = (v_right - v_left) / d

where d is the track width.
"""

from dataclasses import dataclass

from kinematics.chassis_speeds import ChassisSpeeds


@dataclass(frozen=True)
class DifferentialDriveWheelSpeeds:
    """Left and right wheel surface speeds.

    Attributes:
        left_mps: Left wheel speed
        right_mps: Right wheel speed
    """

    left_mps: float = 0.0
    right_mps: float = 0.0


class DifferentialDriveKinematics:
    """Converts between wheel speeds and chassis speeds for a skid-steer base."""

    def __init__(self, track_width_m: float) -> None:
        if track_width_m <= 0:
            raise ValueError(
                f"track_width_m must be positive, got {track_width_m}"
            )
        self._track_width_m = track_width_m

    @property
    def track_width_m(self) -> float:
        return self._track_width_m

    def to_chassis_speeds(
        self,
        wheel_speeds: DifferentialDriveWheelSpeeds
    ) -> ChassisSpeeds:
        """Forward kinematics. Lateral velocity is always zero."""
        return ChassisSpeeds(
            vx_mps=(wheel_speeds.left_mps + wheel_speeds.right_mps) / 2,
            vy_mps=0.0,
            omega_radps=(
                (wheel_speeds.right_mps - wheel_speeds.left_mps)
                / self._track_width_m
            ),
        )

    def to_wheel_speeds(
        self,
        chassis_speeds: ChassisSpeeds
    ) -> DifferentialDriveWheelSpeeds:
        """Inverse kinematics. Lateral velocity is ignored."""
        half_track_m = self._track_width_m / 2
        return DifferentialDriveWheelSpeeds(
            left_mps=chassis_speeds.vx_mps - half_track_m * chassis_speeds.omega_radps,
            right_mps=chassis_speeds.vx_mps + half_track_m * chassis_speeds.omega_radps,
        )

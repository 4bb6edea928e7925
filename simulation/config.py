"""Linear system simulator configuration parameters.

Single source of truth for simulator settings.
See config/simulator_params.yaml for parameter values.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
import yaml


@dataclass(frozen=True)
class SimulatorConfig:
    """Configuration parameters for LinearSystemSimulator.

    All parameters immutable after construction (frozen=True).

    Attributes:
        sampling_period_s: Nominal time between update() calls
        measurement_std_devs: Standard deviation of each output channel,
            in the output's units
        add_noise: Whether measurement noise is added to outputs
        random_seed: Seed for the noise generator (None = nondeterministic)
    """

    sampling_period_s: float
    measurement_std_devs: Tuple[float, ...]
    add_noise: bool = False
    random_seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate parameters satisfy constraints."""
        if self.sampling_period_s <= 0:
            raise ValueError(
                f"sampling_period_s must be positive, "
                f"got {self.sampling_period_s}"
            )
        std_devs = np.array(self.measurement_std_devs, dtype=float)
        if std_devs.ndim != 1 or std_devs.size == 0:
            raise ValueError(
                f"measurement_std_devs must be a non-empty sequence, "
                f"got {self.measurement_std_devs}"
            )
        if not np.all(np.isfinite(std_devs)) or np.any(std_devs < 0):
            raise ValueError(
                f"measurement_std_devs must be finite and non-negative, "
                f"got {self.measurement_std_devs}"
            )

    @classmethod
    def from_yaml(cls, yaml_path: str) -> 'SimulatorConfig':
        """Load configuration from YAML file.

        Args:
            yaml_path: Path to YAML file containing simulator parameters

        Returns:
            SimulatorConfig instance

        Raises:
            FileNotFoundError: If YAML file does not exist
            KeyError: If a required parameter is missing
            ValueError: If parameters are invalid
        """
        with open(yaml_path, 'r') as file:
            config = yaml.safe_load(file)

        # Convert lists to tuples for immutability
        return cls(
            sampling_period_s=config['sampling_period_s'],
            measurement_std_devs=tuple(config['measurement_std_devs']),
            add_noise=config.get('add_noise', False),
            random_seed=config.get('random_seed', None),
        )

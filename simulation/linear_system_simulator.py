"""Simulator for linear state-space plants.

Each update:
1. Holds the current input over the step and advances the true state
   with the ZOH-discretized plant
2. Computes the plant output y = C·x + D·u
3. Optionally adds Gaussian measurement noise to the output

The plant is re-discretized every update so that update() may be called
with a varying timestep.
"""

import logging
from typing import Optional

import numpy as np

from simulation.config import SimulatorConfig
from state_space import LinearSystem, make_white_noise_vector


logger = logging.getLogger(__name__)


class LinearSystemSimulator:
    """Steps a LinearSystem forward and exposes its (noisy) output.

    Attributes:
        system: Continuous plant being simulated
        should_add_noise: Whether measurement noise is added to outputs
        state: Current true state (n,)
        output: Most recent output (p,)
    """

    def __init__(
        self,
        system: LinearSystem,
        add_noise: bool = False,
        measurement_std_devs: Optional[np.ndarray] = None,
        rng: Optional[np.random.Generator] = None,
        sampling_period_s: Optional[float] = None,
    ) -> None:
        """Initialize the simulator at the zero state with zero input.

        Args:
            system: Continuous plant to simulate
            add_noise: Add measurement noise to outputs
            measurement_std_devs: Per-output standard deviations (p,),
                zeros if None
            rng: Random generator for measurement noise
            sampling_period_s: Step used by update() when no timestep is
                given. If None, every update() needs an explicit timestep.

        Raises:
            ValueError: If measurement_std_devs does not match the outputs
                or sampling_period_s is not positive
        """
        self._system = system
        self._should_add_noise = add_noise

        if sampling_period_s is not None and sampling_period_s <= 0:
            raise ValueError(
                f"sampling_period_s must be positive, got {sampling_period_s}"
            )
        self._sampling_period_s = sampling_period_s

        if measurement_std_devs is None:
            measurement_std_devs = np.zeros(system.output_dimension)
        self._measurement_std_devs = np.array(measurement_std_devs, dtype=float)
        if self._measurement_std_devs.shape != (system.output_dimension,):
            raise ValueError(
                f"measurement_std_devs must have shape "
                f"({system.output_dimension},), "
                f"got {self._measurement_std_devs.shape}"
            )

        self._rng = rng if rng is not None else np.random.default_rng()
        self._state = np.zeros(system.state_dimension)
        self._input = np.zeros(system.input_dimension)
        self._output = np.zeros(system.output_dimension)

        logger.info(
            "Linear system simulator: %d states, %d inputs, %d outputs, noise %s",
            system.state_dimension,
            system.input_dimension,
            system.output_dimension,
            'on' if add_noise else 'off',
        )

    @classmethod
    def from_config(
        cls,
        system: LinearSystem,
        config: SimulatorConfig
    ) -> 'LinearSystemSimulator':
        """Build a simulator from a SimulatorConfig.

        The noise generator is seeded with config.random_seed and
        update() defaults to config.sampling_period_s.
        """
        return cls(
            system,
            add_noise=config.add_noise,
            measurement_std_devs=np.array(config.measurement_std_devs),
            rng=np.random.default_rng(config.random_seed),
            sampling_period_s=config.sampling_period_s,
        )

    @property
    def system(self) -> LinearSystem:
        return self._system

    @property
    def sampling_period_s(self) -> Optional[float]:
        return self._sampling_period_s

    @property
    def should_add_noise(self) -> bool:
        return self._should_add_noise

    @should_add_noise.setter
    def should_add_noise(self, add_noise: bool) -> None:
        self._should_add_noise = add_noise

    @property
    def state(self) -> np.ndarray:
        return self._state.copy()

    @property
    def output(self) -> np.ndarray:
        return self._output.copy()

    def output_element(self, row: int) -> float:
        return float(self._output[row])

    def set_state(self, state: np.ndarray) -> None:
        """Overwrite the true state, e.g. to start from initial conditions."""
        state = np.array(state, dtype=float)
        if state.shape != (self._system.state_dimension,):
            raise ValueError(
                f"state must have shape ({self._system.state_dimension},), "
                f"got {state.shape}"
            )
        self._state = state

    def set_input(self, control: np.ndarray) -> None:
        """Set the input held constant over subsequent updates."""
        control = np.array(control, dtype=float)
        if control.shape != (self._system.input_dimension,):
            raise ValueError(
                f"control must have shape ({self._system.input_dimension},), "
                f"got {control.shape}"
            )
        self._input = control

    def set_input_element(self, row: int, value: float) -> None:
        if not 0 <= row < self._system.input_dimension:
            raise ValueError(
                f"row must be in [0, {self._system.input_dimension}), got {row}"
            )
        self._input[row] = value

    def update(self, dt_s: Optional[float] = None) -> np.ndarray:
        """Advance the simulation by dt_s and return the new output.

        Args:
            dt_s: Step length in seconds. If None, uses sampling_period_s
                from initialization.

        Returns:
            Output after the step (p,), noisy if noise is enabled

        Raises:
            ValueError: If dt_s is None and no sampling period was set
        """
        if dt_s is None:
            if self._sampling_period_s is None:
                raise ValueError(
                    "dt_s is required when no sampling_period_s was configured"
                )
            dt_s = self._sampling_period_s

        self._state = self._system.calculate_x(self._state, self._input, dt_s)
        self._output = self._system.calculate_y(self._state, self._input)

        if self._should_add_noise:
            self._output = self._output + make_white_noise_vector(
                self._measurement_std_devs, self._rng
            )

        logger.debug("Simulator step dt=%.4f s, output=%s", dt_s, self._output)
        return self._output.copy()

"""Simulation of linear state-space plants.

This module steps continuous linear plants with exact ZOH discretization
and produces (optionally noisy) measurements for estimator and controller
testing.

Public API:
    - LinearSystemSimulator: Plant simulator
    - SimulatorConfig: Configuration dataclass for the simulator
"""

from simulation.config import SimulatorConfig
from simulation.linear_system_simulator import LinearSystemSimulator

__all__ = [
    'LinearSystemSimulator',
    'SimulatorConfig',
]

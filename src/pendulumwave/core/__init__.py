"""Oscillator model and simulated time."""

from pendulumwave.core.clock import ClockState, SimulationClock
from pendulumwave.core.colorramp import color_from_ratio
from pendulumwave.core.oscillator import Oscillator, oscillators_from_config
from pendulumwave.core.parameters import OscillatorConfig, derive_parameters

__all__ = [
    "ClockState",
    "SimulationClock",
    "color_from_ratio",
    "Oscillator",
    "oscillators_from_config",
    "OscillatorConfig",
    "derive_parameters",
]

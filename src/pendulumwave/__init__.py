"""Pendulum wave simulator: oscillator model, clock, and pygame front end."""

from pendulumwave.config import ConfigurationError, WaveConfig
from pendulumwave.core.clock import SimulationClock
from pendulumwave.core.colorramp import color_from_ratio
from pendulumwave.core.oscillator import Oscillator
from pendulumwave.core.parameters import OscillatorConfig, derive_parameters
from pendulumwave.runner import Control, SceneRunner

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "WaveConfig",
    "SimulationClock",
    "color_from_ratio",
    "Oscillator",
    "OscillatorConfig",
    "derive_parameters",
    "Control",
    "SceneRunner",
]

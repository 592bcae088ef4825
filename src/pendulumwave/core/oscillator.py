"""
Single pendulum bob driven by an exact simple-harmonic angle.

The angle is a closed-form function of simulated time, so an update never
depends on the previous one: rewinding or reversing time is just another
evaluation of the same cosine.
"""

import math

from pendulumwave.config import WaveConfig
from pendulumwave.core.colorramp import outline_color
from pendulumwave.core.parameters import OscillatorConfig, derive_parameters


class Oscillator:
    """
    One pendulum of the wave.

    Configuration is fixed by ``setup``; ``update`` recomputes the angle and
    bob position for a given simulated time and exposes them read-only.
    """

    def __init__(self, config: OscillatorConfig | None = None):
        self._config: OscillatorConfig | None = None
        self._angle = 0.0
        self._position = (0.0, 0.0)
        if config is not None:
            self.setup(config)

    def setup(self, config: OscillatorConfig):
        """Attach the immutable configuration. Rests the bob straight down."""
        self._config = config
        self._angle = 0.0
        self._position = (config.pivot[0], config.pivot[1] + config.visual_length)

    def update(self, total_sim_time: float):
        """Recompute angle and position for ``total_sim_time`` seconds."""
        cfg = self._config
        if cfg is None:
            raise RuntimeError("Oscillator.update() called before setup()")

        angle = cfg.amplitude_rad * math.cos(cfg.angular_frequency * total_sim_time)

        x = cfg.pivot[0] + cfg.visual_length * math.sin(angle)
        y = cfg.pivot[1] + cfg.visual_length * math.cos(angle)

        self._angle = angle
        self._position = (x, y)

    @property
    def config(self) -> OscillatorConfig:
        if self._config is None:
            raise RuntimeError("Oscillator has not been set up")
        return self._config

    @property
    def angle(self) -> float:
        return self._angle

    @property
    def position(self) -> tuple[float, float]:
        return self._position

    @property
    def pivot(self) -> tuple[float, float]:
        return self.config.pivot

    @property
    def color(self) -> tuple[int, int, int]:
        return self.config.color

    @property
    def outline_color(self) -> tuple[int, int, int]:
        return outline_color(self.config.color)

    @property
    def radius(self) -> float:
        return self.config.radius

    def __repr__(self) -> str:
        if self._config is None:
            return "Oscillator(<unset>)"
        return (
            f"Oscillator(index={self._config.index}, "
            f"omega={self._config.angular_frequency:.4f}, angle={self._angle:.4f})"
        )


def oscillators_from_config(config: WaveConfig) -> list[Oscillator]:
    """Derive parameters for every index and set up one Oscillator each."""
    return [Oscillator(params) for params in derive_parameters(config)]

"""
Oscillator parameter derivation.

Each pendulum i completes exactly (base_oscillations + i) full swings over
the total period, so every pendulum shares a whole-number phase at
t = total_period_s and the row re-converges. Frequencies, physical lengths
and on-screen lengths follow from that one rule:

- period(i)        = T / (base + i)
- omega(i)         = 2π / period(i)
- physics_len(i)   = g · (period(i) / 2π)²        (small-angle pendulum)
- pixels_per_meter = height · ratio / physics_len(0)
- visual_len(i)    = physics_len(i) · pixels_per_meter
"""

import math
from dataclasses import dataclass

import numpy as np

from pendulumwave.config import ConfigurationError, WaveConfig
from pendulumwave.core.colorramp import color_from_ratio

TWO_PI = 2.0 * math.pi


@dataclass(frozen=True)
class OscillatorConfig:
    """Immutable per-oscillator configuration."""

    index: int
    angular_frequency: float  # rad/s
    visual_length: float  # pixels
    amplitude_rad: float
    pivot: tuple[float, float]
    color: tuple[int, int, int]
    radius: float

    @property
    def period(self) -> float:
        return TWO_PI / self.angular_frequency


def period_for_index(config: WaveConfig, index: int) -> float:
    """Seconds per full swing of oscillator ``index``."""
    return config.total_period_s / (config.base_oscillations + index)


def angular_frequency_for_index(config: WaveConfig, index: int) -> float:
    return TWO_PI / period_for_index(config, index)


def physics_length_for_index(config: WaveConfig, index: int) -> float:
    """String length in meters giving the required small-angle period."""
    ratio = period_for_index(config, index) / TWO_PI
    return config.gravity * ratio * ratio


def pixels_per_meter(config: WaveConfig) -> float:
    """
    Global scale fitting the longest (slowest, index 0) pendulum into
    ``max_length_ratio`` of the screen height.

    Raises:
        ConfigurationError: if the longest physical length under- or
            overflows, leaving nothing to scale by.
    """
    longest = physics_length_for_index(config, 0)
    if not math.isfinite(longest) or longest <= 0:
        raise ConfigurationError(
            f"Derived physics_length for oscillator 0 is invalid: {longest}"
        )
    return (config.height * config.max_length_ratio) / longest


def color_ratio(index: int, count: int) -> float:
    """Position of ``index`` along a row of ``count``; a single oscillator sits at 0."""
    if count <= 1:
        return 0.0
    return index / (count - 1)


def derive_parameters(config: WaveConfig) -> list[OscillatorConfig]:
    """
    Compute every oscillator's configuration from the global constants.

    Each index is derived independently of the others; the arrays are
    only a convenience for checking all values at once.

    Args:
        config: Validated wave configuration.

    Returns:
        One OscillatorConfig per index, in index order. Empty for N = 0.

    Raises:
        ConfigurationError: if the constants are invalid or any derived
            value is non-finite or non-positive.
    """
    config.validate()

    n = config.num_oscillators
    indices = np.arange(n, dtype=np.float64)

    periods = config.total_period_s / (config.base_oscillations + indices)
    omegas = TWO_PI / periods
    physics_lengths = config.gravity * (periods / TWO_PI) ** 2

    scale = pixels_per_meter(config)
    if not math.isfinite(scale) or scale <= 0:
        raise ConfigurationError(f"Derived pixels_per_meter is invalid: {scale}")

    visual_lengths = physics_lengths * scale

    for name, values in (
        ("period", periods),
        ("angular_frequency", omegas),
        ("visual_length", visual_lengths),
    ):
        bad = ~np.isfinite(values) | (values <= 0)
        if np.any(bad):
            first = int(np.argmax(bad))
            raise ConfigurationError(
                f"Derived {name} for oscillator {first} is invalid: {values[first]}"
            )

    amplitude = config.amplitude_rad
    pivot = config.pivot

    return [
        OscillatorConfig(
            index=i,
            angular_frequency=float(omegas[i]),
            visual_length=float(visual_lengths[i]),
            amplitude_rad=amplitude,
            pivot=pivot,
            color=color_from_ratio(color_ratio(i, n)),
            radius=config.bob_radius,
        )
        for i in range(n)
    ]

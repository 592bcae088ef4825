"""
Startup configuration for the pendulum wave.

All tuning constants live in a single frozen dataclass that is built once
(from defaults, a profile, or CLI flags) and passed explicitly into the
parameter derivation. Nothing here is reconfigurable mid-run.
"""

import math
from dataclasses import dataclass, replace


class ConfigurationError(ValueError):
    """Raised when tuning constants cannot produce a valid wave."""


Color = tuple[int, int, int]


@dataclass(frozen=True)
class WaveConfig:
    """Configuration for the pendulum wave scene."""

    # Window
    width: int = 1800
    height: int = 1000
    fps: int = 120
    title: str = "Pendulum Wave"

    # Wave tuning
    num_oscillators: int = 25
    total_period_s: float = 60.0  # Re-convergence interval
    base_oscillations: int = 50  # Swings of the slowest pendulum per cycle
    max_amplitude_deg: float = 22.0  # Swing angle bound
    gravity: float = 9.81
    max_length_ratio: float = 0.8  # Fraction of height used by the longest string

    # Geometry
    pivot_y: float = 50.0
    pivot_radius: float = 10.0
    bob_radius: float = 12.0
    outline_thickness: int = 2

    # Controls
    speed_step: float = 1.2

    # Colors
    background_color: Color = (15, 15, 30)
    pivot_color: Color = (200, 200, 200)
    string_color: Color = (70, 70, 90)

    @property
    def amplitude_rad(self) -> float:
        return math.radians(self.max_amplitude_deg)

    @property
    def pivot(self) -> tuple[float, float]:
        """Shared overhead anchor, centered horizontally."""
        return (self.width / 2.0, self.pivot_y)

    def with_overrides(self, **overrides) -> "WaveConfig":
        """Return a copy with non-None overrides applied."""
        values = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **values)

    def validate(self) -> "WaveConfig":
        """
        Check every constant and fail fast on anything that would
        propagate NaN or a degenerate geometry into rendering.

        Returns:
            self, so construction can be chained.

        Raises:
            ConfigurationError: naming the offending field.
        """
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(
                f"width and height must be positive, got {self.width}x{self.height}"
            )
        if self.fps <= 0:
            raise ConfigurationError(f"fps must be positive, got {self.fps}")
        if self.num_oscillators < 0:
            raise ConfigurationError(
                f"num_oscillators must be >= 0, got {self.num_oscillators}"
            )
        if not math.isfinite(self.total_period_s) or self.total_period_s <= 0:
            raise ConfigurationError(
                f"total_period_s must be a positive finite number, got {self.total_period_s}"
            )
        if self.base_oscillations < 1:
            raise ConfigurationError(
                f"base_oscillations must be >= 1, got {self.base_oscillations}"
            )
        if not 0.0 < self.max_amplitude_deg < 90.0:
            raise ConfigurationError(
                f"max_amplitude_deg must be in (0, 90), got {self.max_amplitude_deg}"
            )
        if not math.isfinite(self.gravity) or self.gravity <= 0:
            raise ConfigurationError(f"gravity must be positive, got {self.gravity}")
        if not 0.0 < self.max_length_ratio <= 1.0:
            raise ConfigurationError(
                f"max_length_ratio must be in (0, 1], got {self.max_length_ratio}"
            )
        if self.bob_radius < 0 or self.pivot_radius < 0 or self.outline_thickness < 0:
            raise ConfigurationError("bob_radius, pivot_radius and outline_thickness must be >= 0")
        if self.speed_step <= 1.0:
            raise ConfigurationError(f"speed_step must be > 1, got {self.speed_step}")

        for name in ("background_color", "pivot_color", "string_color"):
            color = getattr(self, name)
            if len(color) != 3 or any(
                not isinstance(c, int) or not 0 <= c <= 255 for c in color
            ):
                raise ConfigurationError(f"{name} must be an RGB triple in 0-255, got {color}")

        return self


# Resolution presets, mirroring the render profiles of the CLI
PROFILES = {
    "low": {"width": 1280, "height": 720, "fps": 60},
    "medium": {"width": 1800, "height": 1000, "fps": 120},
    "high": {"width": 2560, "height": 1440, "fps": 120},
}


def config_for_profile(profile: str = "medium", **overrides) -> WaveConfig:
    """
    Build a validated config from a named profile plus overrides.

    Args:
        profile: One of ``PROFILES``.
        **overrides: WaveConfig fields; None values are ignored.

    Returns:
        Validated WaveConfig.
    """
    if profile not in PROFILES:
        raise ConfigurationError(
            f"Unknown profile '{profile}', expected one of {sorted(PROFILES)}"
        )
    return WaveConfig(**PROFILES[profile]).with_overrides(**overrides).validate()

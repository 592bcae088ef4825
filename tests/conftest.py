"""Pytest configuration and shared fixtures."""

import os

# Headless pygame for rendering and event tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from pendulumwave.config import WaveConfig


@pytest.fixture
def default_config() -> WaveConfig:
    """Full-size configuration with the stock tuning."""
    return WaveConfig()


@pytest.fixture
def two_pendulum_config() -> WaveConfig:
    """
    Two pendulums, 50 base swings over 60 seconds.

    Periods are 1.2s and 60/51s.
    """
    return WaveConfig(num_oscillators=2, base_oscillations=50, total_period_s=60.0)


@pytest.fixture
def small_config() -> WaveConfig:
    """Small window for fast headless rendering."""
    return WaveConfig(
        width=200,
        height=150,
        num_oscillators=5,
        pivot_y=10.0,
        pivot_radius=3.0,
        bob_radius=4.0,
    )

"""Visualization renderers."""

from pendulumwave.visualizers.pendulum import PendulumRenderer

__all__ = ["PendulumRenderer"]

"""
Pendulum wave renderer.

Draws the current state of the oscillator row:
- Pivot → single overhead marker
- String → antialiased line from pivot to bob
- Bob → filled circle in the ramp color with a darker rim
"""

from typing import Sequence

import numpy as np
import pygame

from pendulumwave.config import WaveConfig
from pendulumwave.core.oscillator import Oscillator


class PendulumRenderer:
    """
    Renders the oscillator row onto a pygame Surface.

    Works headless: without a surface argument each frame is drawn onto an
    off-screen Surface of the configured size.
    """

    def __init__(self, config: WaveConfig | None = None):
        """
        Initialize the renderer.

        Args:
            config: Scene configuration. Uses defaults if None.
        """
        self.config = config or WaveConfig()
        self.surface: pygame.Surface | None = None

    def _draw_pivot(self, surface: pygame.Surface):
        cfg = self.config
        if cfg.pivot_radius > 0:
            pygame.draw.circle(surface, cfg.pivot_color, cfg.pivot, cfg.pivot_radius)

    def _draw_oscillator(self, surface: pygame.Surface, osc: Oscillator):
        cfg = self.config
        position = osc.position

        pygame.draw.aaline(surface, cfg.string_color, osc.pivot, position)

        if osc.radius <= 0:
            return
        # Rim sits outside the fill radius
        if cfg.outline_thickness > 0:
            pygame.draw.circle(
                surface, osc.outline_color, position, osc.radius + cfg.outline_thickness
            )
        pygame.draw.circle(surface, osc.color, position, osc.radius)

    def render_frame(
        self,
        oscillators: Sequence[Oscillator],
        surface: pygame.Surface | None = None,
    ) -> pygame.Surface:
        """
        Render a single frame.

        Args:
            oscillators: Oscillators already updated for this frame.
            surface: Target surface (e.g. the display). Off-screen if None.

        Returns:
            The surface that was drawn on.
        """
        cfg = self.config

        if surface is None:
            if self.surface is None or self.surface.get_size() != (cfg.width, cfg.height):
                self.surface = pygame.Surface((cfg.width, cfg.height))
            surface = self.surface

        surface.fill(cfg.background_color)
        self._draw_pivot(surface)

        for osc in oscillators:
            self._draw_oscillator(surface, osc)

        return surface

    def surface_to_array(self, surface: pygame.Surface) -> np.ndarray:
        """
        Copy a rendered frame into row-major pixels for inspection.

        Index the result as ``frame[y, x]`` to read the color at a screen
        coordinate, e.g. to check where a bob landed.
        """
        columns = pygame.surfarray.array3d(surface)
        return np.ascontiguousarray(columns.swapaxes(0, 1))

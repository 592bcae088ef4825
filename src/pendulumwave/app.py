"""
Interactive pygame front end.

Opens a resizable window, translates keyboard and window events into
runner controls, and paces frames with ``pygame.time.Clock``.

Keys:
    Space        pause / resume
    R            reset to t = 0
    Up / Right   speed up
    Down / Left  slow down
    Esc          quit
"""

import logging

import pygame

from pendulumwave.config import WaveConfig
from pendulumwave.runner import Control, SceneRunner
from pendulumwave.visualizers.pendulum import PendulumRenderer

logger = logging.getLogger(__name__)


KEY_CONTROLS = {
    pygame.K_SPACE: Control.TOGGLE_PAUSE,
    pygame.K_r: Control.RESET,
    pygame.K_UP: Control.SPEED_UP,
    pygame.K_RIGHT: Control.SPEED_UP,
    pygame.K_DOWN: Control.SPEED_DOWN,
    pygame.K_LEFT: Control.SPEED_DOWN,
    pygame.K_ESCAPE: Control.QUIT,
}


def translate_event(event: pygame.event.Event) -> Control | None:
    """Map a pygame event to a runner control, or None if it is not one."""
    if event.type == pygame.QUIT:
        return Control.QUIT
    if event.type == pygame.KEYDOWN:
        return KEY_CONTROLS.get(event.key)
    return None


def translate_events(events) -> list[Control]:
    controls = []
    for event in events:
        control = translate_event(event)
        if control is not None:
            controls.append(control)
    return controls


def run(
    config: WaveConfig | None = None,
    time_scale: float = 1.0,
    paused: bool = False,
    max_duration: float | None = None,
) -> int:
    """
    Run the interactive window until the user quits.

    Args:
        config: Scene configuration. Uses defaults if None.
        time_scale: Initial simulated seconds per real second.
        paused: Start with the clock paused.
        max_duration: Close automatically after this many real seconds.

    Returns:
        Number of frames rendered.
    """
    cfg = (config or WaveConfig()).validate()

    pygame.init()
    try:
        # RESIZABLE keeps 1:1 pixel coordinates; the scene is not stretched
        screen = pygame.display.set_mode((cfg.width, cfg.height), pygame.RESIZABLE)
        pygame.display.set_caption(cfg.title)
        frame_clock = pygame.time.Clock()

        renderer = PendulumRenderer(cfg)

        def present(oscillators):
            renderer.render_frame(oscillators, pygame.display.get_surface())
            pygame.display.flip()

        runner = SceneRunner(cfg, render_callback=present, time_scale=time_scale, paused=paused)
        renderer.render_frame(runner.oscillators, screen)
        pygame.display.flip()

        elapsed = 0.0
        frame_clock.tick(cfg.fps)
        while True:
            dt = frame_clock.tick(cfg.fps) / 1000.0
            elapsed += dt

            controls = translate_events(pygame.event.get())
            if max_duration is not None and elapsed >= max_duration:
                controls.append(Control.QUIT)

            if not runner.step(dt, controls):
                break

        logger.info("Closed after %d frames (t=%.2fs simulated)", runner.frame_count, runner.total_sim_time)
        return runner.frame_count
    finally:
        pygame.quit()

"""
Per-frame scene driver.

Owns the clock, the oscillators and the pause/speed controls. Each frame
runs in a fixed order: apply controls, advance the clock, update every
oscillator, then hand the row to the renderer callback.
"""

import enum
import logging
from typing import Callable, Iterable, Sequence

from pendulumwave.config import WaveConfig
from pendulumwave.core.clock import ClockState, SimulationClock
from pendulumwave.core.oscillator import Oscillator, oscillators_from_config

logger = logging.getLogger(__name__)


class Control(enum.Enum):
    """Closed set of input actions understood by the runner."""

    TOGGLE_PAUSE = "toggle_pause"
    RESET = "reset"
    SPEED_UP = "speed_up"
    SPEED_DOWN = "speed_down"
    QUIT = "quit"


class SceneRunner:
    """
    Drives the pendulum wave one frame at a time.

    Rendering is delegated to ``render_callback(oscillators)``; the runner
    never draws and never looks at raw window events.
    """

    def __init__(
        self,
        config: WaveConfig | None = None,
        render_callback: Callable[[Sequence[Oscillator]], None] | None = None,
        time_scale: float = 1.0,
        paused: bool = False,
    ):
        if time_scale == 0:
            raise ValueError("time_scale must be nonzero")

        self.cfg = (config or WaveConfig()).validate()
        self.oscillators = oscillators_from_config(self.cfg)
        self.clock = SimulationClock()
        self.render_callback = render_callback

        self.time_scale = time_scale
        self.paused = paused
        self.running = True
        self.frame_count = 0

        # Place every bob at t=0 before the first frame is drawn
        self._update_oscillators(self.clock.total_sim_time)

        logger.info(
            "Scene ready: %d oscillators, total period %.1fs, base %d swings",
            len(self.oscillators),
            self.cfg.total_period_s,
            self.cfg.base_oscillations,
        )

    @property
    def state(self) -> ClockState:
        return ClockState.PAUSED if self.paused else ClockState.RUNNING

    @property
    def total_sim_time(self) -> float:
        return self.clock.total_sim_time

    def handle(self, control: Control):
        """Apply one control action."""
        if control is Control.TOGGLE_PAUSE:
            self.paused = not self.paused
        elif control is Control.RESET:
            self.clock.reset()
        elif control is Control.SPEED_UP:
            self.time_scale *= self.cfg.speed_step
        elif control is Control.SPEED_DOWN:
            self.time_scale /= self.cfg.speed_step
        elif control is Control.QUIT:
            self.running = False
        else:
            raise ValueError(f"Unknown control: {control!r}")

        logger.debug(
            "%s -> %s, time_scale=%.3f, t=%.3f",
            control.value,
            self.state.value,
            self.time_scale,
            self.clock.total_sim_time,
        )

    def _update_oscillators(self, total_sim_time: float):
        for osc in self.oscillators:
            osc.update(total_sim_time)

    def step(self, real_delta_seconds: float, controls: Iterable[Control] = ()) -> bool:
        """
        Run one frame.

        Args:
            real_delta_seconds: Wall-clock seconds since the previous frame.
            controls: Actions received since the previous frame, in order.

        Returns:
            False once a QUIT has been received, True otherwise.
        """
        for control in controls:
            self.handle(control)
        if not self.running:
            return False

        t = self.clock.advance(real_delta_seconds, self.time_scale, self.paused)
        self._update_oscillators(t)

        if self.render_callback is not None:
            self.render_callback(self.oscillators)

        self.frame_count += 1
        return True

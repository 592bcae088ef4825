"""
Simulated time accumulator.
"""

import enum


class ClockState(enum.Enum):
    RUNNING = "running"
    PAUSED = "paused"


class SimulationClock:
    """
    Accumulates simulated seconds from real frame deltas.

    Pause and time scale are owned by the caller and passed in on each
    ``advance``; the clock only integrates. ``time_scale`` may be negative,
    which runs the wave backwards.
    """

    def __init__(self):
        self._total_sim_time = 0.0

    @property
    def total_sim_time(self) -> float:
        return self._total_sim_time

    def advance(self, real_delta_seconds: float, time_scale: float, paused: bool) -> float:
        """
        Step simulated time forward by one frame.

        Args:
            real_delta_seconds: Wall-clock seconds since the last frame (>= 0).
            time_scale: Simulated seconds per real second.
            paused: When True, simulated time does not move.

        Returns:
            The updated total simulated time.
        """
        if real_delta_seconds < 0:
            raise ValueError(f"real_delta_seconds must be >= 0, got {real_delta_seconds}")

        if not paused:
            self._total_sim_time += real_delta_seconds * time_scale
        return self._total_sim_time

    def reset(self):
        self._total_sim_time = 0.0

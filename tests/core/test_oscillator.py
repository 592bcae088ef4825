"""Tests for the single-oscillator model."""

import math

import pytest

from pendulumwave.config import WaveConfig
from pendulumwave.core.oscillator import Oscillator, oscillators_from_config
from pendulumwave.core.parameters import OscillatorConfig, derive_parameters


def _config(**overrides) -> OscillatorConfig:
    values = dict(
        index=0,
        angular_frequency=2 * math.pi,  # 1 second period
        visual_length=100.0,
        amplitude_rad=math.radians(20),
        pivot=(50.0, 10.0),
        color=(255, 0, 0),
        radius=5.0,
    )
    values.update(overrides)
    return OscillatorConfig(**values)


class TestOscillatorUpdate:
    def test_starts_at_full_amplitude(self):
        osc = Oscillator(_config())
        osc.update(0.0)
        cfg = osc.config
        assert osc.angle == pytest.approx(cfg.amplitude_rad)
        x, y = osc.position
        assert x == pytest.approx(50.0 + 100.0 * math.sin(cfg.amplitude_rad))
        assert y == pytest.approx(10.0 + 100.0 * math.cos(cfg.amplitude_rad))

    def test_quarter_period_hangs_straight_down(self):
        osc = Oscillator(_config())
        osc.update(0.25)
        assert osc.angle == pytest.approx(0.0, abs=1e-12)
        x, y = osc.position
        assert x == pytest.approx(50.0, abs=1e-9)
        assert y == pytest.approx(110.0)

    def test_half_period_swings_to_other_side(self):
        osc = Oscillator(_config())
        osc.update(0.5)
        assert osc.angle == pytest.approx(-osc.config.amplitude_rad)
        assert osc.position[0] < 50.0

    def test_string_length_is_preserved(self):
        osc = Oscillator(_config())
        for t in (0.0, 0.13, 0.7, 12.34, -3.2):
            osc.update(t)
            x, y = osc.position
            assert math.hypot(x - 50.0, y - 10.0) == pytest.approx(100.0)

    def test_deterministic(self):
        a = Oscillator(_config())
        b = Oscillator(_config())
        a.update(17.123)
        b.update(3.0)
        b.update(17.123)
        assert a.position == b.position
        assert a.angle == b.angle

    def test_no_accumulation_on_repeat(self):
        osc = Oscillator(_config())
        osc.update(2.5)
        first = osc.position
        for _ in range(100):
            osc.update(2.5)
        assert osc.position == first

    def test_rewound_time(self):
        osc = Oscillator(_config())
        osc.update(0.3)
        early = osc.position
        osc.update(40.0)
        osc.update(0.3)
        assert osc.position == early

    def test_periodicity(self):
        cfg = _config(angular_frequency=5.3)
        osc = Oscillator(cfg)
        for t in (0.0, 0.41, 7.9):
            osc.update(t)
            x0, y0 = osc.position
            osc.update(t + cfg.period)
            x1, y1 = osc.position
            assert x1 == pytest.approx(x0, abs=1e-9)
            assert y1 == pytest.approx(y0, abs=1e-9)

    def test_update_before_setup_raises(self):
        with pytest.raises(RuntimeError):
            Oscillator().update(0.0)

    def test_setup_rests_bob_below_pivot(self):
        osc = Oscillator()
        osc.setup(_config())
        assert osc.position == (50.0, 110.0)


class TestOscillatorProperties:
    def test_render_properties(self):
        osc = Oscillator(_config(color=(200, 100, 51)))
        assert osc.pivot == (50.0, 10.0)
        assert osc.color == (200, 100, 51)
        assert osc.outline_color == (100, 50, 25)
        assert osc.radius == 5.0

    def test_config_before_setup_raises(self):
        with pytest.raises(RuntimeError):
            Oscillator().config

    def test_repr(self):
        assert "unset" in repr(Oscillator())
        assert "index=0" in repr(Oscillator(_config()))


class TestWave:
    def test_builds_one_per_index(self, default_config):
        oscillators = oscillators_from_config(default_config)
        assert len(oscillators) == default_config.num_oscillators
        assert [o.config.index for o in oscillators] == list(range(default_config.num_oscillators))

    def test_reconverges_after_total_period(self, default_config):
        oscillators = oscillators_from_config(default_config)
        for t in (0.0, default_config.total_period_s, 2 * default_config.total_period_s):
            for osc in oscillators:
                osc.update(t)
            angles = [osc.angle for osc in oscillators]
            for angle in angles:
                assert angle == pytest.approx(default_config.amplitude_rad, abs=1e-9)

    def test_phases_spread_between_reconvergences(self, default_config):
        oscillators = oscillators_from_config(default_config)
        for osc in oscillators:
            osc.update(default_config.total_period_s / 4)
        angles = [osc.angle for osc in oscillators]
        assert max(angles) - min(angles) > default_config.amplitude_rad

    def test_worked_example(self, two_pendulum_config):
        params = derive_parameters(two_pendulum_config)
        assert params[0].angular_frequency == pytest.approx(2 * math.pi / 1.2)
        assert params[1].angular_frequency == pytest.approx(2 * math.pi / (60.0 / 51.0))

    def test_empty_wave(self):
        assert oscillators_from_config(WaveConfig(num_oscillators=0)) == []

"""
CLI entry point for the pendulum wave.

Usage:
    pendulum-wave [options]
    python -m pendulumwave [options]
"""

import argparse
import logging
import sys

from pendulumwave.config import PROFILES, ConfigurationError, config_for_profile
from pendulumwave.core.parameters import derive_parameters, period_for_index


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pendulum-wave",
        description="Pendulum wave simulator",
    )

    # Resolution & Profile
    parser.add_argument(
        "-p", "--profile", type=str, default="medium",
        choices=sorted(PROFILES),
        help="Window profile (low: 1280x720 60fps, medium: 1800x1000 120fps, high: 2560x1440 120fps)",
    )
    parser.add_argument("--width", type=int, default=None, help="Window width (overrides profile)")
    parser.add_argument("--height", type=int, default=None, help="Window height (overrides profile)")
    parser.add_argument("-f", "--fps", type=int, default=None, help="Frame rate limit (overrides profile)")

    # Wave tuning
    parser.add_argument(
        "-n", "--count", type=int, default=None,
        help="Number of pendulums (default: 25)",
    )
    parser.add_argument(
        "--total-period", type=float, default=None,
        help="Seconds until the pattern re-converges (default: 60)",
    )
    parser.add_argument(
        "--base-oscillations", type=int, default=None,
        help="Swings of the slowest pendulum per cycle; higher is a tighter wave (default: 50)",
    )
    parser.add_argument(
        "--amplitude", type=float, default=None,
        help="Maximum swing angle in degrees (default: 22)",
    )
    parser.add_argument("--bob-radius", type=float, default=None, help="Bob radius in pixels (default: 12)")
    parser.add_argument(
        "--length-ratio", type=float, default=None,
        help="Fraction of the window height used by the longest string (default: 0.8)",
    )

    # Playback
    parser.add_argument("--speed", type=float, default=1.0, help="Initial time scale (default: 1.0)")
    parser.add_argument("--paused", action="store_true", help="Start paused")
    parser.add_argument(
        "--max-duration", type=float, default=None,
        help="Close the window after N seconds",
    )

    parser.add_argument("-v", "--verbose", action="store_true", help="Log control events")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if args.speed == 0:
        print("Error: --speed must be nonzero", file=sys.stderr)
        sys.exit(1)

    try:
        config = config_for_profile(
            args.profile,
            width=args.width,
            height=args.height,
            fps=args.fps,
            num_oscillators=args.count,
            total_period_s=args.total_period,
            base_oscillations=args.base_oscillations,
            max_amplitude_deg=args.amplitude,
            bob_radius=args.bob_radius,
            max_length_ratio=args.length_ratio,
        )
        # Surface derivation errors before a window opens
        derive_parameters(config)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Pendulum wave: {config.num_oscillators} pendulums at {config.width}x{config.height} @ {config.fps}fps")
    if config.num_oscillators > 0:
        slowest = period_for_index(config, 0)
        fastest = period_for_index(config, config.num_oscillators - 1)
        print(f"  Periods: {slowest:.4f}s .. {fastest:.4f}s")
    print(f"  Re-converges every {config.total_period_s:.1f}s")
    print("  Space: pause  R: reset  Up/Down: speed  Esc: quit")

    from pendulumwave.app import run

    frames = run(config, time_scale=args.speed, paused=args.paused, max_duration=args.max_duration)
    print(f"\nDone! {frames} frames")


if __name__ == "__main__":
    main()

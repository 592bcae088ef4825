"""
Red → green → blue color ramp for the oscillator row.

Three overlapping linear bands: red fades out over the first half,
green peaks in the middle, blue fades in over the second half.
"""


def _to_channel(value: float) -> int:
    return max(0, min(255, round(value * 255)))


def color_from_ratio(ratio: float) -> tuple[int, int, int]:
    """
    Map a normalized index to an RGB display color.

    Args:
        ratio: Position along the row in [0, 1]. Values outside are clamped.

    Returns:
        (r, g, b) tuple of ints in 0-255.
    """
    ratio = max(0.0, min(1.0, ratio))

    r = max(0.0, 1.0 - ratio * 2.0)
    g = 1.0 - abs(ratio - 0.5) * 2.0
    b = max(0.0, (ratio - 0.5) * 2.0)

    return (_to_channel(r), _to_channel(g), _to_channel(b))


def outline_color(color: tuple[int, int, int]) -> tuple[int, int, int]:
    """Darker rim for a bob: each channel halved."""
    return (color[0] // 2, color[1] // 2, color[2] // 2)

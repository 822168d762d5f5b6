"""Per-trail-position colors, bright head fading to a dark green tail."""

import math

from .ansi import rgb

Color = tuple[int, int, int]


def _channel(value: float) -> int:
    # Round half up, then clamp to a valid channel
    return max(0, min(255, math.floor(value + 0.5)))


def _smoothstep(t: float) -> float:
    return t * t * (3 - 2 * t)


def build_gradient(trail_length: int) -> tuple[Color, ...]:
    """Compute one RGB triple per trail offset, head first.

    Red and blue decay polynomially while green follows a smoothstep curve,
    so the middle of the trail stays green longer than a linear fade would.
    A single-cell trail gets only the head color.
    """
    if trail_length < 1:
        raise ValueError(f"trail_length must be positive, got {trail_length}")

    colors = []
    for i in range(trail_length):
        t = i / (trail_length - 1) if trail_length > 1 else 0.0
        r = _channel(255 * (1 - t) ** 3)
        g = _channel(255 - 180 * _smoothstep(t))
        b = _channel(255 * (1 - t) ** 4)
        colors.append((r, g, b))
    return tuple(colors)


def gradient_escapes(trail_length: int) -> tuple[str, ...]:
    """The gradient as ready-to-write foreground color escapes."""
    return tuple(rgb(*color) for color in build_gradient(trail_length))

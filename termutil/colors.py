"""ANSI color escape generation for 256-color and 24-bit truecolor terminals."""

from __future__ import annotations

import bisect
import colorsys
import math

from termutil._utils import clamp

# Channel levels of the xterm 6x6x6 color cube (palette 16-231).
CUBE_LEVELS = (0, 95, 135, 175, 215, 255)
# Bucket boundaries sit halfway between adjacent cube levels.
_CUBE_BOUNDS = tuple((lo + hi) / 2 for lo, hi in zip(CUBE_LEVELS, CUBE_LEVELS[1:]))

# The 24-step grayscale ramp (palette 232-255) covers 8, 18, ... 238.
GRAY_BASE = 232
GRAY_STEPS = 24
GRAY_LOW = 8
# Grays above the midpoint of 238 and cube white 255 are closer to white.
GRAY_HIGH = 246.5


def _channel(value) -> int:
    """Round and clamp a color channel to 0..255; non-finite values become 0."""
    try:
        value = float(value)
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(value):
        return 0
    return int(clamp(round(value), 0, 255))


def _unit(value) -> float:
    """Clamp a saturation/value component to [0, 1]; non-finite values become 0."""
    value = float(value)
    if not math.isfinite(value):
        return 0.0
    return clamp(value, 0.0, 1.0)


def _cube_index(value: int) -> int:
    return bisect.bisect_right(_CUBE_BOUNDS, value)


def palette_index(r, g, b) -> int:
    """Nearest xterm 256-color palette index for an RGB color."""
    r, g, b = _channel(r), _channel(g), _channel(b)
    if r == g == b and GRAY_LOW < r < GRAY_HIGH:
        gray = clamp((r - GRAY_LOW + 5) // 10, 0, GRAY_STEPS - 1)
        return GRAY_BASE + gray
    return 16 + 36 * _cube_index(r) + 6 * _cube_index(g) + _cube_index(b)


def rgb256(r, g, b, background=False) -> str:
    """Escape sequence selecting the closest 256-color palette entry."""
    return f"\033[{48 if background else 38};5;{palette_index(r, g, b)}m"


def rgb_truecolor(r, g, b, fallback=False, background=False) -> str:
    """24-bit color escape sequence.

    With *fallback*, the 256-color sequence for the same color is emitted
    first so that terminals without truecolor support still get a close match.
    """
    r, g, b = _channel(r), _channel(g), _channel(b)
    seq = f"\033[{48 if background else 38};2;{r};{g};{b}m"
    if fallback:
        return rgb256(r, g, b, background=background) + seq
    return seq


def hsv_to_rgb(h, s, v) -> tuple[int, int, int]:
    """Convert HSV components in [0, 1] to 0..255 RGB channels."""
    h = float(h)
    h = h % 1.0 if math.isfinite(h) else 0.0
    r, g, b = colorsys.hsv_to_rgb(h, _unit(s), _unit(v))
    return _channel(r * 255), _channel(g * 255), _channel(b * 255)


def hsv_to_truecolor(h, s, v, fallback=False, background=False) -> str:
    """24-bit color escape sequence for an HSV color (hue wraps at 1.0)."""
    r, g, b = hsv_to_rgb(h, s, v)
    return rgb_truecolor(r, g, b, fallback=fallback, background=background)

"""RGBA colours and conversion between RGB and HSB on a 0-255 scale."""

from __future__ import annotations

import math
from dataclasses import dataclass

LIMIT = 255.0


@dataclass(frozen=True)
class Color:
    """An 8-bit RGBA colour."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"channel {name} out of range 0-255: {value!r}")

    def with_alpha(self, alpha: int) -> Color:
        """Return the same colour with another alpha value."""
        return Color(self.r, self.g, self.b, int(alpha))

    def to_float(self) -> tuple[float, float, float, float]:
        """Return the channels scaled to the range 0.0-1.0."""
        return (self.r / LIMIT, self.g / LIMIT, self.b / LIMIT, self.a / LIMIT)

    def hsb(self) -> tuple[float, float, float]:
        """Return hue, saturation and brightness on a 0-255 scale."""
        return rgb_to_hsb(self.r, self.g, self.b)

    @classmethod
    def from_hsb(
        cls, hue: float, saturation: float, brightness: float, alpha: int = 255
    ) -> Color:
        """Build a colour from hue, saturation and brightness on a 0-255 scale."""
        red, green, blue = hsb_to_rgb(hue, saturation, brightness)
        return cls(red, green, blue, int(alpha))


def rgb_to_hsb(red: float, green: float, blue: float) -> tuple[float, float, float]:
    """Convert RGB channels to (hue, saturation, brightness), all on 0-255."""
    high = max(red, green, blue)
    if high == 0:
        return (0.0, 0.0, 0.0)
    low = min(red, green, blue)
    if high == low:
        return (0.0, 0.0, float(high))
    span = high - low
    if red == high:
        sixth = (green - blue) / span
        if sixth < 0:
            sixth += 6.0
    elif green == high:
        sixth = 2.0 + (blue - red) / span
    else:
        sixth = 4.0 + (red - green) / span
    return (LIMIT * sixth / 6.0, LIMIT * span / high, float(high))


def hsb_to_rgb(hue: float, saturation: float, brightness: float) -> tuple[int, int, int]:
    """Convert hue, saturation and brightness (0-255) to integer RGB channels."""
    saturation = min(max(saturation, 0.0), LIMIT)
    brightness = min(max(brightness, 0.0), LIMIT)
    if brightness == 0:
        return (0, 0, 0)
    if saturation == 0:
        grey = int(brightness)
        return (grey, grey, grey)

    hue = math.fmod(hue, LIMIT)
    if hue < 0:
        hue += LIMIT
    sixth = hue * 6.0 / LIMIT
    category = math.floor(sixth)
    remainder = sixth - category
    sat = saturation / LIMIT

    v = int(brightness)
    p = int((1.0 - sat) * brightness)
    q = int((1.0 - sat * remainder) * brightness)
    t = int((1.0 - sat * (1.0 - remainder)) * brightness)

    sectors = {
        1: (q, v, p),
        2: (p, v, t),
        3: (p, q, v),
        4: (t, p, v),
        5: (v, p, q),
    }
    return sectors.get(category, (v, t, p))


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
ALICE_BLUE = Color(240, 248, 255)
CHARTREUSE = Color(127, 255, 0)
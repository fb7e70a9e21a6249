"""
creature_sim module: creature/colors.py

HSL colors and the per-creature color mutator.
"""

from __future__ import annotations
import colorsys
from dataclasses import dataclass, replace
from typing import Callable, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from creature.random_source import SeededRandom

COLOR_ALPHA = 0.95

# mutator spread around the base color
HUE_SPIN = 30.0         # degrees
SATURATION_SHIFT = 10.0  # percent
LIGHTNESS_SHIFT = 10.0   # percent


def _clamp01(v: float) -> float:
    return max(0.0, min(1.0, v))


@dataclass(frozen=True)
class Color:
    h: float  # degrees, [0, 360)
    s: float
    l: float
    a: float = 1.0

    def spin(self, degrees: float) -> "Color":
        return replace(self, h=(self.h + degrees) % 360.0)

    def saturate(self, percent: float) -> "Color":
        return replace(self, s=_clamp01(self.s + percent / 100.0))

    def lighten(self, percent: float) -> "Color":
        return replace(self, l=_clamp01(self.l + percent / 100.0))

    def to_rgb(self) -> Tuple[int, int, int]:
        r, g, b = colorsys.hls_to_rgb(self.h / 360.0, self.l, self.s)
        return (round(r * 255), round(g * 255), round(b * 255))

    def to_hex(self) -> str:
        return "#%02x%02x%02x" % self.to_rgb()

    def css(self) -> str:
        r, g, b = self.to_rgb()
        return f"rgba({r}, {g}, {b}, {self.a:g})"


def random_color(random: "SeededRandom") -> Color:
    return Color(
        h=random.real(0.0, 360.0),
        s=random.real(0.0, 1.0),
        l=random.real(0.2, 0.8),
        a=COLOR_ALPHA,
    )


def color_mutator(random: "SeededRandom") -> Callable[[], Color]:
    """
    Pick one base color and return ``next_color()``.

    Every call perturbs the same base (hue spin, then saturation, then
    lightness, each drawn fresh), so colors stay related without drifting
    along the chain.
    """
    base = random_color(random)

    def next_color() -> Color:
        return (
            base
            .spin(random.real(-HUE_SPIN, HUE_SPIN))
            .saturate(random.real(-SATURATION_SHIFT, SATURATION_SHIFT))
            .lighten(random.real(-LIGHTNESS_SHIFT, LIGHTNESS_SHIFT))
        )

    return next_color

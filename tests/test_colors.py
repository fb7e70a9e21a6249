"""
Tests for HSL colors and the per-creature color mutator.
"""

import pytest

from creature.colors import COLOR_ALPHA, Color, color_mutator, random_color
from creature.random_source import SeededRandom


def _hue_distance(a: float, b: float) -> float:
    d = abs(a - b) % 360.0
    return min(d, 360.0 - d)


class TestColor:
    def test_spin_wraps_around(self):
        assert Color(350.0, 0.5, 0.5).spin(20.0).h == pytest.approx(10.0)
        assert Color(10.0, 0.5, 0.5).spin(-20.0).h == pytest.approx(350.0)

    def test_saturate_and_lighten_clamp(self):
        c = Color(0.0, 0.95, 0.02)
        assert c.saturate(10).s == 1.0
        assert c.lighten(-10).l == 0.0

    def test_operations_return_new_colors(self):
        c = Color(100.0, 0.5, 0.5)
        c.spin(30).saturate(5).lighten(5)
        assert c == Color(100.0, 0.5, 0.5)

    @pytest.mark.parametrize(
        "color, rgb",
        [
            (Color(0.0, 1.0, 0.5), (255, 0, 0)),
            (Color(120.0, 1.0, 0.5), (0, 255, 0)),
            (Color(240.0, 1.0, 0.5), (0, 0, 255)),
            (Color(0.0, 0.0, 1.0), (255, 255, 255)),
            (Color(0.0, 0.0, 0.0), (0, 0, 0)),
        ],
    )
    def test_to_rgb(self, color, rgb):
        assert color.to_rgb() == rgb

    def test_hex_and_css(self):
        red = Color(0.0, 1.0, 0.5, 0.95)
        assert red.to_hex() == "#ff0000"
        assert red.css() == "rgba(255, 0, 0, 0.95)"


class TestColorMutator:
    """Colors vary around one fixed base and never drift away from it."""

    def test_random_color_ranges(self):
        r = SeededRandom(3)
        for _ in range(200):
            c = random_color(r)
            assert 0.0 <= c.h < 360.0
            assert 0.0 <= c.s <= 1.0
            assert 0.2 <= c.l <= 0.8
            assert c.a == COLOR_ALPHA

    def test_no_cumulative_drift(self):
        base = random_color(SeededRandom(42))
        next_color = color_mutator(SeededRandom(42))

        for _ in range(300):
            c = next_color()
            assert _hue_distance(c.h, base.h) <= 30.0 + 1e-9
            assert abs(c.s - base.s) <= 0.1 + 1e-9
            assert abs(c.l - base.l) <= 0.1 + 1e-9
            assert c.a == COLOR_ALPHA

    def test_successive_colors_differ(self):
        next_color = color_mutator(SeededRandom(5))
        colors = [next_color() for _ in range(10)]
        assert len(set(colors)) == 10

    def test_same_seed_same_palette(self):
        a = color_mutator(SeededRandom(77))
        b = color_mutator(SeededRandom(77))
        assert [a() for _ in range(8)] == [b() for _ in range(8)]

"""
Tests for the pygame renderer and the viewer glue in main.py.
Drawing happens on an off-screen Surface; no window is opened.
"""

import logging

import pygame
import pytest
from typer.testing import CliRunner

import config
import main
from creature.colors import Color
from creature.generation import generate
from creature.nodes import Node, NodeType
from render import colors
from render.animation import Pose
from render.renderer import draw_creature, view_transform


@pytest.fixture
def surface():
    s = pygame.Surface((config.SCREEN_W, config.SCREEN_H))
    s.fill(colors.BG)
    return s


class TestDrawCreature:
    def test_view_transform_maps_origin(self):
        x, y = view_transform().apply(0.0, 0.0)
        assert (x, y) == pytest.approx((300.0, 300.0))

    def test_draws_over_background(self, surface):
        draw_creature(surface, generate(1))
        assert tuple(surface.get_at((300, 300)))[:3] != colors.BG

    def test_returns_mouth_hotspot(self, surface):
        hotspot = draw_creature(surface, generate(1))
        assert hotspot is not None
        assert hotspot.radius > 0
        assert hotspot.contains(hotspot.x, hotspot.y)
        assert not hotspot.contains(hotspot.x + hotspot.radius + 1, hotspot.y)

    def test_generated_creatures_draw_every_part(self, surface, caplog):
        with caplog.at_level(logging.ERROR, logger="render.renderer"):
            for seed in range(20):
                for pose in (Pose(), Pose(blinking=True, mouth_open=True)):
                    assert draw_creature(surface, generate(seed), pose) is not None
        assert "Unexpected node type" not in caplog.text

    def test_mouth_drawn_closed_and_open(self, surface):
        creature = Node(
            type=NodeType.CORE,
            size=(40.0, 40.0),
            color=Color(0.0, 1.0, 0.5),
            children=(
                Node(
                    type=NodeType.MOUTH,
                    size=(10.0, 4.0),
                    color=Color(120.0, 1.0, 0.5),
                    lip_thickness=2.0,
                    curve=0.0,
                    position=(0.0, -0.5),
                ),
            ),
        )

        hotspot = draw_creature(surface, creature, Pose())
        assert (hotspot.x, hotspot.y) == pytest.approx((300.0, 280.0))
        center = (round(hotspot.x), round(hotspot.y))
        assert tuple(surface.get_at(center))[:3] == (0, 255, 0)

        draw_creature(surface, creature, Pose(mouth_open=True))
        assert tuple(surface.get_at(center))[:3] == colors.MOUTH_OPEN

    def test_unknown_type_skipped(self, surface, caplog):
        creature = Node(
            type=NodeType.CORE,
            size=(10.0, 10.0),
            color=Color(0.0, 1.0, 0.5),
            children=(Node(type=NodeType.FACE_BLOB),),
        )
        with caplog.at_level(logging.ERROR, logger="render.renderer"):
            draw_creature(surface, creature)
        assert "Unexpected node type" in caplog.text
        assert tuple(surface.get_at((300, 300)))[:3] == (255, 0, 0)


class TestMood:
    @pytest.mark.parametrize(
        "curve, glyph",
        [
            (8.0, main.FROWNING_FACE),
            (3.0, main.SLIGHTLY_FROWNING_FACE),
            (0.0, main.NEUTRAL_FACE),
            (-5.0, main.SLIGHTLY_SMILING_FACE),
            (-15.0, main.SMILING_FACE),
        ],
    )
    def test_mood_for_curve(self, curve, glyph):
        assert main.mood_for_curve(curve) == glyph

    def test_caption_uses_mouth_curve(self):
        creature = generate(1)
        caption = main.caption_for(1, creature)
        assert caption.endswith("#1")
        assert caption.startswith(main.mood_for(creature))

    def test_text_color_caps_brightness(self):
        white = Node(type=NodeType.CORE, color=Color(0.0, 0.0, 1.0))
        r, g, b = main.text_color(white)
        assert r == g == b
        assert 229 <= r <= 230


class TestCli:
    def test_svg_export(self, tmp_path):
        out = tmp_path / "creature.svg"
        result = CliRunner().invoke(main.app, ["--seed", "1", "--svg", str(out)])
        assert result.exit_code == 0, result.output
        text = out.read_text(encoding="utf-8")
        assert text.startswith("<svg")
        assert text == main.render_svg(generate(1))

    def test_svg_export_negative_seed(self, tmp_path):
        out = tmp_path / "negative.svg"
        result = CliRunner().invoke(main.app, ["--seed=-5", "--svg", str(out)])
        assert result.exit_code == 0, result.output
        assert out.read_text(encoding="utf-8") == main.render_svg(generate(-5))

"""
creature_sim module: render/renderer.py

Pygame rendering of creatures.

The tree is walked with affine matrices following the same placement rule as
the SVG export; ellipses become transformed polygons.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
import math
from typing import Callable, Dict, List, Optional, Tuple

import pygame

import config
from creature.nodes import Node, NodeType
from render import colors
from render.animation import Pose, REST_POSE
from render.transform import Affine, DEFAULT_PARENT, InstancePath, expand_mirrors, placement

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


@dataclass
class MouthHotspot:
    x: float
    y: float
    radius: float  # screen pixels

    def contains(self, px: float, py: float) -> bool:
        return math.hypot(px - self.x, py - self.y) <= self.radius


def view_transform(w: int = config.SCREEN_W, h: int = config.SCREEN_H) -> Affine:
    """Map the viewBox onto a w x h surface."""
    vx, vy, vw, vh = config.VIEW_BOX
    return Affine.scale(w / vw, h / vh) @ Affine.translate(-vx, -vy)


def _ellipse_points(m: Affine, cx: float, cy: float, rx: float, ry: float) -> List[Point]:
    n = config.ELLIPSE_SEGMENTS
    pts = []
    for i in range(n):
        t = 2.0 * math.pi * i / n
        pts.append(m.apply(cx + rx * math.cos(t), cy + ry * math.sin(t)))
    return pts


def _fill_ellipse(screen: pygame.Surface, m: Affine, color, cx: float, cy: float, rx: float, ry: float, width: int = 0) -> None:
    pygame.draw.polygon(screen, color, _ellipse_points(m, cx, cy, rx, ry), width)


def _node_rgb(node: Node) -> Tuple[int, int, int]:
    return node.color.to_rgb() if node.color is not None else (0, 0, 0)


class _Walk:
    """State for one draw pass."""

    def __init__(self, screen: pygame.Surface, pose: Pose):
        self.screen = screen
        self.pose = pose
        self.mouth_hotspot: Optional[MouthHotspot] = None

    # each drawer paints the node and returns the matrix its children use,
    # or None when the children should not be drawn

    def core(self, node: Node, m: Affine, path: InstancePath) -> Optional[Affine]:
        w, h = node.size_xy()
        _fill_ellipse(self.screen, m, _node_rgb(node), 0, 0, w, h)
        return m

    def joint(self, node: Node, m: Affine, path: InstancePath) -> Optional[Affine]:
        m = m @ Affine.rotate(self.pose.angle_for(path))
        w, h = node.size_xy()
        _fill_ellipse(self.screen, m, _node_rgb(node), 0, 0, w, h)
        return m

    def segment(self, node: Node, m: Affine, path: InstancePath) -> Optional[Affine]:
        w, h = node.size_xy()
        _fill_ellipse(self.screen, m, _node_rgb(node), 0, h, w, h)
        return m

    def mouth(self, node: Node, m: Affine, path: InstancePath) -> Optional[Affine]:
        w, _ = node.size_xy()
        half = w / 2.0
        lip = node.lip_thickness or 1.0
        px_scale = m.uniform_scale

        if self.pose.mouth_open:
            r = max(config.MOUTH_OPEN_MIN_RADIUS, half)
            _fill_ellipse(self.screen, m, colors.MOUTH_OPEN, 0, 0, r, r)
            _fill_ellipse(self.screen, m, _node_rgb(node), 0, 0, r, r, width=max(1, int(lip * px_scale)))
        else:
            curve = node.curve or 0.0
            pts = []
            for i in range(17):
                t = i / 16.0
                # quadratic bezier (-half, 0) -> (0, curve) -> (half, 0)
                x = (1 - t) ** 2 * -half + t ** 2 * half
                y = 2 * (1 - t) * t * curve
                pts.append(m.apply(x, y))
            pygame.draw.lines(self.screen, _node_rgb(node), False, pts, max(1, int(lip * 2 * px_scale)))

        cx, cy = m.apply(0, 0)
        self.mouth_hotspot = MouthHotspot(cx, cy, config.MOUTH_HOVER_RADIUS * px_scale)
        return m

    def eye(self, node: Node, m: Affine, path: InstancePath) -> Optional[Affine]:
        if self.pose.blinking:
            # scaled flat: nothing visible, iris included
            return None
        _fill_ellipse(self.screen, m, colors.EYE_WHITE, 0, 0, 1, 1)
        _fill_ellipse(self.screen, m, colors.EYE_STROKE, 0, 0, 1, 1, width=1)
        return m

    def iris(self, node: Node, m: Affine, path: InstancePath) -> Optional[Affine]:
        r, _ = node.size_xy()
        pupil = node.pupil_size or 0.0
        _fill_ellipse(self.screen, m, _node_rgb(node), 0, 0, r, r)
        _fill_ellipse(self.screen, m, colors.PUPIL, 0, 0, pupil, pupil)
        _fill_ellipse(self.screen, m, colors.HIGHLIGHT, -0.1, 0.1, pupil * 0.2, pupil * 0.2)
        return m

    def drawers(self) -> Dict[NodeType, Callable[[Node, Affine, InstancePath], Optional[Affine]]]:
        return {
            NodeType.CORE: self.core,
            NodeType.NECK: self.joint,
            NodeType.BALL_JOINT: self.joint,
            NodeType.SEGMENT: self.segment,
            NodeType.MOUTH: self.mouth,
            NodeType.EYE: self.eye,
            NodeType.IRIS: self.iris,
        }

    def draw(self, parent: Node, node: Node, parent_m: Affine, is_mirrored: bool, path: InstancePath) -> None:
        drawer = self.drawers().get(node.type)
        if drawer is None:
            logger.error(f"Unexpected node type: {node.type}")
            return

        m = parent_m @ placement(parent, node, is_mirrored).to_affine()
        child_m = drawer(node, m, path)
        if child_m is None:
            return
        for i, child, mirrored in expand_mirrors(node.children):
            self.draw(node, child, child_m, mirrored, path + ((i, mirrored),))


def draw_creature(screen: pygame.Surface, creature: Node, pose: Optional[Pose] = None) -> Optional[MouthHotspot]:
    """
    Draw ``creature`` onto ``screen``. Returns the mouth hotspot (last mouth
    instance drawn) so the caller can drive the hover interaction.
    """
    walk = _Walk(screen, pose or REST_POSE)
    walk.draw(DEFAULT_PARENT, creature, view_transform(*screen.get_size()), False, ())
    return walk.mouth_hotspot


def draw_hud(screen: pygame.Surface, stats: dict) -> None:
    font = pygame.font.Font(None, 22)

    lines = [
        f"Seed: {stats.get('seed', 0)}",
        "SPACE / click: new creature",
    ]

    y = 10
    for line in lines:
        txt = font.render(line, True, stats.get("text_color", colors.HUD_TEXT))
        screen.blit(txt, (12, y))
        y += 20

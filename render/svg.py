"""
creature_sim module: render/svg.py

SVG export of a creature: one nested <g> per rendered node instance, placed
with the shared transform rule, then the node's own shapes.
"""

from __future__ import annotations
import logging
from typing import Callable, Dict, List, Optional, Tuple

import config
from creature.nodes import Node, NodeType
from render import colors
from render.animation import Pose, REST_POSE
from render.transform import DEFAULT_PARENT, InstancePath, expand_mirrors, placement

logger = logging.getLogger(__name__)

# (opening markup, closing markup); children are emitted in between
Wrap = Tuple[str, str]
Drawer = Callable[[Node, Pose, InstancePath], Wrap]


def _fill(node: Node) -> str:
    return node.color.css() if node.color is not None else "black"


def _ellipse(cx: float, cy: float, rx: float, ry: float, **attrs: str) -> str:
    extra = "".join(f' {k.replace("_", "-")}="{v}"' for k, v in attrs.items())
    return f'<ellipse cx="{cx:.4f}" cy="{cy:.4f}" rx="{rx:.4f}" ry="{ry:.4f}"{extra}/>'


def draw_core(node: Node, pose: Pose, path: InstancePath) -> Wrap:
    w, h = node.size_xy()
    return f'<g class="Core">{_ellipse(0, 0, w, h, fill=_fill(node))}', "</g>"


def draw_joint(node: Node, pose: Pose, path: InstancePath) -> Wrap:
    w, h = node.size_xy()
    angle = pose.angle_for(path)
    return (
        f'<g class="BallJoint" transform="rotate({angle:.4f})">{_ellipse(0, 0, w, h, fill=_fill(node))}',
        "</g>",
    )


def draw_segment(node: Node, pose: Pose, path: InstancePath) -> Wrap:
    w, h = node.size_xy()
    return f'<g class="Segment">{_ellipse(0, h, w, h, fill=_fill(node))}', "</g>"


def draw_mouth(node: Node, pose: Pose, path: InstancePath) -> Wrap:
    w, _ = node.size_xy()
    half = w / 2.0
    lip = node.lip_thickness or 1.0
    if pose.mouth_open:
        r = max(config.MOUTH_OPEN_MIN_RADIUS, half)
        shape = _ellipse(
            0, 0, r, r,
            fill=colors.rgb_string(colors.MOUTH_OPEN),
            stroke=_fill(node),
            stroke_width=f"{lip:.4f}",
        )
    else:
        curve = node.curve or 0.0
        shape = (
            f'<path d="M {-half:.4f} 0 Q 0 {curve:.4f}, {half:.4f} 0" fill="transparent"'
            f' stroke="{_fill(node)}" stroke-width="{lip * 2:.4f}" stroke-linecap="round"/>'
        )
    return f'<g class="Mouth">{shape}', "</g>"


def draw_eye(node: Node, pose: Pose, path: InstancePath) -> Wrap:
    scale_y = 0 if pose.blinking else 1
    white = _ellipse(
        0, 0, 1, 1,
        stroke=colors.rgb_string(colors.EYE_STROKE),
        stroke_width="0.3",
        fill=colors.rgb_string(colors.EYE_WHITE),
    )
    return f'<g class="Eye" transform="scale(1, {scale_y})">{white}', "</g>"


def draw_iris(node: Node, pose: Pose, path: InstancePath) -> Wrap:
    r, _ = node.size_xy()
    pupil = node.pupil_size or 0.0
    shapes = [
        _ellipse(0, 0, r, r, fill=_fill(node)),
        _ellipse(0, 0, pupil, pupil, fill=colors.rgb_string(colors.PUPIL)),
        _ellipse(-0.1, 0.1, pupil * 0.2, pupil * 0.2, fill=colors.rgb_string(colors.HIGHLIGHT)),
    ]
    return '<g class="Iris">' + "".join(shapes), "</g>"


DRAWERS: Dict[NodeType, Drawer] = {
    NodeType.CORE: draw_core,
    NodeType.NECK: draw_joint,
    NodeType.BALL_JOINT: draw_joint,
    NodeType.SEGMENT: draw_segment,
    NodeType.MOUTH: draw_mouth,
    NodeType.EYE: draw_eye,
    NodeType.IRIS: draw_iris,
}


def _render_node(
    out: List[str],
    parent: Node,
    node: Node,
    is_mirrored: bool,
    path: InstancePath,
    pose: Pose,
) -> None:
    drawer = DRAWERS.get(node.type)
    if drawer is None:
        logger.error(f"Unexpected node type: {node.type}")
        return

    head, tail = drawer(node, pose, path)
    out.append(f'<g class="{node.type.value}" transform="{placement(parent, node, is_mirrored).to_svg()}">')
    out.append(head)
    for i, child, mirrored in expand_mirrors(node.children):
        _render_node(out, node, child, mirrored, path + ((i, mirrored),), pose)
    out.append(tail)
    out.append("</g>")


def render_svg(creature: Node, pose: Optional[Pose] = None) -> str:
    pose = pose or REST_POSE
    x, y, w, h = config.VIEW_BOX
    out: List[str] = [
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="{x:g} {y:g} {w:g} {h:g}">'
    ]
    _render_node(out, DEFAULT_PARENT, creature, False, (), pose)
    out.append("</svg>")
    return "\n".join(out)

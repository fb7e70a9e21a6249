"""
creature_sim module: creature/generation.py

Procedural creature generation.

A creature is a tree of body-part nodes grown from a fixed grammar:

    spine:  1-5 CORE vertebrae, chained
            each vertebra carries 0-2 mirrored limbs
            the last vertebra carries the neck
    limb:   1-4 (BALL_JOINT, SEGMENT) pairs, chained
    neck:   NECK -> SEGMENT -> head
    head:   CORE with one MOUTH and 1-3 EYEs sharing a single IRIS

Every random draw goes through the ``SeededRandom`` handed in by ``generate``,
in a fixed order, so the same seed always yields the same tree.
"""

from __future__ import annotations
from dataclasses import replace
import logging
from typing import Callable, List, Optional, Sequence, Tuple

from creature.colors import Color, color_mutator, random_color
from creature.nodes import Node, NodeType, iter_nodes
from creature.random_source import SeededRandom

logger = logging.getLogger(__name__)

MAX_MOUTH_CURVE = 10.0
MIN_MOUTH_CURVE = -20.0

GetColor = Callable[[], Color]


def chain(nodes: Sequence[Node]) -> Optional[Node]:
    """
    Link ``nodes`` into one parent -> child chain and return its head.

    Each node gets the following node appended after its existing children.
    Nodes are immutable, so the chain is rebuilt from the tail up.
    Returns None for an empty sequence.
    """
    if not nodes:
        return None
    return _link(nodes)


def _link(nodes: Sequence[Node]) -> Node:
    linked = nodes[-1]
    for node in reversed(nodes[:-1]):
        linked = replace(node, children=node.children + (linked,))
    return linked


def create_ball_joint(
    random: SeededRandom,
    next_color: GetColor,
    position: Tuple[float, float],
    rotation: float,
    mirror: bool,
) -> Node:
    size = random.real(10, 40)
    return Node(
        type=NodeType.BALL_JOINT,
        position=position,
        rotation=rotation,
        max_angle=random.real(5, 90),
        size=(size, size),
        color=next_color(),
        mirror=mirror,
    )


def generate_limb(
    random: SeededRandom,
    next_color: GetColor,
    position: Tuple[float, float],
    rotation: float,
) -> Optional[Node]:
    """
    A limb hangs off its anchor as alternating joints and segments.
    The first joint sits at the anchor and is always mirrored so limbs
    come in symmetric pairs.
    """
    count = random.integer(1, 4)
    nodes: List[Node] = []
    for i in range(count):
        if i == 0:
            joint = create_ball_joint(random, next_color, position, rotation, mirror=True)
        else:
            joint_position = (0.0, 2.0)
            joint_rotation = random.real(-20, 70)
            joint_mirror = random.bool(0.2)
            joint = create_ball_joint(random, next_color, joint_position, joint_rotation, joint_mirror)
        nodes.append(joint)

        width = random.real(10, 20)
        height = random.real(10, 50)
        nodes.append(Node(type=NodeType.SEGMENT, size=(width, height), color=next_color()))
    return chain(nodes)


def generate_iris(random: SeededRandom) -> Node:
    size = random.real(0.1, 0.7)
    color = random_color(random)
    return Node(
        type=NodeType.IRIS,
        size=size,
        color=color,
        pupil_size=random.real(0.1, 0.5),
    )


def generate_mouth(random: SeededRandom) -> Node:
    color = random_color(random)
    size = (random.real(10, 40), random.real(1, 30))
    lip_thickness = random.real(1, 10)
    # max before min; SeededRandom.real still covers the whole [-20, 10] interval
    curve = random.real(MAX_MOUTH_CURVE, MIN_MOUTH_CURVE)
    position = (0.0, -random.real(0.1, 0.9))
    return Node(
        type=NodeType.MOUTH,
        color=color,
        size=size,
        lip_thickness=lip_thickness,
        curve=curve,
        position=position,
    )


def generate_eye(random: SeededRandom, iris: Node) -> Node:
    """A single eye sits on the center line; otherwise it is drawn twice, mirrored."""
    is_single = random.bool(0.5)
    scale = random.real(3, 20)
    x = 0.0 if is_single else random.real(0.2, 0.5)
    y = random.real(0.3, 1)
    return Node(
        type=NodeType.EYE,
        scale=scale,
        mirror=not is_single,
        position=(x, y),
        children=(iris,),
    )


def generate_head(random: SeededRandom, next_color: GetColor) -> Node:
    # one iris instance, shared by every eye of this head
    iris = generate_iris(random)

    size = (random.real(20, 60), random.real(20, 60))
    color = next_color()
    mouth = generate_mouth(random)
    eyes = [generate_eye(random, iris) for _ in range(random.integer(1, 3))]

    return Node(
        type=NodeType.CORE,
        position=(0.0, 2.0),
        size=size,
        color=color,
        children=(mouth, *eyes),
    )


def generate_neck(random: SeededRandom, next_color: GetColor) -> Node:
    size = random.real(10, 30)
    position = (0.0, random.real(-0.8, -1))
    color = next_color()

    segment_size = (random.real(10, 20), random.real(20, 30))
    segment_color = next_color()
    segment = Node(
        type=NodeType.SEGMENT,
        position=(0.0, 0.0),
        rotation=180.0,
        size=segment_size,
        color=segment_color,
        children=(generate_head(random, next_color),),
    )

    return Node(
        type=NodeType.NECK,
        max_angle=10.0,
        position=position,
        rotation=0.0,
        size=(size, size),
        color=color,
        mirror=False,
        children=(segment,),
    )


def generate_vertebra(random: SeededRandom, next_color: GetColor, index: int) -> Node:
    size = (random.real(15, 50), random.real(15, 40))
    position = (0.0, 0.0 if index == 0 else -1.0)
    color = next_color()

    limbs: List[Node] = []
    for _ in range(random.integer(0, 2)):
        rotation = random.real(0, 180)
        anchor = (random.real(0.1, 0.4), random.real(0.6, 1))
        limb = generate_limb(random, next_color, anchor, rotation)
        if limb is not None:
            limbs.append(limb)

    return Node(
        type=NodeType.CORE,
        size=size,
        position=position,
        color=color,
        mirror=False,
        children=tuple(limbs),
    )


def generate_spine(random: SeededRandom, next_color: GetColor) -> Node:
    count = random.integer(1, 5)
    vertebrae = [generate_vertebra(random, next_color, i) for i in range(count)]

    # the neck goes on top of whatever limbs the last vertebra already has
    last = vertebrae[-1]
    neck = generate_neck(random, next_color)
    vertebrae[-1] = replace(last, children=last.children + (neck,))

    return _link(vertebrae)


def generate(seed) -> Node:
    """
    Grow a creature from ``seed``.

    Raises InvalidSeed for seeds that are not finite integers.
    """
    random = SeededRandom(seed)
    next_color = color_mutator(random)
    root = generate_spine(random, next_color)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            f"Generated creature seed={random.seed} vertebrae={spine_length(root)} "
            f"nodes={sum(1 for _ in iter_nodes(root))}"
        )
    return root


def spine_length(root: Node) -> int:
    """Number of vertebrae on the chain starting at ``root``."""
    length = 0
    node: Optional[Node] = root
    while node is not None and node.type == NodeType.CORE:
        length += 1
        node = next((c for c in node.children if c.type == NodeType.CORE), None)
    return length

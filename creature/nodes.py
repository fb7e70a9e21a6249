"""
creature_sim module: creature/nodes.py

Body-part node primitives for generated creatures.

Nodes are immutable. A creature is built bottom-up: children are finished
before the parent that owns them is constructed.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple, Union

from creature.colors import Color


class NodeType(Enum):
    CORE = "CORE"
    LEVER_JOINT = "LEVER_JOINT"  # reserved, never generated
    BALL_JOINT = "BALL_JOINT"
    SEGMENT = "SEGMENT"
    NECK = "NECK"
    HAND = "HAND"  # reserved, never generated
    EYE = "EYE"
    IRIS = "IRIS"
    MOUTH = "MOUTH"
    FACE_BLOB = "FACE_BLOB"  # reserved, never generated


JOINT_TYPES = (NodeType.BALL_JOINT, NodeType.NECK)


@dataclass(frozen=True)
class Node:
    type: NodeType
    children: Tuple["Node", ...] = ()

    # placement within the parent's local space
    position: Optional[Tuple[float, float]] = None
    rotation: Optional[float] = None
    scale: Optional[float] = None
    mirror: Optional[bool] = None

    # shape
    size: Optional[Union[Tuple[float, float], float]] = None
    color: Optional[Color] = None
    max_angle: Optional[float] = None  # joints only: bounds the idle sway

    # mouth / iris
    lip_thickness: Optional[float] = None
    curve: Optional[float] = None
    pupil_size: Optional[float] = None

    @property
    def is_joint(self) -> bool:
        return self.type in JOINT_TYPES

    def size_xy(self) -> Tuple[float, float]:
        """Size as a (w, h) pair; scalar sizes apply to both axes."""
        if self.size is None:
            return (1.0, 1.0)
        if isinstance(self.size, tuple):
            return self.size
        return (self.size, self.size)


def iter_nodes(root: Node) -> Iterator[Node]:
    """
    Depth-first, pre-order walk. A shared child (the iris) is yielded once
    per parent that holds it.
    """
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def find_node(root: Node, node_type: NodeType) -> Optional[Node]:
    for node in iter_nodes(root):
        if node.type == node_type:
            return node
    return None

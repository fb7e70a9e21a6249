"""
creature_sim module: render/transform.py

Placement of a node inside its parent, shared by the SVG and pygame renderers.

Every rendered instance is placed with, left to right:

    scale(mirror, 1) translate(t) rotate(rotation) scale(scale)

where t is (0, position.y) rotated by position.x * 180 degrees and then
stretched by the parent's size.
"""

from __future__ import annotations
from dataclasses import dataclass
import math
from typing import Iterator, List, Sequence, Tuple

from creature.nodes import Node, NodeType

# anchor for the root: unit size, no rotation
DEFAULT_PARENT = Node(type=NodeType.CORE, size=(1.0, 1.0), rotation=0.0)


@dataclass(frozen=True)
class Affine:
    """
    2D affine matrix

        | a c e |
        | b d f |
        | 0 0 1 |
    """
    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    @staticmethod
    def translate(x: float, y: float) -> "Affine":
        return Affine(e=x, f=y)

    @staticmethod
    def scale(sx: float, sy: float | None = None) -> "Affine":
        return Affine(a=sx, d=sx if sy is None else sy)

    @staticmethod
    def rotate(degrees: float) -> "Affine":
        r = math.radians(degrees)
        cos, sin = math.cos(r), math.sin(r)
        return Affine(a=cos, b=sin, c=-sin, d=cos)

    def __matmul__(self, o: "Affine") -> "Affine":
        return Affine(
            a=self.a * o.a + self.c * o.b,
            b=self.b * o.a + self.d * o.b,
            c=self.a * o.c + self.c * o.d,
            d=self.b * o.c + self.d * o.d,
            e=self.a * o.e + self.c * o.f + self.e,
            f=self.b * o.e + self.d * o.f + self.f,
        )

    def apply(self, x: float, y: float) -> Tuple[float, float]:
        return (self.a * x + self.c * y + self.e, self.b * x + self.d * y + self.f)

    @property
    def uniform_scale(self) -> float:
        """Geometric-mean scale factor, for stroke widths."""
        return math.sqrt(abs(self.a * self.d - self.b * self.c))


@dataclass(frozen=True)
class Placement:
    mirror_sign: float
    translation: Tuple[float, float]
    rotation: float
    scale: float

    def to_affine(self) -> Affine:
        return (
            Affine.scale(self.mirror_sign, 1.0)
            @ Affine.translate(*self.translation)
            @ Affine.rotate(self.rotation)
            @ Affine.scale(self.scale)
        )

    def to_svg(self) -> str:
        tx, ty = self.translation
        return (
            f"scale({self.mirror_sign:g}, 1) "
            f"translate({tx:.4f}, {ty:.4f}) "
            f"rotate({self.rotation:.4f}) "
            f"scale({self.scale:.4f})"
        )


def translation_for(parent: Node, node: Node) -> Tuple[float, float]:
    x, y = node.position if node.position is not None else (0.0, 0.0)
    pw, ph = parent.size_xy()
    r = math.radians(x * 180.0)
    # (0, y) rotated by x * 180 degrees
    tx = 0.0 - y * math.sin(r)
    ty = y * math.cos(r)
    return (tx * pw, ty * ph)


def placement(parent: Node, node: Node, is_mirrored: bool = False) -> Placement:
    return Placement(
        mirror_sign=-1.0 if is_mirrored else 1.0,
        translation=translation_for(parent, node),
        rotation=node.rotation or 0.0,
        scale=node.scale if node.scale is not None else 1.0,
    )


def expand_mirrors(children: Sequence[Node]) -> Iterator[Tuple[int, Node, bool]]:
    """
    Yield (index, child, is_mirrored) in paint order. A mirrored child is
    followed immediately by its flipped twin.
    """
    for i, child in enumerate(children):
        yield i, child, False
        if child.mirror:
            yield i, child, True


def instance_count(node: Node) -> int:
    return 2 if node.mirror else 1


InstancePath = Tuple[Tuple[int, bool], ...]


def joint_paths(root: Node) -> List[Tuple[InstancePath, Node]]:
    """
    Every joint instance in the expanded render tree, keyed by its path of
    (child index, mirrored) steps from the root.
    """
    found: List[Tuple[InstancePath, Node]] = []

    def walk(node: Node, path: InstancePath) -> None:
        if node.is_joint:
            found.append((path, node))
        for i, child, mirrored in expand_mirrors(node.children):
            walk(child, path + ((i, mirrored),))

    walk(root, ())
    return found

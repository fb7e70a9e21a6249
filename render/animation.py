"""
creature_sim module: render/animation.py

Idle animation state for a displayed creature:
- eyes blink (long open spells, short closed spells)
- every joint instance sways to a fresh angle within its max_angle
- the mouth opens while the pointer hovers over it

The animator owns its own SeededRandom; it never touches the random source
a creature was generated with.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import random
from typing import Dict, Optional

import config
from creature.nodes import Node
from creature.random_source import SeededRandom
from render.transform import InstancePath, joint_paths


@dataclass(frozen=True)
class Pose:
    blinking: bool = False
    joint_angles: Dict[InstancePath, float] = field(default_factory=dict)
    mouth_open: bool = False

    def angle_for(self, path: InstancePath) -> float:
        return self.joint_angles.get(path, 0.0)


REST_POSE = Pose()


@dataclass
class JointSway:
    max_angle: float
    interval_ms: int
    elapsed_ms: float = 0.0
    angle: float = 0.0


class IdleAnimator:
    def __init__(self, creature: Node, seed: Optional[int] = None):
        if seed is None:
            seed = random.randrange(config.SEED_MAX)
        self.rng = SeededRandom(seed)
        self.creature = creature

        self.blinking = False
        self.blink_remaining_ms = float(self._open_duration())
        self.mouth_open = False

        self.joints: Dict[InstancePath, JointSway] = {}
        for path, node in joint_paths(creature):
            self.joints[path] = JointSway(
                max_angle=node.max_angle or 0.0,
                interval_ms=self.rng.integer(*config.SWAY_INTERVAL_MS),
            )

    def _open_duration(self) -> int:
        return self.rng.integer(*config.BLINK_OPEN_MS)

    def _closed_duration(self) -> int:
        return self.rng.integer(*config.BLINK_CLOSED_MS)

    def _sway_angle(self, max_angle: float) -> float:
        return self.rng.integer(0, int(max_angle)) - max_angle / 2.0

    def update(self, dt_ms: float) -> None:
        self.blink_remaining_ms -= dt_ms
        while self.blink_remaining_ms <= 0:
            self.blinking = not self.blinking
            duration = self._closed_duration() if self.blinking else self._open_duration()
            self.blink_remaining_ms += duration

        for sway in self.joints.values():
            sway.elapsed_ms += dt_ms
            while sway.elapsed_ms >= sway.interval_ms:
                sway.elapsed_ms -= sway.interval_ms
                sway.angle = self._sway_angle(sway.max_angle)

    def set_pointer_over_mouth(self, hovering: bool) -> None:
        self.mouth_open = hovering

    def pose(self) -> Pose:
        return Pose(
            blinking=self.blinking,
            joint_angles={path: sway.angle for path, sway in self.joints.items()},
            mouth_open=self.mouth_open,
        )

"""
slime_sim module: slime/skills.py

Skill record carried by every slime.

Three independent counters (vision, efficiency, jumper). Each level scales a
base value by ``1 + level / MAX_SKILL_LEVEL * strength``.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import random
from typing import Dict

import config


class SkillKind(Enum):
    VISION = 0
    EFFICIENCY = 1
    JUMPER = 2

    @staticmethod
    def random(rng: random.Random) -> "SkillKind":
        return rng.choice(list(SkillKind))


@dataclass
class Skills:
    vision: int = 0
    efficiency: int = 0
    jumper: int = 0

    def get(self, kind: SkillKind) -> int:
        return getattr(self, kind.name.lower())

    def add(self, kind: SkillKind, levels: int = 1) -> None:
        if levels < 0:
            raise ValueError(f"cannot add a negative number of levels ({levels})")
        name = kind.name.lower()
        setattr(self, name, getattr(self, name) + levels)

    def total(self) -> int:
        return self.vision + self.efficiency + self.jumper

    def levels(self) -> Dict[SkillKind, int]:
        return {k: self.get(k) for k in SkillKind}

    def clone(self) -> "Skills":
        return Skills(vision=self.vision, efficiency=self.efficiency, jumper=self.jumper)


def skill_modifier(level: int, strength: float, cap: int = config.MAX_SKILL_LEVEL) -> float:
    return 1.0 + level / cap * strength

"""
slime_sim module: evolution/inheritance.py

Skill inheritance on breeding and the evolution-threshold schedule.
"""

from __future__ import annotations
import math
import random
from typing import Optional, Tuple

import config
from slime.skills import SkillKind, Skills


def pick_contribution(parent: Skills, rng: random.Random) -> Optional[Tuple[SkillKind, int]]:
    """
    One skill category from a parent, chosen with probability proportional
    to its level, passed down at a third of that level (rounded up).
    Returns None for a parent with no skills.
    """
    levels = parent.levels()
    kinds = [k for k, lvl in levels.items() if lvl > 0]
    if not kinds:
        return None
    kind = rng.choices(kinds, weights=[levels[k] for k in kinds], k=1)[0]
    return kind, math.ceil(levels[kind] / 3)


def inherit_skills(a: Skills, b: Skills, rng: random.Random) -> Skills:
    child = Skills()
    for parent in (a, b):
        contribution = pick_contribution(parent, rng)
        if contribution is None:
            continue
        kind, levels = contribution
        child.add(kind, levels)
    return child


def evolution_threshold(skills: Skills, initial_energy: float) -> float:
    """
    Energy at which a slime holding ``skills`` next evolves.
    Returns inf once the total skill cap is reached.
    """
    total = skills.total()
    if total >= config.MAX_SKILL_LEVEL:
        return math.inf
    return initial_energy + config.EVOLVE_STEP * (total + 1)


def evolve(skills: Skills, path: SkillKind, threshold: float) -> float:
    """
    Apply one evolution event in-place and return the next threshold.
    """
    skills.add(path, 1)
    if skills.total() >= config.MAX_SKILL_LEVEL:
        return math.inf
    return threshold + config.EVOLVE_STEP

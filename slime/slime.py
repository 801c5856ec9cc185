"""
slime_sim module: slime/slime.py

Slime entity plus the tunable base configuration all slimes share.

A slime's effective vision, speed, step cost, jump cooldown and jump distance
are its base settings scaled by its skill levels. Settings are held by
reference, so edits made through the settings panel apply from the next tick.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
import math
from typing import Tuple

import config
from slime.skills import SkillKind, Skills, skill_modifier


class SlimeState(Enum):
    NORMAL = 0
    JUMPING = 1
    BREEDING = 2


def size_for_energy(energy: float) -> float:
    return max(config.SIZE_MIN, min(config.SIZE_MAX, energy / config.SIZE_ENERGY_RATIO))


@dataclass
class SlimeSettings:
    speed_factor: float = config.SLIME_SPEED_FACTOR
    initial_energy: float = config.SLIME_INITIAL_ENERGY
    step_cost: float = config.SLIME_STEP_COST
    vision_range: float = config.SLIME_VISION_RANGE
    jump_cooldown: int = config.SLIME_JUMP_COOLDOWN
    jump_distance: float = config.SLIME_JUMP_DISTANCE
    breeding_cooldown: int = config.SLIME_BREEDING_COOLDOWN
    time_cost_interval: int = config.SLIME_TIME_COST_INTERVAL
    limit: int = config.SLIME_LIMIT

    vision_strength: float = config.VISION_STRENGTH
    vision_speed_strength: float = config.VISION_SPEED_STRENGTH
    efficiency_strength: float = config.EFFICIENCY_STRENGTH
    jumper_strength: float = config.JUMPER_STRENGTH

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        non_negative = (
            "speed_factor", "step_cost", "vision_range", "jump_cooldown", "jump_distance",
            "breeding_cooldown", "limit", "vision_strength", "vision_speed_strength",
            "efficiency_strength", "jumper_strength",
        )
        for name in non_negative:
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0, got {getattr(self, name)}")
        if self.initial_energy <= 0:
            raise ValueError(f"initial_energy must be > 0, got {self.initial_energy}")
        if self.time_cost_interval < 1:
            raise ValueError(f"time_cost_interval must be >= 1 tick, got {self.time_cost_interval}")


@dataclass(eq=False)
class Slime:
    x: float
    y: float
    energy: float
    settings: SlimeSettings
    skill_path: SkillKind
    skills: Skills = field(default_factory=Skills)
    heading: float = 0.0
    state: SlimeState = SlimeState.NORMAL
    next_evolution: float = math.inf
    last_jump_tick: int = 0
    last_breed_tick: int = 0
    born_tick: int = 0

    @property
    def pos(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @property
    def size(self) -> float:
        return size_for_energy(self.energy)

    # ---- skill-adjusted values ----

    @property
    def vision_range(self) -> float:
        return self.settings.vision_range * skill_modifier(self.skills.vision, self.settings.vision_strength)

    @property
    def speed_factor(self) -> float:
        return self.settings.speed_factor * skill_modifier(self.skills.vision, self.settings.vision_speed_strength)

    @property
    def step_cost(self) -> float:
        return self.settings.step_cost / skill_modifier(self.skills.efficiency, self.settings.efficiency_strength)

    @property
    def jump_cooldown(self) -> float:
        return self.settings.jump_cooldown / skill_modifier(self.skills.jumper, self.settings.jumper_strength)

    @property
    def jump_distance(self) -> float:
        return self.settings.jump_distance * skill_modifier(self.skills.jumper, self.settings.jumper_strength)

    @property
    def sight(self) -> float:
        """Detection radius: body size plus vision range."""
        return self.size + self.vision_range

    def movement_cost(self, energy: float) -> float:
        """
        Energy paid for one step at the given energy level.
        Free below the free-movement threshold; otherwise scaled up for
        energy-rich slimes.
        """
        if energy < config.FREE_MOVEMENT_THRESHOLD:
            return 0.0
        return self.step_cost * max(1.0, energy / config.ABUNDANT_ENERGY)

    def breed_ready(self, tick: int) -> bool:
        return (
            self.energy >= config.BREEDING_REQUIREMENT
            and self.state != SlimeState.BREEDING
            and tick - self.last_breed_tick >= self.settings.breeding_cooldown
        )

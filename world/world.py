"""
slime_sim module: world/world.py

World state container: field bounds, the tick clock, both populations and the
read-only views the renderer draws from.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
import logging
import random
from typing import Dict, Optional, Tuple

import config
from slime.controller import SlimeController
from slime.skills import SkillKind, Skills
from slime.slime import Slime, SlimeSettings, SlimeState
from world.food import FoodController, FoodSettings

logger = logging.getLogger(__name__)


@dataclass
class SimulationSettings:
    """Everything the settings panel may edit between ticks."""
    food: FoodSettings = field(default_factory=FoodSettings)
    slimes: SlimeSettings = field(default_factory=SlimeSettings)
    sim_speed: int = config.SIM_SPEED

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not 1 <= self.sim_speed <= config.MAX_SIM_SPEED:
            raise ValueError(f"sim_speed must be in [1, {config.MAX_SIM_SPEED}], got {self.sim_speed}")
        self.food.validate()
        self.slimes.validate()


@dataclass(frozen=True)
class FoodView:
    x: float
    y: float
    energy: float
    size: float = config.FOOD_DRAW_RADIUS


@dataclass(frozen=True)
class SlimeView:
    x: float
    y: float
    size: float
    state: SlimeState
    energy: float
    skills: Dict[SkillKind, int]
    skill_path: SkillKind
    vision_radius: float

    @staticmethod
    def of(s: Slime) -> "SlimeView":
        return SlimeView(
            x=s.x,
            y=s.y,
            size=s.size,
            state=s.state,
            energy=s.energy,
            skills=s.skills.levels(),
            skill_path=s.skill_path,
            vision_radius=s.sight,
        )


@dataclass(frozen=True)
class WorldSnapshot:
    tick: int
    food: Tuple[FoodView, ...]
    slimes: Tuple[SlimeView, ...]
    births: int
    deaths: int
    evolutions: int
    skill_totals: Dict[SkillKind, int]
    sim_speed: int

    @property
    def sim_time(self) -> float:
        return self.tick / config.TICKS_PER_SECOND


class World:
    def __init__(
        self,
        w: int,
        h: int,
        initial_food: int,
        initial_slimes: int,
        settings: Optional[SimulationSettings] = None,
        seed: Optional[int] = None,
    ):
        self.w = w
        self.h = h
        self.initial_food = initial_food
        self.initial_slimes = initial_slimes
        self.settings = settings if settings is not None else SimulationSettings()
        self.rng = random.Random(seed)
        self.tick = 0

        self.food = FoodController(w, h, self.rng, self.settings.food)
        self.slimes = SlimeController(w, h, self.rng, self.settings.slimes)
        self.reset()

    @staticmethod
    def create(
        w: int,
        h: int,
        initial_food: int = config.START_FOOD,
        initial_slimes: int = config.START_SLIMES,
        food_limit: Optional[int] = None,
        seed: Optional[int] = None,
        settings: Optional[SimulationSettings] = None,
    ) -> "World":
        """
        Build and seed a world. A food_limit override is applied to a copy,
        so the caller's settings object is left untouched.
        """
        settings = settings if settings is not None else SimulationSettings()
        if food_limit is not None:
            settings = replace(settings, food=replace(settings.food, limit=food_limit))
        world = World(w, h, initial_food, initial_slimes, settings=settings, seed=seed)
        logger.info(
            "world %dx%d created: %d food (cap %d), %d slimes, seed=%s",
            w, h, len(world.food.population), settings.food.limit, len(world.slimes.population), seed,
        )
        return world

    # ---- host actions ----

    def reset(self) -> None:
        """Clear both populations and reseed them from the initial counts."""
        self.tick = 0
        self.food.clear()
        self.food.reset_time(self.tick)
        self.slimes.reset(self.tick)
        self.food.spawn_n(self.initial_food)
        self.slimes.spawn_n(self.initial_slimes, self.tick)
        logger.info("world reset: %d food, %d slimes", len(self.food.population), len(self.slimes.population))

    def spawn_food(self) -> bool:
        return self.food.spawn() is not None

    def spawn_slime(self) -> bool:
        return self.slimes.spawn_one(self.tick) is not None

    def resize(self, w: int, h: int) -> None:
        self.w = w
        self.h = h
        self.food.resize(w, h)
        self.slimes.resize(w, h)

    # ---- clock ----

    def step(self) -> None:
        self.tick += 1
        self.food.update_step(self.tick)
        self.slimes.update_step(self.tick, self.food)

    def advance(self) -> int:
        """Run one rendered frame worth of ticks. Returns the tick count run."""
        n = max(1, self.settings.sim_speed)
        for _ in range(n):
            self.step()
        return n

    # ---- read-out ----

    def snapshot(self) -> WorldSnapshot:
        totals: Skills = self.slimes.skill_totals()
        return WorldSnapshot(
            tick=self.tick,
            food=tuple(FoodView(x=f.x, y=f.y, energy=f.energy) for f in self.food.population),
            slimes=tuple(SlimeView.of(s) for s in self.slimes.population),
            births=self.slimes.births,
            deaths=self.slimes.deaths,
            evolutions=self.slimes.evolutions,
            skill_totals=totals.levels(),
            sim_speed=self.settings.sim_speed,
        )

    def inspect(self, x: float, y: float) -> Optional[SlimeView]:
        """
        Slime under the pointer: the nearest one whose sight radius covers (x, y).
        """
        best, d = self.slimes.nearest(x, y)
        if best is None or d > best.sight:
            return None
        return SlimeView.of(best)

    def stats(self) -> dict:
        energies = [s.energy for s in self.slimes.population]
        return {
            "tick": self.tick,
            "slimes": len(self.slimes.population),
            "food": len(self.food.population),
            "births": self.slimes.births,
            "deaths": self.slimes.deaths,
            "evolutions": self.slimes.evolutions,
            "avg_energy": sum(energies) / len(energies) if energies else 0.0,
        }


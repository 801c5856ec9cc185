"""
slime_sim module: world/food.py

Food system:
- One pellet spawns per cadence interval while below the population cap
- Each pellet drifts with a fixed velocity for its whole lifetime
- Richer pellets drift faster (speed is interpolated from energy)
- Pellets are only ever removed by being eaten
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
import math
import random
from typing import List, Optional, Tuple

import config
from world.geometry import distance, polar_to_cartesian, random_point, wrap_around

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Food:
    x: float
    y: float
    energy: float
    vx: float = 0.0
    vy: float = 0.0

    @property
    def pos(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @property
    def speed(self) -> float:
        return math.hypot(self.vx, self.vy)


def _check_range(name: str, r: Tuple[float, float]) -> None:
    lo, hi = r
    if lo < 0:
        raise ValueError(f"{name} minimum must be >= 0, got {lo}")
    if lo > hi:
        raise ValueError(f"{name} minimum {lo} is greater than maximum {hi}")


@dataclass
class FoodSettings:
    """
    spawn_interval:
      - ticks that must elapse between two spawns
    limit:
      - maximum number of pellets alive at once
    energy_range / speed_range:
      - (min, max); speed is mapped linearly from energy
    """
    spawn_interval: int = config.FOOD_SPAWN_INTERVAL
    limit: int = config.FOOD_LIMIT
    energy_range: Tuple[float, float] = config.FOOD_ENERGY_RANGE
    speed_range: Tuple[float, float] = config.FOOD_SPEED_RANGE

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if self.spawn_interval < 1:
            raise ValueError(f"spawn_interval must be >= 1 tick, got {self.spawn_interval}")
        if self.limit < 0:
            raise ValueError(f"limit must be >= 0, got {self.limit}")
        _check_range("energy_range", self.energy_range)
        _check_range("speed_range", self.speed_range)


def speed_for_energy(energy: float, energy_range: Tuple[float, float], speed_range: Tuple[float, float]) -> float:
    e_min, e_max = energy_range
    s_min, s_max = speed_range
    if e_max <= e_min:
        return s_min
    t = (energy - e_min) / (e_max - e_min)
    t = max(0.0, min(1.0, t))
    return s_min + t * (s_max - s_min)


def make_food(rng: random.Random, settings: FoodSettings, w: float, h: float) -> Food:
    energy = rng.uniform(*settings.energy_range)
    speed = speed_for_energy(energy, settings.energy_range, settings.speed_range)
    direction = rng.uniform(0.0, 2.0 * math.pi)
    vx, vy = polar_to_cartesian(speed, direction)
    x, y = random_point(rng, w, h)
    return Food(x=x, y=y, energy=energy, vx=vx, vy=vy)


class FoodController:
    def __init__(self, w: float, h: float, rng: random.Random, settings: Optional[FoodSettings] = None):
        self.w = w
        self.h = h
        self.rng = rng
        self.settings = settings if settings is not None else FoodSettings()
        self.population: List[Food] = []
        self.last_spawn_tick = 0

    @property
    def full(self) -> bool:
        return len(self.population) >= self.settings.limit

    def reset_time(self, tick: int = 0) -> None:
        self.last_spawn_tick = tick

    def clear(self) -> None:
        self.population = []

    def resize(self, w: float, h: float) -> None:
        self.w = w
        self.h = h

    def spawn(self) -> Optional[Food]:
        """
        Spawn a single pellet. Returns None when the cap is already reached.
        """
        if self.full:
            return None
        food = make_food(self.rng, self.settings, self.w, self.h)
        self.population.append(food)
        return food

    def spawn_n(self, n: int) -> int:
        n = max(0, min(n, self.settings.limit - len(self.population)))
        for _ in range(n):
            self.spawn()
        logger.debug("spawned %d food (population %d)", n, len(self.population))
        return n

    def update_positions(self) -> None:
        for f in self.population:
            f.x, f.y = wrap_around(f.x + f.vx, f.y + f.vy, self.w, self.h)

    def check_spawn(self, tick: int) -> bool:
        # at most one spawn per check, no catch-up after long gaps
        if tick - self.last_spawn_tick < self.settings.spawn_interval:
            return False
        if self.spawn() is None:
            return False
        self.last_spawn_tick = tick
        return True

    def trim_to_limit(self) -> int:
        """Drop the newest pellets beyond the cap. Returns how many were dropped."""
        excess = len(self.population) - self.settings.limit
        if excess <= 0:
            return 0
        del self.population[self.settings.limit:]
        logger.debug("cap lowered to %d: dropped %d food", self.settings.limit, excess)
        return excess

    def update_step(self, tick: int) -> None:
        self.update_positions()
        self.trim_to_limit()
        self.check_spawn(tick)

    def nearest(self, x: float, y: float, max_distance: float = math.inf) -> Tuple[Optional[Food], float]:
        """
        Returns (food, distance) for the nearest pellet within max_distance,
        or (None, inf) if there is none.
        """
        best = None
        best_d = math.inf
        for f in self.population:
            d = distance((x, y), f.pos)
            if d < best_d:
                best_d = d
                best = f
        if best is None or best_d > max_distance:
            return None, math.inf
        return best, best_d

    def take_within(self, x: float, y: float, reach: float) -> List[Food]:
        """
        Remove and return every pellet within reach of (x, y).
        """
        taken: List[Food] = []
        remaining: List[Food] = []
        for f in self.population:
            if distance((x, y), f.pos) <= reach:
                taken.append(f)
            else:
                remaining.append(f)
        if taken:
            self.population = remaining
        return taken

    def remove(self, food: Food) -> bool:
        for i, f in enumerate(self.population):
            if f is food:
                del self.population[i]
                return True
        return False

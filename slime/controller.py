"""
slime_sim module: slime/controller.py

Slime population engine. One ``update_step`` per tick:

  0. time cost on its own cadence (starved slimes are removed), states reset
  1. target: nearest breed-ready partner in sight, else nearest food in sight
  2. move towards the target (or keep heading), pay the step cost
  3. eat every pellet under the body
  4. breed if the chosen partner is in contact (child buffered)
  5. jump onto food in range if nothing was eaten and not breeding
  6. evolve once energy reaches the next threshold

Food is shared and consumed first-come-first-served within the pass.
Partner search reads positions and breed readiness captured at the start of
the tick; a slime that is already BREEDING this tick is never picked. A slime's
own position/energy/state are written back once, at the end of its turn.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
import math
import random
from typing import Dict, List, Optional, Set, Tuple

import config
from evolution.inheritance import evolution_threshold, evolve, inherit_skills
from slime.skills import SkillKind, Skills
from slime.slime import Slime, SlimeSettings, SlimeState, size_for_energy
from world.food import FoodController
from world.geometry import Point, angle_between, distance, polar_to_cartesian, random_point, wrap_around

logger = logging.getLogger(__name__)


@dataclass
class TickReport:
    """Per-tick bookkeeping, mostly for logs and tests."""
    deaths: int = 0
    births: int = 0
    eaten: int = 0
    jumps: int = 0
    evolutions: int = 0


def _still_ready(s: Slime, ready: Set[Slime]) -> bool:
    return s in ready and s.state != SlimeState.BREEDING


class SlimeController:
    def __init__(self, w: float, h: float, rng: random.Random, settings: Optional[SlimeSettings] = None):
        self.w = w
        self.h = h
        self.rng = rng
        self.settings = settings if settings is not None else SlimeSettings()
        self.population: List[Slime] = []

        self.tick = 0
        self.last_time_cost_tick = 0

        # lifetime counters for the HUD
        self.births = 0
        self.deaths = 0
        self.evolutions = 0

    # ---- spawning ----

    def make_slime(self, x: float, y: float, tick: int, skills: Optional[Skills] = None) -> Slime:
        skills = skills if skills is not None else Skills()
        return Slime(
            x=x,
            y=y,
            energy=self.settings.initial_energy,
            settings=self.settings,
            skill_path=SkillKind.random(self.rng),
            skills=skills,
            heading=self.rng.uniform(0.0, 2.0 * math.pi),
            next_evolution=evolution_threshold(skills, self.settings.initial_energy),
            last_jump_tick=tick,
            last_breed_tick=tick,
            born_tick=tick,
        )

    def spawn_one(self, tick: Optional[int] = None) -> Optional[Slime]:
        """
        Spawn a fresh slime at a random position. Returns None at the cap.
        """
        if len(self.population) >= self.settings.limit:
            return None
        x, y = random_point(self.rng, self.w, self.h)
        slime = self.make_slime(x, y, self.tick if tick is None else tick)
        self.population.append(slime)
        return slime

    def spawn_n(self, n: int, tick: Optional[int] = None) -> int:
        spawned = 0
        for _ in range(n):
            if self.spawn_one(tick) is None:
                break
            spawned += 1
        return spawned

    def clear(self) -> None:
        self.population = []

    def reset(self, tick: int = 0) -> None:
        self.clear()
        self.tick = tick
        self.last_time_cost_tick = tick
        self.births = 0
        self.deaths = 0
        self.evolutions = 0

    def resize(self, w: float, h: float) -> None:
        self.w = w
        self.h = h

    # ---- queries ----

    def nearest(self, x: float, y: float) -> Tuple[Optional[Slime], float]:
        best = None
        best_d = math.inf
        for s in self.population:
            d = distance((x, y), s.pos)
            if d < best_d:
                best_d = d
                best = s
        return best, best_d

    def skill_totals(self) -> Skills:
        totals = Skills()
        for s in self.population:
            for kind, level in s.skills.levels().items():
                totals.add(kind, level)
        return totals

    # ---- simulation ----

    def update_step(self, tick: int, food: FoodController) -> TickReport:
        self.tick = tick
        report = TickReport()

        report.deaths = self._apply_time_cost(tick)

        positions: Dict[Slime, Point] = {s: s.pos for s in self.population}
        ready: Set[Slime] = {s for s in self.population if s.breed_ready(tick)}
        children: List[Slime] = []

        for slime in list(self.population):
            self._step_slime(slime, tick, food, positions, ready, children, report)

        # newborns join after the pass so they never act in their birth tick
        if children:
            self.population.extend(children)
            report.births = len(children)
            self.births += len(children)

        return report

    def _apply_time_cost(self, tick: int) -> int:
        for s in self.population:
            s.state = SlimeState.NORMAL

        if tick - self.last_time_cost_tick < self.settings.time_cost_interval:
            return 0
        self.last_time_cost_tick = tick

        survivors: List[Slime] = []
        for s in self.population:
            s.energy -= 1.0
            if s.energy > 0:
                survivors.append(s)
        dead = len(self.population) - len(survivors)
        self.population = survivors

        if dead:
            self.deaths += dead
            logger.debug("tick %d: %d slime(s) starved", tick, dead)
        return dead

    def _find_partner(self, slime: Slime, positions: Dict[Slime, Point], ready: Set[Slime]) -> Optional[Slime]:
        best = None
        best_d = math.inf
        reach = slime.sight
        for other in self.population:
            if other is slime or not _still_ready(other, ready):
                continue
            d = distance(slime.pos, positions.get(other, other.pos))
            if d <= reach and d < best_d:
                best_d = d
                best = other
        return best

    def _step_slime(
        self,
        slime: Slime,
        tick: int,
        food: FoodController,
        positions: Dict[Slime, Point],
        ready: Set[Slime],
        children: List[Slime],
        report: TickReport,
    ) -> None:
        x, y = slime.pos
        energy = slime.energy
        heading = slime.heading
        state = slime.state
        size = slime.size
        last_jump_tick = slime.last_jump_tick
        bred = False

        # 1. target acquisition
        target: Optional[Point] = None
        partner: Optional[Slime] = None
        if _still_ready(slime, ready):
            partner = self._find_partner(slime, positions, ready)
            if partner is not None:
                target = positions.get(partner, partner.pos)
        if target is None:
            nearest_food, _ = food.nearest(x, y, slime.sight)
            if nearest_food is not None:
                target = nearest_food.pos

        # 2. movement
        step = slime.speed_factor
        if target is not None:
            heading = angle_between((x, y), target)
            step = min(step, distance((x, y), target))
        if step > 0:
            dx, dy = polar_to_cartesian(step, heading)
            x, y = wrap_around(x + dx, y + dy, self.w, self.h)
            energy -= slime.movement_cost(energy)

        # 3. eating
        eaten = food.take_within(x, y, size)
        for f in eaten:
            energy += f.energy
        report.eaten += len(eaten)

        # 4. breeding
        if partner is not None and _still_ready(partner, ready):
            contact = size_for_energy(energy) + partner.size
            if distance((x, y), partner.pos) <= contact:
                cost = self.settings.initial_energy
                energy -= cost
                state = SlimeState.BREEDING
                bred = True

                partner.energy -= cost
                partner.state = SlimeState.BREEDING
                partner.last_breed_tick = tick

                skills = inherit_skills(slime.skills, partner.skills, self.rng)
                children.append(self.make_slime(x, y, tick, skills))
                logger.debug("tick %d: birth at (%.1f, %.1f), inherited %s", tick, x, y, skills)

        # 5. jumping
        if not eaten and state != SlimeState.BREEDING and energy >= config.JUMP_REQUIREMENT:
            if tick - last_jump_tick >= slime.jump_cooldown:
                prey, _ = food.nearest(x, y, slime.jump_distance)
                if prey is not None and food.remove(prey):
                    x, y = prey.pos
                    energy += prey.energy - config.JUMP_COST
                    last_jump_tick = tick
                    state = SlimeState.JUMPING
                    report.jumps += 1

        # write back
        slime.x, slime.y = x, y
        slime.heading = heading
        slime.energy = energy
        slime.state = state
        slime.last_jump_tick = last_jump_tick
        if bred:
            slime.last_breed_tick = tick

        # 6. evolution
        if slime.energy >= slime.next_evolution:
            slime.next_evolution = evolve(slime.skills, slime.skill_path, slime.next_evolution)
            report.evolutions += 1
            self.evolutions += 1
            logger.debug(
                "tick %d: slime evolved %s -> %d",
                tick, slime.skill_path.name.lower(), slime.skills.get(slime.skill_path),
            )

"""
slime_sim module: render/panel.py

Settings panel model: a list of numeric fields bound to the live settings
dataclasses. The renderer draws it; the main loop moves the selection and
nudges values. Kept free of pygame so it can be exercised headless.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Any, List, Optional

from world.world import SimulationSettings

logger = logging.getLogger(__name__)


@dataclass
class PanelField:
    """
    label:
      - text shown in the panel
    target / attr:
      - object and attribute the field edits
    index:
      - element of a (min, max) tuple attribute, or None for scalars
    step:
      - amount added/subtracted per key press
    integer:
      - round to int after each edit
    """
    label: str
    target: Any
    attr: str
    step: float
    index: Optional[int] = None
    integer: bool = False

    def get(self) -> float:
        value = getattr(self.target, self.attr)
        if self.index is not None:
            return value[self.index]
        return value

    def set(self, value: float) -> None:
        if self.index is None:
            setattr(self.target, self.attr, value)
            return
        items = list(getattr(self.target, self.attr))
        items[self.index] = value
        setattr(self.target, self.attr, tuple(items))

    def nudge(self, direction: int) -> float:
        v = self.get() + direction * self.step
        if self.integer:
            v = int(round(v))
        else:
            v = round(v, 4)
        self.set(v)
        return v


def build_fields(settings: SimulationSettings) -> List[PanelField]:
    food = settings.food
    slimes = settings.slimes
    return [
        PanelField("Sim speed", settings, "sim_speed", 1, integer=True),
        PanelField("Food spawn interval", food, "spawn_interval", 1, integer=True),
        PanelField("Food cap", food, "limit", 10, integer=True),
        PanelField("Food energy min", food, "energy_range", 1.0, index=0),
        PanelField("Food energy max", food, "energy_range", 1.0, index=1),
        PanelField("Food speed min", food, "speed_range", 0.1, index=0),
        PanelField("Food speed max", food, "speed_range", 0.1, index=1),
        PanelField("Slime cap", slimes, "limit", 10, integer=True),
        PanelField("Slime start energy", slimes, "initial_energy", 5.0),
        PanelField("Slime speed", slimes, "speed_factor", 0.1),
        PanelField("Slime step cost", slimes, "step_cost", 0.01),
        PanelField("Slime vision", slimes, "vision_range", 5.0),
        PanelField("Jump cooldown", slimes, "jump_cooldown", 10, integer=True),
        PanelField("Jump distance", slimes, "jump_distance", 5.0),
        PanelField("Breeding cooldown", slimes, "breeding_cooldown", 10, integer=True),
        PanelField("Time cost interval", slimes, "time_cost_interval", 5, integer=True),
        PanelField("Vision strength", slimes, "vision_strength", 0.1),
        PanelField("Vision speed strength", slimes, "vision_speed_strength", 0.05),
        PanelField("Efficiency strength", slimes, "efficiency_strength", 0.1),
        PanelField("Jumper strength", slimes, "jumper_strength", 0.1),
    ]


class SettingsPanel:
    def __init__(self, settings: SimulationSettings):
        self.settings = settings
        self.fields = build_fields(settings)
        self.selected = 0
        self.visible = False

    def toggle(self) -> None:
        self.visible = not self.visible

    def select(self, delta: int) -> None:
        self.selected = (self.selected + delta) % len(self.fields)

    @property
    def current(self) -> PanelField:
        return self.fields[self.selected]

    def adjust(self, direction: int) -> bool:
        """
        Nudge the selected field. Edits that break validation are reverted.
        Returns True if the new value was kept.
        """
        f = self.current
        previous = f.get()
        f.nudge(direction)
        try:
            self.settings.validate()
        except ValueError as e:
            f.set(previous)
            logger.warning("rejected %s edit: %s", f.label, e)
            return False
        logger.debug("%s -> %s", f.label, f.get())
        return True

"""Pytest configuration and fixtures for slime_sim tests."""

import random

import pytest

from slime.controller import SlimeController
from slime.slime import SlimeSettings
from world.food import Food, FoodController, FoodSettings


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def food_ctrl(seeded_rng):
    """Stationary food on a 200x200 field, spawn check every tick."""
    settings = FoodSettings(spawn_interval=1, limit=50, energy_range=(5.0, 20.0), speed_range=(0.0, 0.0))
    return FoodController(200, 200, seeded_rng, settings)


@pytest.fixture
def slime_ctrl(seeded_rng):
    """Slime engine on a 200x200 field with starvation effectively disabled."""
    settings = SlimeSettings(time_cost_interval=10_000)
    return SlimeController(200, 200, seeded_rng, settings)


@pytest.fixture
def place_slime(slime_ctrl):
    def _place(x, y, energy=50.0, heading=0.0, tick=0):
        s = slime_ctrl.make_slime(x, y, tick)
        s.energy = energy
        s.heading = heading
        slime_ctrl.population.append(s)
        return s

    return _place


@pytest.fixture
def place_food(food_ctrl):
    def _place(x, y, energy=5.0):
        f = Food(x=x, y=y, energy=energy)
        food_ctrl.population.append(f)
        return f

    return _place

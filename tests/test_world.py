import pytest

import config
from slime.slime import SlimeSettings
from world.food import FoodSettings
from world.world import SimulationSettings, World


def _world(seed=1, **kw):
    return World.create(300, 200, initial_food=kw.pop("food", 20), initial_slimes=kw.pop("slimes", 6), seed=seed, **kw)


def test_create_seeds_populations():
    world = _world()
    assert world.tick == 0
    assert len(world.food.population) == 20
    assert len(world.slimes.population) == 6


def test_food_limit_caps_initial_food():
    world = World.create(300, 200, initial_food=50, initial_slimes=0, food_limit=10, seed=1)
    assert len(world.food.population) == 10
    assert world.settings.food.limit == 10


def test_invalid_food_limit_rejected():
    with pytest.raises(ValueError):
        World.create(300, 200, food_limit=-5)


def test_sim_speed_validated():
    with pytest.raises(ValueError):
        SimulationSettings(sim_speed=0)


def test_step_advances_clock_and_keeps_cap():
    world = _world(food=5)
    for expected in range(1, 400):
        world.step()
        assert world.tick == expected
        assert len(world.food.population) <= world.settings.food.limit


def test_advance_runs_sim_speed_ticks():
    world = _world()
    world.settings.sim_speed = 4
    assert world.advance() == 4
    assert world.tick == 4


def test_same_seed_same_run():
    a = _world(seed=99)
    b = _world(seed=99)
    for _ in range(300):
        a.step()
        b.step()
    assert a.snapshot() == b.snapshot()


def test_reset_restores_initial_state():
    world = _world()
    for _ in range(100):
        world.step()
    world.spawn_slime()
    world.reset()
    assert world.tick == 0
    assert len(world.food.population) == 20
    assert len(world.slimes.population) == 6
    assert world.slimes.births == world.slimes.deaths == 0
    assert world.food.last_spawn_tick == 0


def test_spawn_actions_respect_caps():
    settings = SimulationSettings(food=FoodSettings(limit=2), slimes=SlimeSettings(limit=1))
    world = World.create(100, 100, initial_food=0, initial_slimes=0, seed=3, settings=settings)
    assert world.spawn_food() is True
    assert world.spawn_food() is True
    assert world.spawn_food() is False
    assert world.spawn_slime() is True
    assert world.spawn_slime() is False


def test_snapshot_exposes_render_state():
    world = _world()
    snap = world.snapshot()
    assert len(snap.food) == 20
    assert len(snap.slimes) == 6
    view = snap.slimes[0]
    s = world.slimes.population[0]
    assert (view.x, view.y) == s.pos
    assert view.size == s.size
    assert view.vision_radius == pytest.approx(s.size + s.vision_range)
    assert sum(snap.skill_totals.values()) == 0
    assert snap.sim_time == pytest.approx(0.0)


def test_snapshot_is_detached_from_live_state():
    world = _world()
    snap = world.snapshot()
    world.slimes.population[0].x += 10.0
    assert snap.slimes[0].x != world.slimes.population[0].x


def test_inspect_hits_nearby_slime_only():
    world = World.create(400, 400, initial_food=0, initial_slimes=1, seed=5)
    s = world.slimes.population[0]
    hit = world.inspect(s.x + 1.0, s.y)
    assert hit is not None
    assert hit.energy == s.energy
    far_x = (s.x + 200.0) % 400
    assert world.inspect(far_x, s.y) is None


def test_resize_propagates_bounds():
    world = _world()
    world.resize(640, 480)
    assert (world.food.w, world.food.h) == (640, 480)
    assert (world.slimes.w, world.slimes.h) == (640, 480)


def test_sim_time_uses_ticks_per_second():
    world = _world()
    for _ in range(config.TICKS_PER_SECOND):
        world.step()
    assert world.snapshot().sim_time == pytest.approx(1.0)


def test_create_leaves_caller_settings_untouched():
    settings = SimulationSettings()
    world = World.create(300, 200, initial_food=5, initial_slimes=0, food_limit=7, settings=settings, seed=1)
    assert world.settings.food.limit == 7
    assert settings.food.limit == config.FOOD_LIMIT

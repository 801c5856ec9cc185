import main


def test_parse_args_defaults_and_overrides():
    args = main.parse_args(["--food", "7", "--slimes", "3", "--food-limit", "9", "--seed", "4", "--headless"])
    assert (args.food, args.slimes, args.food_limit, args.seed) == (7, 3, 9, 4)
    assert args.headless is True


def test_headless_run_reports_stats():
    args = main.parse_args(["--food", "20", "--slimes", "5", "--seed", "1", "--headless"])
    world = main.build_world(args)
    stats = main.run_headless(world, ticks=50, stats_interval=10)

    # 50 energy cannot run out in 50 ticks: step cost 0.1 plus one time-cost charge
    assert stats["tick"] == 50
    assert stats["deaths"] == 0
    assert stats["slimes"] >= 5
    assert stats["food"] <= world.settings.food.limit

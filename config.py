"""
Simulation tuning knobs.

Durations are in ticks; the host runs ``SIM_SPEED`` ticks per rendered frame.
"""

# Environment
SCREEN_W, SCREEN_H = 980, 720
FRAME_RATE = 60
TICKS_PER_SECOND = 60

# Runtime pacing
SIM_SPEED = 1  # simulation ticks per rendered frame
MAX_SIM_SPEED = 50

# Population controls
START_FOOD = 60
START_SLIMES = 12

# Food field
FOOD_SPAWN_INTERVAL = 12  # ticks between spawn checks (0.2s)
FOOD_LIMIT = 100
FOOD_ENERGY_RANGE = (5.0, 20.0)
FOOD_SPEED_RANGE = (0.3, 1.2)
FOOD_DRAW_RADIUS = 3.0

# Slime defaults (mutable at runtime through the settings panel)
SLIME_LIMIT = 200
SLIME_SPEED_FACTOR = 1.8
SLIME_INITIAL_ENERGY = 50.0
SLIME_STEP_COST = 0.1
SLIME_VISION_RANGE = 45.0
SLIME_JUMP_COOLDOWN = 120  # ticks (2s)
SLIME_JUMP_DISTANCE = 90.0
SLIME_BREEDING_COOLDOWN = 300  # ticks (5s)
SLIME_TIME_COST_INTERVAL = 30  # ticks (0.5s), each costs 1 energy

# Skill strengths: modifier = 1 + level / MAX_SKILL_LEVEL * strength
VISION_STRENGTH = 1.0
VISION_SPEED_STRENGTH = 0.25
EFFICIENCY_STRENGTH = 1.0
JUMPER_STRENGTH = 1.0

# Energy economy
FREE_MOVEMENT_THRESHOLD = 5.0  # below this, moving costs nothing
ABUNDANT_ENERGY = 100.0  # step cost is multiplied by max(1, energy / this)
JUMP_REQUIREMENT = 20.0
JUMP_COST = 5.0
BREEDING_REQUIREMENT = 100.0

# Evolution
EVOLVE_STEP = 50.0
MAX_SKILL_LEVEL = 10

# Size mapping: size = clamp(energy / SIZE_ENERGY_RATIO, SIZE_MIN, SIZE_MAX)
SIZE_ENERGY_RATIO = 10.0
SIZE_MIN = 2.5
SIZE_MAX = 30.0

"""
slime_sim module: render/colors.py

Central color palette.
"""

BG = (0, 0, 0)
TEXT = (235, 235, 235)
TEXT_DIM = (150, 150, 160)
HIGHLIGHT = (255, 210, 90)

FOOD = (40, 220, 70)

SLIME_NORMAL = (220, 50, 50)
SLIME_JUMPING = (255, 150, 40)
SLIME_BREEDING = (255, 110, 200)

HOVER = (255, 20, 148, 70)

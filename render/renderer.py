"""
slime_sim module: render/renderer.py

Pygame rendering of world snapshots (top-down).
"""

from __future__ import annotations
import pygame

from render import colors
from render.panel import SettingsPanel
from slime.skills import SkillKind
from slime.slime import SlimeState
from world.world import FoodView, SlimeView, WorldSnapshot

_STATE_COLORS = {
    SlimeState.NORMAL: colors.SLIME_NORMAL,
    SlimeState.JUMPING: colors.SLIME_JUMPING,
    SlimeState.BREEDING: colors.SLIME_BREEDING,
}


def draw_food(screen: pygame.Surface, food: tuple[FoodView, ...]) -> None:
    for f in food:
        pygame.draw.circle(screen, colors.FOOD, (int(f.x), int(f.y)), int(f.size))


def draw_slimes(screen: pygame.Surface, slimes: tuple[SlimeView, ...]) -> None:
    for s in slimes:
        col = _STATE_COLORS.get(s.state, colors.SLIME_NORMAL)
        pygame.draw.circle(screen, col, (int(s.x), int(s.y)), max(1, int(s.size)))


def draw_hover(screen: pygame.Surface, view: SlimeView) -> None:
    # translucent vision disc needs its own alpha surface
    r = int(view.vision_radius)
    overlay = pygame.Surface((2 * r + 2, 2 * r + 2), pygame.SRCALPHA)
    pygame.draw.circle(overlay, colors.HOVER, (r + 1, r + 1), r)
    screen.blit(overlay, (int(view.x) - r - 1, int(view.y) - r - 1))

    font = pygame.font.Font(None, 18)
    skills = " ".join(f"{k.name[0]}{lvl}" for k, lvl in view.skills.items())
    lines = [
        f"E:{view.energy:.1f}",
        f"{skills} ({view.skill_path.name.lower()})",
    ]
    y = view.y - r - 4 - 14 * len(lines)
    for line in lines:
        txt = font.render(line, True, colors.TEXT)
        screen.blit(txt, (view.x - txt.get_width() / 2, y))
        y += 14


def draw_hud(screen: pygame.Surface, snap: WorldSnapshot) -> None:
    font = pygame.font.Font(None, 22)

    totals = snap.skill_totals
    lines = [
        f"Slimes: {len(snap.slimes)}",
        f"Foods: {len(snap.food)}",
        f"Births: {snap.births}  Deaths: {snap.deaths}  Evolutions: {snap.evolutions}",
        (
            f"Skills: vision {totals.get(SkillKind.VISION, 0)}"
            f"  efficiency {totals.get(SkillKind.EFFICIENCY, 0)}"
            f"  jumper {totals.get(SkillKind.JUMPER, 0)}"
        ),
    ]

    y = 8
    for line in lines:
        txt = font.render(line, True, colors.TEXT)
        screen.blit(txt, (8, y))
        y += 18

    clock_txt = font.render(f"{snap.sim_time:.1f}s  tick {snap.tick}  x{snap.sim_speed}", True, colors.TEXT_DIM)
    screen.blit(clock_txt, (screen.get_width() - clock_txt.get_width() - 8, 8))


def draw_panel(screen: pygame.Surface, panel: SettingsPanel) -> None:
    if not panel.visible:
        return
    font = pygame.font.Font(None, 20)
    x = screen.get_width() - 260
    y = 32
    for i, f in enumerate(panel.fields):
        col = colors.HIGHLIGHT if i == panel.selected else colors.TEXT_DIM
        txt = font.render(f"{f.label}: {f.get():g}", True, col)
        screen.blit(txt, (x, y))
        y += 17


def draw_world(
    screen: pygame.Surface,
    snap: WorldSnapshot,
    hovered: SlimeView | None = None,
    panel: SettingsPanel | None = None,
) -> None:
    screen.fill(colors.BG)
    draw_food(screen, snap.food)
    draw_slimes(screen, snap.slimes)
    if hovered is not None:
        draw_hover(screen, hovered)
    draw_hud(screen, snap)
    if panel is not None:
        draw_panel(screen, panel)

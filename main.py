"""
Live creature viewer: a generated creature idles on screen (blinks, sways,
opens its mouth when hovered). SPACE or a click grows a new one.
"""

from __future__ import annotations
import colorsys
import logging
from pathlib import Path
import random
from typing import Optional, Tuple

import pygame
import typer

import config
from creature.generation import MAX_MOUTH_CURVE, MIN_MOUTH_CURVE, generate
from creature.nodes import Node, NodeType, find_node
from render import colors
from render.animation import IdleAnimator
from render.renderer import draw_creature, draw_hud
from render.svg import render_svg

logger = logging.getLogger(__name__)

app = typer.Typer(help="Procedural creature viewer")

SMILING_FACE = "\U0001F60A"
SLIGHTLY_SMILING_FACE = "\U0001F642"
NEUTRAL_FACE = "\U0001F610"
SLIGHTLY_FROWNING_FACE = "\U0001F641"
FROWNING_FACE = "☹️"


def next_seed() -> int:
    return random.randrange(config.SEED_MAX)


def mood_for_curve(curve: float) -> str:
    # positive curve bends the lip down
    if curve > 0.6 * MAX_MOUTH_CURVE:
        return FROWNING_FACE
    if curve > 0.2 * MAX_MOUTH_CURVE:
        return SLIGHTLY_FROWNING_FACE
    if curve > 0.05 * MIN_MOUTH_CURVE:
        return NEUTRAL_FACE
    if curve > 0.6 * MIN_MOUTH_CURVE:
        return SLIGHTLY_SMILING_FACE
    return SMILING_FACE


def mood_for(creature: Node) -> str:
    mouth = find_node(creature, NodeType.MOUTH)
    curve = mouth.curve if mouth is not None and mouth.curve is not None else 0.0
    return mood_for_curve(curve)


def text_color(creature: Node, max_value: float = 0.9) -> Tuple[int, int, int]:
    """Root color with its HSV value capped, so text stays readable."""
    if creature.color is None:
        return colors.HUD_TEXT
    r, g, b = (c / 255.0 for c in creature.color.to_rgb())
    h, s, v = colorsys.rgb_to_hsv(r, g, b)
    r, g, b = colorsys.hsv_to_rgb(h, s, min(v, max_value))
    return (round(r * 255), round(g * 255), round(b * 255))


def caption_for(seed: int, creature: Node) -> str:
    return f"{mood_for(creature)} creature #{seed}"


def run_viewer(seed: Optional[int]) -> None:
    pygame.init()
    screen = pygame.display.set_mode((config.SCREEN_W, config.SCREEN_H))
    clock = pygame.time.Clock()

    def load(new_seed: int):
        creature = generate(new_seed)
        pygame.display.set_caption(caption_for(new_seed, creature))
        logger.info(f"Showing creature seed={new_seed}")
        return creature, IdleAnimator(creature)

    seed = next_seed() if seed is None else seed
    creature, animator = load(seed)

    running = True
    while running:
        dt_ms = clock.tick(config.FPS)

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
            elif (e.type == pygame.KEYDOWN and e.key == pygame.K_SPACE) or e.type == pygame.MOUSEBUTTONDOWN:
                seed = next_seed()
                creature, animator = load(seed)

        animator.update(dt_ms)

        screen.fill(colors.BG)
        mouth = draw_creature(screen, creature, animator.pose())
        draw_hud(screen, {"seed": seed, "text_color": text_color(creature)})

        mx, my = pygame.mouse.get_pos()
        animator.set_pointer_over_mouth(mouth is not None and mouth.contains(mx, my))

        pygame.display.flip()

    pygame.quit()


@app.command()
def main(
    seed: Optional[int] = typer.Option(None, help="Creature seed (random when omitted)"),
    svg: Optional[Path] = typer.Option(None, help="Write the creature as SVG to this path and exit"),
    log_level: str = typer.Option(config.LOG_LEVEL, help="Logging level"),
) -> None:
    """Show a procedurally generated creature."""
    logging.basicConfig(level=log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    if svg is not None:
        seed = next_seed() if seed is None else seed
        svg.write_text(render_svg(generate(seed)), encoding="utf-8")
        logger.info(f"Wrote creature seed={seed} to {svg}")
        return

    run_viewer(seed)


if __name__ == "__main__":
    app()

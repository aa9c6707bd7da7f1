"""
paddleball.render
=================
Drawing. The simulation never touches pygame; these helpers read a state
object and push it through a renderer exposing three primitives:

* ``fill_rect(x, y, w, h, colour)``
* ``fill_circle(x, y, r, colour)``
* ``fill_text(text, x, y, font, align, colour)`` – *font* is a point size
"""

from __future__ import annotations

import pygame

from paddleball.constants import *


class PygameRenderer:
    """Renderer primitives over a ``pygame.Surface``."""

    def __init__(self, surface: pygame.Surface):
        self.surface = surface
        self._fonts: dict[int, pygame.font.Font] = {}

    def fill_rect(self, x, y, w, h, colour):
        pygame.draw.rect(self.surface, colour, pygame.Rect(round(x), round(y), round(w), round(h)))

    def fill_circle(self, x, y, r, colour):
        pygame.draw.circle(self.surface, colour, (round(x), round(y)), round(r))

    def fill_text(self, text, x, y, font, align, colour):
        img = self._font(font).render(str(text), True, colour)
        if align == "center":
            x -= img.get_width() / 2
        elif align == "right":
            x -= img.get_width()
        # canvas-style baseline: y is the bottom of the text
        self.surface.blit(img, (round(x), round(y - img.get_height())))

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]


# ---------------------------------------------------------------------------
# Per-game scenes
# ---------------------------------------------------------------------------
def draw_breakout(state, renderer) -> None:
    renderer.fill_rect(0, 0, state.width, state.height, BLACK)
    ball = state.ball
    renderer.fill_rect(ball.x, ball.y, ball.width, ball.height, ball.colour)
    p = state.player
    renderer.fill_rect(p.x, p.y, p.width, p.height, p.colour)
    for block in state.blocks:
        renderer.fill_rect(block.x, block.y, block.width, block.height, block.colour)

    if state.won:
        cx, cy = state.centre
        renderer.fill_text(WIN_TEXT, cx, cy, WIN_FONT_SIZE, "center", WHITE)


def draw_net(state, renderer) -> None:
    x = state.width / 2 - NET_WIDTH / 2
    for y in range(0, int(state.height) + 1, 15):
        renderer.fill_rect(x, y, NET_WIDTH, 10, WHITE)


def draw_pong(state, renderer) -> None:
    renderer.fill_rect(0, 0, state.width, state.height, BLACK)
    draw_net(state, renderer)
    renderer.fill_text(state.player_score, 10, 40, SCORE_FONT_SIZE, "left", WHITE)
    renderer.fill_text(state.computer_score, state.width / 2 + 10, 40,
                       SCORE_FONT_SIZE, "left", WHITE)
    for p in state.paddles:
        renderer.fill_rect(p.x, p.y, p.width, p.height, p.colour)
    ball = state.ball
    renderer.fill_circle(ball.x, ball.y, ball.radius, ball.colour)


SCENES = {
    "breakout": draw_breakout,
    "pong": draw_pong,
}

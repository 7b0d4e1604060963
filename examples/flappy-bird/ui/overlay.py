"""Menu and game-over overlays with a start/restart button."""
from __future__ import annotations

import pygame

from flappy import GameState, Snapshot
from ui.constants import (
    BUTTON,
    BUTTON_HOVER,
    BUTTON_TEXT,
    OVERLAY_DIM,
    SCREEN_H,
    SCREEN_W,
    TEXT_COLOR,
    TEXT_DIM,
)

BUTTON_RECT = pygame.Rect(0, 0, 160, 44)
BUTTON_RECT.center = (SCREEN_W // 2, SCREEN_H // 2 + 70)


class Overlay:
    """Driven purely by the snapshot's state; hidden while playing."""

    def __init__(self) -> None:
        self._title_font = pygame.font.SysFont("arial", 32, bold=True)
        self._font = pygame.font.SysFont("arial", 18)
        self._dim = pygame.Surface((SCREEN_W, SCREEN_H), pygame.SRCALPHA)
        self._dim.fill(OVERLAY_DIM)

    def button_hit(self, state: GameState, pos: tuple[int, int]) -> bool:
        return state is not GameState.PLAYING and BUTTON_RECT.collidepoint(pos)

    def draw(self, surface: pygame.Surface, snap: Snapshot) -> None:
        if snap.state is GameState.PLAYING:
            return

        surface.blit(self._dim, (0, 0))
        cx, cy = SCREEN_W // 2, SCREEN_H // 2

        if snap.state is GameState.MENU:
            title = "Flappy Bird"
            lines = ["Click or press SPACE to start!"]
            label = "Start Game"
        else:
            title = "Game Over!"
            lines = [f"Score: {snap.score}", f"High Score: {snap.high_score}"]
            label = "Play Again"

        text = self._title_font.render(title, True, TEXT_COLOR)
        surface.blit(text, text.get_rect(center=(cx, cy - 60)))
        for i, line in enumerate(lines):
            text = self._font.render(line, True, TEXT_DIM)
            surface.blit(text, text.get_rect(center=(cx, cy - 15 + i * 26)))

        hover = BUTTON_RECT.collidepoint(pygame.mouse.get_pos())
        pygame.draw.rect(
            surface, BUTTON_HOVER if hover else BUTTON, BUTTON_RECT, border_radius=6
        )
        text = self._font.render(label, True, BUTTON_TEXT)
        surface.blit(text, text.get_rect(center=BUTTON_RECT.center))

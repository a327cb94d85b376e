"""Track, handle and status bar rendering."""
from __future__ import annotations

import pygame

from drag_verify import WidgetView

from ui.constants import (
    HANDLE_PAD,
    HANDLE_W,
    INVERTED_TEXT,
    SCREEN_H,
    SCREEN_W,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
    TITLE_COLOR,
    TONE_COLORS,
    TRACK_H,
    TRACK_W,
    TRACK_X,
    TRACK_Y,
)

_ICONS = {"arrow": ">", "check": "OK", "alert": "!"}


def handle_rect(view: WidgetView) -> pygame.Rect:
    """Screen rect of the handle for the given view state."""
    left = TRACK_X + HANDLE_PAD + view.handle_left_pct / 100 * TRACK_W
    return pygame.Rect(int(left), TRACK_Y + HANDLE_PAD, HANDLE_W, TRACK_H - 2 * HANDLE_PAD)


def draw_track(surface: pygame.Surface, font: pygame.font.Font, view: WidgetView) -> None:
    border, fill, handle, text = TONE_COLORS[view.tone]
    track = pygame.Rect(TRACK_X, TRACK_Y, TRACK_W, TRACK_H)

    title = font.render("Human verification", True, TITLE_COLOR)
    surface.blit(title, (TRACK_X, TRACK_Y - 40))

    pygame.draw.rect(surface, (249, 250, 251), track, border_radius=16)
    if view.fill_pct > 0:
        filled = track.copy()
        filled.width = int(TRACK_W * view.fill_pct / 100)
        pygame.draw.rect(surface, fill, filled, border_radius=16)
    pygame.draw.rect(surface, border, track, width=2, border_radius=16)

    label_color = INVERTED_TEXT if view.text_inverted else text
    label = font.render(view.message, True, label_color)
    surface.blit(label, label.get_rect(center=track.center))

    rect = handle_rect(view)
    pygame.draw.rect(surface, handle, rect, border_radius=12)
    icon = font.render(_ICONS[view.icon], True, TITLE_COLOR if view.tone == "neutral" else INVERTED_TEXT)
    surface.blit(icon, icon.get_rect(center=rect.center))


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font, phase: str, progress: float, redirect: str | None) -> None:
    y = SCREEN_H - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    info = font.render(f"{phase}  {progress:5.1f}%", True, TEXT_COLOR)
    surface.blit(info, (10, y + 8))
    hint = f"-> {redirect}" if redirect else "Esc quit"
    text = font.render(hint, True, TEXT_DIM)
    surface.blit(text, (SCREEN_W - text.get_width() - 10, y + 8))

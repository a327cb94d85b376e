"""Verify Demo - drag-to-verify widget in a pygame window.

Exercises VerifyWidget with either input adapter, the signal bus and a
redirect sink.

Controls:
  Drag    Slide the handle to the right edge to verify
  Esc     Quit

Redirect targets come from PUBLIC_SUCCESS_URL / PUBLIC_FAIL_URL unless
given on the command line.
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from drag_verify import (
    BrowserRedirectSink,
    CaptureTarget,
    ListenerTarget,
    LoggingRedirectSink,
    Phase,
    PlatformCapabilities,
    TrackGeometry,
    VerifyConfig,
    VerifyWidget,
)
from drag_verify.bus import REDIRECTED, STATE_CHANGED

from host.bridge import PygameBridge
from ui.constants import (
    BG_COLOR,
    FPS,
    HANDLE_PAD,
    HANDLE_W,
    PANEL_BG,
    SCREEN_H,
    SCREEN_W,
    STATUS_H,
    TRACK_W,
    TRACK_X,
)
from ui.track import draw_status_bar, draw_track, handle_rect

logger = logging.getLogger("verify-demo")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Verify Demo - drag-verify visual demo")
    p.add_argument("--success-url", default=None, help="Redirect after verification")
    p.add_argument("--failure-url", default=None, help="Redirect after failure")
    p.add_argument("--mouse-touch", action="store_true",
                   help="Use the mouse/touch adapter instead of pointer events")
    p.add_argument("--open-browser", action="store_true",
                   help="Open the redirect target in a web browser")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p.parse_args()


def track_geometry() -> TrackGeometry:
    return TrackGeometry(origin_x=TRACK_X, width=TRACK_W, handle_width=HANDLE_W + 2 * HANDLE_PAD)


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    overrides = {}
    if args.success_url is not None:
        overrides["success_url"] = args.success_url
    if args.failure_url is not None:
        overrides["failure_url"] = args.failure_url
    config = VerifyConfig.from_env(**overrides)

    sink = BrowserRedirectSink() if args.open_browser else LoggingRedirectSink()
    widget = VerifyWidget(
        config,
        sink,
        track_geometry,
        capabilities=PlatformCapabilities(pointer_events=not args.mouse_touch),
    )

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Verify Demo - drag-verify")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("sans", 18)
    small = pygame.font.SysFont("monospace", 13)

    handle, document = CaptureTarget("handle"), ListenerTarget("document")
    widget.mount(handle, document)
    bridge = PygameBridge(
        handle,
        document,
        lambda: handle_rect(widget.view()),
        (SCREEN_W, SCREEN_H),
        pointer_events=not args.mouse_touch,
    )

    redirect: list[str] = []

    def _on_state(signal: str, data: dict) -> None:
        # Keep the cursor inside the window while a drag is in progress.
        pygame.event.set_grab(data["phase"] is Phase.DRAGGING)

    widget.subscribe(STATE_CHANGED, _on_state)
    widget.subscribe(REDIRECTED, lambda s, d: redirect.append(d["url"]))

    running = True
    while running:
        elapsed_ms = clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            elif widget.mounted:
                bridge.feed(event)

        # --- Timers ---
        widget.advance(elapsed_ms)

        # --- Render ---
        screen.fill(BG_COLOR)
        pygame.draw.rect(screen, PANEL_BG, (16, 16, SCREEN_W - 32, SCREEN_H - STATUS_H - 32),
                         border_radius=20)
        draw_track(screen, font, widget.view())
        draw_status_bar(screen, small, widget.phase.name, widget.progress,
                        redirect[0] if redirect else None)
        pygame.display.flip()

    widget.unmount()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()

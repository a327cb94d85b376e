"""Layout constants and color definitions."""

FPS = 60

# Layout dimensions
SCREEN_W = 560
SCREEN_H = 260
STATUS_H = 32

TRACK_W = 440
TRACK_H = 64
TRACK_X = (SCREEN_W - TRACK_W) // 2
TRACK_Y = 110
HANDLE_W = 48
HANDLE_PAD = 8

# Colors
BG_COLOR = (20, 24, 34)
PANEL_BG = (245, 246, 250)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
TITLE_COLOR = (30, 40, 60)

# tone -> (border, fill, handle, text)
TONE_COLORS: dict[str, tuple[tuple[int, int, int], ...]] = {
    "neutral": ((200, 204, 212), (191, 219, 254), (255, 255, 255), (75, 85, 99)),
    "active": ((96, 165, 250), (147, 197, 253), (59, 130, 246), (75, 85, 99)),
    "success": ((52, 211, 153), (110, 231, 183), (16, 185, 129), (4, 120, 87)),
    "failure": ((248, 113, 113), (252, 165, 165), (239, 68, 68), (185, 28, 28)),
}
INVERTED_TEXT = (255, 255, 255)

"""Layout constants and color definitions."""

from flappy.config import CANVAS_HEIGHT, CANVAS_WIDTH

# Timing
FPS = 60

# Layout
SCREEN_W = CANVAS_WIDTH
SCREEN_H = CANVAS_HEIGHT
GROUND_H = 20
HEADER_H = 24
CAP_H = 20
CAP_OVERHANG = 5
EYE_R = 3
BEAK_LEN = 8

# Colors
SKY = (135, 206, 235)
PIPE = (34, 139, 34)
PIPE_CAP = (50, 205, 50)
BIRD = (255, 215, 0)
BIRD_EYE = (0, 0, 0)
BIRD_BEAK = (255, 140, 0)
GROUND = (139, 69, 19)
SCORE_COLOR = (255, 255, 255)
HEADER_BG = (243, 244, 246)
HEADER_TEXT = (55, 65, 81)
OVERLAY_DIM = (0, 0, 0, 128)
TEXT_COLOR = (255, 255, 255)
TEXT_DIM = (200, 200, 200)
BUTTON = (234, 179, 8)
BUTTON_HOVER = (202, 138, 4)
BUTTON_TEXT = (20, 20, 20)

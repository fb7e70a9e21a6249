"""
creature_sim module: render/colors.py

Fixed colors used by the renderers (creature parts carry their own).
"""

BG = (245, 242, 236)

EYE_WHITE = (255, 255, 255)
EYE_STROKE = (100, 100, 100)
PUPIL = (0, 0, 0)
HIGHLIGHT = (255, 255, 255)
MOUTH_OPEN = (0, 0, 0)

HUD_TEXT = (60, 60, 60)


def rgb_string(rgb) -> str:
    return "rgb(%d, %d, %d)" % rgb

"""
Viewer tuning knobs.
"""

# Seeds handed out for "new creature"
SEED_MAX = 2 ** 31

# Window
SCREEN_W, SCREEN_H = 600, 500
FPS = 60

# SVG-style viewBox (min_x, min_y, width, height) mapped onto the window
VIEW_BOX = (-300.0, -300.0, 600.0, 500.0)

# Blinking (ms): open spells are long, closed spells short
BLINK_OPEN_MS = (500, 5000)
BLINK_CLOSED_MS = (200, 300)

# Joint sway: each joint picks a new angle every SWAY_INTERVAL_MS
SWAY_INTERVAL_MS = (300, 500)

# Mouth opens while the pointer is within this radius (viewBox units)
MOUTH_HOVER_RADIUS = 30.0
MOUTH_OPEN_MIN_RADIUS = 15.0

# Ellipses are drawn as polygons with this many points
ELLIPSE_SEGMENTS = 32

LOG_LEVEL = "INFO"

"""
Shared constants for the simulation (scaled demo units, not SI).

G and the masses are scaled together so that the seeded binary stays bound and
visually stable at TIME_STEP. Tune them as a set.
"""

# Gravity
G = 6.6743e-11  # scaled gravitational constant
TIME_STEP = 0.5  # simulation time per tick

# Spawned bodies
NEW_ANCHOR_MASS = 1e11
NEW_SATELLITE_MASS = 1e9
NEW_ANCHOR_COLOR = "white"
NEW_SATELLITE_COLOR = "magenta"

# Visual sizes (world units)
ANCHOR_RADIUS = 10.0
SATELLITE_RADIUS = 5.0

# Window
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
FRAMERATE_LIMIT = 144
BACKGROUND_COLOR = "black"

"""
Timeline Constants

Central location for timeline dimensions and timing constants.
Colors are defined in core/style.py for centralized styling.
"""

# =============================================================================
# Time Range / Zoom
# =============================================================================

DEFAULT_STEP_SIZE = 1  # Time step, multiplies the draw range and pan amount
DEFAULT_DRAW_RANGE = 500  # Visible time range at zoom 100 (multiplied by step size)
DEFAULT_ZOOM_VALUE = 100  # Percentage, 100 = default range
ZOOM_FACTOR = 1.001  # Zoom multiplier per wheel delta unit (factor ** |delta|)
PAN_FACTOR = 1  # Pan = delta * PAN_FACTOR * step size

# =============================================================================
# Dimensions
# =============================================================================

LABEL_WIDTH_OF_TIMELINE = 0.25  # Proportion of the canvas used by the layer label column
MAX_LAYER_HEIGHT = 60
TIMELINE_OBJECT_HEIGHT = 0.8  # Object height as a proportion of the row height
MIN_OBJECT_WIDTH = 1  # Visible rectangles are never narrower than this (pixels)

THICKNESS_PLAYHEAD = 5
THICKNESS_LINE = 1
THICKNESS_TIMELINE_OBJECT_BORDER = 1

# =============================================================================
# Sentinels
# =============================================================================

OFFSCREEN_LEFT = -1  # time_to_x() result for times before the visible window
NOT_OVER_TIMELINE = -1  # x_to_time() / x_ratio() result outside the timeline area

# =============================================================================
# Playback
# =============================================================================

DEFAULT_PLAYHEAD_SPEED = 1  # Time units per second

# Target 60 FPS for smooth playhead animation
PLAYHEAD_UPDATE_INTERVAL_MS = 16  # ~60 FPS (1000ms / 60 = 16.67ms)

"""Default parameter values for the Sorting Visualizer.

These constants are used as `Field(default=...)` values in the Pydantic
config schemas and by the core engine.  They live here (in the schemas layer)
rather than in `core/constants.py` so that `schemas` does not depend on `core`.
"""

# =============================================================================
# ARRAY GENERATION
# =============================================================================
# Generated values are uniform integers in [VALUE_MIN, VALUE_MIN + VALUE_SPAN - 1],
# i.e. [10, 309].  User-supplied values are clamped to CUSTOM_VALUE_CAP.
VALUE_MIN = 10
VALUE_SPAN = 300
CUSTOM_VALUE_CAP = 300

DEFAULT_ARRAY_SIZE = 50
MIN_ARRAY_SIZE = 1
MAX_ARRAY_SIZE = 1000

# =============================================================================
# PACING
# =============================================================================
# Ordered slowest -> fastest.  The index is what the UI slider stores.
SPEED_PRESETS: tuple[tuple[str, int], ...] = (
    ("Slow", 200),
    ("Normal", 100),
    ("Fast", 50),
    ("Very Fast", 25),
    ("Lightning", 10),
)
DEFAULT_SPEED_INDEX = len(SPEED_PRESETS) // 2  # middle preset

# Finalization flourish: only every k-th element waits, with a short delay.
FINALIZE_STRIDE = 3
FINALIZE_DELAY_MS = 30

# =============================================================================
# SOUND
# =============================================================================
# tone = TONE_BASE_HZ + value                  (algorithm steps)
# tone = FINALE_BASE_HZ + FINALE_SCALE * value (finalization pass)
DEFAULT_SOUND_ENABLED = True
TONE_BASE_HZ = 200.0
FINALE_BASE_HZ = 400.0
FINALE_SCALE = 2.0

# =============================================================================
# SELECTION
# =============================================================================
DEFAULT_ALGORITHM = "bubble"
DEFAULT_VISUAL_MODE = "bars"

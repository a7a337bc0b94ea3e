"""Game-wide constants shared by the engine, the CLI and the frontends."""

from __future__ import annotations

# -- board sizes ----------------------------------------------------------------

MIN_SIZE = 2
MAX_SIZE = 12
DEFAULT_SIZE = 4

# Sizes offered by the frontend menus (the engine itself accepts any >= MIN_SIZE).
MENU_SIZES: tuple[int, ...] = (3, 4, 5, 6, 7, 8)

# -- engine ---------------------------------------------------------------------

# A scramble walks the blank 150 * size random steps away from the goal state.
SHUFFLE_MOVES_PER_SIZE = 150

# Seconds between clock ticks.
TICK_INTERVAL = 1.0

# -- logging --------------------------------------------------------------------

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"

"""
Configuration constants for the graph search engine.

Everything tunable lives here. The iteration bound is deliberately not
exposed to callers of the engine.
"""

import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================

PROJECT_ROOT = Path(__file__).parent

# Folder holding sample graph files for the command line tool
GRAPH_FOLDER = PROJECT_ROOT / "graphs"

# =============================================================================
# Engine Configuration
# =============================================================================

# Safety brake: a run that needs more loop iterations than this ends with
# a limit_reached snapshot instead of looping forever
MAX_ITERATIONS = 1000

DEFAULT_STRATEGY = "BFS"

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: Builders, the IO layer and the CLI read the same geometry
   constants (full turn, UV centre, flat normal) from one place.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find assets (preset catalogs) when the app is frozen into an executable.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    DEFAULT_PRESETS_PATH (str): Absolute path to the bundled shape presets.
"""
import logging
import math
import os
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/spritemesh/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


# Global Constants
ASSETS_PATH: str = get_resource_path("assets")
DEFAULT_PRESETS_PATH: str = os.path.join(ASSETS_PATH, "presets_default.json")

# Geometry
FULL_TURN: float = 2.0 * math.pi
UV_CENTER: float = 0.5
FLAT_NORMAL: tuple[float, float, float] = (0.0, 0.0, -1.0)

# Fans need at least two rim vertices
MIN_SIDES: int = 2
DEFAULT_SIDES: int = 32

# Resolution used when a circle collider has to be drawn as a polyline
COLLIDER_CIRCLE_SEGMENTS: int = 64

if not os.path.exists(ASSETS_PATH):
    logger.warning(f"Assets path not found at {ASSETS_PATH}")

"""
game_settings.py
----------------
Centralized constants for the window, input, animation and player systems.
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Screen and window configuration."""
    WIDTH: int = 1920
    HEIGHT: int = 1080
    FPS: int = 60
    CAPTION: str = "Lunar Posadas"
    BACKGROUND_COLOR = (18, 18, 28)


# ===========================================================
# Input Configuration
# ===========================================================

class Input:
    """Controller and input configuration."""
    CONTROLLER_DEADZONE: float = 0.2


# ===========================================================
# Animation
# ===========================================================

class Animation:
    """Playback and classification defaults."""
    # Vector components at or below this magnitude classify as zero
    DIRECTION_TOLERANCE: float = 1e-3
    DEFAULT_FRAME_TIME: float = 0.5
    SAMPLING: str = "nearest"


# ===========================================================
# Assets
# ===========================================================

class Assets:
    """Asset root, resolved against the working directory."""
    ROOT: str = "assets"


# ===========================================================
# Rendering Layers
# ===========================================================

class Layers:
    """Z-order for rendering."""
    PLAYER: int = 400


# ===========================================================
# Player Defaults
# ===========================================================

class Player:
    """Player configuration defaults."""
    SPEED: float = 200.0
    SPAWN = (0.0, 0.0)

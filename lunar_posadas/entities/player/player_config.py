"""
player_config.py
----------------
Handles player configuration loading with default fallbacks.

This ensures the player always spawns even if player.json is missing or
incomplete.
"""

from lunar_posadas.core.runtime.game_settings import Player as PlayerDefaults
from lunar_posadas.core.services.config_manager import load_config
from lunar_posadas.graphics.animations.animation_ids import DEFAULT_ANIMATION

# ===========================================================
# Default Fallback Configuration
# ===========================================================
DEFAULT_CONFIG = {
    "core_attributes": {
        "speed": PlayerDefaults.SPEED,       # World units per second
        "spawn": list(PlayerDefaults.SPAWN), # World position, origin at screen centre
    },
    "animation": {
        "initial": DEFAULT_ANIMATION.value,  # Shown until the first movement
    },
}


# ===========================================================
# Load JSON + Apply Fallbacks
# ===========================================================
def load_player_config(filename="player.json"):
    """
    Load player.json merged over DEFAULT_CONFIG.

    Returns:
        dict: Complete player configuration dictionary.
    """
    return load_config(filename, default_dict=DEFAULT_CONFIG)

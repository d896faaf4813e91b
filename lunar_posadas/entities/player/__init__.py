"""
Player entity package.

Exports:
    Player              - The controllable, animated character
    load_player_config  - player.json merged over defaults
"""

from lunar_posadas.entities.player.player_core import Player
from lunar_posadas.entities.player.player_config import load_player_config

__all__ = [
    'Player',
    'load_player_config',
]

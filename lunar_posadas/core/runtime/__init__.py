"""
Runtime configuration exports.

Provides game-wide constants. All exports are lightweight class constants
with no initialization overhead.
"""

from lunar_posadas.core.runtime.game_settings import (
    Display,
    Input,
    Animation,
    Assets,
    Layers,
    Player,
)

__all__ = [
    'Display',
    'Input',
    'Animation',
    'Assets',
    'Layers',
    'Player',
]

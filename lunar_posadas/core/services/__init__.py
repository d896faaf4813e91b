"""
Core services exports.

Provides configuration loading and input polling.
"""

from lunar_posadas.core.services.config_manager import load_config
from lunar_posadas.core.services.input_manager import InputManager

__all__ = [
    'load_config',
    'InputManager',
]

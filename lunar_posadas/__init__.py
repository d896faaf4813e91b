"""
Lunar Posadas: a 2D scene with one directionally animated player sprite.
"""

__version__ = "0.1.0"

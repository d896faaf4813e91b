"""
direction_classifier.py
-----------------------
Maps a movement vector and speed onto a directional animation.

Classification looks up the sign pair (sign(x), sign(y)) in a fixed sector
table. y grows away from the viewer. Up-diagonals get the side-back art,
down-diagonals reuse the plain side art.
"""

from typing import Optional, Tuple

from lunar_posadas.core.debug.debug_logger import DebugLogger
from lunar_posadas.core.runtime.game_settings import Animation
from lunar_posadas.graphics.animations.animation_ids import AnimationId, Facing


# (sign_x, sign_y) -> (facing family, mirrored)
# (0, 0) is absent: no input keeps the current animation.
SECTOR_TABLE = {
    (0, 1): (Facing.BACK, False),
    (0, -1): (Facing.FRONT, False),
    (1, 0): (Facing.SIDE, False),
    (1, -1): (Facing.SIDE, False),
    (-1, 0): (Facing.SIDE, True),
    (-1, -1): (Facing.SIDE, True),
    (1, 1): (Facing.SIDE_BACK, False),
    (-1, 1): (Facing.SIDE_BACK, True),
}


def sign_of(value: float, tolerance: float = Animation.DIRECTION_TOLERANCE) -> int:
    """-1, 0 or 1; magnitudes within tolerance count as zero."""
    if value > tolerance:
        return 1
    if value < -tolerance:
        return -1
    return 0


def classify(x: float, y: float, speed: float,
             tolerance: float = Animation.DIRECTION_TOLERANCE) -> Optional[Tuple[AnimationId, bool]]:
    """
    Classify one tick of movement.

    Args:
        x, y: Movement vector (need not be normalized)
        speed: 0 for idle, > 0 for walking; negative values are clamped to 0
        tolerance: Dead zone applied to each component

    Returns:
        (AnimationId, mirrored), or None for a zero vector, meaning the
        caller keeps its current animation and mirror flag.
    """
    if speed < 0:
        DebugLogger.warn(f"Negative speed {speed} clamped to 0", category="animation")
        speed = 0.0

    sector = SECTOR_TABLE.get((sign_of(x, tolerance), sign_of(y, tolerance)))
    if sector is None:
        return None

    facing, mirrored = sector
    return AnimationId.for_family(facing, speed > 0), mirrored

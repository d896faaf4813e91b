"""
animation_ids.py
----------------
Closed set of directional animation identifiers for the player sprite.
"""

from enum import Enum, IntEnum


class Facing(IntEnum):
    """Which way the sprite faces relative to the viewer."""

    FRONT = 0       # toward the viewer
    BACK = 1        # away from the viewer
    SIDE = 2        # right-facing art, mirrored for left
    SIDE_BACK = 3   # right-and-away art, mirrored for left-and-away


class AnimationId(Enum):
    """
    Every animation the player can show.

    Values are the keys used in animations.json.
    """

    IDLE_FRONT = "idle_front"
    IDLE_BACK = "idle_back"
    IDLE_SIDE = "idle_side"
    IDLE_SIDE_BACK = "idle_side_back"
    WALK_FRONT = "walk_front"
    WALK_BACK = "walk_back"
    WALK_SIDE = "walk_side"
    WALK_SIDE_BACK = "walk_side_back"

    @property
    def facing(self) -> Facing:
        return _FACING[self]

    @property
    def walking(self) -> bool:
        return self.value.startswith("walk_")

    @property
    def mirrorable(self) -> bool:
        """Only side families have mirrored variants."""
        return self.facing in (Facing.SIDE, Facing.SIDE_BACK)

    @classmethod
    def for_family(cls, facing: Facing, walking: bool) -> "AnimationId":
        """Return the idle or walking identifier of a facing family."""
        return _BY_FAMILY[(facing, walking)]


_FACING = {
    AnimationId.IDLE_FRONT: Facing.FRONT,
    AnimationId.IDLE_BACK: Facing.BACK,
    AnimationId.IDLE_SIDE: Facing.SIDE,
    AnimationId.IDLE_SIDE_BACK: Facing.SIDE_BACK,
    AnimationId.WALK_FRONT: Facing.FRONT,
    AnimationId.WALK_BACK: Facing.BACK,
    AnimationId.WALK_SIDE: Facing.SIDE,
    AnimationId.WALK_SIDE_BACK: Facing.SIDE_BACK,
}

_BY_FAMILY = {(facing, anim_id.walking): anim_id for anim_id, facing in _FACING.items()}

DEFAULT_ANIMATION = AnimationId.IDLE_FRONT

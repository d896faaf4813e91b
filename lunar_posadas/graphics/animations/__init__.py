"""
Directional sprite animation package.

Exports the registry, classifier, playback state machine and atlas helpers
used by the player entity.
"""

from lunar_posadas.graphics.animations.animation_ids import AnimationId, Facing, DEFAULT_ANIMATION
from lunar_posadas.graphics.animations.atlas import AtlasLayout, resolve_rect
from lunar_posadas.graphics.animations.animation_data import (
    AssetProvider,
    AssetLoadError,
    Texture,
    load_animation_declarations,
)
from lunar_posadas.graphics.animations.animation_registry import (
    AnimationConfig,
    AnimationRegistry,
    AnimationRegistryError,
)
from lunar_posadas.graphics.animations.direction_classifier import classify
from lunar_posadas.graphics.animations.animation_manager import AnimationManager, PlaybackState, SpriteFrame

__all__ = [
    'AnimationId',
    'Facing',
    'DEFAULT_ANIMATION',
    'AtlasLayout',
    'resolve_rect',
    'AssetProvider',
    'AssetLoadError',
    'Texture',
    'load_animation_declarations',
    'AnimationConfig',
    'AnimationRegistry',
    'AnimationRegistryError',
    'classify',
    'AnimationManager',
    'PlaybackState',
    'SpriteFrame',
]

"""
animation_data.py
-----------------
Animation declarations and the texture loading they depend on.

Responsibilities
----------------
- Declare every player animation (sheet path, frame grid, timing, size).
- Merge animations.json overrides over the built-in declarations.
- Load and cache textures, and cut one-row atlas grids over them.
"""

import os
from dataclasses import dataclass
from typing import Dict, Tuple

import pygame

from lunar_posadas.core.debug.debug_logger import DebugLogger
from lunar_posadas.core.runtime.game_settings import Animation, Assets
from lunar_posadas.core.services.config_manager import load_config
from lunar_posadas.graphics.animations.atlas import AtlasLayout


SAMPLING_MODES = ("nearest", "linear")


class AssetLoadError(FileNotFoundError):
    """A declared texture is missing or could not be decoded."""


# ===========================================================
# Declarations
# ===========================================================

DEFAULT_ANIMATIONS = {
    "idle_back": {
        "path": "animations/player/posadas_idle_back.png",
        "frame_size": [200, 240],   # pixels per frame in the sheet
        "frame_count": 3,
        "display_size": [54.0, 72.0],  # in-game size, world units
        "frame_time": 0.5,
    },
    "idle_front": {
        "path": "animations/player/posadas_idle_front.png",
        "frame_size": [200, 250],
        "frame_count": 3,
        "display_size": [54.0, 75.0],
        "frame_time": 0.5,
    },
    "idle_side": {
        "path": "animations/player/posadas_idle_side.png",
        "frame_size": [190, 250],
        "frame_count": 4,
        "display_size": [51.0, 75.0],
        "frame_time": 0.5,
    },
    "idle_side_back": {
        "path": "animations/player/posadas_idle_back_side.png",
        "frame_size": [200, 230],
        "frame_count": 4,
        "display_size": [54.0, 69.0],
        "frame_time": 0.5,
    },
    "walk_front": {
        "path": "animations/player/posadas_walk_front.png",
        "frame_size": [220, 250],
        "frame_count": 4,
        "display_size": [66.0, 75.0],
        "frame_time": 0.35,
    },
    "walk_back": {
        "path": "animations/player/posadas_walk_back.png",
        "frame_size": [200, 240],
        "frame_count": 4,
        "display_size": [54.0, 72.0],
        "frame_time": 0.35,
    },
    "walk_side": {
        "path": "animations/player/posadas_walk_right.png",
        "frame_size": [180, 270],
        "frame_count": 4,
        "display_size": [54.0, 81.0],
        "frame_time": 0.35,
    },
    "walk_side_back": {
        "path": "animations/player/posadas_walk_back_side.png",
        "frame_size": [200, 230],
        "frame_count": 4,
        "display_size": [54.0, 69.0],
        "frame_time": 0.35,
    },
}


@dataclass(frozen=True)
class AnimationDeclaration:
    """One animation as written in config, before any asset is loaded."""

    name: str
    path: str
    frame_size: Tuple[int, int]
    frame_count: int
    display_size: Tuple[float, float]
    frame_time: float

    @classmethod
    def from_dict(cls, name: str, data: dict) -> "AnimationDeclaration":
        frame_size = data["frame_size"]
        display_size = data["display_size"]
        return cls(
            name=name,
            path=data["path"],
            frame_size=(int(frame_size[0]), int(frame_size[1])),
            frame_count=data["frame_count"],
            display_size=(float(display_size[0]), float(display_size[1])),
            frame_time=float(data.get("frame_time", Animation.DEFAULT_FRAME_TIME)),
        )


def load_animation_declarations(filename: str = "animations.json") -> Dict[str, AnimationDeclaration]:
    """
    Read animation declarations, falling back to DEFAULT_ANIMATIONS.

    Returns:
        {animation name: AnimationDeclaration}
    """
    data = load_config(filename, default_dict=DEFAULT_ANIMATIONS)
    declarations = {}
    for name, entry in data.items():
        try:
            declarations[name] = AnimationDeclaration.from_dict(name, entry)
        except (KeyError, TypeError, IndexError, ValueError) as e:
            raise ValueError(f"Malformed animation declaration '{name}': {e}") from e
    DebugLogger.system(f"Read {len(declarations)} animation declarations", category="loading")
    return declarations


# ===========================================================
# Textures
# ===========================================================

class Texture:
    """A loaded image plus the sampling mode used when it is scaled."""

    __slots__ = ("path", "surface", "sampling")

    def __init__(self, path: str, surface: pygame.Surface, sampling: str = "linear"):
        self.path = path
        self.surface = surface
        self.sampling = sampling

    @property
    def size(self):
        return self.surface.get_size()

    def __repr__(self):
        return f"Texture({self.path!r}, {self.size[0]}x{self.size[1]}, {self.sampling})"


class AssetProvider:
    """Loads textures from the asset root and caches them by path."""

    def __init__(self, root: str = Assets.ROOT):
        self.root = root
        self._cache = {}

    def load_texture(self, path: str) -> Texture:
        """
        Load (or fetch from cache) the texture at a path relative to the root.

        Raises:
            AssetLoadError: file missing or not a decodable image
        """
        if path in self._cache:
            return self._cache[path]

        full_path = os.path.join(self.root, path)
        if not os.path.exists(full_path):
            DebugLogger.fail(f"Texture not found: {full_path}", category="loading")
            raise AssetLoadError(f"Texture not found: {full_path}")

        try:
            surface = pygame.image.load(full_path)
        except pygame.error as e:
            DebugLogger.fail(f"Failed to decode {full_path}: {e}", category="loading")
            raise AssetLoadError(f"Failed to decode {full_path}: {e}") from e

        # convert_alpha() needs a display mode
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            surface = surface.convert_alpha()

        texture = Texture(path, surface)
        self._cache[path] = texture
        DebugLogger.state(f"Loaded texture {path} ({texture.size[0]}x{texture.size[1]})", category="loading")
        return texture

    def define_atlas(self, frame_size, frame_count: int) -> AtlasLayout:
        """One-row grid of frame_count frames of frame_size pixels."""
        return AtlasLayout.from_grid(frame_size, frame_count, 1)

    def set_sampling(self, texture: Texture, mode: str):
        """Change how the texture is filtered when scaled."""
        if mode not in SAMPLING_MODES:
            raise ValueError(f"Unknown sampling mode '{mode}', expected one of {SAMPLING_MODES}")
        texture.sampling = mode

"""
animation_registry.py
---------------------
Read-only registry of player animations, built once before the first tick.

Responsibilities
----------------
- Turn declarations into AnimationConfig entries backed by loaded textures.
- Reject invalid or incomplete declarations at startup.
- Provide O(1) lookup by AnimationId for the playback state machine.

The registry has no mutation API; build() is its only construction path.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, Tuple

from lunar_posadas.core.debug.debug_logger import DebugLogger
from lunar_posadas.core.runtime.game_settings import Animation
from lunar_posadas.graphics.animations.animation_data import AnimationDeclaration, Texture
from lunar_posadas.graphics.animations.animation_ids import AnimationId
from lunar_posadas.graphics.animations.atlas import AtlasLayout


class AnimationRegistryError(LookupError):
    """The registry is incomplete or was asked for an undeclared animation."""


@dataclass(frozen=True, eq=False)
class AnimationConfig:
    """Playback configuration for one animation."""

    identifier: AnimationId
    atlas: AtlasLayout
    texture: Texture
    frame_count: int
    frame_time: float
    display_size: Tuple[float, float]


class AnimationRegistry:
    """Mapping of AnimationId -> AnimationConfig, immutable after build()."""

    __slots__ = ("_configs",)

    def __init__(self, configs: Dict[AnimationId, AnimationConfig]):
        self._configs = MappingProxyType(dict(configs))

    # ===========================================================
    # Construction
    # ===========================================================

    @classmethod
    def build(cls, declarations: Dict[str, AnimationDeclaration], asset_provider,
              sampling: str = Animation.SAMPLING) -> "AnimationRegistry":
        """
        Load every declared animation and validate the result.

        Args:
            declarations: {animation name: AnimationDeclaration}
            asset_provider: Object with load_texture, define_atlas and set_sampling
            sampling: Sampling mode applied to every texture

        Raises:
            AnimationRegistryError: unknown name, invalid values, a sheet too
                small for its frame grid, or an AnimationId with no declaration
        """
        configs = {}
        for name, decl in declarations.items():
            try:
                identifier = AnimationId(name)
            except ValueError as e:
                raise AnimationRegistryError(f"Unknown animation '{name}' in declarations") from e

            _validate_declaration(decl)

            texture = asset_provider.load_texture(decl.path)
            atlas = asset_provider.define_atlas(decl.frame_size, decl.frame_count)
            _check_atlas_fits(decl, atlas, texture)
            asset_provider.set_sampling(texture, sampling)

            configs[identifier] = AnimationConfig(
                identifier=identifier,
                atlas=atlas,
                texture=texture,
                frame_count=decl.frame_count,
                frame_time=decl.frame_time,
                display_size=decl.display_size,
            )

        missing = [anim_id.value for anim_id in AnimationId if anim_id not in configs]
        if missing:
            raise AnimationRegistryError(f"Animations never declared: {', '.join(missing)}")

        registry = cls(configs)
        DebugLogger.init_entry("AnimationRegistry")
        DebugLogger.init_sub(f"{len(registry)} animations, sampling={sampling}")
        return registry

    # ===========================================================
    # Lookup
    # ===========================================================

    def lookup(self, identifier: AnimationId) -> AnimationConfig:
        """
        Return the config for an identifier.

        Raises:
            AnimationRegistryError: identifier was never declared
        """
        try:
            return self._configs[identifier]
        except KeyError:
            raise AnimationRegistryError(f"Animation {identifier!r} is not registered") from None

    def identifiers(self):
        return tuple(self._configs)

    def __contains__(self, identifier):
        return identifier in self._configs

    def __iter__(self) -> Iterator[AnimationId]:
        return iter(self._configs)

    def __len__(self):
        return len(self._configs)


def _validate_declaration(decl: AnimationDeclaration):
    """Reject values the state machine cannot play."""
    if isinstance(decl.frame_count, bool) or not isinstance(decl.frame_count, int) or decl.frame_count <= 0:
        raise AnimationRegistryError(f"'{decl.name}': frame_count must be a positive integer, got {decl.frame_count!r}")
    if not decl.frame_time > 0:
        raise AnimationRegistryError(f"'{decl.name}': frame_time must be positive, got {decl.frame_time!r}")
    if decl.display_size[0] <= 0 or decl.display_size[1] <= 0:
        raise AnimationRegistryError(f"'{decl.name}': display_size must be positive, got {decl.display_size!r}")
    if decl.frame_size[0] <= 0 or decl.frame_size[1] <= 0:
        raise AnimationRegistryError(f"'{decl.name}': frame_size must be positive, got {decl.frame_size!r}")


def _check_atlas_fits(decl: AnimationDeclaration, atlas: AtlasLayout, texture: Texture):
    """Every frame rect must lie inside the sheet it is cut from."""
    sheet_w, sheet_h = texture.size
    if atlas.size[0] > sheet_w or atlas.size[1] > sheet_h:
        raise AnimationRegistryError(
            f"'{decl.name}': {decl.frame_count} frames of {decl.frame_size[0]}x{decl.frame_size[1]} "
            f"need {atlas.size[0]}x{atlas.size[1]}, but {decl.path} is {sheet_w}x{sheet_h}"
        )

"""
player_core.py
--------------
Defines the Player entity: position, movement and its own animation state.
"""

import pygame

from lunar_posadas.core.debug.debug_logger import DebugLogger
from lunar_posadas.core.runtime.game_settings import Layers
from lunar_posadas.graphics.animations.animation_ids import AnimationId
from lunar_posadas.graphics.animations.animation_manager import AnimationManager
from lunar_posadas.graphics.animations.animation_registry import AnimationRegistryError
from .player_config import load_player_config
from .player_movement import update_movement


# ===========================================================
# Input Query Wrapper
# ===========================================================
class PlayerInput:
    """Wrapper so the player only sees the movement vector."""

    __slots__ = ('input_manager',)

    def __init__(self, input_manager):
        self.input_manager = input_manager

    def move(self) -> pygame.Vector2:
        """Unit movement vector (x right, y up), or (0, 0) when idle."""
        return self.input_manager.get_normalized_move()


class Player:
    """The single controllable, animated character."""

    def __init__(self, registry, input_manager, cfg=None):
        """
        Spawn the player.

        Args:
            registry: Built AnimationRegistry shared for the whole run
            input_manager: Source of the per-tick movement vector
            cfg: Player config dict (defaults to load_player_config())

        Raises:
            AnimationRegistryError: initial animation is not a registered id
        """
        if input_manager is None:
            raise ValueError("Player requires input_manager")

        # ========================================
        # 1. Config
        # ========================================
        self.cfg = cfg if cfg is not None else load_player_config()
        core = self.cfg["core_attributes"]

        self.speed = float(core["speed"])
        self.pos = pygame.Vector2(core["spawn"])
        self.input = PlayerInput(input_manager)
        self.layer = Layers.PLAYER

        # ========================================
        # 2. Animation State
        # ========================================
        initial_name = self.cfg["animation"]["initial"]
        try:
            initial = AnimationId(initial_name)
        except ValueError as e:
            raise AnimationRegistryError(f"Unknown initial animation {initial_name!r} in player config") from e
        self.animation = AnimationManager(registry, initial)

        # Direction and speed used on the last tick
        self.direction = pygame.Vector2(0, 0)
        self.current_speed = 0.0

        DebugLogger.init_entry("Player Initialized")
        DebugLogger.init_sub(f"Location: ({self.pos.x:.1f}, {self.pos.y:.1f})")
        DebugLogger.init_sub(f"Animation: {initial.value}")

    # ===========================================================
    # Update & Draw
    # ===========================================================
    def update(self, dt):
        """
        Run one tick: movement, then the animation pipeline.

        Args:
            dt (float): Delta time since the last frame (in seconds).
        """
        self.direction, self.current_speed = update_movement(self, self.input.move(), dt)
        return self.animation.update(self.direction.x, self.direction.y, self.current_speed, dt)

    def draw(self, draw_manager):
        """Queue the current animation frame at the player's position."""
        draw_manager.queue_sprite(self.animation.frame(), self.pos, self.layer)

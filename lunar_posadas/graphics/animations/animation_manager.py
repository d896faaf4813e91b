"""
animation_manager.py
--------------------
Per-character playback state machine for directional sprite animations.

Responsibilities
----------------
- Own one character's PlaybackState (identifier, frame, timer, mirror).
- Restart an animation from frame 0 whenever the identifier changes.
- Advance frames from elapsed real time, stepping several frames when a
  tick is longer than one frame time.
- Resolve the atlas sub-rectangle for the current frame, keeping the last
  good rectangle if the atlas and frame count ever disagree.
"""

import math
from typing import NamedTuple, Optional, Tuple

import pygame

from lunar_posadas.core.debug.debug_logger import DebugLogger
from lunar_posadas.graphics.animations.animation_ids import AnimationId, DEFAULT_ANIMATION
from lunar_posadas.graphics.animations.atlas import resolve_rect
from lunar_posadas.graphics.animations.direction_classifier import classify


class SpriteFrame(NamedTuple):
    """Everything the renderer needs to draw one frame."""
    texture: object
    rect: Optional[pygame.Rect]
    display_size: Tuple[float, float]
    mirrored: bool


class PlaybackState:
    """Mutable playback state owned by exactly one character."""

    __slots__ = (
        'current_identifier',  # AnimationId being played
        'current_frame',  # Index into the atlas, < frame_count
        'elapsed_time',  # Seconds into the current frame, < frame_time
        'mirrored',  # Horizontal flip for left-facing side art
        'active_config',  # Registry config for current_identifier
        'rect',  # Last resolved atlas sub-rectangle
    )

    def __init__(self, identifier: AnimationId, config):
        self.current_identifier = identifier
        self.current_frame = 0
        self.elapsed_time = 0.0
        self.mirrored = False
        self.active_config = config
        self.rect = None


class AnimationManager:
    """Drives one character's PlaybackState through the per-tick pipeline."""

    __slots__ = ('registry', 'state')

    # ===========================================================
    # Initialization
    # ===========================================================
    def __init__(self, registry, initial: AnimationId = DEFAULT_ANIMATION):
        """
        Args:
            registry: Built AnimationRegistry (shared, read-only)
            initial: Animation shown on spawn
        """
        self.registry = registry
        self.state = PlaybackState(initial, registry.lookup(initial))
        self.resolve()

        DebugLogger.state(f"Playback seeded with {initial.value}", category="animation")

    # ===========================================================
    # Per-tick Pipeline
    # ===========================================================
    def update(self, x: float, y: float, speed: float, dt: float) -> SpriteFrame:
        """
        Run classification, transition, frame advance and rect resolution.

        Args:
            x, y: Movement vector for this tick
            speed: Movement speed for this tick (0 = idle)
            dt: Elapsed real time in seconds

        Returns:
            SpriteFrame for the renderer
        """
        result = classify(x, y, speed)
        if result is not None:
            self.transition(*result)

        self.advance(dt)
        self.resolve()
        return self.frame()

    def transition(self, identifier: AnimationId, mirrored: bool = False) -> bool:
        """
        Switch to identifier, restarting it at frame 0 if it changed.

        The mirror flag is applied on every call so a side animation can
        turn around without restarting.

        Returns:
            True if the identifier changed
        """
        state = self.state
        mirrored = bool(mirrored) and identifier.mirrorable

        if identifier == state.current_identifier:
            state.mirrored = mirrored
            return False

        config = self.registry.lookup(identifier)
        previous = state.current_identifier

        state.mirrored = mirrored
        state.current_identifier = identifier
        state.active_config = config
        state.current_frame = 0
        state.elapsed_time = 0.0

        DebugLogger.state(
            f"{previous.value} -> {identifier.value} (mirrored={state.mirrored})",
            category="animation_state"
        )
        return True

    def advance(self, dt: float) -> int:
        """
        Add dt to the frame timer and step frames for each full frame_time.
        Negative or non-finite dt counts as 0.

        Returns:
            Number of frames stepped this call
        """
        if not math.isfinite(dt) or dt < 0:
            DebugLogger.warn(f"Invalid frame delta {dt} clamped to 0", category="animation")
            dt = 0.0

        state = self.state
        frame_time = state.active_config.frame_time
        frame_count = state.active_config.frame_count

        state.elapsed_time += dt
        steps = 0
        while state.elapsed_time >= frame_time:
            state.elapsed_time -= frame_time
            state.current_frame = (state.current_frame + 1) % frame_count
            steps += 1

        if steps > 1:
            DebugLogger.trace(
                f"{state.current_identifier.value}: {steps} frames in one tick (dt={dt:.3f}s)",
                category="timing"
            )
        return steps

    def resolve(self) -> Optional[pygame.Rect]:
        """
        Update state.rect for the current frame.

        On an atlas/frame mismatch the previous rect stays in place.
        """
        state = self.state
        rect = resolve_rect(state.active_config.atlas, state.current_frame)
        if rect is None:
            DebugLogger.warn(
                f"{state.current_identifier.value}: frame {state.current_frame} outside atlas, keeping previous rect",
                category="animation"
            )
            return state.rect

        state.rect = rect
        return rect

    # ===========================================================
    # Renderer Hand-off
    # ===========================================================
    def frame(self) -> SpriteFrame:
        state = self.state
        config = state.active_config
        return SpriteFrame(config.texture, state.rect, config.display_size, state.mirrored)

    @property
    def current_identifier(self) -> AnimationId:
        return self.state.current_identifier

    @property
    def current_frame(self) -> int:
        return self.state.current_frame

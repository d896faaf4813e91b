"""
draw_manager.py
---------------
Layered renderer for sprite frames.

Responsibilities:
- Maintain a layered draw queue, cleared every frame
- Cut atlas frames, mirror and scale them to their display size
- Cache prepared frame surfaces
- Map world coordinates (origin at screen centre, y up) to the screen
"""

import pygame

from lunar_posadas.core.debug.debug_logger import DebugLogger
from lunar_posadas.core.runtime.game_settings import Display


class DrawManager:
    """Handles sprite rendering with layered batching."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, background_color=Display.BACKGROUND_COLOR, screen_size=None):
        self.background_color = background_color

        # Size of the surface render() draws to; the game updates it every frame
        self.screen_size = screen_size or (Display.WIDTH, Display.HEIGHT)

        # {layer: [(surface, rect), ...]}
        self.surface_layers = {}
        self._layer_keys_cache = []
        self._layers_dirty = False

        # {(texture id, rect, size, mirrored, sampling): Surface}
        self._frame_cache = {}

        DebugLogger.init_entry("DrawManager")

    # ===========================================================
    # Queue Management
    # ===========================================================

    def clear(self):
        """Clear all draw queues for new frame."""
        for layer_items in self.surface_layers.values():
            layer_items.clear()

    def queue_draw(self, surface, rect, layer=0):
        """
        Queue a surface for drawing.

        Args:
            surface: pygame.Surface to draw
            rect: Screen-space position rectangle
            layer: Render layer (lower = first)
        """
        if surface is None or rect is None:
            DebugLogger.warn(f"Skipped invalid draw call at layer {layer}", category="render")
            return

        if layer not in self.surface_layers:
            self.surface_layers[layer] = []
            self._layers_dirty = True

        self.surface_layers[layer].append((surface, rect))

    def queue_sprite(self, frame, world_pos, layer=0, screen_size=None):
        """
        Queue one animation frame centred on a world position.

        Args:
            frame: SpriteFrame (texture, rect, display_size, mirrored)
            world_pos: (x, y) in world units, y up
            layer: Render layer
            screen_size: Target surface size (defaults to self.screen_size)
        """
        if frame.rect is None:
            DebugLogger.warn("Sprite frame has no atlas rect yet, skipped", category="render")
            return

        surface = self._frame_surface(frame)
        center = self.world_to_screen(world_pos, screen_size or self.screen_size)
        self.queue_draw(surface, surface.get_rect(center=center), layer)

    # ===========================================================
    # Frame Preparation
    # ===========================================================

    def _frame_surface(self, frame):
        """Cut, mirror and scale a frame, reusing cached results."""
        texture = frame.texture
        size = (max(1, round(frame.display_size[0])), max(1, round(frame.display_size[1])))
        key = (id(texture), tuple(frame.rect), size, frame.mirrored, texture.sampling)

        cached = self._frame_cache.get(key)
        if cached is not None:
            return cached

        image = texture.surface.subsurface(frame.rect)
        if frame.mirrored:
            image = pygame.transform.flip(image, True, False)

        if texture.sampling == "nearest":
            image = pygame.transform.scale(image, size)
        else:
            image = pygame.transform.smoothscale(image, size)

        self._frame_cache[key] = image
        DebugLogger.trace(f"Prepared frame {key[1]} of {texture.path} at {size}", category="render")
        return image

    @staticmethod
    def world_to_screen(world_pos, screen_size):
        """World origin is the screen centre; world y grows upwards."""
        return (
            round(screen_size[0] / 2 + world_pos[0]),
            round(screen_size[1] / 2 - world_pos[1]),
        )

    # ===========================================================
    # Rendering
    # ===========================================================

    def render(self, target_surface):
        """Fill the background, then blit every layer in ascending order."""
        target_surface.fill(self.background_color)

        if self._layers_dirty:
            self._layer_keys_cache = sorted(self.surface_layers.keys())
            self._layers_dirty = False

        for layer in self._layer_keys_cache:
            items = self.surface_layers.get(layer)
            if items:
                target_surface.blits(items)

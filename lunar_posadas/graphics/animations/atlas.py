"""
atlas.py
--------
Texture atlas layouts and frame rectangle resolution.

An atlas is one texture cut into a grid of equally sized frames. Frame
rectangles are stored row-major in texture pixel space, so index 0 is the
top-left frame.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import pygame


@dataclass(frozen=True)
class AtlasLayout:
    """Ordered frame rectangles for one texture."""

    size: Tuple[int, int]
    textures: Tuple[pygame.Rect, ...]

    @classmethod
    def from_grid(cls, tile_size, columns: int, rows: int = 1, padding=None, offset=None) -> "AtlasLayout":
        """
        Build a layout from a uniform grid.

        Args:
            tile_size: (width, height) of one frame in pixels
            columns: Frames per row
            rows: Number of rows
            padding: Optional (x, y) gap between frames
            offset: Optional (x, y) of the first frame's top-left corner

        Returns:
            AtlasLayout with columns * rows frames
        """
        tile_w, tile_h = int(tile_size[0]), int(tile_size[1])
        if tile_w <= 0 or tile_h <= 0:
            raise ValueError(f"Atlas tile size must be positive, got {tile_size}")
        if columns <= 0 or rows <= 0:
            raise ValueError(f"Atlas grid must have at least one cell, got {columns}x{rows}")

        pad_x, pad_y = padding or (0, 0)
        off_x, off_y = offset or (0, 0)

        frames = []
        for row in range(rows):
            for column in range(columns):
                x = off_x + column * (tile_w + pad_x)
                y = off_y + row * (tile_h + pad_y)
                frames.append(pygame.Rect(x, y, tile_w, tile_h))

        width = off_x + columns * tile_w + (columns - 1) * pad_x
        height = off_y + rows * tile_h + (rows - 1) * pad_y
        return cls(size=(width, height), textures=tuple(frames))

    def __len__(self):
        return len(self.textures)


def resolve_rect(atlas: AtlasLayout, index: int) -> Optional[pygame.Rect]:
    """
    Return the sub-rectangle for a frame index, or None if out of range.

    The returned rect is a copy; callers may keep it across ticks.
    """
    if atlas is None or index < 0 or index >= len(atlas.textures):
        return None
    return pygame.Rect(atlas.textures[index])

"""
conftest.py
-----------
Shared pytest configuration and fixtures for Lunar Posadas tests.

Contains:
- Headless SDL setup so pygame surfaces work without a window
- Registry fixtures backed by in-memory textures
- Shared mock collaborators (input, draw manager)
"""

import os
import sys

# Headless SDL before pygame is imported anywhere
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Project root on the path so tests run from a plain checkout
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
import pygame
from unittest.mock import MagicMock

from lunar_posadas.graphics.animations.animation_data import (
    DEFAULT_ANIMATIONS,
    AnimationDeclaration,
    AssetProvider,
    Texture,
)
from lunar_posadas.graphics.animations.animation_registry import AnimationRegistry


# ===========================================================
# Test Doubles
# ===========================================================

class InMemoryAssetProvider(AssetProvider):
    """AssetProvider that hands out blank surfaces instead of reading files."""

    def __init__(self, texture_size=(1024, 512)):
        super().__init__(root="unused")
        self.texture_size = texture_size
        self.loaded = []

    def load_texture(self, path):
        if path not in self._cache:
            self._cache[path] = Texture(path, pygame.Surface(self.texture_size))
            self.loaded.append(path)
        return self._cache[path]


def build_declarations(**overrides):
    """
    Default declarations with per-animation field overrides.

    Example:
        build_declarations(idle_side={"frame_count": 2})
    """
    declarations = {}
    for name, entry in DEFAULT_ANIMATIONS.items():
        data = {**entry, **overrides.get(name, {})}
        declarations[name] = AnimationDeclaration.from_dict(name, data)
    return declarations


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture
def asset_provider():
    return InMemoryAssetProvider()


@pytest.fixture
def make_asset_provider():
    """Factory for in-memory providers with a chosen sheet size."""
    return InMemoryAssetProvider


@pytest.fixture
def make_declarations():
    """Factory for declarations with per-animation overrides."""
    return build_declarations


@pytest.fixture
def registry(asset_provider):
    """Fully built registry with the default declarations."""
    return AnimationRegistry.build(build_declarations(), asset_provider)


@pytest.fixture
def mock_input_manager():
    """Mock for InputManager with no movement."""
    input_manager = MagicMock()
    input_manager.get_move.return_value = pygame.Vector2(0, 0)
    input_manager.get_normalized_move.return_value = pygame.Vector2(0, 0)
    return input_manager


@pytest.fixture
def mock_draw_manager():
    """Mock for DrawManager."""
    draw_manager = MagicMock()
    draw_manager.queue_sprite = MagicMock()
    return draw_manager


# ===========================================================
# Pytest configuration
# ===========================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "integration: marks tests that exercise the full tick pipeline")


def pytest_collection_modifyitems(config, items):
    """Mark everything outside integration tests as unit tests."""
    for item in items:
        if "integration" not in item.keywords:
            item.add_marker(pytest.mark.unit)

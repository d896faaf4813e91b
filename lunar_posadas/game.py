"""
game.py
-------
Window setup and the main loop.

Responsibilities
----------------
- Initialize pygame, open the window and build the animation registry
  before the first tick (a bad registry aborts startup)
- Spawn the player
- Run the per-frame loop: events -> input -> player tick -> render
"""

import sys

import pygame

from lunar_posadas.core.debug.debug_logger import DebugLogger, LoggerConfig
from lunar_posadas.core.runtime.game_settings import Display
from lunar_posadas.core.services.config_manager import load_config
from lunar_posadas.core.services.input_manager import InputManager
from lunar_posadas.entities.player.player_core import Player
from lunar_posadas.graphics.animations.animation_data import (
    AssetLoadError,
    AssetProvider,
    load_animation_declarations,
)
from lunar_posadas.graphics.animations.animation_registry import AnimationRegistry, AnimationRegistryError
from lunar_posadas.graphics.draw_manager import DrawManager


def _read_declarations():
    """animations.json merged over the defaults; malformed entries abort startup."""
    try:
        return load_animation_declarations()
    except ValueError as e:
        raise AnimationRegistryError(str(e)) from e


def build_registry(asset_provider=None):
    """
    Build the animation registry; the only window in which it is mutable.

    Raises:
        AnimationRegistryError: declarations malformed, invalid or incomplete
        AssetLoadError: a sprite sheet is missing or unreadable
    """
    try:
        return AnimationRegistry.build(_read_declarations(), asset_provider or AssetProvider())
    except (AnimationRegistryError, AssetLoadError) as e:
        DebugLogger.init_entry("AnimationRegistry", "FAIL")
        DebugLogger.fail(f"Animation registry incomplete: {e}", category="animation")
        raise


class Game:
    """Owns the window, the registry and the single player."""

    def __init__(self):
        """Initialize pygame and all foundational systems."""
        LoggerConfig.apply(load_config("settings.json").get("logging", {}))
        DebugLogger.section("Initializing Game")

        pygame.init()
        self.screen = pygame.display.set_mode((Display.WIDTH, Display.HEIGHT))
        pygame.display.set_caption(Display.CAPTION)
        DebugLogger.init_entry("Pygame")
        DebugLogger.init_sub(f"Window {Display.WIDTH}x{Display.HEIGHT} '{Display.CAPTION}'")

        self.registry = build_registry()
        self.input_manager = InputManager()
        self.draw_manager = DrawManager()
        self.player = Player(self.registry, self.input_manager)

        self.clock = pygame.time.Clock()
        self.running = True

    # ===========================================================
    # Core Runtime Loop
    # ===========================================================
    def run(self):
        """Main loop that runs until the window is closed."""
        DebugLogger.section("Game Loop")

        while self.running:
            dt = self.clock.tick(Display.FPS) / 1000.0

            self._handle_events()
            self.input_manager.update()
            self.player.update(dt)
            self._draw()

        pygame.quit()
        DebugLogger.system("Pygame terminated")

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.stop()
                DebugLogger.action("Quit signal received")
                break
            self.input_manager.handle_system_input(event, self)

    def _draw(self):
        self.draw_manager.clear()
        self.draw_manager.screen_size = self.screen.get_size()
        self.player.draw(self.draw_manager)
        self.draw_manager.render(self.screen)
        pygame.display.flip()

    # ===========================================================
    # Window Controls
    # ===========================================================
    def toggle_fullscreen(self):
        pygame.display.toggle_fullscreen()
        DebugLogger.state("Toggled fullscreen", category="display")

    def stop(self):
        self.running = False


def main():
    """Console entry point."""
    try:
        game = Game()
    except (AnimationRegistryError, AssetLoadError) as e:
        DebugLogger.fail(f"Startup aborted: {e}")
        pygame.quit()
        return 1
    game.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())

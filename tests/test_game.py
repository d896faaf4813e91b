"""
test_game.py
------------
Tests for startup (registry build) and a single pass of the main loop.
"""

import pytest
import pygame
from unittest.mock import MagicMock, patch

from lunar_posadas import game as game_module
from lunar_posadas.graphics.animations.animation_data import AssetLoadError
from lunar_posadas.graphics.animations.animation_ids import AnimationId
from lunar_posadas.graphics.animations.animation_registry import AnimationRegistryError

DECLARATIONS_SOURCE = "lunar_posadas.graphics.animations.animation_data.load_config"
PLAYER_CONFIG_SOURCE = "lunar_posadas.entities.player.player_core.load_player_config"


# ===========================================================
# Registry Startup
# ===========================================================

def test_build_registry_from_bundled_declarations(asset_provider):
    registry = game_module.build_registry(asset_provider)
    assert set(registry) == set(AnimationId)


def test_missing_texture_aborts_startup():
    provider = MagicMock()
    provider.load_texture.side_effect = AssetLoadError("assets/player/posadas_idle_back.png")

    with patch.object(game_module.DebugLogger, "fail") as mock_fail:
        with pytest.raises(AssetLoadError):
            game_module.build_registry(provider)

    mock_fail.assert_called_once()


def test_incomplete_declarations_abort_startup(asset_provider, make_declarations):
    declarations = make_declarations()
    del declarations["walk_back"]

    with patch.object(game_module, "load_animation_declarations", return_value=declarations):
        with pytest.raises(AnimationRegistryError, match="walk_back"):
            game_module.build_registry(asset_provider)


def test_malformed_declaration_is_registry_error(asset_provider):
    with patch(DECLARATIONS_SOURCE, return_value={"idle_side": {"path": "x.png"}}):
        with pytest.raises(AnimationRegistryError, match="idle_side"):
            game_module.build_registry(asset_provider)


def test_main_returns_error_code_on_bad_registry():
    with patch.object(game_module, "Game", side_effect=AnimationRegistryError("incomplete")):
        assert game_module.main() == 1


def test_main_returns_error_code_on_malformed_declaration(asset_provider):
    with patch.object(game_module, "AssetProvider", return_value=asset_provider), \
            patch(DECLARATIONS_SOURCE, return_value={"idle_side": {"path": "x.png"}}), \
            patch.object(game_module.DebugLogger, "fail") as mock_fail:
        assert game_module.main() == 1

    assert any("idle_side" in c.args[0] for c in mock_fail.call_args_list)


def test_main_returns_error_code_on_unknown_initial_animation(asset_provider):
    player_cfg = {
        "core_attributes": {"speed": 200, "spawn": [0, 0]},
        "animation": {"initial": "run_front"},
    }
    with patch.object(game_module, "AssetProvider", return_value=asset_provider), \
            patch(PLAYER_CONFIG_SOURCE, return_value=player_cfg), \
            patch.object(game_module.DebugLogger, "fail") as mock_fail:
        assert game_module.main() == 1

    assert any("run_front" in c.args[0] for c in mock_fail.call_args_list)


# ===========================================================
# Main Loop
# ===========================================================

@pytest.mark.integration
def test_single_loop_pass_then_quit(asset_provider):
    with patch.object(game_module, "AssetProvider", return_value=asset_provider):
        game = game_module.Game()

    game.player.update = MagicMock(wraps=game.player.update)
    screen_size = game.screen.get_size()
    game.draw_manager.screen_size = (1, 1)
    pygame.event.post(pygame.event.Event(pygame.QUIT))

    game.run()

    assert game.running is False
    game.player.update.assert_called_once()
    assert game.draw_manager.screen_size == screen_size
    assert game.player.animation.current_identifier == AnimationId.IDLE_FRONT


def test_stop_ends_loop():
    game = game_module.Game.__new__(game_module.Game)
    game.running = True
    game.stop()
    assert game.running is False

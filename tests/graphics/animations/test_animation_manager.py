"""
test_animation_manager.py
-------------------------
Regression tests for the per-character playback state machine.

Covers:
1. Seeding on spawn
2. Reset-to-first-frame on identifier change
3. Multi-frame advance when a tick spans several frame times
4. Retaining the facing when input stops
5. Keeping the last rect when atlas and frame count disagree
"""

import random

import pytest
import pygame

from lunar_posadas.graphics.animations.animation_ids import AnimationId
from lunar_posadas.graphics.animations.animation_manager import AnimationManager, SpriteFrame
from lunar_posadas.graphics.animations.animation_registry import AnimationConfig, AnimationRegistry
from lunar_posadas.graphics.animations.atlas import AtlasLayout


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture
def manager(registry):
    return AnimationManager(registry)


def _assert_invariants(manager):
    state = manager.state
    config = state.active_config
    assert 0 <= state.current_frame < config.frame_count
    assert 0 <= state.elapsed_time < config.frame_time
    assert config is manager.registry.lookup(state.current_identifier)


# ===========================================================
# Spawn
# ===========================================================

class TestSeeding:

    def test_spawns_idle_front_at_first_frame(self, manager, registry):
        state = manager.state
        assert state.current_identifier == AnimationId.IDLE_FRONT
        assert state.current_frame == 0
        assert state.elapsed_time == 0.0
        assert state.mirrored is False
        assert state.active_config is registry.lookup(AnimationId.IDLE_FRONT)
        assert state.rect == pygame.Rect(0, 0, 200, 250)

    def test_custom_initial_animation(self, registry):
        manager = AnimationManager(registry, AnimationId.IDLE_SIDE_BACK)
        assert manager.current_identifier == AnimationId.IDLE_SIDE_BACK


# ===========================================================
# Identifier Transitions
# ===========================================================

class TestTransition:

    def test_change_resets_frame_and_timer(self, manager, registry):
        manager.advance(1.2)
        assert manager.current_frame == 2

        changed = manager.transition(AnimationId.WALK_SIDE, True)

        state = manager.state
        assert changed is True
        assert state.current_identifier == AnimationId.WALK_SIDE
        assert state.current_frame == 0
        assert state.elapsed_time == 0.0
        assert state.mirrored is True
        assert state.active_config is registry.lookup(AnimationId.WALK_SIDE)

    def test_same_identifier_keeps_progress(self, manager):
        manager.advance(0.7)
        changed = manager.transition(AnimationId.IDLE_FRONT, False)

        assert changed is False
        assert manager.current_frame == 1
        assert manager.state.elapsed_time == pytest.approx(0.2)

    def test_turning_around_flips_without_restarting(self, manager):
        manager.update(-1, 0, 200, 0.0)
        manager.update(-1, 0, 200, 0.4)
        frame_before = manager.current_frame

        manager.update(1, 0, 200, 0.0)

        assert manager.current_identifier == AnimationId.WALK_SIDE
        assert manager.state.mirrored is False
        assert manager.current_frame == frame_before

    def test_front_back_never_mirrored(self, manager):
        manager.transition(AnimationId.WALK_BACK, True)
        assert manager.state.mirrored is False

    def test_reset_visible_immediately_after_change(self, manager):
        manager.update(0, -1, 0, 0.9)
        assert manager.current_frame == 1

        manager.update(0, 1, 200, 0.0)

        assert manager.current_identifier == AnimationId.WALK_BACK
        assert manager.current_frame == 0
        assert manager.state.elapsed_time == 0.0


# ===========================================================
# Frame Advance
# ===========================================================

class TestAdvance:

    def test_single_wrap_carries_remainder(self, manager):
        # idle_side: 4 frames, 0.5s each
        manager.transition(AnimationId.IDLE_SIDE)
        manager.state.current_frame = 3
        manager.state.elapsed_time = 0.4

        steps = manager.advance(0.3)

        assert steps == 1
        assert manager.current_frame == 0
        assert manager.state.elapsed_time == pytest.approx(0.2)

    def test_long_tick_steps_multiple_frames(self, manager):
        # idle_front: 3 frames, 0.5s each
        steps = manager.advance(1.3)

        assert steps == 2
        assert manager.current_frame == 2
        assert manager.state.elapsed_time == pytest.approx(0.3)

    def test_tick_spanning_whole_cycle_wraps(self, manager):
        manager.advance(2.0)
        assert manager.current_frame == (4 % 3)
        assert manager.state.elapsed_time == 0.0

    def test_short_tick_only_accumulates(self, manager):
        assert manager.advance(0.1) == 0
        assert manager.current_frame == 0
        assert manager.state.elapsed_time == pytest.approx(0.1)

    def test_negative_dt_is_ignored(self, manager):
        manager.advance(0.2)
        manager.advance(-1.0)
        assert manager.state.elapsed_time == pytest.approx(0.2)

    @pytest.mark.parametrize("dt", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_dt_is_ignored(self, manager, dt):
        manager.advance(0.2)
        frame = manager.current_frame

        assert manager.advance(dt) == 0
        assert manager.current_frame == frame
        assert manager.state.elapsed_time == pytest.approx(0.2)

    @pytest.mark.parametrize("dt, ticks", [(0.125, 40), (0.75, 13), (0.5, 9), (1.25, 7)])
    def test_cycling_matches_total_time(self, manager, dt, ticks):
        manager.transition(AnimationId.IDLE_SIDE)
        config = manager.state.active_config

        for k in range(1, ticks + 1):
            manager.advance(dt)
            expected = int((k * dt) // config.frame_time) % config.frame_count
            assert manager.current_frame == expected


# ===========================================================
# Idle Retention
# ===========================================================

class TestIdleRetention:

    @pytest.mark.parametrize("speed", [0, 200])
    def test_zero_vector_keeps_identifier_and_mirror(self, manager, speed):
        manager.update(-1, 1, 200, 0.1)
        assert manager.current_identifier == AnimationId.WALK_SIDE_BACK

        manager.update(0, 0, speed, 0.1)

        assert manager.current_identifier == AnimationId.WALK_SIDE_BACK
        assert manager.state.mirrored is True

    def test_zero_vector_keeps_frames_advancing(self, manager):
        manager.update(0, 0, 0, 0.6)
        assert manager.current_identifier == AnimationId.IDLE_FRONT
        assert manager.current_frame == 1


# ===========================================================
# Rect Resolution
# ===========================================================

class TestResolve:

    def test_rect_follows_frame(self, manager):
        manager.transition(AnimationId.IDLE_SIDE)
        manager.advance(1.0)
        manager.resolve()
        assert manager.state.rect == pygame.Rect(2 * 190, 0, 190, 250)

    def test_mismatched_atlas_keeps_previous_rect(self, registry):
        # Declares 4 frames but the atlas only has 2
        short = AtlasLayout.from_grid((10, 10), 2)
        base = registry.lookup(AnimationId.IDLE_FRONT)
        configs = {anim_id: registry.lookup(anim_id) for anim_id in registry}
        configs[AnimationId.IDLE_FRONT] = AnimationConfig(
            identifier=AnimationId.IDLE_FRONT,
            atlas=short,
            texture=base.texture,
            frame_count=4,
            frame_time=0.5,
            display_size=base.display_size,
        )
        manager = AnimationManager(AnimationRegistry(configs))

        manager.update(0, 0, 0, 0.5)
        assert manager.state.rect == pygame.Rect(10, 0, 10, 10)

        frame = manager.update(0, 0, 0, 0.5)

        assert manager.current_frame == 2
        assert frame.rect == pygame.Rect(10, 0, 10, 10)

    def test_frame_hand_off(self, manager, registry):
        manager.update(-1, 0, 0, 0.0)
        frame = manager.frame()
        config = registry.lookup(AnimationId.IDLE_SIDE)

        assert isinstance(frame, SpriteFrame)
        assert frame.texture is config.texture
        assert frame.display_size == config.display_size
        assert frame.mirrored is True
        assert frame.rect == pygame.Rect(0, 0, 190, 250)


# ===========================================================
# Invariants
# ===========================================================

@pytest.mark.integration
def test_invariants_hold_over_random_ticks(manager):
    rng = random.Random(1234)
    choices = [-1, -0.5, 0, 0.5, 1]

    for _ in range(500):
        x, y = rng.choice(choices), rng.choice(choices)
        speed = rng.choice([0, 0, 200])
        dt = rng.choice([0.0, 0.016, 0.1, 0.35, 0.9, 2.1])

        previous = manager.current_identifier
        manager.update(x, y, speed, dt)
        _assert_invariants(manager)

        if (x, y) == (0, 0):
            assert manager.current_identifier == previous

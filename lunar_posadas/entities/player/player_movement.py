"""
player_movement.py
------------------
Translates the input vector into player motion.

Responsibilities
----------------
- Normalize the input direction so diagonals are not faster.
- Move the player at constant speed while input is held.
- Report the speed used this tick (0 when there is no input).
"""

import pygame


def update_movement(player, move_vec, dt):
    """
    Move the player for one tick.

    Args:
        player (Player): Entity with pos (Vector2) and speed (float).
        move_vec: Raw input vector, x right / y up.
        dt (float): Delta time since the last frame (in seconds).

    Returns:
        tuple: (direction Vector2, speed float) fed to the animation pipeline.
    """
    direction = pygame.Vector2(move_vec)

    if direction.length_squared() == 0:
        return direction, 0.0

    direction = direction.normalize()
    player.pos += direction * player.speed * dt
    return direction, player.speed

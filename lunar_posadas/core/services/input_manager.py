"""
input_manager.py
----------------
Keyboard and controller polling that yields one movement vector per tick.

Provides:
- Key bindings per context (gameplay, system)
- Movement vector in world orientation (x right, y up)
- Controller analog stick support with deadzone
- Global hotkeys (fullscreen toggle, quit)
"""

import pygame

from lunar_posadas.core.debug.debug_logger import DebugLogger
from lunar_posadas.core.runtime.game_settings import Input


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    "gameplay": {
        "move_left": [pygame.K_a, pygame.K_LEFT],
        "move_right": [pygame.K_d, pygame.K_RIGHT],
        "move_up": [pygame.K_w, pygame.K_UP],
        "move_down": [pygame.K_s, pygame.K_DOWN],
    },
    "system": {
        "toggle_fullscreen": [pygame.K_F11],
        "quit": [pygame.K_ESCAPE],
    },
}


# Unit step each movement action contributes (x right, y up)
MOVE_AXES = {
    "move_right": (1, 0),
    "move_left": (-1, 0),
    "move_up": (0, 1),
    "move_down": (0, -1),
}

# System action -> method called on the game object
SYSTEM_ACTIONS = {
    "toggle_fullscreen": "toggle_fullscreen",
    "quit": "stop",
}


class InputManager:
    """
    Polls input devices once per frame and exposes the movement vector.

    Usage:
        input_manager.update()
        move = input_manager.get_move()   # (0, 0) means "no input"
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, key_bindings=None):
        """
        Initialize input system.

        Args:
            key_bindings: Custom key bindings dict (uses DEFAULT_KEY_BINDINGS if None)
        """
        DebugLogger.init_entry("InputManager")

        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS
        self._action_to_keys = {
            action: tuple(keys)
            for action, keys in self.key_bindings.get("gameplay", {}).items()
        }

        self.move = pygame.Vector2(0, 0)
        self._move_keyboard = pygame.Vector2(0, 0)
        self._move_controller = pygame.Vector2(0, 0)

        self._init_controller()

    def _init_controller(self):
        """Initialize game controller if available."""
        pygame.joystick.init()
        self.controller = None

        if pygame.joystick.get_count() > 0:
            self.controller = pygame.joystick.Joystick(0)
            self.controller.init()
            DebugLogger.init_sub(f"Controller: {self.controller.get_name()}")

    # ===========================================================
    # Public API
    # ===========================================================

    def get_move(self) -> pygame.Vector2:
        """Raw movement vector for this frame (x right, y up)."""
        return pygame.Vector2(self.move)

    def get_normalized_move(self) -> pygame.Vector2:
        """Unit movement vector, or (0, 0) when there is no input."""
        if self.move.length_squared() > 0:
            return self.move.normalize()
        return pygame.Vector2(0, 0)

    # ===========================================================
    # Frame Update
    # ===========================================================

    def update(self):
        """Poll all input sources. Call once per frame."""
        keys = pygame.key.get_pressed()

        x = y = 0
        for action, (dx, dy) in MOVE_AXES.items():
            if self._is_action_pressed(action, keys):
                x += dx
                y += dy
        self._move_keyboard.update(x, y)

        if self.controller:
            self._merge_controller_movement()
        else:
            self.move.update(self._move_keyboard)

    def _merge_controller_movement(self):
        """Merge controller analog stick with keyboard movement."""
        x_axis = self.controller.get_axis(0)
        y_axis = self.controller.get_axis(1)
        deadzone = Input.CONTROLLER_DEADZONE

        self._move_controller.x = x_axis if abs(x_axis) > deadzone else 0
        # Stick y grows downwards
        self._move_controller.y = -y_axis if abs(y_axis) > deadzone else 0

        if self._move_controller.length_squared() > 0:
            self.move.update(self._move_controller)
        else:
            self.move.update(self._move_keyboard)

    # ===========================================================
    # System Input (Global Hotkeys)
    # ===========================================================

    def handle_system_input(self, event, game):
        """
        Handle global hotkeys.

        Args:
            event: pygame event to process
            game: Object exposing toggle_fullscreen() and stop()
        """
        if event.type != pygame.KEYDOWN:
            return

        for action, keys in self.key_bindings.get("system", {}).items():
            if event.key in keys and action in SYSTEM_ACTIONS:
                getattr(game, SYSTEM_ACTIONS[action])()
                DebugLogger.action(f"System action: {action}", category="input")
                return

    # ===========================================================
    # Internal Helpers
    # ===========================================================

    def _is_action_pressed(self, action: str, keys) -> bool:
        return any(keys[key] for key in self._action_to_keys.get(action, ()))

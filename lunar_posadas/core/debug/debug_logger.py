"""
debug_logger.py
---------------
Console logger with per-category switches and ANSI colours.

Every line names its source (the calling class, or the module when called
from a plain function) so the per-tick animation output stays readable:

    [12:00:01] [AnimationManager][STATE] idle_front -> walk_side (mirrored=True)

The noisy categories ("animation_state", "timing") are off by default and
can be switched on from the "logging" section of settings.json.
"""

import sys
from datetime import datetime


# ===========================================================
# Logger Configuration
# ===========================================================

class LoggerConfig:
    """Class-level switches read on every log call."""

    ENABLE_LOGGING = True
    LOG_LEVEL = "INFO"  # NONE, ERROR, WARN, INFO, VERBOSE
    SHOW_TIMESTAMP = True

    CATEGORIES = {
        "loading": False,
        "system": True,
        "display": True,
        "input": True,
        "animation": True,
        "animation_state": False,  # every identifier change
        "timing": False,           # multi-frame advances
        "entity_core": True,
        "render": False,
    }

    @classmethod
    def apply(cls, overrides: dict):
        """
        Layer a "logging" config section over the class defaults.

        Recognised keys: "enabled" (bool), "level" (name, case-insensitive,
        unknown names ignored) and "categories" ({name: bool}).
        """
        if not overrides:
            return
        if "enabled" in overrides:
            cls.ENABLE_LOGGING = bool(overrides["enabled"])

        level = str(overrides.get("level", cls.LOG_LEVEL)).upper()
        if level in LEVEL_VALUES:
            cls.LOG_LEVEL = level

        for category, on in overrides.get("categories", {}).items():
            cls.CATEGORIES[category] = bool(on)


LEVEL_VALUES = {"NONE": 0, "ERROR": 1, "WARN": 2, "INFO": 3, "VERBOSE": 4}


# ===========================================================
# ANSI Colors
# ===========================================================

class Colors:
    RESET = "\033[0m"
    WHITE = "\033[97m"
    GREEN = "\033[92m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    BLUE = "\033[94m"
    YELLOW = "\033[93m"
    RED = "\033[91m"


def _caller_name(frame) -> str:
    """Class of `self`/`cls` in frame, else the CamelCased module name."""
    if frame is None:
        return "Unknown"
    local_vars = frame.f_locals
    if "self" in local_vars:
        return type(local_vars["self"]).__name__
    if "cls" in local_vars and isinstance(local_vars["cls"], type):
        return local_vars["cls"].__name__

    module = frame.f_code.co_filename.replace("\\", "/").rsplit("/", 1)[-1]
    if module.endswith(".py"):
        module = module[:-3]
    return "".join(part.capitalize() for part in module.split("_"))


# ===========================================================
# Debug Logger
# ===========================================================

class DebugLogger:
    """Static logger; all methods are safe to call before pygame starts."""

    LINE_LENGTH = 59

    # tag -> (colour, minimum level)
    STYLES = {
        "INIT": (Colors.WHITE, "INFO"),
        "SYSTEM": (Colors.MAGENTA, "INFO"),
        "STATE": (Colors.CYAN, "INFO"),
        "ACTION": (Colors.GREEN, "INFO"),
        "TRACE": (Colors.BLUE, "VERBOSE"),
        "WARN": (Colors.YELLOW, "WARN"),
        "FAIL": (Colors.RED, "ERROR"),
    }

    STATUS_COLORS = {
        "OK": Colors.GREEN,
        "LOADING": Colors.CYAN,
        "FAIL": Colors.RED,
    }

    @staticmethod
    def enabled(category: str, level: str = "INFO") -> bool:
        """True if a message of this category and level would be printed."""
        if not LoggerConfig.ENABLE_LOGGING:
            return False
        if not LoggerConfig.CATEGORIES.get(category, False):
            return False
        threshold = LEVEL_VALUES.get(LoggerConfig.LOG_LEVEL, LEVEL_VALUES["INFO"])
        return LEVEL_VALUES.get(level, LEVEL_VALUES["INFO"]) <= threshold

    @staticmethod
    def _emit(tag: str, msg: str, category: str):
        color, level = DebugLogger.STYLES[tag]
        if not DebugLogger.enabled(category, level):
            return

        # 0 = _emit, 1 = public method, 2 = whoever logged
        source = _caller_name(sys._getframe(2))
        stamp = f"[{datetime.now():%H:%M:%S}] " if LoggerConfig.SHOW_TIMESTAMP else ""
        print(f"{color}{stamp}[{source}][{tag}] {msg}{Colors.RESET}")

    # ===========================================================
    # Public Log Methods
    # ===========================================================

    @staticmethod
    def init(msg: str = "", category: str = "system"):
        """Startup message; an empty message prints a spacer line."""
        if not msg.strip():
            if LoggerConfig.ENABLE_LOGGING:
                print()
            return
        DebugLogger._emit("INIT", msg, category)

    @staticmethod
    def system(msg: str, category: str = "system"):
        DebugLogger._emit("SYSTEM", msg, category)

    @staticmethod
    def state(msg: str, category: str = "system"):
        DebugLogger._emit("STATE", msg, category)

    @staticmethod
    def action(msg: str, category: str = "system"):
        DebugLogger._emit("ACTION", msg, category)

    @staticmethod
    def trace(msg: str, category: str = "timing"):
        """Verbose-only detail; defaults to the per-tick timing category."""
        DebugLogger._emit("TRACE", msg, category)

    @staticmethod
    def warn(msg: str, category: str = "system"):
        DebugLogger._emit("WARN", msg, category)

    @staticmethod
    def fail(msg: str, category: str = "system"):
        DebugLogger._emit("FAIL", msg, category)

    # ===========================================================
    # Startup Report
    # ===========================================================

    @staticmethod
    def section(title: str):
        """Boxed header between startup phases."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        rule = "─" * DebugLogger.LINE_LENGTH
        print(f"\n{Colors.WHITE}{rule}\n{f'[{title}]'.center(DebugLogger.LINE_LENGTH)}{Colors.RESET}\n")

    @staticmethod
    def init_entry(module: str, status: str = "OK"):
        """Dotted status line, e.g. '> AnimationRegistry ......... [OK]'."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        print(DebugLogger.format_entry(module, status))

    @staticmethod
    def init_sub(detail: str, level: int = 1):
        """Bullet under the previous init_entry."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        print(f"{'    ' * level}• {Colors.WHITE}{detail}{Colors.RESET}")

    @staticmethod
    def format_entry(module: str, status: str) -> str:
        label = f"> {module}"
        badge = f"[{status}]"
        gap = max(30 - len(label), 1)
        dots = max(DebugLogger.LINE_LENGTH - len(label) - gap - len(badge) - 1, 1)
        color = DebugLogger.STATUS_COLORS.get(status.upper(), Colors.WHITE)
        return f"{Colors.WHITE}{label}{' ' * gap}{'.' * dots} {color}{badge}{Colors.RESET}"

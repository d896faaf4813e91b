"""
config_manager.py
-----------------
Loads JSON (or Python) data files and layers them over in-code defaults.

Lookup order
------------
1. An absolute path is used as-is.
2. Otherwise the name is looked up in the config index, built from
   ./config (working directory) and then the bundled package config/
   directory. A file in ./config shadows the bundled one.
3. Names may omit the extension; .json is tried before .py.

Keys named "_notes" are comments for whoever edits the file and never
reach the merged result.
"""

import copy
import importlib.util
import json
from pathlib import Path

from lunar_posadas.core.debug.debug_logger import DebugLogger


# ===========================================================
# Search Locations
# ===========================================================

PACKAGE_CONFIG_DIR = Path(__file__).resolve().parents[2] / "config"

SEARCH_DIRS = [
    Path("config"),
    PACKAGE_CONFIG_DIR,
]

CONFIG_SUFFIXES = (".json", ".py")
NOTES_KEY = "_notes"

_FILE_INDEX = None


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Load a config file merged over default_dict.

    Args:
        filename: Bare name ("player.json", "player") or a full path
        default_dict: Values used for every key the file leaves out
        strict: Raise instead of falling back when the file is missing
                or unreadable

    Returns:
        dict: A new dict; default_dict is never modified.

    Raises:
        FileNotFoundError: strict is set and the file could not be read
    """
    defaults = default_dict or {}
    path = _resolve_path(filename)

    try:
        data = _read(path)
    except (OSError, ValueError, SyntaxError, ImportError) as e:
        if strict:
            raise FileNotFoundError(f"Config not found or unreadable: {filename}") from e
        DebugLogger.warn(f"{filename}: {e} - using defaults", category="loading")
        data = {}

    return _merge_dicts(defaults, data)


def build_file_index():
    """Walk SEARCH_DIRS once and remember where each config file lives."""
    global _FILE_INDEX
    index = {}

    for directory in SEARCH_DIRS:
        if not directory.is_dir():
            continue
        for path in sorted(directory.rglob("*")):
            if path.suffix not in CONFIG_SUFFIXES or path.name == "__init__.py":
                continue
            index.setdefault(path.name, path)

    _FILE_INDEX = index
    DebugLogger.init(f"Config index: {len(index)} files", category="loading")


def rebuild_file_index():
    """Forget the index and scan again (after chdir or adding files)."""
    global _FILE_INDEX
    _FILE_INDEX = None
    build_file_index()


def get_indexed_files():
    """Return {filename: path string} for every indexed config."""
    if _FILE_INDEX is None:
        build_file_index()
    return {name: str(path) for name, path in _FILE_INDEX.items()}


# ===========================================================
# Path Resolution
# ===========================================================

def _resolve_path(filename) -> Path:
    path = Path(filename)
    if path.is_absolute():
        return path

    if _FILE_INDEX is None:
        build_file_index()

    name = path.name
    if name in _FILE_INDEX:
        return _FILE_INDEX[name]
    for suffix in CONFIG_SUFFIXES:
        if name + suffix in _FILE_INDEX:
            return _FILE_INDEX[name + suffix]

    # Not indexed; let the reader report it
    return path


# ===========================================================
# File Readers
# ===========================================================

def _read(path: Path) -> dict:
    reader = _load_py_module if path.suffix == ".py" else _load_json
    data = reader(path)
    if not isinstance(data, dict):
        raise ValueError(f"top level must be an object, got {type(data).__name__}")
    DebugLogger.system(f"Loaded {path.name}", category="loading")
    return data


def _load_json(path: Path):
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def _load_py_module(path: Path):
    """Execute a .py config and return its DEFAULT_CONFIG (or {})."""
    spec = importlib.util.spec_from_file_location(f"_config_{path.stem}", path)
    if spec is None or spec.loader is None:
        raise ImportError(f"cannot load {path}")
    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        # Any error raised while running the file is a bad config
        raise ImportError(f"{path.name} failed to run: {e!r}") from e
    return getattr(module, "DEFAULT_CONFIG", {})


# ===========================================================
# Merging
# ===========================================================

def _merge_dicts(default, override):
    """Deep-merge override into a copy of default, skipping "_notes"."""
    merged = copy.deepcopy(default)
    merged.pop(NOTES_KEY, None)

    for key, value in override.items():
        if key == NOTES_KEY:
            continue
        current = merged.get(key)
        if isinstance(value, dict) and isinstance(current, dict):
            merged[key] = _merge_dicts(current, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged

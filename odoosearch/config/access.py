"""Cached configuration access facade.

The CLI selects the config file once (``--config``); commands then read it through
:func:`get_config` without threading the path around.
"""

from __future__ import annotations

import threading
from pathlib import Path

from odoosearch.config.loader import get_config_path, load_config
from odoosearch.config.schema import Config

_lock = threading.RLock()
_cache: dict[str, Config] = {}
_active_path: Path | None = None


def set_active_config_path(config_path: Path | None) -> None:
    """Make ``config_path`` the default for later :func:`get_config` calls (None resets)."""
    global _active_path
    with _lock:
        _active_path = Path(config_path).expanduser() if config_path else None


def active_config_path() -> Path:
    return _active_path or get_config_path()


def _cache_key(config_path: Path | None = None) -> str:
    return str(Path(config_path or active_config_path()).expanduser().resolve())


def get_config(*, config_path: Path | None = None, force_reload: bool = False) -> Config:
    """Get config with process-local cache and optional refresh."""
    key = _cache_key(config_path)
    with _lock:
        if force_reload or key not in _cache:
            _cache[key] = load_config(Path(key))
        return _cache[key]


def clear_config_cache(*, config_path: Path | None = None) -> None:
    """Clear cached config entry (or all cache entries)."""
    with _lock:
        if config_path is None:
            _cache.clear()
            return
        _cache.pop(_cache_key(config_path), None)

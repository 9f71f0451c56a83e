# src/css_color_extractor/extraction/general/utils/load_config.py

"""Load JSON option files with caching and typed coercions.

The file must hold a JSON object (JSON5 when comments are allowed); results
are cached per path and mtime.

Used by the CLI (--config / CSS_COLOR_EXTRACTOR_CONFIG) and by load_options().
"""

from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import Any

# --- optional json5 support (no hard dependency) -----------------------------
try:  # mypy: json5 may be missing in most envs
    import json5 as _json5
except Exception:  # pragma: no cover - only hit when json5 missing
    _json5 = None  # type: ignore[assignment]

# ── Public surface ────────────────────────────────────────────────────────────
CONFIG_ENV_VAR = "CSS_COLOR_EXTRACTOR_CONFIG"
__all__ = [
    "CONFIG_ENV_VAR",
    "load_config",
    "clear_config_cache",
    "env_config_path",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]


# ── Exceptions ───────────────────────────────────────────────────────────────
class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested config file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing fails for a config file."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON doesn't match the expected structure."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# cache key includes: path, mtime, encoding, allow_comments
_CONFIG_CACHE: dict[tuple[Path, float, str, bool], dict[str, Any]] = {}


def clear_config_cache() -> None:
    """Empty the in-memory config cache (useful for pytest/hot-reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
        log.debug("Config cache cleared.")


def env_config_path() -> Path | None:
    """Resolve the options file from CSS_COLOR_EXTRACTOR_CONFIG if set."""
    v = os.environ.get(CONFIG_ENV_VAR)
    if v:
        return Path(os.path.expanduser(v)).resolve()
    return None


def load_config(
    file: str | os.PathLike[str],
    *,
    encoding: str = "utf-8",
    allow_comments: bool = False,
) -> dict[str, Any]:
    """Load <file>, parse it, require a JSON object, and cache the result."""
    path = Path(os.fspath(file)).expanduser().resolve()
    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")

    # mtime-based cache key for auto-invalidation when file changes
    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    cache_key = (path, mtime, encoding, allow_comments)

    with _CACHE_LOCK:
        if cache_key in _CONFIG_CACHE:
            log.debug("Config cache HIT: %s", path.name)
            return _CONFIG_CACHE[cache_key]

    # Read & parse
    try:
        with path.open("r", encoding=encoding, errors="strict", newline="") as f:
            if allow_comments:
                if _json5 is None:
                    raise ConfigParseError(
                        "json5 requested (allow_comments=True) but not installed"
                    )
                data = _json5.load(f)  # allows comments/trailing commas
            else:
                data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e
    except ValueError as e:
        if isinstance(e, ConfigParseError):
            raise
        raise ConfigParseError(f"Invalid JSON5 in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigTypeError(f"{path.name}: expected a JSON object, got {type(data).__name__}")

    with _CACHE_LOCK:
        _CONFIG_CACHE[cache_key] = data
        log.debug("Config cache MISS → STORED: %s", path.name)

    return data

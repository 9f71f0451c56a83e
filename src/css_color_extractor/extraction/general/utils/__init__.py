# css_color_extractor/extraction/general/utils/__init__.py
"""

Does: Provide config loading and lightweight debug logging utilities for the extraction stack.
Returns: Public API via load_config/clear_config_cache and debug/reload_topics.
Used by: The CLI, options loading, the tokenizer, and tests.
"""

from __future__ import annotations

from .load_config import (
    CONFIG_ENV_VAR,
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    clear_config_cache,
    env_config_path,
    load_config,
)
from .log import (
    debug,
    is_enabled,
    reload_topics,
)

__all__ = [
    # Config loading
    "load_config",
    "clear_config_cache",
    "env_config_path",
    "CONFIG_ENV_VAR",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "is_enabled",
    "reload_topics",
]

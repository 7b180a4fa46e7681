"""Configuration getter functions."""

import os
import shlex
from pathlib import Path
from typing import Any

from .env_loader import get_global_config_dir, load_global_config, load_local_config

DEFAULT_AXE_SOURCE = "https://cdnjs.cloudflare.com/ajax/libs/axe-core/4.10.2/axe.min.js"
DEFAULT_LOG_LEVEL = "WARNING"


def get_config(key: str, work_dir: Path | None = None, default: Any = None) -> Any:
    """
    Get configuration value with priority:
    1. Environment variable
    2. .env file in the working directory
    3. Global config file
    4. Default value

    Args:
        key: Configuration key
        work_dir: Optional directory holding a .env file
        default: Default value if not found

    Returns:
        Configuration value or default
    """
    # 1. Check environment variable
    env_value = os.environ.get(key)
    if env_value:
        return env_value

    # 2. Check local .env file
    local_config = load_local_config(work_dir)
    if key in local_config:
        return local_config[key]

    # 3. Check global config
    global_config = load_global_config()
    if key in global_config:
        return global_config[key]

    # 4. Return default
    return default


def get_axe_source(work_dir: Path | None = None) -> str:
    """Get the URL or file path of the axe-core bundle."""
    return str(get_config("AXE_SCANNER_AXE_SOURCE", work_dir, default=DEFAULT_AXE_SOURCE))


def get_cache_dir(work_dir: Path | None = None) -> Path:
    """Get the directory downloaded axe-core bundles are cached in."""
    configured = get_config("AXE_SCANNER_CACHE_DIR", work_dir)
    if configured:
        return Path(str(configured)).expanduser()
    return get_global_config_dir() / "cache"


def get_log_level(work_dir: Path | None = None) -> str:
    """Get the log level name (default: WARNING)."""
    return str(get_config("AXE_SCANNER_LOG_LEVEL", work_dir, default=DEFAULT_LOG_LEVEL)).upper()


def get_server_command(work_dir: Path | None = None) -> list[str] | None:
    """Get an explicit server command for the client, split shell-style."""
    configured = get_config("AXE_SCANNER_SERVER_COMMAND", work_dir)
    if not configured:
        return None
    return shlex.split(str(configured))

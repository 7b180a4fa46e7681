"""
Configuration management for axe-scanner-mcp.

Supports multiple configuration sources in order of priority:
1. Environment variables (highest priority)
2. .env file in the working directory
3. Global config file (~/.axe-scanner/config.yml)
4. Default values (lowest priority)
"""

from .env_loader import (
    get_global_config_dir,
    load_env_file,
    load_global_config,
    load_local_config,
)
from .getters import (
    DEFAULT_AXE_SOURCE,
    DEFAULT_LOG_LEVEL,
    get_axe_source,
    get_cache_dir,
    get_config,
    get_log_level,
    get_server_command,
)

__all__ = [
    # env_loader
    "get_global_config_dir",
    "load_env_file",
    "load_global_config",
    "load_local_config",
    # getters
    "DEFAULT_AXE_SOURCE",
    "DEFAULT_LOG_LEVEL",
    "get_axe_source",
    "get_cache_dir",
    "get_config",
    "get_log_level",
    "get_server_command",
]

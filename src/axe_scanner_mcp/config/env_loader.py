"""Environment variable and configuration file loading."""

from pathlib import Path
from typing import Any

import yaml

CONFIG_DIR_NAME = ".axe-scanner"


def get_global_config_dir() -> Path:
    """Return the per-user directory holding config.yml and the script cache."""
    return Path.home() / CONFIG_DIR_NAME


def load_env_file(env_path: Path) -> dict[str, str]:
    """Load KEY=value pairs from a .env file."""
    env_vars = {}
    if env_path.exists():
        with open(env_path) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, value = line.split("=", 1)
                    # Remove quotes if present
                    value = value.strip().strip("\"'")
                    env_vars[key.strip()] = value
    return env_vars


def load_global_config() -> dict[str, Any]:
    """Load global configuration from ~/.axe-scanner/config.yml."""
    config_path = get_global_config_dir() / "config.yml"
    if config_path.exists():
        with open(config_path) as f:
            return yaml.safe_load(f) or {}
    return {}


def load_local_config(work_dir: Path | None = None) -> dict[str, str]:
    """Load the .env file of the working directory, if any."""
    base = work_dir or Path.cwd()
    return load_env_file(base / ".env")

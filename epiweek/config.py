"""
Configuration loader for epiweek.
Loads YAML config and provides access to default policies.
"""
import yaml
from pathlib import Path
from typing import Any, Dict, Optional


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config file. Defaults to configs/config_default.yaml

    Returns:
        Dictionary containing all configuration settings
    """
    if config_path is None:
        config_path = get_project_root() / "configs" / "config_default.yaml"
    else:
        config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        config = yaml.safe_load(f)

    return config or {}


def get_project_root() -> Path:
    """Get the package directory holding the shipped configs."""
    return Path(__file__).parent


def get_setting(section: str, key: str, config: Optional[Dict[str, Any]] = None) -> Any:
    """
    Read one setting from a loaded config.

    Args:
        section: Top-level section, e.g. "compose"
        key: Key within the section, e.g. "convention"
        config: Config dictionary. Defaults to the one loaded at import

    Returns:
        The configured value

    Raises:
        ValueError: If the setting is absent
    """
    cfg = CONFIG if config is None else config
    value = cfg.get(section, {}).get(key)
    if value is None:
        raise ValueError(f"{section}.{key} must be provided via config or caller")
    return value


# Convenience: load default config on module import
try:
    CONFIG = load_config()
except FileNotFoundError:
    CONFIG = {}

"""Configuration package exports."""

from .config_loader import config_path_from_env, get_configuration, load_config
from .model import BotConfig

__all__ = [
    "BotConfig",
    "config_path_from_env",
    "get_configuration",
    "load_config",
]

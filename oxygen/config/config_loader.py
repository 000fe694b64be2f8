"""Configuration loading utilities."""

from __future__ import annotations

import logging
import os
import sys
import tomllib

from pydantic import ValidationError

from ..constants import DEFAULT_CONFIG_FILE
from ..errors.internal import ConfigError
from .model import BotConfig


def load_config(config_file: str | os.PathLike[str]) -> BotConfig:
    """Read and validate a TOML configuration file.

    Args:
        config_file: Path to the configuration file.

    Returns:
        The validated BotConfig.

    Raises:
        ConfigError: If the file is missing, unreadable, not TOML or invalid.
    """
    try:
        with open(config_file, "rb") as f:
            raw = tomllib.load(f)
    except FileNotFoundError as e:
        raise ConfigError(
            f"configuration file not found: {config_file}",
            data={"path": str(config_file)},
        ) from e
    except OSError as e:
        raise ConfigError(f"could not read {config_file}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"invalid TOML in {config_file}: {e}") from e
    try:
        return BotConfig.from_dict(raw)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'config'}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigError(
            f"invalid configuration in {config_file}: {problems}",
            data={"path": str(config_file)},
        ) from e


def config_path_from_env() -> str:
    return os.environ.get("OXYGEN_CONF_FILE", DEFAULT_CONFIG_FILE)


def get_configuration() -> BotConfig:
    """Load the configuration named by OXYGEN_CONF_FILE.

    Raises:
        SystemExit: If the configuration cannot be loaded.
    """
    config_file = config_path_from_env()
    try:
        config = load_config(config_file)
    except ConfigError as e:
        logging.error(f"📁 {e}")
        sys.exit(1)
    logging.info(
        f"✅ Configuration loaded nickname={config.nickname} channels={len(config.channels)}"
    )
    return config

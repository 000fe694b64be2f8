"""
Configuration constants for the Oxygen factoid bot

Tunables can be overridden by setting an environment variable with the same
name. Protocol constants are fixed.
"""

import os


def _get_env_int(name: str, default: int) -> int:
    """Retrieve an integer value from an environment variable.

    Args:
        name: The name of the environment variable to read.
        default: The value to use when the variable is unset or invalid.

    Returns:
        The parsed integer value from the environment, or the default.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            print(
                f"Warning: Invalid integer value for {name}='{value}', using default {default}"
            )
    return default


def _get_env_float(name: str, default: float) -> float:
    """Retrieve a float value from an environment variable.

    Args:
        name: The name of the environment variable to read.
        default: The value to use when the variable is unset or invalid.

    Returns:
        The parsed float value from the environment, or the default.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return float(value)
        except ValueError:
            print(
                f"Warning: Invalid float value for {name}='{value}', using default {default}"
            )
    return default


# Transport
READ_CHUNK_SIZE = _get_env_int("READ_CHUNK_SIZE", 1024)  # Bytes per socket read
CONNECT_TIMEOUT = _get_env_float("CONNECT_TIMEOUT", 30.0)  # Seconds per connect attempt
CONNECT_MAX_ATTEMPTS = _get_env_int("CONNECT_MAX_ATTEMPTS", 3)
CONNECT_RETRY_MAX_WAIT = _get_env_float("CONNECT_RETRY_MAX_WAIT", 60.0)
RECONNECT_DELAY = _get_env_float("RECONNECT_DELAY", 5.0)  # Only used when reconnect is enabled
MAX_LINE_BUFFER = _get_env_int("MAX_LINE_BUFFER", READ_CHUNK_SIZE * 64)  # Unterminated bytes allowed

# Files
DEFAULT_CONFIG_FILE = "oxygen_config.toml"
DEFAULT_FACTOIDS_FILE = "factoids.txt"

# Protocol
LINE_TERMINATOR = b"\r\n"
RPL_WELCOME = "001"  # Registration complete
DEFAULT_TRIGGER = "$"

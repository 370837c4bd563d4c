"""Environment-driven settings for fireworks-stand.

Every setting is an optional environment variable with a literal fallback.
An unset variable and an empty one are treated the same.
"""

import logging
import os
from typing import Mapping, Optional

DEFAULT_LOG_LEVEL = "WARNING"


def env_value(name: str, default: str, env: Optional[Mapping[str, str]] = None) -> str:
    """Read an environment variable, falling back when unset or empty.

    Args:
        name: Variable name (e.g. "BRANCH_NAME")
        default: Value used when the variable is missing or ""
        env: Mapping to read from (defaults to os.environ)

    Returns:
        The variable's value, or default
    """
    if env is None:
        env = os.environ
    return env.get(name) or default


def log_level(env: Optional[Mapping[str, str]] = None) -> int:
    """Resolve the CLI log level from FIREWORKS_LOG_LEVEL.

    Accepts level names in any case ("debug", "INFO"). Unknown names give
    WARNING.
    """
    name = env_value("FIREWORKS_LOG_LEVEL", DEFAULT_LOG_LEVEL, env).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING

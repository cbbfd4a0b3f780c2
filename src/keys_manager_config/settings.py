"""Environment-driven settings for locating config files and log level."""

import logging
import os
from typing import List, Optional, Union

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

WORKSPACE_CONFIG_ENV = 'KEYS_MANAGER_CONFIG_FILE'
LOG_LEVEL_ENV = 'KEYS_MANAGER_LOG_LEVEL'
DEFAULT_WORKSPACE_CONFIG_FILE = 'transloco.config.yaml'
DEFAULT_LOG_LEVEL = 'WARNING'


def resolve(arg: Optional[str], env_keys: Union[str, List[str]], default: Optional[str]) -> Optional[str]:
    """
    Resolve a setting from multiple sources in priority order:
    1. Direct argument (if not None)
    2. Environment variables
    3. Default value
    """
    if arg is not None:
        return arg

    if isinstance(env_keys, str):
        env_keys = [env_keys]

    for key in env_keys:
        val = os.getenv(key)
        if val is not None:
            return val

    return default


def resolve_workspace_config_path(file_path: Optional[str] = None) -> str:
    """Path of the workspace config file, relative paths taken from the cwd."""
    path = resolve(file_path, WORKSPACE_CONFIG_ENV, DEFAULT_WORKSPACE_CONFIG_FILE)
    return os.path.abspath(path)


def resolve_log_level(level: Optional[str] = None) -> str:
    return resolve(level, LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()


def load_env_file(env_path: Optional[str] = None) -> bool:
    """Load a .env file (default: ``.env`` in the cwd) if it exists."""
    env_path = env_path or os.path.join(os.getcwd(), '.env')
    if not os.path.exists(env_path):
        return False
    load_dotenv(env_path)
    logger.debug(f".env file loaded: {env_path}")
    return True

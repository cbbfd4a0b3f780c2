"""Process boundary: resolve config for a CLI run, exiting on invalid config."""

import logging
import sys
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from .domain import Command, ResolvedConfig
from .project_root import ProjectRootResolver
from .resolver import ConfigResolver
from .settings import load_env_file, resolve_log_level
from .validators import InvalidPathError, KeysManagerConfigError
from .workspace_config import WorkspaceConfigProvider

logger = logging.getLogger(__name__)


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging from ``level`` or KEYS_MANAGER_LOG_LEVEL."""
    logging.basicConfig(
        level=resolve_log_level(level),
        format='%(levelname)s:%(name)s:%(message)s'
    )


def resolve_config_or_exit(
    inline_config: Optional[Dict[str, Any]] = None,
    command: Optional[Union[Command, str]] = None,
    *,
    project_root_resolver: Optional[ProjectRootResolver] = None,
    workspace_config: Optional[WorkspaceConfigProvider] = None,
    cwd: Optional[str] = None
) -> ResolvedConfig:
    """
    Resolve the configuration for a CLI run.

    Loads ``.env`` from the working directory first. Invalid configuration
    is reported on stderr as ``<Field> <message>`` and the process exits
    with status 1.
    """
    load_env_file()
    resolver = ConfigResolver(project_root_resolver, workspace_config, cwd)

    try:
        return resolver.resolve(inline_config, command)
    except InvalidPathError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)
    except (KeysManagerConfigError, ValidationError) as e:
        print(f"[FATAL] Failed to resolve keys manager config: {e}", file=sys.stderr)
        sys.exit(1)

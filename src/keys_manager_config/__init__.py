from .domain import (
    Command,
    FileFormat,
    ProjectBasePath,
    ResolvedConfig,
    ScopeFileEntry,
    Scopes,
)
from .defaults import DEFAULT_CONFIG, default_config
from .interpolation import SOURCE_ROOT_TOKEN, interpolate, interpolate_paths
from .merger import merge_configs
from .validators import (
    KeysManagerConfigError,
    InvalidPathError,
    WorkspaceConfigError,
    PathProblem,
    check_directory,
    validate_paths,
)
from .workspace_config import (
    WorkspaceConfig,
    KeysManagerSection,
    WorkspaceConfigProvider,
    StaticWorkspaceConfigProvider,
    YamlWorkspaceConfigProvider,
    load_workspace_config,
)
from .project_root import (
    ProjectRootResolver,
    StaticProjectRootResolver,
    MappingProjectRootResolver,
)
from .resolver import ConfigResolver, resolve_config
from .scope_paths import build_scope_file_paths
from .runner import configure_logging, resolve_config_or_exit

__all__ = [
    "Command",
    "FileFormat",
    "ProjectBasePath",
    "ResolvedConfig",
    "ScopeFileEntry",
    "Scopes",
    "DEFAULT_CONFIG",
    "default_config",
    "SOURCE_ROOT_TOKEN",
    "interpolate",
    "interpolate_paths",
    "merge_configs",
    "KeysManagerConfigError",
    "InvalidPathError",
    "WorkspaceConfigError",
    "PathProblem",
    "check_directory",
    "validate_paths",
    "WorkspaceConfig",
    "KeysManagerSection",
    "WorkspaceConfigProvider",
    "StaticWorkspaceConfigProvider",
    "YamlWorkspaceConfigProvider",
    "load_workspace_config",
    "ProjectRootResolver",
    "StaticProjectRootResolver",
    "MappingProjectRootResolver",
    "ConfigResolver",
    "resolve_config",
    "build_scope_file_paths",
    "configure_logging",
    "resolve_config_or_exit",
]

"""Project base path lookups used as the ${sourceRoot} value."""

import logging
from typing import Callable, Dict, Optional, Union

from .domain import ProjectBasePath
from .workspace_config import WorkspaceConfig, WorkspaceProject, load_workspace_config
from .settings import resolve_workspace_config_path

logger = logging.getLogger(__name__)

DEFAULT_SOURCE_ROOT = 'src'

# (project_name) -> ProjectBasePath
ProjectRootResolver = Callable[[Optional[str]], ProjectBasePath]


class StaticProjectRootResolver:
    """Returns the same base path for every project."""

    def __init__(self, base_path: str = DEFAULT_SOURCE_ROOT):
        self.base_path = base_path

    def __call__(self, project_name: Optional[str] = None) -> ProjectBasePath:
        return ProjectBasePath(base_path=self.base_path)


class MappingProjectRootResolver:
    """Looks a project up in a name -> source root mapping.

    Unknown or missing project names fall back to ``default_base_path``.
    """

    def __init__(
        self,
        projects: Dict[str, Union[str, WorkspaceProject]],
        default_base_path: str = DEFAULT_SOURCE_ROOT
    ):
        self.projects = dict(projects)
        self.default_base_path = default_base_path

    @classmethod
    def from_workspace(
        cls,
        workspace: WorkspaceConfig,
        default_base_path: str = DEFAULT_SOURCE_ROOT
    ) -> 'MappingProjectRootResolver':
        return cls(workspace.projects, default_base_path)

    @classmethod
    def from_workspace_file(
        cls,
        file_path: Optional[str] = None,
        default_base_path: str = DEFAULT_SOURCE_ROOT
    ) -> 'MappingProjectRootResolver':
        workspace = load_workspace_config(resolve_workspace_config_path(file_path))
        return cls.from_workspace(workspace, default_base_path)

    def __call__(self, project_name: Optional[str] = None) -> ProjectBasePath:
        entry = self.projects.get(project_name) if project_name else None

        if entry is None:
            if project_name:
                logger.warning(f"Project '{project_name}' not found, using '{self.default_base_path}'")
            return ProjectBasePath(base_path=self.default_base_path)

        if isinstance(entry, str):
            return ProjectBasePath(base_path=entry)
        return ProjectBasePath(base_path=entry.source_root, project_type=entry.project_type)

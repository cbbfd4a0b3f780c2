"""Resolve layered keys manager configuration into a ResolvedConfig."""

import logging
import os
from typing import Any, Dict, List, Optional, Union

from .defaults import default_config
from .domain import Command, ResolvedConfig
from .interpolation import interpolate, interpolate_paths
from .merger import merge_configs
from .project_root import ProjectRootResolver, StaticProjectRootResolver
from .validators import validate_paths
from .workspace_config import WorkspaceConfigProvider, YamlWorkspaceConfigProvider

logger = logging.getLogger(__name__)

PATH_FIELDS = ('output', 'translations_path')


def _as_list(value: Union[str, List[str]]) -> List[str]:
    return [value] if isinstance(value, str) else list(value)


def _absolute(path: str, cwd: str) -> str:
    return os.path.normpath(os.path.join(cwd, path))


class ConfigResolver:
    """Merges defaults, workspace and inline config and resolves its paths.

    Collaborators are injected so each call can be isolated: the project
    root and the workspace config are looked up again on every
    :meth:`resolve`, nothing is cached between calls.
    """

    def __init__(
        self,
        project_root_resolver: Optional[ProjectRootResolver] = None,
        workspace_config: Optional[WorkspaceConfigProvider] = None,
        cwd: Optional[str] = None
    ):
        self.project_root_resolver = project_root_resolver or StaticProjectRootResolver()
        self.workspace_config = workspace_config or YamlWorkspaceConfigProvider()
        self.cwd = cwd

    def resolve(
        self,
        inline_config: Optional[Dict[str, Any]] = None,
        command: Optional[Union[Command, str]] = None
    ) -> ResolvedConfig:
        """
        Resolve the configuration for one run.

        Args:
            inline_config: Inline / CLI overrides. May carry ``project`` and
                ``command`` keys.
            command: Active sub-command, overrides ``inline_config['command']``.

        Returns:
            ResolvedConfig with absolute paths.

        Raises:
            InvalidPathError: If an input directory (or, for ``find``, the
                translations directory) is missing or not a directory.
        """
        inline = dict(inline_config or {})
        inline_command = inline.pop('command', None)
        command = command if command is not None else inline_command

        # Step 1: Fresh project root lookup
        project_base = self.project_root_resolver(inline.get('project'))
        source_root = project_base.base_path
        logger.debug(f"resolve: project={inline.get('project')!r} source_root={source_root!r}")

        # Step 2: Merge layers
        workspace = self.workspace_config.get()
        merged = merge_configs(default_config(), workspace.to_raw_config(), inline)

        # Step 3 & 4: Interpolate ${sourceRoot}, then make paths absolute
        cwd = self.cwd or os.getcwd()
        merged['input'] = [
            _absolute(p, cwd) for p in interpolate_paths(_as_list(merged['input']), source_root)
        ]
        for field in PATH_FIELDS:
            merged[field] = _absolute(interpolate(merged[field], source_root), cwd)

        # Step 5: Validate directories
        error = validate_paths(merged['input'], merged['translations_path'], command)
        if error:
            logger.error(str(error))
            raise error

        config = ResolvedConfig.build(merged, source_root)
        logger.debug(f"resolve: output={config.output} translations_path={config.translations_path}")
        return config


def resolve_config(
    inline_config: Optional[Dict[str, Any]] = None,
    command: Optional[Union[Command, str]] = None,
    *,
    project_root_resolver: Optional[ProjectRootResolver] = None,
    workspace_config: Optional[WorkspaceConfigProvider] = None,
    cwd: Optional[str] = None
) -> ResolvedConfig:
    """
    Convenience function to resolve a configuration.

    Args:
        inline_config: Inline / CLI overrides.
        command: Active sub-command.
        project_root_resolver: Optional project root lookup.
        workspace_config: Optional workspace config provider.
        cwd: Optional working directory used for absolute paths.

    Returns:
        ResolvedConfig.
    """
    resolver = ConfigResolver(project_root_resolver, workspace_config, cwd)
    return resolver.resolve(inline_config, command)
